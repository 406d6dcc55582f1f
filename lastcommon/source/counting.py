"""Call-counting wrapper for observing remote traffic."""

from typing import Mapping

from .base import CommitGraphSource


class Counting(CommitGraphSource):
    """Delegates to another source and counts the calls made to it.

    Useful for checking that a finder's cache keeps remote lookups to
    one per branch and one per commit.
    """

    def __init__(self, source: CommitGraphSource) -> None:
        self.source = source
        self.branch_calls: dict[str, int] = {}
        self.parent_calls: dict[str, int] = {}

    @property
    def total_calls(self) -> int:
        return sum(self.branch_calls.values()) + sum(self.parent_calls.values())

    def resolve_branch(self, name: str) -> str:
        self.branch_calls[name] = self.branch_calls.get(name, 0) + 1
        return self.source.resolve_branch(name)

    def fetch_parents(self, commit: str) -> Mapping[str, tuple[str, ...]]:
        self.parent_calls[commit] = self.parent_calls.get(commit, 0) + 1
        return self.source.fetch_parents(commit)

    def reset_counts(self) -> None:
        self.branch_calls.clear()
        self.parent_calls.clear()

    def close(self) -> None:
        self.source.close()
