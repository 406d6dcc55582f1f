"""In-memory commit-graph source."""

from collections import deque
from typing import Iterable, Mapping

from ..errors import NotFound
from .base import CommitGraphSource


class Memory(CommitGraphSource):
    """A commit graph held in dicts.

    Args:
        parents: Commit id -> parent ids.
        branches: Branch name -> tip commit id.
        batch_size: Number of commits answered per ``fetch_parents``
            call. ``1`` answers only the requested commit; larger values
            add further ancestors in breadth-first order, the way a
            paginated history endpoint does.
    """

    def __init__(
        self,
        parents: Mapping[str, Iterable[str]] | None = None,
        branches: Mapping[str, str] | None = None,
        *,
        batch_size: int = 1,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.parents: dict[str, tuple[str, ...]] = {
            commit: tuple(ps) for commit, ps in (parents or {}).items()
        }
        self.branches: dict[str, str] = dict(branches or {})
        self.batch_size = batch_size

    def add_commit(self, commit: str, *parents: str) -> None:
        self.parents[commit] = parents

    def set_branch(self, name: str, commit: str) -> None:
        self.branches[name] = commit

    def resolve_branch(self, name: str) -> str:
        try:
            return self.branches[name]
        except KeyError:
            raise NotFound(name, "Branch not found") from None

    def fetch_parents(self, commit: str) -> Mapping[str, tuple[str, ...]]:
        if commit not in self.parents:
            raise NotFound(commit, "No commit found for SHA")

        result: dict[str, tuple[str, ...]] = {}
        queue: deque[str] = deque([commit])
        while queue and len(result) < self.batch_size:
            current = queue.popleft()
            if current in result or current not in self.parents:
                continue
            result[current] = self.parents[current]
            queue.extend(self.parents[current])
        return result
