"""Memo tables in front of a commit-graph source."""

import logging
from typing import Iterable

from .errors import MalformedResponse
from .source.base import CommitGraphSource

logger = logging.getLogger(__name__)


class LookupCache:
    """Read-through cache of branch tips and parent edges.

    On a miss the source is asked once and every pair it returns is
    kept, so one batched answer can serve many later lookups. Entries are
    never evicted; the cache lives as long as the finder that owns it.
    A failing lookup leaves earlier entries untouched.

    Args:
        source: Where misses are resolved.
    """

    def __init__(self, source: CommitGraphSource) -> None:
        self.source = source
        self._branches: dict[str, str] = {}
        self._parents: dict[str, tuple[str, ...]] = {}

    def branch(self, name: str) -> str:
        """Tip commit of ``name``; one source call per distinct name."""
        commit = self._branches.get(name)
        if commit is None:
            commit = self.source.resolve_branch(name)
            self._branches[name] = commit
            logger.debug("Branch %s -> %s", name, commit[:8])
        return commit

    def parents(self, commit: str) -> tuple[str, ...]:
        """Parents of ``commit``; one source call per unknown commit."""
        parents = self._parents.get(commit)
        if parents is not None:
            return parents

        answered = self.source.fetch_parents(commit)
        if commit not in answered:
            raise MalformedResponse(f"Source did not answer parents of {commit!r}")
        for known, known_parents in answered.items():
            self._parents.setdefault(known, tuple(known_parents))
        return self._parents[commit]

    def cached_parents(self, commit: str) -> tuple[str, ...] | None:
        """Parents of ``commit`` if already known, without calling out."""
        return self._parents.get(commit)

    @property
    def branches(self) -> dict[str, str]:
        return dict(self._branches)

    def commits(self) -> Iterable[str]:
        return self._parents.keys()

    def __contains__(self, commit: str) -> bool:
        return commit in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def clear(self) -> None:
        self._branches.clear()
        self._parents.clear()
