"""FIFO frontier of pending commit expansions."""

from collections import Counter, deque
from dataclasses import dataclass
from typing import Iterable, Iterator

from .color import Origin


@dataclass(frozen=True)
class FrontierEntry:
    """A commit waiting for expansion, tagged with the side that found it."""

    commit: str
    origin: Origin


class Frontier:
    """Breadth-first queue with an index of the commits it holds.

    The index makes membership tests O(1) and lets ``discard`` skip the
    queue scan when a commit is not pending.
    """

    def __init__(self) -> None:
        self._queue: deque[FrontierEntry] = deque()
        self._pending: Counter[str] = Counter()

    def push(self, entry: FrontierEntry) -> None:
        self._queue.append(entry)
        self._pending[entry.commit] += 1

    def extend(self, commits: Iterable[str], origin: Origin) -> None:
        for commit in commits:
            self.push(FrontierEntry(commit, origin))

    def pop(self) -> FrontierEntry:
        entry = self._queue.popleft()
        self._pending[entry.commit] -= 1
        if not self._pending[entry.commit]:
            del self._pending[entry.commit]
        return entry

    def discard(self, commit: str) -> int:
        """Remove every entry for ``commit``; return how many were removed."""
        count = self._pending.pop(commit, 0)
        if count:
            self._queue = deque(e for e in self._queue if e.commit != commit)
        return count

    def __contains__(self, commit: str) -> bool:
        return commit in self._pending

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __iter__(self) -> Iterator[FrontierEntry]:
        return iter(self._queue)
