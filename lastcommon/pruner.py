"""Dominance pruning for the last-common-commits search."""

import logging
from collections import deque

from .cache import LookupCache
from .color import Color
from .frontier import Frontier

logger = logging.getLogger(__name__)


class DominancePruner:
    """Strikes out the ancestors of a newly confirmed common commit.

    Everything upstream of a common commit is common too, so none of it
    can be a *last* common commit. The walk only follows parent edges the
    cache already holds and never calls the source; it is an optimization
    bounded by what the search has already paid for.

    Args:
        cache: Parent lookups.
        colors: The search's color map; visited commits are marked
            ``FROM_BOTH`` so the search neither expands nor confirms them.
    """

    def __init__(self, cache: LookupCache, colors: dict[str, Color]) -> None:
        self.cache = cache
        self.colors = colors

    def prune(self, commit: str, frontier: Frontier, result: set[str]) -> int:
        """Walk the cached ancestry of ``commit``.

        Removes visited commits from ``frontier`` (every origin) and from
        ``result``. Does not descend past commits that were already
        ``FROM_BOTH``. Returns the number of frontier entries removed.
        """
        removed = frontier.discard(commit)
        stack = list(self.cache.cached_parents(commit) or ())
        visited: set[str] = {commit}

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)

            removed += frontier.discard(current)
            if current in result:
                result.discard(current)
                logger.debug("%s is dominated by %s", current[:8], commit[:8])

            if self.colors.get(current) is Color.FROM_BOTH:
                continue
            self.colors[current] = Color.FROM_BOTH
            stack.extend(self.cache.cached_parents(current) or ())

        return removed


def remove_redundant(candidates: set[str], cache: LookupCache) -> set[str]:
    """Drop every candidate that is an ancestor of another candidate.

    Walks the ancestries of all candidates together, breadth first,
    recording which candidates reach each commit. A commit reached by
    every candidate has no candidate among its ancestors (that candidate
    would reach itself), so the walk stops there. Edges come through
    ``cache`` and may call the source.
    """
    if len(candidates) < 2:
        return set(candidates)

    everyone = frozenset(candidates)
    reached: dict[str, frozenset[str]] = {c: frozenset([c]) for c in candidates}
    queue: deque[str] = deque(candidates)
    redundant: set[str] = set()

    while queue:
        commit = queue.popleft()
        owners = reached[commit]
        if owners == everyone:
            continue
        for parent in cache.parents(commit):
            known = reached.get(parent, frozenset())
            merged = known | owners
            if merged == known:
                continue
            reached[parent] = merged
            if parent in everyone:
                redundant.add(parent)
            queue.append(parent)

    return candidates - redundant
