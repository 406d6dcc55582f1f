"""The last-common-commits search."""

from __future__ import annotations

import logging
import types

from .cache import LookupCache
from .color import Color, Origin, Step, color_of, merge_color
from .errors import NotFound, ResolutionError, TransportError
from .frontier import Frontier
from .pruner import DominancePruner, remove_redundant
from .source.base import CommitGraphSource

logger = logging.getLogger(__name__)


class LastCommonCommitsFinder:
    """Finds the last common commits of two branches.

    A last common commit is an ancestor of both branch tips that is not
    an ancestor of any other common ancestor; criss-cross histories have
    more than one.

    The search is a breadth-first walk from both tips at once. Each
    commit is colored by the tips it is reachable from; the first time a
    commit becomes reachable from both it is recorded and its ancestry
    is pruned from the frontier. Parent edges are fetched lazily and kept
    in a ``LookupCache`` owned by the finder, so repeated searches never
    ask the source twice for the same branch or commit. Colors and the
    frontier are per call.
    """

    def __init__(self, source: CommitGraphSource) -> None:
        self.source = source
        self.cache = LookupCache(source)

    def find_last_common_commits(self, branch_a: str, branch_b: str) -> set[str]:
        """Return the last common commits of ``branch_a`` and ``branch_b``.

        Raises ``ResolutionError`` if a branch cannot be resolved, and
        lets any ``SourceError`` raised while walking history propagate.
        """
        tip_a = self._resolve(branch_a)
        tip_b = self._resolve(branch_b)

        if tip_a == tip_b:
            return {tip_a}

        colors: dict[str, Color] = {
            tip_a: color_of(Origin.A),
            tip_b: color_of(Origin.B),
        }
        frontier = Frontier()
        frontier.extend(self.cache.parents(tip_a), Origin.A)
        frontier.extend(self.cache.parents(tip_b), Origin.B)

        pruner = DominancePruner(self.cache, colors)
        result: set[str] = set()

        while frontier:
            entry = frontier.pop()
            color, step = merge_color(
                colors.get(entry.commit, Color.UNSEEN), entry.origin
            )
            colors[entry.commit] = color

            if step is Step.CONFIRM:
                result.add(entry.commit)
                removed = pruner.prune(entry.commit, frontier, result)
                logger.debug(
                    "Common commit %s, pruned %d frontier entries",
                    entry.commit[:8],
                    removed,
                )
            elif step is Step.EXPAND:
                frontier.extend(self.cache.parents(entry.commit), entry.origin)

        result = remove_redundant(result, self.cache)
        logger.info(
            "Last common commits of %s (%s) and %s (%s): %s",
            branch_a,
            tip_a[:8],
            branch_b,
            tip_b[:8],
            ", ".join(sorted(c[:8] for c in result)) or "none",
        )
        return result

    def close(self) -> None:
        self.source.close()

    def __enter__(self) -> LastCommonCommitsFinder:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        self.close()

    def _resolve(self, branch: str) -> str:
        try:
            return self.cache.branch(branch)
        except (NotFound, TransportError) as exc:
            raise ResolutionError(branch, str(exc)) from exc
