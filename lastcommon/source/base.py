"""Abstract commit-graph source interface."""

from abc import ABC, abstractmethod
from typing import Mapping


class CommitGraphSource(ABC):
    """Where branch tips and parent edges come from.

    Sources are usually remote and slow. Callers are expected to memoize
    answers (see ``LookupCache``); sources themselves do not cache.
    """

    @abstractmethod
    def resolve_branch(self, name: str) -> str:
        """Return the tip commit of branch ``name``.

        Raises ``NotFound`` or ``TransportError``.
        """

    @abstractmethod
    def fetch_parents(self, commit: str) -> Mapping[str, tuple[str, ...]]:
        """Return parent tuples keyed by commit id.

        The mapping always contains ``commit``. It may carry parents of
        other commits discovered by the same call (batching); callers
        should keep them but must not rely on them.

        Raises ``NotFound``, ``TransportError`` or ``MalformedResponse``.
        """

    def close(self) -> None:
        """Release any resources held by the source."""
