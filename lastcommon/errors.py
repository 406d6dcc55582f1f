"""lastcommon error types."""


class LastCommonError(Exception):
    """Base class for every error raised by lastcommon."""


class SourceError(LastCommonError):
    """Raised by a ``CommitGraphSource`` when a lookup fails."""


class NotFound(SourceError):
    """The branch or commit does not exist upstream.

    Attributes:
        name: The branch name or commit id that was looked up.
    """

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        self.message = message
        detail = f": {message}" if message else ""
        super().__init__(f"Not found {name!r}{detail}")


class TransportError(SourceError):
    """The source could not be reached, or refused to answer."""


class MalformedResponse(SourceError):
    """The source answered with a payload of unexpected shape."""


class ResolutionError(LastCommonError):
    """Raised when a branch cannot be resolved to its tip commit.

    The underlying ``NotFound`` or ``TransportError`` is chained as
    ``__cause__``.

    Attributes:
        branch: The branch name that failed to resolve.
    """

    def __init__(self, branch: str, reason: str) -> None:
        self.branch = branch
        super().__init__(f"Cannot resolve branch {branch!r}: {reason}")
