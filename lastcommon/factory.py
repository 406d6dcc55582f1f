"""Finder protocol and factory function."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Iterable, Literal, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .search import LastCommonCommitsFinder

TOKEN_ENV_VAR = "GITHUB_TOKEN"


@runtime_checkable
class CommitsFinder(Protocol):
    """Protocol for objects that find the last common commits of two branches.

    Implementations: ``LastCommonCommitsFinder``.
    """

    def find_last_common_commits(self, branch_a: str, branch_b: str) -> set[str]: ...
    def close(self) -> None: ...


def finder(
    kind: Literal["github", "memory"] = "github",
    *,
    owner: str | None = None,
    repo: str | None = None,
    token: str | None = None,
    parents: Mapping[str, Iterable[str]] | None = None,
    branches: Mapping[str, str] | None = None,
    batch_size: int = 1,
    **github_options: Any,
) -> LastCommonCommitsFinder:
    """Create a ``LastCommonCommitsFinder`` with sensible defaults.

    Args:
        kind: ``"github"`` (default) to read a GitHub repository, or
            ``"memory"`` for a graph given as dicts.
        owner: Repository owner. Required for ``kind="github"``.
        repo: Repository name. Required for ``kind="github"``.
        token: GitHub token. Defaults to the ``GITHUB_TOKEN``
            environment variable; anonymous access when neither is set.
        parents: Commit -> parent ids (``kind="memory"`` only).
        branches: Branch -> tip commit (``kind="memory"`` only).
        batch_size: Commits answered per lookup (``kind="memory"`` only).
        **github_options: Passed to ``Github`` (``base_url``,
            ``per_page``, ``batch``, ``timeout``, ``client``).

    Returns:
        A ``LastCommonCommitsFinder`` owning a fresh cache.
    """
    from .search import LastCommonCommitsFinder

    if kind == "github":
        if not owner or not repo:
            raise ValueError("owner and repo are required when kind='github'")
        if parents is not None or branches is not None:
            raise ValueError("parents and branches are only valid for kind='memory'")
        from .source.github import Github

        if token is None:
            token = os.environ.get(TOKEN_ENV_VAR) or None
        return LastCommonCommitsFinder(Github(owner, repo, token, **github_options))

    if kind == "memory":
        if github_options:
            names = ", ".join(sorted(github_options))
            raise ValueError(f"Options not valid for kind='memory': {names}")
        from .source.memory import Memory

        return LastCommonCommitsFinder(Memory(parents, branches, batch_size=batch_size))

    raise ValueError(f"Unknown kind: {kind!r}")
