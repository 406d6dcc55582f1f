"""GitHub REST API commit-graph source.

Resolves branches with ``GET /repos/{owner}/{repo}/branches/{branch}``
and parents with either the paginated history endpoint
(``GET /repos/{owner}/{repo}/commits?sha=...&per_page=...``, the default,
which answers up to ``per_page`` ancestors at once) or the single commit
endpoint (``GET /repos/{owner}/{repo}/commits/{sha}``).

The token, when given, is sent as ``Authorization: token <token>`` and is
never written to logs.
"""

from __future__ import annotations

import logging
import types
from typing import Any, Mapping

import httpx

from ..errors import MalformedResponse, NotFound, TransportError
from .base import CommitGraphSource

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_PER_PAGE = 100
DEFAULT_TIMEOUT = 10.0

_TRANSPORT_STATUSES = frozenset({401, 403, 429})


class Github(CommitGraphSource):
    """Commit graph of one GitHub repository.

    Args:
        owner: Repository owner (user or organisation).
        repo: Repository name.
        token: Personal access token; anonymous access when ``None``.
        base_url: API root, for GitHub Enterprise or tests.
        per_page: Commits requested per history page (GitHub caps it at 100).
        batch: Use the history endpoint (``True``) or the single commit
            endpoint (``False``) for parent lookups.
        timeout: Per-request timeout in seconds.
        client: Pre-built ``httpx.Client``; the source does not close it.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        per_page: int = DEFAULT_PER_PAGE,
        batch: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        if not owner:
            raise ValueError("owner is required")
        if not repo:
            raise ValueError("repo is required")
        if not 1 <= per_page <= DEFAULT_PER_PAGE:
            raise ValueError(f"per_page must be between 1 and {DEFAULT_PER_PAGE}")
        self.owner = owner
        self.repo = repo
        self.per_page = per_page
        self.batch = batch

        headers = {"Accept": "application/vnd.github.v3+json"}
        if token:
            headers["Authorization"] = f"token {token}"
            logger.debug("GitHub source for %s/%s uses token auth (token ***)", owner, repo)

        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                base_url=base_url,
                timeout=timeout,
                follow_redirects=True,
            )
        self._client = client
        self._headers = headers

    # -- CommitGraphSource --

    def resolve_branch(self, name: str) -> str:
        payload = self._get(f"{self._repo_path}/branches/{name}", name)
        commit = payload.get("commit") if isinstance(payload, dict) else None
        sha = commit.get("sha") if isinstance(commit, dict) else None
        if isinstance(sha, str):
            return sha
        message = _message(payload)
        if message is not None:
            raise NotFound(name, message)
        raise MalformedResponse(f"Unexpected branch payload for {name!r}")

    def fetch_parents(self, commit: str) -> Mapping[str, tuple[str, ...]]:
        if self.batch:
            payload = self._get(
                f"{self._repo_path}/commits",
                commit,
                params={"sha": commit, "per_page": self.per_page},
            )
        else:
            payload = self._get(f"{self._repo_path}/commits/{commit}", commit)

        if isinstance(payload, list):
            entries = payload
        elif isinstance(payload, dict) and "sha" in payload:
            entries = [payload]
        else:
            message = _message(payload)
            if message is not None:
                raise NotFound(commit, message)
            raise MalformedResponse(f"Unexpected commits payload for {commit!r}")

        result = dict(_parse_commit(entry) for entry in entries)
        logger.debug(
            "Fetched parents of %d commit(s) starting at %s", len(result), commit[:8]
        )
        return result

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Github:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        self.close()

    # -- Internal --

    @property
    def _repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def _get(self, path: str, subject: str, **kwargs: Any) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Maps connection failures and refusing statuses to
        ``TransportError`` and undecodable bodies to ``MalformedResponse``.
        ``subject`` names the branch or commit for error messages.
        """
        try:
            response = self._client.get(path, headers=self._headers, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"GitHub request for {subject!r} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            if response.is_server_error or response.status_code in _TRANSPORT_STATUSES:
                raise TransportError(
                    f"GitHub returned {response.status_code} for {subject!r}"
                ) from exc
            raise MalformedResponse(f"GitHub response for {subject!r} is not JSON") from exc

        if response.is_server_error or response.status_code in _TRANSPORT_STATUSES:
            detail = _message(payload) or response.reason_phrase
            raise TransportError(
                f"GitHub returned {response.status_code} for {subject!r}: {detail}"
            )
        return payload


def _message(payload: Any) -> str | None:
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return None


def _parse_commit(entry: Any) -> tuple[str, tuple[str, ...]]:
    """Turn one ``{sha, parents: [{sha}, ...]}`` object into a pair."""
    if not isinstance(entry, dict):
        raise MalformedResponse("Commit entry is not an object")
    sha = entry.get("sha")
    parents = entry.get("parents")
    if not isinstance(sha, str) or not isinstance(parents, list):
        raise MalformedResponse("Commit entry lacks 'sha' or 'parents'")
    parent_shas = []
    for parent in parents:
        parent_sha = parent.get("sha") if isinstance(parent, dict) else None
        if not isinstance(parent_sha, str):
            raise MalformedResponse(f"Parent entry of {sha!r} lacks 'sha'")
        parent_shas.append(parent_sha)
    return sha, tuple(parent_shas)
