"""HTTP client for the GitHub contents API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, Protocol
from urllib.parse import quote

from cwlgraph.adapters.http_resilience import ResilientClient, build_limiter
from cwlgraph.config.github import get_github_config
from cwlgraph.domain.ports.retrieval import RepositorySource

from .schema import CommitPayload, ContentEntry, DirectoryListing, ErrorResponse
from .translator import translate_entry

if TYPE_CHECKING:
    import httpx
    from aiolimiter import AsyncLimiter

    from cwlgraph.config.github import GitHubConfig
    from cwlgraph.config.http_resilience import ResilienceConfig
    from cwlgraph.domain.ports.retrieval import RepositoryEntry, RepositoryLocation

log = getLogger(__name__)

RAW_MEDIA_TYPE = "application/vnd.github.raw+json"


class GitHubAPIError(RuntimeError):
    """Raised when the GitHub API returns an unexpected payload."""


class ClientFactory(Protocol):
    def __call__(
        self, config: ResilienceConfig, *, limiter: AsyncLimiter | None
    ) -> ResilientClient: ...


def _contents_path(location: RepositoryLocation) -> str:
    base = f"/repos/{location.owner}/{location.repo}/contents"
    path = location.path.strip("/")
    return f"{base}/{quote(path)}" if path else base


class GitHubClient:
    """Synchronous retrieval collaborator backed by the GitHub REST API."""

    def __init__(
        self,
        *,
        config: GitHubConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_github_config()
        self._resilience = self._config.resilience
        self._client_factory = client_factory or ResilientClient
        # one limiter for every request this client makes
        self._limiter = build_limiter(self._resilience.ratelimit)

    def list_directory(self, location: RepositoryLocation) -> list[RepositoryEntry]:
        return asyncio.run(self._list_directory_async(location))

    def read_file(self, location: RepositoryLocation, *, revision: str | None = None) -> str:
        return asyncio.run(self._read_file_async(location, revision=revision))

    def latest_commit(self, location: RepositoryLocation) -> str:
        """Return the sha of the newest commit on the location's branch."""

        return asyncio.run(self._latest_commit_async(location))

    async def _list_directory_async(self, location: RepositoryLocation) -> list[RepositoryEntry]:
        params = {"ref": location.branch} if location.branch else None
        async with self._open_client() as client:
            payload = await self._get_json(client, _contents_path(location), params=params)

        if isinstance(payload, dict):
            # the location names a single file rather than a directory
            if "type" not in payload:
                raise self._payload_error(payload)
            entries = [ContentEntry.model_validate(payload)]
        else:
            entries = DirectoryListing.model_validate(payload).root

        log.debug("Listed %d entries under %s", len(entries), location.path or "/")
        return [translate_entry(entry) for entry in entries]

    async def _read_file_async(self, location: RepositoryLocation, *, revision: str | None) -> str:
        ref = revision or location.branch
        params = {"ref": ref} if ref else None
        async with self._open_client() as client:
            response = await client.get(
                _contents_path(location),
                params=params,
                headers={"Accept": RAW_MEDIA_TYPE},
            )
        response.raise_for_status()
        log.debug("Downloaded %s at %s", location.path, ref or "default branch")
        return response.text

    async def _latest_commit_async(self, location: RepositoryLocation) -> str:
        ref = quote(location.branch or "HEAD", safe="")
        path = f"/repos/{location.owner}/{location.repo}/commits/{ref}"
        async with self._open_client() as client:
            payload = await self._get_json(client, path)

        if not isinstance(payload, dict) or "sha" not in payload:
            raise self._payload_error(payload)
        return CommitPayload.model_validate(payload).sha

    def _open_client(self) -> ResilientClient:
        return self._client_factory(self._resilience, limiter=self._limiter)

    async def _get_json(
        self,
        client: ResilientClient,
        path: str,
        *,
        params: dict[str, str] | None = None,
    ) -> object:
        if self._resilience.base_url is None:
            raise GitHubAPIError("Missing GitHub base_url in resilience configuration")
        response: httpx.Response = await client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _payload_error(payload: object) -> GitHubAPIError:
        if isinstance(payload, dict) and "message" in payload:
            error = ErrorResponse.model_validate(payload)
            log.error(f"GitHub API error: {error.message}")
            return GitHubAPIError(error.message)
        return GitHubAPIError("Unexpected GitHub response payload")


if TYPE_CHECKING:
    _source_check: RepositorySource = GitHubClient()
