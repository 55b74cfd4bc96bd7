"""GitHub API client for repository and release metadata.

This module handles direct HTTP communication with the GitHub REST API.
Each call performs exactly one request; retries, backoff and caching are
left to the caller.

Usage:
    >>> async with GitHubClient(token) as github:
    ...     release = await github.latest_release("owner/project")
    ...     response = await github.download(release.assets[0])
    ...     async with response:
    ...         async for chunk in response.content.iter_chunked(8192):
    ...             ...
"""

import re
from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any, TypeVar
from urllib.parse import unquote, urlsplit

import aiohttp
import ijson
from aiohttp import hdrs

from gh_releases.auth import TokenAuthMiddleware
from gh_releases.config import ClientConfig
from gh_releases.exceptions import (
    DecodeError,
    HTTPStatusError,
    RequestConstructionError,
    TransportError,
)
from gh_releases.http_session import build_http_session
from gh_releases.logger import get_logger
from gh_releases.models import Asset, Release, RepositoryInfo

T = TypeVar("T")

logger = get_logger(__name__)

# Constants
HTTP_OK_MIN = 200
HTTP_OK_MAX = 299
OCTET_STREAM = "application/octet-stream"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class GitHubClient:
    """Minimal GitHub REST API client.

    The client holds one HTTP session for its whole lifetime and no other
    state, so a single instance may serve concurrent tasks.

    Without an injected session, the session is created on first use.
    Enter the client with ``async with`` before fanning out tasks so the
    session exists up front. Concurrent first calls on the same event loop
    still share a single session.
    """

    def __init__(
        self,
        token: str = "",
        *,
        session: aiohttp.ClientSession | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize the client. No I/O happens here.

        Args:
            token: GitHub token; empty means unauthenticated requests
            session: Optional session to send requests through. The caller
                keeps ownership of an injected session. When omitted, one
                is created on first use and closed by close().
            config: Client configuration (defaults apply when None)

        """
        self.config = config or ClientConfig()
        self._session = session
        self._owns_session = session is None
        self._middlewares: tuple[TokenAuthMiddleware, ...] = (
            (TokenAuthMiddleware(token),) if token else ()
        )

    @property
    def authenticated(self) -> bool:
        """Whether requests carry an Authorization header."""
        return bool(self._middlewares)

    async def __aenter__(self) -> "GitHubClient":
        self._get_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def project_for_url(self, source_url: str) -> str:
        """Return ``owner/project`` for a GitHub project URL.

        This is a membership test: any URL that is not a project URL on the
        configured web host yields an empty string instead of an error.

        Args:
            source_url: Arbitrary URL string

        Returns:
            ``owner/project`` or ``""``

        """
        if source_url.startswith(" ") or _CONTROL_CHARS.search(source_url):
            return ""
        try:
            parsed = urlsplit(source_url)
        except ValueError:
            return ""
        host = parsed.netloc.rpartition("@")[2]
        if host != self.config.web_host:
            return ""
        if _INVALID_ESCAPE.search(parsed.path) or _INVALID_ESCAPE.search(
            parsed.fragment
        ):
            return ""
        parts = unquote(parsed.path).split("/")
        if len(parts) < 3:  # noqa: PLR2004
            return ""
        return "/".join(parts[1:3])

    async def repo(self, repo: str) -> RepositoryInfo:
        """Fetch repository information.

        Args:
            repo: Repository as ``owner/name``

        Returns:
            Repository description and homepage

        """
        url = f"{self.config.api_base_url}/repos/{repo}"
        return await self._decode(url, RepositoryInfo.from_api_response)

    async def latest_release(self, repo: str) -> Release:
        """Fetch the latest release of a repository."""
        url = f"{self.config.api_base_url}/repos/{repo}/releases/latest"
        return await self._decode(url, Release.from_api_response)

    async def releases(self, repo: str) -> list[Release]:
        """Fetch the first page of releases of a repository.

        Args:
            repo: Repository as ``owner/name``

        Returns:
            Releases in the order the API returned them

        """
        url = f"{self.config.api_base_url}/repos/{repo}/releases"
        return await self._decode(url, Release.list_from_api_response)

    async def download(self, asset: Asset) -> aiohttp.ClientResponse:
        """Start downloading a release asset.

        The response is returned unread and its status is not checked.
        The caller owns it and must release it, e.g. with
        ``async with response:``, after consuming the body.

        Args:
            asset: Asset taken from a fetched release

        Returns:
            Live response streaming the asset's binary content

        Raises:
            RequestConstructionError: If asset.url is not a valid URL
            TransportError: If the request could not be sent

        """
        kwargs = self._request_kwargs(asset.url, {hdrs.ACCEPT: OCTET_STREAM})
        session = self._get_session()
        logger.debug("Downloading asset %s from %s", asset.name, asset.url)
        try:
            return await session.get(asset.url, **kwargs)
        except aiohttp.InvalidURL as e:
            raise RequestConstructionError(asset.url, e) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise TransportError(asset.url, e) from e

    async def _decode(self, url: str, parse: Callable[[Any], T]) -> T:
        """GET ``url`` and parse its JSON body with ``parse``.

        The body is parsed incrementally as it arrives and the response is
        always released before returning. Bodies of non-2xx responses are
        not read.

        Raises:
            RequestConstructionError: If the request could not be built
            TransportError: If the service could not be reached
            HTTPStatusError: If the status code is outside 2xx
            DecodeError: If the body is not JSON of the expected shape

        """
        kwargs = self._request_kwargs(url, {})
        session = self._get_session()
        logger.debug("GET %s", url)
        try:
            async with session.get(url, **kwargs) as response:
                logger.debug("GET %s -> %s", url, response.status)
                if not HTTP_OK_MIN <= response.status <= HTTP_OK_MAX:
                    raise HTTPStatusError(
                        url, response.status, response.reason or ""
                    )
                try:
                    data = await _read_json(response.content)
                    return parse(data)
                except (ijson.JSONError, TypeError, ValueError) as e:
                    raise DecodeError(url, e) from e
        except aiohttp.InvalidURL as e:
            raise RequestConstructionError(url, e) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise TransportError(url, e) from e

    def _request_kwargs(
        self, url: str, headers: Mapping[str, str]
    ) -> dict[str, Any]:
        """Validate ``url`` and build keyword arguments for a GET request."""
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise RequestConstructionError(url, e) from e
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise RequestConstructionError(
                url, ValueError(f"not an absolute http(s) URL: {url!r}")
            )

        kwargs: dict[str, Any] = {"headers": dict(headers)}
        if self._middlewares:
            kwargs["middlewares"] = self._middlewares
        return kwargs

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = build_http_session(self.config)
        return self._session


async def _read_json(stream: aiohttp.StreamReader) -> Any:  # noqa: ANN401
    """Parse exactly one JSON document from ``stream`` as it is read."""
    values = [
        value async for value in ijson.items(stream, "", use_float=True)
    ]
    if len(values) != 1:
        msg = f"expected one JSON document, got {len(values)}"
        raise ValueError(msg)
    return values[0]
