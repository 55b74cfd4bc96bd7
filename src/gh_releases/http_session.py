"""HTTP session utilities for gh-releases.

This module provides utilities for creating configured HTTP sessions
with proper timeout and header settings.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from gh_releases.config import ClientConfig

READ_TIMEOUT_MULTIPLIER = 3


def build_http_session(config: ClientConfig) -> aiohttp.ClientSession:
    """Create a configured HTTP session.

    Must be called from a running event loop. There is no total timeout so
    that long asset downloads are bounded only by connect and read stalls.

    Args:
        config: Client configuration

    Returns:
        Configured aiohttp.ClientSession, owned by the caller

    """
    timeout = aiohttp.ClientTimeout(
        total=None,
        sock_connect=config.timeout_seconds,
        sock_read=config.timeout_seconds * READ_TIMEOUT_MULTIPLIER,
    )
    return aiohttp.ClientSession(
        timeout=timeout,
        headers={aiohttp.hdrs.USER_AGENT: config.user_agent},
    )


@asynccontextmanager
async def create_http_session(
    config: ClientConfig | None = None,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session and close it on exit.

    Args:
        config: Client configuration (defaults apply when None)

    Yields:
        Configured aiohttp.ClientSession

    """
    async with build_http_session(config or ClientConfig()) as session:
        yield session
