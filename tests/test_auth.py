"""Tests for token validation and the authentication middleware."""

import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from gh_releases.auth import TokenAuthMiddleware, validate_github_token


@pytest.mark.parametrize(
    "token",
    [
        "a" * 40,
        "0123456789abcdef0123456789abcdef01234567",
        "ghp_" + "A1b2" * 9,
        "gho_" + "x" * 36,
        "ghs_" + "y" * 40,
        "github_pat_" + "Z_9" * 20,
    ],
)
def test_validate_github_token_accepts_known_formats(token):
    assert validate_github_token(token) is True


@pytest.mark.parametrize(
    "token",
    [
        None,
        "",
        "   ",
        "a" * 39,
        "G" * 40,
        "ghp_short",
        "ghx_" + "x" * 36,
        "ghp_" + "x" * 300,
    ],
)
def test_validate_github_token_rejects_invalid(token):
    assert validate_github_token(token) is False


def test_middleware_requires_token():
    with pytest.raises(ValueError, match="non-empty token"):
        TokenAuthMiddleware("")


def test_middleware_repr_hides_token():
    token = "ghp_" + "s" * 36
    middleware = TokenAuthMiddleware(token)

    assert token not in repr(middleware)


def test_unknown_token_format_warns_without_leaking(caplog):
    with caplog.at_level(logging.WARNING, logger="gh_releases"):
        TokenAuthMiddleware("custom-token-value")

    assert "known token format" in caplog.text
    assert "custom-token-value" not in caplog.text


@pytest.mark.asyncio
async def test_middleware_sets_header_and_forwards():
    token = "ghp_" + "t" * 36
    middleware = TokenAuthMiddleware(token)
    request = SimpleNamespace(headers={"Accept": "application/json"})
    sentinel = object()
    handler = AsyncMock(return_value=sentinel)

    result = await middleware(request, handler)

    assert result is sentinel
    handler.assert_awaited_once_with(request)
    assert request.headers == {
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
    }


@pytest.mark.asyncio
async def test_middleware_custom_scheme_overrides_existing_header():
    middleware = TokenAuthMiddleware("a" * 40, scheme="token")
    request = SimpleNamespace(headers={"Authorization": "stale"})

    await middleware(request, AsyncMock())

    assert request.headers["Authorization"] == "token " + "a" * 40
