"""Tests for gh-releases exception classes."""

import aiohttp

from gh_releases.exceptions import (
    DecodeError,
    ErrorKind,
    GitHubAPIError,
    HTTPStatusError,
    RequestConstructionError,
    TransportError,
)

URL = "https://api.github.com/repos/o/r"


def test_base_error_formatting():
    assert str(GitHubAPIError("boom")) == "GitHub API request failed: boom"
    assert str(GitHubAPIError("boom", url=URL)) == (
        f"{URL}: GitHub API request failed: boom"
    )


def test_http_status_error():
    error = HTTPStatusError(URL, 403, "Forbidden")

    assert error.kind is ErrorKind.HTTP_STATUS
    assert error.status == 403
    assert error.status_text == "403 Forbidden"
    assert error.cause is None
    assert str(error) == f"{URL}: GitHub API request failed with 403 Forbidden"


def test_http_status_error_without_reason():
    assert HTTPStatusError(URL, 599).status_text == "599"


def test_transport_error_wraps_cause():
    cause = aiohttp.ClientConnectionError("refused")
    error = TransportError(URL, cause)

    assert error.kind is ErrorKind.TRANSPORT
    assert error.cause is cause
    assert error.url == URL
    assert str(error) == f"{URL}: Transport error: refused"


def test_transport_error_with_empty_message_uses_type_name():
    assert str(TransportError(URL, TimeoutError())).endswith("TimeoutError")


def test_decode_and_construction_kinds():
    assert DecodeError(URL, ValueError("x")).kind is ErrorKind.DECODE
    assert (
        RequestConstructionError(URL, ValueError("x")).kind
        is ErrorKind.CONSTRUCTION
    )


def test_all_errors_share_base_class():
    for error in (
        RequestConstructionError(URL, ValueError()),
        TransportError(URL, OSError()),
        HTTPStatusError(URL, 500),
        DecodeError(URL, ValueError()),
    ):
        assert isinstance(error, GitHubAPIError)
