"""Exception classes for gh-releases operations.

Every failure of a metadata or download call is raised as a subclass of
``GitHubAPIError``. Each error carries a kind tag, the requested URL and
the underlying cause so callers can inspect it programmatically as well as
print it.
"""

from enum import Enum


class ErrorKind(Enum):
    """Stage of a request at which an error occurred."""

    CONSTRUCTION = "construction"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


class GitHubAPIError(Exception):
    """Base exception for GitHub API client operations."""

    error_prefix: str = "GitHub API request failed"
    kind: ErrorKind

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize error with message, URL and wrapped cause.

        Args:
            message: Error message describing the failure.
            url: URL of the request that failed.
            cause: Underlying exception, if any.

        """
        super().__init__(message)
        self.message = message
        self.url = url
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.url:
            return f"{self.url}: {self.error_prefix}: {self.message}"
        return f"{self.error_prefix}: {self.message}"


class RequestConstructionError(GitHubAPIError):
    """Raised when the outbound request could not be built."""

    error_prefix = "Invalid request"
    kind = ErrorKind.CONSTRUCTION

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(str(cause), url=url, cause=cause)


class TransportError(GitHubAPIError):
    """Raised when the remote service could not be reached."""

    error_prefix = "Transport error"
    kind = ErrorKind.TRANSPORT

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(
            str(cause) or type(cause).__name__, url=url, cause=cause
        )


class HTTPStatusError(GitHubAPIError):
    """Raised when a response has a status code outside 2xx."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, url: str, status: int, reason: str = "") -> None:
        """Initialize error with the response status.

        Args:
            url: URL of the request that failed.
            status: HTTP status code of the response.
            reason: HTTP reason phrase of the response.

        """
        self.status = status
        self.reason = reason
        super().__init__(self.status_text, url=url)

    @property
    def status_text(self) -> str:
        """Status code and reason phrase, e.g. ``404 Not Found``."""
        return f"{self.status} {self.reason}".strip()

    def __str__(self) -> str:
        return f"{self.url}: GitHub API request failed with {self.status_text}"


class DecodeError(GitHubAPIError):
    """Raised when a response body does not have the expected shape."""

    error_prefix = "Invalid response body"
    kind = ErrorKind.DECODE

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(str(cause), url=url, cause=cause)


class ConfigError(Exception):
    """Raised when a configuration file holds an invalid value."""
