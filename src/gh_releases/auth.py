"""GitHub token authentication for outgoing requests.

``TokenAuthMiddleware`` is an aiohttp client middleware: it sits between
the session and the connection and adds the Authorization header to every
request passing through it. Operation code never touches credentials.
"""

import re

from aiohttp import ClientHandlerType, ClientRequest, ClientResponse, hdrs

from gh_releases.logger import get_logger

logger = get_logger(__name__)

# GitHub token security constraints
MAX_TOKEN_LENGTH: int = 255  # GitHub's documented maximum token length

_PREFIXED_TOKEN_PATTERNS = (
    r"^ghp_[A-Za-z0-9_]{36,251}$",  # Personal Access Tokens
    r"^gho_[A-Za-z0-9_]{36,251}$",  # OAuth Access tokens
    r"^ghu_[A-Za-z0-9_]{36,251}$",  # GitHub App user-to-server tokens
    r"^ghs_[A-Za-z0-9_]{36,251}$",  # GitHub App server-to-server tokens
    r"^ghr_[A-Za-z0-9_]{36,251}$",  # GitHub App refresh tokens
    r"^github_pat_[A-Za-z0-9_]{36,243}$",  # Fine-grained PATs
)


def validate_github_token(token: str | None) -> bool:
    """Validate GitHub token format.

    Supports both legacy and newer GitHub token formats:
    - Legacy: 40 hexadecimal characters (classic personal access tokens).
    - Prefixed formats such as ``ghp_``, ``gho_``, ``ghu_``, ``ghs_``,
      ``ghr_`` and ``github_pat_``.

    Args:
        token (str | None): The token to validate. ``None`` and non-string
            values are considered invalid.

    Returns:
        bool: True if the token format is valid, False otherwise.

    """
    if not token or not isinstance(token, str):
        return False

    token = token.strip()
    if not token or len(token) > MAX_TOKEN_LENGTH:
        return False

    if re.match(r"^[a-f0-9]{40}$", token):
        return True

    return any(re.match(pattern, token) for pattern in _PREFIXED_TOKEN_PATTERNS)


class TokenAuthMiddleware:
    """Client middleware that authenticates every request with a token."""

    def __init__(self, token: str, scheme: str = "Bearer") -> None:
        """Initialize the middleware.

        Args:
            token: GitHub token; must not be empty
            scheme: Authorization scheme placed before the token

        Raises:
            ValueError: If token is empty

        """
        if not token:
            msg = "TokenAuthMiddleware requires a non-empty token"
            raise ValueError(msg)
        if not validate_github_token(token):
            logger.warning(
                "GitHub token does not match a known token format; "
                "using it anyway"
            )
        self._credentials = f"{scheme} {token}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(token=<hidden>)"

    async def __call__(
        self,
        request: ClientRequest,
        handler: ClientHandlerType,
    ) -> ClientResponse:
        """Set the Authorization header, then forward the request."""
        request.headers[hdrs.AUTHORIZATION] = self._credentials
        return await handler(request)
