"""Client configuration for gh-releases.

Settings can be built directly or read from an INI file:

    [github]
    api_base_url = https://api.github.com
    web_host = github.com  # host accepted by project_for_url

    [network]
    timeout_seconds = 10
    user_agent = gh-releases
"""

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from gh_releases.exceptions import ConfigError
from gh_releases.logger import get_logger

logger = get_logger(__name__)

SECTION_GITHUB = "github"
SECTION_NETWORK = "network"

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_WEB_HOST = "github.com"
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_USER_AGENT = "gh-releases"


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments (anything after '  #') from a value."""
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class CommentAwareConfigParser(configparser.ConfigParser):
    """ConfigParser that strips inline comments when reading values."""

    def get(  # type: ignore[override]
        self,
        section: str,
        option: str,
        **kwargs: Any,  # noqa: ANN401
    ) -> str:
        """Get a configuration value with inline comments stripped."""
        value = super().get(section, option, **kwargs)
        return _strip_inline_comment(value)


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Settings shared by every request a client issues.

    Attributes:
        api_base_url: Origin of the REST API, without trailing slash
        web_host: Host whose project URLs the client recognizes
        timeout_seconds: Connect timeout; reads may take three times longer
        user_agent: User-Agent header sent with each request

    """

    api_base_url: str = DEFAULT_API_BASE_URL
    web_host: str = DEFAULT_WEB_HOST
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        parts = urlsplit(self.api_base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            msg = f"api_base_url must be an http(s) URL: {self.api_base_url!r}"
            raise ConfigError(msg)
        if self.api_base_url.endswith("/"):
            object.__setattr__(
                self, "api_base_url", self.api_base_url.rstrip("/")
            )
        if not self.web_host:
            msg = "web_host must not be empty"
            raise ConfigError(msg)
        if self.timeout_seconds <= 0:
            msg = f"timeout_seconds must be positive: {self.timeout_seconds}"
            raise ConfigError(msg)


def load_config(path: Path) -> ClientConfig:
    """Load client configuration from an INI file.

    Missing files, sections and options fall back to defaults.

    Args:
        path: Path to the INI file

    Returns:
        Parsed ClientConfig

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values

    """
    if not path.exists():
        logger.debug("Config file %s not found, using defaults", path)
        return ClientConfig()

    parser = CommentAwareConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as e:
        msg = f"Failed to parse {path}: {e}"
        raise ConfigError(msg) from e

    try:
        timeout_seconds = parser.getint(
            SECTION_NETWORK,
            "timeout_seconds",
            fallback=DEFAULT_TIMEOUT_SECONDS,
        )
    except ValueError as e:
        msg = f"Invalid timeout_seconds in {path}: {e}"
        raise ConfigError(msg) from e

    config = ClientConfig(
        api_base_url=parser.get(
            SECTION_GITHUB, "api_base_url", fallback=DEFAULT_API_BASE_URL
        ),
        web_host=parser.get(
            SECTION_GITHUB, "web_host", fallback=DEFAULT_WEB_HOST
        ),
        timeout_seconds=timeout_seconds,
        user_agent=parser.get(
            SECTION_NETWORK, "user_agent", fallback=DEFAULT_USER_AGENT
        ),
    )
    logger.debug("Loaded client config from %s", path)
    return config
