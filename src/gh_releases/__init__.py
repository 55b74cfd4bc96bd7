"""Minimal async client for GitHub repository and release metadata."""

from gh_releases.auth import TokenAuthMiddleware, validate_github_token
from gh_releases.client import GitHubClient
from gh_releases.config import ClientConfig, load_config
from gh_releases.exceptions import (
    ConfigError,
    DecodeError,
    ErrorKind,
    GitHubAPIError,
    HTTPStatusError,
    RequestConstructionError,
    TransportError,
)
from gh_releases.http_session import create_http_session
from gh_releases.logger import get_logger, setup_logging
from gh_releases.models import Asset, Release, RepositoryInfo

__version__ = "0.1.0"

__all__ = [
    "Asset",
    "ClientConfig",
    "ConfigError",
    "DecodeError",
    "ErrorKind",
    "GitHubAPIError",
    "GitHubClient",
    "HTTPStatusError",
    "Release",
    "RepositoryInfo",
    "RequestConstructionError",
    "TokenAuthMiddleware",
    "TransportError",
    "create_http_session",
    "get_logger",
    "load_config",
    "setup_logging",
    "validate_github_token",
]
