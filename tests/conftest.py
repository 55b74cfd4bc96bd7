"""Pytest configuration and fixtures for gh-releases tests."""

import logging
from typing import Any

import pytest

from gh_releases.logger import ROOT_LOGGER_NAME
from tests.fakes import FakeSession


@pytest.fixture
def fake_session() -> FakeSession:
    """Provide an empty FakeSession; tests fill in routes."""
    return FakeSession()


@pytest.fixture
def release_payload() -> dict[str, Any]:
    """Sample GitHub release data."""
    return {
        "tag_name": "v1.2.3",
        "name": "Release 1.2.3",
        "prerelease": False,
        "assets": [
            {
                "name": "tool-linux-amd64.tar.gz",
                "url": "https://api.github.com/repos/owner/tool/releases/assets/1",
                "browser_download_url": "https://github.com/owner/tool/releases/download/v1.2.3/tool-linux-amd64.tar.gz",
                "size": 1024,
            },
            {
                "name": "checksums.txt",
                "url": "https://api.github.com/repos/owner/tool/releases/assets/2",
                "browser_download_url": "https://github.com/owner/tool/releases/download/v1.2.3/checksums.txt",
                "size": 128,
            },
        ],
    }


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler and level changes made to the package logger."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level

    yield

    root.handlers = handlers
    root.setLevel(level)
