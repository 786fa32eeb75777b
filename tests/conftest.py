"""Pytest configuration for the Pastebin MCP tools."""

import sys
from pathlib import Path

import pytest

# Project root on sys.path so core/, tools/ and agent/ import as top-level packages.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.credentials import StaticCredentialProvider  # noqa: E402


@pytest.fixture
def full_credentials() -> StaticCredentialProvider:
    return StaticCredentialProvider(developer_key="dev-key", user_key="user-key")


@pytest.fixture
def dev_only_credentials() -> StaticCredentialProvider:
    return StaticCredentialProvider(developer_key="dev-key")


@pytest.fixture
def no_credentials() -> StaticCredentialProvider:
    return StaticCredentialProvider()
