"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from android_management_cli.api import AndroidManagementClient
from android_management_cli.config import Config


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep tests away from the real home directory config and debug switch."""
    monkeypatch.delenv("AMDM_DEBUG", raising=False)
    monkeypatch.setattr(Config, "CONFIG_FILE", tmp_path / ".amdm_config.json")


@pytest.fixture
def key_file(tmp_path):
    """A service account key file that exists on disk."""
    path = tmp_path / "service-account.json"
    path.write_text('{"type": "service_account"}')
    return path


@pytest.fixture
def config(tmp_path, key_file):
    """A complete configuration with a default enterprise."""
    return Config(
        {
            "serviceAccountKey": str(key_file),
            "projectId": "my-project",
            "callbackUrl": "https://example.com",
            "defaultEnterprise": "enterprises/LC03trycps",
        },
        path=tmp_path / ".amdm_config.json",
    )


@pytest.fixture
def client():
    """An API client whose every request is mocked."""
    return MagicMock(spec=AndroidManagementClient)
