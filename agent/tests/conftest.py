"""Shared test fixtures for the test suite.

Keeps settings tests independent of the developer's shell environment
and any local ``.env`` file.
"""

from __future__ import annotations

import pytest

from shared.config import REQUIRED_ENV_VARS, get_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset all DO_SPACES_* variables and run from an empty directory."""
    for name in (*REQUIRED_ENV_VARS, "DO_SPACES_REGION", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def spaces_env(clean_env):
    """Populate every required DO_SPACES_* variable."""
    clean_env.setenv("DO_SPACES_KEY", "key")
    clean_env.setenv("DO_SPACES_SECRET", "secret")
    clean_env.setenv("DO_SPACES_ENDPOINT", "https://nyc3.digitaloceanspaces.com")
    clean_env.setenv("DO_SPACES_BUCKET", "my-bucket")
    return clean_env
