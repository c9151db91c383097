"""Shared test fixtures for logmeta."""

import os
import tempfile
from unittest.mock import AsyncMock

import pytest

from logmeta.core.env import EnvironmentReader
from logmeta.resource.environment import EnvironmentClassification


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "resource": {"project_id": "file-project", "disable_project_lookup": False},
        "logging": {"level": "debug"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture(autouse=True)
def _clear_logmeta_env(monkeypatch):
    """Keep the developer's LOGMETA_* variables out of config tests."""
    for key in list(os.environ):
        if key.startswith("LOGMETA_"):
            monkeypatch.delenv(key)


@pytest.fixture
def empty_env():
    return EnvironmentReader.from_dict({})


@pytest.fixture
def identity():
    """Identity provider double that records every call."""
    provider = AsyncMock()
    provider.get_project_id.return_value = "proj-1"
    provider.get_environment.return_value = EnvironmentClassification()
    return provider
