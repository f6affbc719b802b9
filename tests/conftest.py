from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config manager at a throwaway directory for every test."""
    monkeypatch.setenv("EMOJI_DIFF_CONFIG_DIR", str(tmp_path / "config"))
    ConfigManager.reset_instance()
    yield ConfigManager.get_instance()
    ConfigManager.reset_instance()


@pytest.fixture
def client(isolated_config):
    from main import app

    with TestClient(app) as test_client:
        yield test_client


def assert_has_keys(obj: dict[str, Any], required: tuple[str, ...]) -> None:
    missing = [k for k in required if k not in obj]
    assert not missing, f"Missing keys: {missing} in {obj}"
