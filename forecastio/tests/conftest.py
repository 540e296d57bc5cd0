"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sf_payload(fixtures_dir: Path) -> dict:
    """Full forecast payload for San Francisco."""
    with open(fixtures_dir / "forecast_sf.json") as f:
        return json.load(f)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "base_url": "https://test-forecast.example.com/forecast",
        "timeout": 10.0,
        "units": "si",
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture(autouse=True)
def _no_env_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORECAST_API_KEY", raising=False)
