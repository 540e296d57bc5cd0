"""Tests for client config schema and YAML loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from forecastio.config.loader import load_config
from forecastio.config.schema import FORECAST_BASE_URL, ClientConfig
from forecastio.models.common import Units


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == FORECAST_BASE_URL
        assert config.timeout is None
        assert config.units == Units.US
        assert config.api_key == ""

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ClientConfig(retries=3)

    def test_units_coerced(self):
        assert ClientConfig(units="ca").units == Units.CA

    def test_unknown_units_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(units="imperial")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0.0)
        assert ClientConfig(timeout=2.5).timeout == 2.5


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.base_url == "https://test-forecast.example.com/forecast"
        assert config.timeout == 10.0
        assert config.units == Units.SI

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == ClientConfig()

    def test_accepts_str_path(self, config_yaml_path: Path):
        assert load_config(str(config_yaml_path)).units == Units.SI

    def test_invalid_value(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"timeout": -1}, f)
        with pytest.raises(ValidationError):
            load_config(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")
