"""YAML config loader."""

from pathlib import Path

import yaml

from forecastio.config.schema import ClientConfig


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate client config from a YAML file.

    An empty file yields the defaults.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return ClientConfig(**raw)
