"""Load engine configuration from YAML."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

from .schema import Config

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


def load_config(yaml_path: str = None) -> Config:
    """
    Read and validate an engine config.

    Args:
        yaml_path: YAML file with `constants` and `asset_classes` sections
            (the packaged defaults.yaml when omitted)

    Raises:
        OSError: if the file cannot be read
        pydantic.ValidationError: if the table or constants are invalid
    """
    with open(yaml_path or DEFAULTS_PATH, 'r') as f:
        data = yaml.safe_load(f)
    return Config.from_dict(data)


@lru_cache(maxsize=1)
def get_default_config() -> Config:
    """Packaged defaults, loaded once per process."""
    return load_config()


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Validate a config given as a plain mapping, e.g. an edited `Config.to_dict()`."""
    return Config.from_dict(data)
