"""Configuration schema and loaders."""

from .loader import config_from_dict, get_default_config, load_config
from .schema import AssetClassParameters, Config, EngineConstants

__all__ = [
    "AssetClassParameters",
    "Config",
    "EngineConstants",
    "config_from_dict",
    "get_default_config",
    "load_config",
]
