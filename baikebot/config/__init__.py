"""Configuration module for baikebot."""

from baikebot.config.loader import get_config_path, load_config
from baikebot.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
