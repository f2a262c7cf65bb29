"""Configuration loading utilities."""

import json
from pathlib import Path

from baikebot.config.schema import Config

# Top-level keys used by the flat single-plugin config format
_LEGACY_BAIKE_KEYS = ("maxResultCount", "maxSummaryLength", "format")


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".baikebot" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            print(f"Warning: Failed to load config from {path}: {e}")
            print("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")

    # Move flat maxResultCount/maxSummaryLength/format -> baike.*
    baike_cfg = data.setdefault("baike", {})
    for key in _LEGACY_BAIKE_KEYS:
        if key in data:
            value = data.pop(key)
            baike_cfg.setdefault(key, value)

    # Move legacy top-level locale -> i18n.locale
    legacy_locale = data.pop("locale", None)
    if legacy_locale:
        data.setdefault("i18n", {}).setdefault("locale", legacy_locale)

    return data
