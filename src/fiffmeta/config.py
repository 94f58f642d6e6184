"""
Configuration Management for fiffmeta

Loads channel-pick settings from YAML config files with fallback to
hardcoded defaults.

Usage:
    from fiffmeta.config import load_config, get_config_path

    cfg = load_config()  # Load default config
    cfg = load_config("configs/custom.yaml")  # Load custom config

    # Access parameters
    preset = cfg["picks"]["default_preset"]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

# Determine project root (works both installed and development mode)
# File is at: src/fiffmeta/config.py
# Project root: src/fiffmeta -> src -> project_root
_THIS_FILE = Path(__file__)
PROJECT_ROOT = _THIS_FILE.parent.parent.parent

DEFAULT_CONFIG_PATH = PROJECT_ROOT / "configs" / "default_picks.yaml"

PACKAGE_LOGGER = "fiffmeta"


def get_config_path(config_name: str = "default_picks.yaml") -> Path:
    """
    Get the full path to a config file.

    Parameters
    ----------
    config_name : str
        Name of the config file (with or without .yaml extension).

    Returns
    -------
    Path
        Full path to the config file.
    """
    if not config_name.endswith(".yaml"):
        config_name = f"{config_name}.yaml"
    return PROJECT_ROOT / "configs" / config_name


def get_default_config() -> dict[str, Any]:
    """
    Return hardcoded default configuration.

    Used as fallback when config file is missing.
    """
    return {
        "logging": {
            "level": "WARNING",
        },
        "picks": {
            "default_preset": "meg",
            "exclude_bads": True,
        },
        # User-defined presets, merged over the built-in ones
        "presets": {},
    }


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load configuration from YAML file with fallback to defaults.

    Parameters
    ----------
    config_path : str or Path, optional
        Path to YAML config file. If None, uses default_picks.yaml.
        If file doesn't exist, falls back to hardcoded defaults.

    Returns
    -------
    dict
        Configuration dictionary.

    Raises
    ------
    None
        This function never raises; it gracefully falls back to defaults.

    Examples
    --------
    >>> cfg = load_config()
    >>> cfg["picks"]["default_preset"]
    'meg'
    """
    config, _ = load_config_safe(config_path)
    return config


def load_config_safe(
    config_path: str | Path | None = None,
) -> tuple[dict[str, Any], list[str]]:
    """
    Load configuration with detailed error reporting.

    Unlike load_config(), this function returns error messages
    for debugging and user feedback.

    Parameters
    ----------
    config_path : str or Path, optional
        Path to YAML config file.

    Returns
    -------
    tuple[dict, list[str]]
        (config_dict, error_messages). Config is always valid (defaults used on error).
        error_messages is empty if load succeeded.
    """
    errors = []

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        errors.append(f"Config file not found: {config_path}. Using defaults.")
        return get_default_config(), errors

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
        if config is None:
            errors.append(f"Config file is empty: {config_path}. Using defaults.")
            return get_default_config(), errors
        if not isinstance(config, dict):
            errors.append(
                f"Config file {config_path} must contain a mapping, "
                f"got {type(config).__name__}. Using defaults."
            )
            return get_default_config(), errors
        return config, errors
    except yaml.YAMLError as e:
        errors.append(
            f"YAML parse error in {config_path}: {e}. "
            "Check indentation and syntax. Using defaults."
        )
        return get_default_config(), errors
    except IOError as e:
        errors.append(f"Cannot read {config_path}: {e}. Using defaults.")
        return get_default_config(), errors


def save_config(config: dict[str, Any], config_path: str | Path) -> None:
    """
    Save configuration to a YAML file.

    Parameters
    ----------
    config : dict
        Configuration dictionary.
    config_path : str or Path
        Output path for the YAML file.
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def configure_logging(config: dict[str, Any] | None = None) -> logging.Logger:
    """
    Set the level of the ``fiffmeta`` logger from ``config["logging"]["level"]``.

    Handlers are left to the application.
    """
    if config is None:
        config = load_config()
    level_name = str(config.get("logging", {}).get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger
