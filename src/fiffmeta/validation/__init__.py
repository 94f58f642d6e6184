"""
Validation Module for fiffmeta

Provides measurement info invariant checks, channel selection checks,
and YAML configuration validation.
"""

from __future__ import annotations

from fiffmeta.validation.info_validators import (
    ConfigValidationResult,
    InfoValidationResult,
    SelectionValidationResult,
    validate_config_file,
    validate_info,
    validate_selection,
)

__all__ = [
    "InfoValidationResult",
    "SelectionValidationResult",
    "ConfigValidationResult",
    "validate_info",
    "validate_selection",
    "validate_config_file",
]
