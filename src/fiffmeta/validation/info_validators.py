"""
Validators for Channel Metadata

Provides structural validation for:
- Measurement info invariants (name/descriptor alignment, bad channels,
  transform frames)
- Channel selections before they are applied with ``pick_info``
- YAML pick configuration files

Validators never raise on bad input; they report errors, warnings and
recovery suggestions in a result object so loaders and UIs can decide
what to do.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np
import yaml

from fiffmeta.fiff.constants import (
    FIFFV_COORD_DEVICE,
    FIFFV_COORD_HEAD,
    FIFFV_MNE_COORD_CTF_HEAD,
)
from fiffmeta.fiff.pick import PickSpec

if TYPE_CHECKING:
    from fiffmeta.fiff.info_base import MeasInfoBase


# =============================================================================
# Validation Result Types
# =============================================================================


@dataclass
class InfoValidationResult:
    """Result of measurement info validation.

    Attributes
    ----------
    is_valid : bool
        True if no structural invariant is violated.
    nchan : int
        Declared channel count of the validated info.
    warnings : list[str]
        Non-fatal findings (e.g., duplicate channel names).
    errors : list[str]
        Invariant violations.
    recovery_suggestions : list[str]
        Actionable suggestions for fixing issues.
    """

    is_valid: bool
    nchan: int
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    recovery_suggestions: list[str] = field(default_factory=list)


@dataclass
class SelectionValidationResult:
    """Result of channel selection validation.

    Attributes
    ----------
    is_valid : bool
        True if every index can be passed to ``pick_info``.
    n_selected : int
        Number of entries in the selection.
    invalid_indices : list
        Entries that are out of range or not integers.
    warnings : list[str]
        Non-fatal findings (e.g., duplicates, empty selection).
    errors : list[str]
        Fatal findings.
    recovery_suggestions : list[str]
        Actionable suggestions for fixing issues.
    """

    is_valid: bool
    n_selected: int
    invalid_indices: list[Any] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    recovery_suggestions: list[str] = field(default_factory=list)


@dataclass
class ConfigValidationResult:
    """Result of YAML configuration file validation.

    Attributes
    ----------
    is_valid : bool
        True if config loaded and validated successfully.
    config : dict | None
        Loaded configuration (None if load failed).
    file_path : Path | None
        Path to the config file (None if using defaults).
    warnings : list[str]
        Non-fatal warnings (e.g., missing optional fields).
    errors : list[str]
        Fatal errors (e.g., parse failures).
    recovery_suggestions : list[str]
        Actionable suggestions for fixing issues.
    """

    is_valid: bool
    config: dict[str, Any] | None
    file_path: Path | None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    recovery_suggestions: list[str] = field(default_factory=list)


# =============================================================================
# Measurement Info Validation
# =============================================================================


def validate_info(info: "MeasInfoBase") -> InfoValidationResult:
    """
    Check the structural invariants of a measurement info.

    Errors:
    - ``nchan`` differs from ``len(chs)`` on a non-empty info
    - ``ch_names`` and ``chs`` differ in length
    - ``ch_names[k]`` differs from ``chs[k].ch_name``

    Warnings:
    - duplicate channel names (name-based picks match the first copy only)
    - bad channels that are not in ``ch_names``
    - transforms between unexpected coordinate frames

    Parameters
    ----------
    info : MeasInfoBase
        Measurement info to check.

    Returns
    -------
    InfoValidationResult
        Validation result with diagnostic messages.

    Examples
    --------
    >>> info = MeasInfoBase(nchan=3, chs=chs[:2], ch_names=names[:2])
    >>> validate_info(info).errors
    ['CHANNEL COUNT MISMATCH: ...']
    """
    warnings = []
    errors = []
    suggestions = []

    n_chs = len(info.chs)

    if not info.is_empty() and info.nchan != n_chs:
        errors.append(
            f"CHANNEL COUNT MISMATCH: nchan={info.nchan} but {n_chs} channel "
            "descriptors are present."
        )
        suggestions.append("Set nchan to len(chs) or use MeasInfoBase.from_channels().")

    if info.is_empty() and n_chs > 0:
        errors.append(
            f"EMPTY INFO WITH CHANNELS: nchan={info.nchan} marks the info as empty "
            f"but {n_chs} channel descriptors are present."
        )
        suggestions.append("Set nchan to len(chs).")

    if len(info.ch_names) != n_chs:
        errors.append(
            f"NAME COUNT MISMATCH: {len(info.ch_names)} channel names for "
            f"{n_chs} channel descriptors."
        )
        suggestions.append("Rebuild ch_names from [ch.ch_name for ch in chs].")
    else:
        mismatched = [
            k for k, (name, ch) in enumerate(zip(info.ch_names, info.chs))
            if name != ch.ch_name
        ]
        if mismatched:
            k = mismatched[0]
            errors.append(
                f"NAME MISMATCH: {len(mismatched)} channel name(s) differ from their "
                f"descriptor, first at index {k} ({info.ch_names[k]!r} vs "
                f"{info.chs[k].ch_name!r})."
            )
            suggestions.append("Rebuild ch_names from [ch.ch_name for ch in chs].")

    duplicates = sorted(name for name, count in Counter(info.ch_names).items() if count > 1)
    if duplicates:
        warnings.append(
            f"DUPLICATE CHANNEL NAMES: {duplicates}. Name-based picks select only "
            "the first channel carrying each name."
        )

    known = set(info.ch_names)
    unknown_bads = [bad for bad in info.bads if bad not in known]
    if unknown_bads:
        warnings.append(f"UNKNOWN BAD CHANNELS: {unknown_bads} are not in ch_names.")
        suggestions.append("Remove stale entries from bads.")

    expected_frames = (
        ("dev_head_t", info.dev_head_t, FIFFV_COORD_DEVICE),
        ("ctf_head_t", info.ctf_head_t, FIFFV_MNE_COORD_CTF_HEAD),
    )
    for name, trans, from_frame in expected_frames:
        if trans.is_empty():
            continue
        if trans.from_frame != from_frame or trans.to_frame != FIFFV_COORD_HEAD:
            warnings.append(
                f"UNEXPECTED FRAMES: {name} maps frame {trans.from_frame} -> "
                f"{trans.to_frame}, expected {from_frame} -> {FIFFV_COORD_HEAD}."
            )

    return InfoValidationResult(
        is_valid=len(errors) == 0,
        nchan=info.nchan,
        warnings=warnings,
        errors=errors,
        recovery_suggestions=suggestions,
    )


# =============================================================================
# Selection Validation
# =============================================================================


def validate_selection(info: "MeasInfoBase", sel: Any) -> SelectionValidationResult:
    """
    Check a channel selection against ``info`` before calling ``pick_info``.

    Parameters
    ----------
    info : MeasInfoBase
        Measurement info the selection refers to.
    sel : array-like
        Channel indices; may be a row vector.

    Returns
    -------
    SelectionValidationResult
        ``is_valid`` is False when an entry is out of range or not an integer,
        the cases in which ``info.pick_info(sel)`` raises ``InvalidSelectionError``.
    """
    flat = np.asarray(sel if isinstance(sel, np.ndarray) else list(sel), dtype=object).ravel()
    nchan = max(info.nchan, 0)

    warnings = []
    errors = []
    suggestions = []
    invalid = []

    for value in flat:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            invalid.append(value)
        elif not 0 <= value < nchan:
            invalid.append(int(value))

    if invalid:
        errors.append(
            f"INVALID SELECTION: {len(invalid)} entr{'y' if len(invalid) == 1 else 'ies'} "
            f"outside [0, {nchan}) or not integers: {invalid[:10]}"
        )
        suggestions.append(
            "Build selections with pick_channels() or pick_types() on the same info."
        )

    if flat.size == 0:
        warnings.append("EMPTY SELECTION: pick_info will return an info without channels.")

    valid_values = [int(v) for v in flat if not isinstance(v, (bool, np.bool_))
                    and isinstance(v, (int, np.integer))]
    repeated = sorted(k for k, count in Counter(valid_values).items() if count > 1)
    if repeated:
        warnings.append(f"DUPLICATE INDICES: {repeated} appear more than once.")

    return SelectionValidationResult(
        is_valid=len(errors) == 0,
        n_selected=int(flat.size),
        invalid_indices=invalid,
        warnings=warnings,
        errors=errors,
        recovery_suggestions=suggestions,
    )


# =============================================================================
# Configuration File Validation
# =============================================================================

# Required sections in config
REQUIRED_CONFIG_SECTIONS = ["picks"]


def validate_config_file(
    config_path: Path | str | None = None,
    strict: bool = False,
) -> ConfigValidationResult:
    """
    Load and validate YAML configuration file.

    Provides graceful error handling with helpful messages for:
    - Missing files (falls back to defaults)
    - Malformed YAML (syntax errors)
    - Invalid presets (unknown keys, bad ``meg`` values)

    Parameters
    ----------
    config_path : Path or str, optional
        Path to YAML config file. If None, uses default_picks.yaml.
    strict : bool
        If True, treat warnings as errors. Default False.

    Returns
    -------
    ConfigValidationResult
        Validation result with loaded config and any issues found.
    """
    from fiffmeta.config import DEFAULT_CONFIG_PATH, get_default_config

    warnings = []
    errors = []
    suggestions = []

    # Determine file path
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    config = None
    file_exists = config_path.exists()

    if not file_exists:
        warnings.append(
            f"CONFIG FILE NOT FOUND: '{config_path}' does not exist. "
            "Using built-in defaults."
        )
        suggestions.append(
            f"Create config file at '{config_path}' or use load_config() without path."
        )
        config = get_default_config()
    else:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            # Handle empty YAML file (returns None)
            if config is None:
                warnings.append(
                    f"CONFIG FILE EMPTY: '{config_path}' contains no data. "
                    "Using built-in defaults."
                )
                config = get_default_config()
            elif not isinstance(config, dict):
                errors.append(
                    f"CONFIG NOT A MAPPING: '{config_path}' holds a "
                    f"{type(config).__name__}."
                )
                config = get_default_config()
        except yaml.YAMLError as e:
            errors.append(
                f"YAML PARSE ERROR in '{config_path}': {str(e)}"
            )
            suggestions.append(
                "Check YAML syntax: proper indentation (2 spaces), "
                "colons after keys, no tabs."
            )
            config = get_default_config()
        except IOError as e:
            errors.append(
                f"FILE READ ERROR for '{config_path}': {str(e)}"
            )
            suggestions.append("Check file permissions and path.")
            config = get_default_config()

    defaults = get_default_config()
    for section in REQUIRED_CONFIG_SECTIONS:
        if section not in config:
            if strict:
                errors.append(
                    f"MISSING REQUIRED SECTION: '{section}' not found in config."
                )
            else:
                warnings.append(
                    f"MISSING SECTION: '{section}' not found. Using defaults."
                )
            config[section] = defaults[section]

    presets = config.get("presets") or {}
    if not isinstance(presets, dict):
        errors.append("PRESETS NOT A MAPPING: 'presets' must map names to pick parameters.")
        presets = {}
    for key, params in presets.items():
        try:
            PickSpec.from_dict(params)
        except (TypeError, ValueError) as e:
            errors.append(f"INVALID PRESET '{key}': {e}")
            suggestions.append(
                f"Preset '{key}' may only use: meg, eeg, stim, include, exclude, "
                "exclude_bads, name, description."
            )

    # Only checked for existence here; unknown names surface in apply_preset
    default_preset = (config.get("picks") or {}).get("default_preset")
    if default_preset is not None and not isinstance(default_preset, str):
        errors.append(
            f"TYPE ERROR: picks.default_preset should be str, "
            f"got {type(default_preset).__name__}."
        )

    is_valid = len(errors) == 0
    if strict:
        is_valid = is_valid and len(warnings) == 0

    return ConfigValidationResult(
        is_valid=is_valid,
        config=config,
        file_path=config_path if file_exists else None,
        warnings=warnings,
        errors=errors,
        recovery_suggestions=suggestions,
    )
