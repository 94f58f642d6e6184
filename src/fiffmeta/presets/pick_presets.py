"""
Channel Pick Presets

Pre-configured channel selections for common analysis setups.
Each preset is a PickSpec plus a display name and description.

Usage:
    from fiffmeta.presets import MEG_EEG, get_preset, apply_preset

    # Use preset directly
    sel = MEG_EEG.apply(info)

    # Or load by name
    sel = apply_preset(info, "meg_eeg")
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import numpy as np

from fiffmeta.fiff.info_base import MeasInfoBase
from fiffmeta.fiff.pick import PickSpec

# =============================================================================
# Preset Definitions
# =============================================================================


MEG = PickSpec(meg=True)
GRAD = PickSpec(meg="grad")
MAG = PickSpec(meg="mag")
EEG = PickSpec(meg=False, eeg=True)
MEG_EEG = PickSpec(meg=True, eeg=True)
STIM = PickSpec(meg=False, stim=True)
ALL_GOOD = PickSpec(meg=True, eeg=True, stim=True, exclude_bads=True)


# =============================================================================
# Preset Registry
# =============================================================================


PRESETS: dict[str, dict[str, Any]] = {
    "meg": {
        "name": "MEG",
        "description": "All MEG sensors, including reference channels.",
        "spec": MEG,
    },
    "grad": {
        "name": "Gradiometers",
        "description": "Planar gradiometers only (unit T/m).",
        "spec": GRAD,
    },
    "mag": {
        "name": "Magnetometers",
        "description": "Magnetometers only (unit T).",
        "spec": MAG,
    },
    "eeg": {
        "name": "EEG",
        "description": "EEG electrodes only.",
        "spec": EEG,
    },
    "meg_eeg": {
        "name": "MEG + EEG",
        "description": "Combined MEG and EEG sensor analysis.",
        "spec": MEG_EEG,
    },
    "stim": {
        "name": "Stimulus",
        "description": "Trigger and stimulus lines for event extraction.",
        "spec": STIM,
    },
    "all_good": {
        "name": "All Good Data Channels",
        "description": "MEG, EEG and stimulus channels with bad channels removed.",
        "spec": ALL_GOOD,
    },
}


def _normalize(name: str) -> str:
    return name.lower().replace(" ", "_").replace("-", "_")


def load_presets(config: dict[str, Any] | None = None) -> dict[str, dict[str, Any]]:
    """
    Built-in presets merged with those defined under ``config["presets"]``.

    Config entries override built-ins of the same name.

    Raises
    ------
    ValueError
        If a configured preset has unknown or invalid pick parameters.
    """
    presets = {key: dict(preset) for key, preset in PRESETS.items()}
    if not config:
        return presets

    for key, params in (config.get("presets") or {}).items():
        params = dict(params)
        presets[_normalize(key)] = {
            "name": params.get("name", key),
            "description": params.get("description", ""),
            "spec": PickSpec.from_dict(params),
        }
    return presets


def list_presets(config: dict[str, Any] | None = None) -> list[str]:
    """
    List all available preset names.

    Returns
    -------
    list[str]
        Names of available presets.

    Examples
    --------
    >>> list_presets()
    ['meg', 'grad', 'mag', 'eeg', 'meg_eeg', 'stim', 'all_good']
    """
    return list(load_presets(config).keys())


def get_preset(name: str, config: dict[str, Any] | None = None) -> PickSpec:
    """
    Get a preset by name.

    Parameters
    ----------
    name : str
        Preset name (case-insensitive, spaces and dashes read as underscores).
    config : dict, optional
        Configuration whose ``presets`` section extends the built-ins.

    Returns
    -------
    PickSpec
        The preset's pick parameters.

    Raises
    ------
    KeyError
        If preset name not found.

    Examples
    --------
    >>> get_preset("MEG-EEG").eeg
    True
    """
    presets = load_presets(config)
    normalized = _normalize(name)

    if normalized not in presets:
        available = ", ".join(presets)
        raise KeyError(
            f"Preset '{name}' not found. Available presets: {available}"
        )

    return presets[normalized]["spec"]


def get_preset_names_and_descriptions(
    config: dict[str, Any] | None = None,
) -> list[tuple[str, str, str]]:
    """
    Get all preset names with their display names and descriptions.

    Returns
    -------
    list[tuple[str, str, str]]
        List of (key, display_name, description) tuples.
    """
    return [
        (key, preset["name"], preset["description"])
        for key, preset in load_presets(config).items()
    ]


def apply_preset(
    info: MeasInfoBase,
    name: str | None = None,
    config: dict[str, Any] | None = None,
) -> np.ndarray:
    """
    Pick channels of ``info`` with a named preset.

    Parameters
    ----------
    info : MeasInfoBase
        Measurement info to select from.
    name : str, optional
        Preset name. Defaults to ``config["picks"]["default_preset"]``.
    config : dict, optional
        Configuration providing extra presets and pick defaults. When
        ``picks.exclude_bads`` is true, bad channels are always excluded.

    Returns
    -------
    np.ndarray
        Selected channel indices, ascending.
    """
    picks_cfg = (config or {}).get("picks") or {}
    if name is None:
        name = picks_cfg.get("default_preset", "meg")

    spec = get_preset(name, config)
    if picks_cfg.get("exclude_bads", False) and not spec.exclude_bads:
        spec = replace(spec, exclude_bads=True)
    return spec.apply(info)
