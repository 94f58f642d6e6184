"""
Channel Pick Presets for fiffmeta

Pre-configured channel selections for common analysis setups.
"""

from __future__ import annotations

from fiffmeta.presets.pick_presets import (
    ALL_GOOD,
    EEG,
    GRAD,
    MAG,
    MEG,
    MEG_EEG,
    PRESETS,
    STIM,
    apply_preset,
    get_preset,
    get_preset_names_and_descriptions,
    list_presets,
    load_presets,
)

__all__ = [
    "MEG",
    "GRAD",
    "MAG",
    "EEG",
    "MEG_EEG",
    "STIM",
    "ALL_GOOD",
    "PRESETS",
    "apply_preset",
    "get_preset",
    "get_preset_names_and_descriptions",
    "list_presets",
    "load_presets",
]
