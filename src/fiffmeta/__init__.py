"""
fiffmeta - FIFF Measurement Info and Channel Selection

This package contains:
- fiff: Channel descriptors, coordinate transforms, and the measurement
  info model with the MNE toolbox selectors (pick_channels, pick_types,
  pick_info)
- validation: Invariant checks for measurement info, selections and config
- presets: Named channel picks for common analysis setups
- config: YAML configuration and logging setup

Usage:
    # After installing with: pip install -e .
    from fiffmeta import MeasInfoBase, pick_channels
    from fiffmeta.presets import apply_preset
    from fiffmeta.config import load_config

    info = MeasInfoBase.from_channels(chs, bads=["MEG 2443"])
    sel = info.pick_types(meg=True, eeg=True, exclude_bads=True)
    meg_eeg_info = info.pick_info(sel)
"""

from fiffmeta.fiff import (
    ChannelInfo,
    CoordTrans,
    InvalidSelectionError,
    MalformedInfoError,
    MeasInfoBase,
    PickSpec,
    pick_channels,
    pick_channels_regexp,
)

__version__ = "0.1.0"
__all__ = [
    "ChannelInfo",
    "CoordTrans",
    "InvalidSelectionError",
    "MalformedInfoError",
    "MeasInfoBase",
    "PickSpec",
    "pick_channels",
    "pick_channels_regexp",
    "fiff",
    "validation",
    "presets",
    "config",
]
