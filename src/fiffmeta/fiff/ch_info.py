"""
Per-Channel Descriptors

ChannelInfo mirrors a FIFF channel-info record: identification, type,
calibration, and sensor location/orientation of one measurement channel.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

import numpy as np

from fiffmeta.fiff.constants import (
    CH_LOC_SIZE,
    CHANNEL_KIND_NAMES,
    FIFF_UNIT_V,
    FIFF_UNITM_NONE,
    FIFFV_COIL_NONE,
    FIFFV_COORD_UNKNOWN,
    FIFFV_EEG_CH,
    FIFFV_MEG_CH,
    FIFFV_MISC_CH,
    FIFFV_STIM_CH,
    MEG_KINDS,
    MEG_UNIT_NAMES,
)


@dataclass(eq=False)
class ChannelInfo:
    """
    Descriptor of a single measurement channel.

    Attributes
    ----------
    ch_name : str
        Channel name, e.g. ``"MEG 0113"``.
    kind : int
        Channel kind (``FIFFV_*_CH``).
    scan_no : int
        Scanning order number (1-based in FIFF files).
    log_no : int
        Logical channel number.
    range : float
        Voltmeter range; multiplies raw data together with ``cal``.
    cal : float
        Calibration factor.
    coil_type : int
        Sensor coil type (``FIFFV_COIL_*``).
    loc : np.ndarray
        Sensor location and orientation, shape (12,): r0, ex, ey, ez.
    coord_frame : int
        Frame ``loc`` is expressed in.
    unit : int
        Physical unit of the data (``FIFF_UNIT_*``).
    unit_mul : int
        Unit multiplier exponent.
    """

    ch_name: str = ""
    kind: int = FIFFV_MISC_CH
    scan_no: int = 0
    log_no: int = 0
    range: float = 1.0
    cal: float = 1.0
    coil_type: int = FIFFV_COIL_NONE
    loc: np.ndarray = field(default_factory=lambda: np.zeros(CH_LOC_SIZE))
    coord_frame: int = FIFFV_COORD_UNKNOWN
    unit: int = FIFF_UNIT_V
    unit_mul: int = FIFF_UNITM_NONE

    def __post_init__(self) -> None:
        self.loc = np.array(self.loc, dtype=np.float64).ravel()
        if self.loc.shape[0] != CH_LOC_SIZE:
            raise ValueError(
                f"loc must have {CH_LOC_SIZE} entries, got {self.loc.shape[0]}"
            )

    @property
    def is_meg(self) -> bool:
        """MEG sensor, including reference magnetometers/gradiometers."""
        return self.kind in MEG_KINDS

    @property
    def is_eeg(self) -> bool:
        return self.kind == FIFFV_EEG_CH

    @property
    def is_stim(self) -> bool:
        return self.kind == FIFFV_STIM_CH

    @property
    def channel_type(self) -> str:
        """
        Short type name as used by the MNE toolbox.

        MEG channels resolve to ``"grad"`` or ``"mag"`` from their unit;
        unknown kinds give ``"unknown"``.
        """
        if self.kind == FIFFV_MEG_CH:
            return MEG_UNIT_NAMES.get(self.unit, "meg")
        return CHANNEL_KIND_NAMES.get(self.kind, "unknown")

    @property
    def position(self) -> np.ndarray:
        """Sensor origin r0, shape (3,)."""
        return self.loc[:3].copy()

    def copy(self) -> "ChannelInfo":
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChannelInfo):
            return NotImplemented
        return (
            self.ch_name == other.ch_name
            and self.kind == other.kind
            and self.scan_no == other.scan_no
            and self.log_no == other.log_no
            and self.range == other.range
            and self.cal == other.cal
            and self.coil_type == other.coil_type
            and self.coord_frame == other.coord_frame
            and self.unit == other.unit
            and self.unit_mul == other.unit_mul
            and np.array_equal(self.loc, other.loc)
        )
