"""
FIFF Constants for Channel Metadata

Numeric codes follow the FIFF file-format definition (Elekta/Neuromag)
as used by the MNE toolbox. Only the subset needed by the channel
metadata model is defined here.
"""

from __future__ import annotations

# =============================================================================
# Channel Kinds
# =============================================================================

FIFFV_MEG_CH: int = 1
FIFFV_EEG_CH: int = 2
FIFFV_STIM_CH: int = 3
FIFFV_EOG_CH: int = 202
FIFFV_REF_MEG_CH: int = 301
FIFFV_EMG_CH: int = 302
FIFFV_ECG_CH: int = 402
FIFFV_MISC_CH: int = 502
FIFFV_RESP_CH: int = 602  # Respiration monitoring

MEG_KINDS: frozenset[int] = frozenset({FIFFV_MEG_CH, FIFFV_REF_MEG_CH})

# =============================================================================
# Units
# =============================================================================

FIFF_UNIT_NONE: int = -1
FIFF_UNIT_V: int = 107  # volt
FIFF_UNIT_T: int = 112  # tesla
FIFF_UNIT_T_M: int = 201  # T/m

FIFF_UNITM_NONE: int = 0

# =============================================================================
# Coil Types
# =============================================================================

FIFFV_COIL_NONE: int = 0
FIFFV_COIL_EEG: int = 1
FIFFV_COIL_VV_PLANAR_T1: int = 3012
FIFFV_COIL_VV_MAG_T3: int = 3024

# =============================================================================
# Coordinate Frames
# =============================================================================

FIFFV_COORD_UNKNOWN: int = 0
FIFFV_COORD_DEVICE: int = 1
FIFFV_COORD_ISOTRAK: int = 2
FIFFV_COORD_HPI: int = 3
FIFFV_COORD_HEAD: int = 4
FIFFV_COORD_MRI: int = 5
FIFFV_MNE_COORD_CTF_HEAD: int = 1004  # CTF head coordinates

# =============================================================================
# Channel Type Names
# =============================================================================

# Kind -> type name; MEG channels are split further by unit.
CHANNEL_KIND_NAMES: dict[int, str] = {
    FIFFV_MEG_CH: "meg",
    FIFFV_REF_MEG_CH: "ref_meg",
    FIFFV_EEG_CH: "eeg",
    FIFFV_STIM_CH: "stim",
    FIFFV_EOG_CH: "eog",
    FIFFV_EMG_CH: "emg",
    FIFFV_ECG_CH: "ecg",
    FIFFV_MISC_CH: "misc",
    FIFFV_RESP_CH: "resp",
}

MEG_UNIT_NAMES: dict[int, str] = {
    FIFF_UNIT_T_M: "grad",
    FIFF_UNIT_T: "mag",
}

# Number of location values stored per channel: r0 followed by ex, ey, ez.
CH_LOC_SIZE: int = 12
