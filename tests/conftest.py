"""Shared channel layouts for the fiffmeta test suites."""

from __future__ import annotations

import numpy as np
import pytest

from fiffmeta.fiff.ch_info import ChannelInfo
from fiffmeta.fiff.constants import (
    FIFF_UNIT_T,
    FIFF_UNIT_T_M,
    FIFF_UNIT_V,
    FIFFV_COIL_EEG,
    FIFFV_COIL_VV_MAG_T3,
    FIFFV_COIL_VV_PLANAR_T1,
    FIFFV_COORD_DEVICE,
    FIFFV_COORD_HEAD,
    FIFFV_ECG_CH,
    FIFFV_EEG_CH,
    FIFFV_MEG_CH,
    FIFFV_REF_MEG_CH,
    FIFFV_STIM_CH,
)
from fiffmeta.fiff.coord_trans import CoordTrans
from fiffmeta.fiff.info_base import MeasInfoBase


def make_channel(name: str, kind: int, unit: int = FIFF_UNIT_V, coil_type: int = 0,
                 scan_no: int = 1) -> ChannelInfo:
    loc = np.zeros(12)
    loc[:3] = [0.01 * scan_no, 0.0, 0.05]
    return ChannelInfo(
        ch_name=name,
        kind=kind,
        scan_no=scan_no,
        log_no=scan_no,
        coil_type=coil_type,
        unit=unit,
        loc=loc,
        coord_frame=FIFFV_COORD_DEVICE if kind == FIFFV_MEG_CH else FIFFV_COORD_HEAD,
    )


@pytest.fixture
def four_channel_info() -> MeasInfoBase:
    """MEG001, MEG002, EEG001, STI001 with EEG001 marked bad."""
    chs = [
        make_channel("MEG001", FIFFV_MEG_CH, FIFF_UNIT_T_M, FIFFV_COIL_VV_PLANAR_T1, 1),
        make_channel("MEG002", FIFFV_MEG_CH, FIFF_UNIT_T, FIFFV_COIL_VV_MAG_T3, 2),
        make_channel("EEG001", FIFFV_EEG_CH, FIFF_UNIT_V, FIFFV_COIL_EEG, 3),
        make_channel("STI001", FIFFV_STIM_CH, FIFF_UNIT_V, 0, 4),
    ]
    dev_head_t = CoordTrans.from_rotation_translation(
        np.eye(3), [0.0, 0.0, 0.04], FIFFV_COORD_DEVICE, FIFFV_COORD_HEAD
    )
    return MeasInfoBase.from_channels(chs, bads=["EEG001"], dev_head_t=dev_head_t)


@pytest.fixture
def mixed_info() -> MeasInfoBase:
    """Gradiometers, magnetometer, reference MEG, EEG, ECG and stimulus channels."""
    chs = [
        make_channel("MEG 0113", FIFFV_MEG_CH, FIFF_UNIT_T_M, FIFFV_COIL_VV_PLANAR_T1, 1),
        make_channel("MEG 0112", FIFFV_MEG_CH, FIFF_UNIT_T_M, FIFFV_COIL_VV_PLANAR_T1, 2),
        make_channel("MEG 0111", FIFFV_MEG_CH, FIFF_UNIT_T, FIFFV_COIL_VV_MAG_T3, 3),
        make_channel("REF 001", FIFFV_REF_MEG_CH, FIFF_UNIT_T, FIFFV_COIL_VV_MAG_T3, 4),
        make_channel("EEG 001", FIFFV_EEG_CH, FIFF_UNIT_V, FIFFV_COIL_EEG, 5),
        make_channel("EEG 002", FIFFV_EEG_CH, FIFF_UNIT_V, FIFFV_COIL_EEG, 6),
        make_channel("ECG 063", FIFFV_ECG_CH, FIFF_UNIT_V, 0, 7),
        make_channel("STI 014", FIFFV_STIM_CH, FIFF_UNIT_V, 0, 8),
    ]
    return MeasInfoBase.from_channels(chs, bads=["MEG 0112", "EEG 002"])
