"""
Tests for fiffmeta Validation Module

Tests measurement info invariant checks, selection checks, and config
file validation.
"""

from __future__ import annotations

from pathlib import Path
import tempfile

import numpy as np

from fiffmeta.fiff.constants import (
    FIFFV_COORD_DEVICE,
    FIFFV_COORD_HEAD,
    FIFFV_COORD_MRI,
    FIFFV_EEG_CH,
)
from fiffmeta.fiff.coord_trans import CoordTrans
from fiffmeta.fiff.info_base import MeasInfoBase
from fiffmeta.validation import (
    validate_config_file,
    validate_info,
    validate_selection,
)

from conftest import make_channel


# =============================================================================
# Measurement Info Validation Tests
# =============================================================================


class TestInfoValidation:
    """Tests for measurement info invariants."""

    def test_valid_info(self, four_channel_info: MeasInfoBase) -> None:
        result = validate_info(four_channel_info)

        assert result.is_valid is True
        assert result.errors == []
        assert result.warnings == []
        assert result.nchan == 4

    def test_empty_info_is_valid(self) -> None:
        assert validate_info(MeasInfoBase()).is_valid is True

    def test_count_mismatch(self, four_channel_info: MeasInfoBase) -> None:
        four_channel_info.nchan = 3
        result = validate_info(four_channel_info)

        assert result.is_valid is False
        assert "CHANNEL COUNT MISMATCH" in result.errors[0]
        assert len(result.recovery_suggestions) > 0

    def test_empty_marker_with_channels(self, four_channel_info: MeasInfoBase) -> None:
        four_channel_info.nchan = -1
        result = validate_info(four_channel_info)

        assert result.is_valid is False
        assert "EMPTY INFO WITH CHANNELS" in result.errors[0]

    def test_name_count_mismatch(self, four_channel_info: MeasInfoBase) -> None:
        four_channel_info.ch_names.pop()
        result = validate_info(four_channel_info)

        assert result.is_valid is False
        assert any("NAME COUNT MISMATCH" in e for e in result.errors)

    def test_name_mismatch(self, four_channel_info: MeasInfoBase) -> None:
        four_channel_info.ch_names[2] = "EEG999"
        result = validate_info(four_channel_info)

        assert result.is_valid is False
        assert "index 2" in result.errors[0]

    def test_duplicate_names_warn(self) -> None:
        chs = [make_channel("EEG 001", FIFFV_EEG_CH), make_channel("EEG 001", FIFFV_EEG_CH)]
        info = MeasInfoBase(nchan=2, chs=chs, ch_names=["EEG 001", "EEG 001"])
        result = validate_info(info)

        assert result.is_valid is True
        assert "DUPLICATE CHANNEL NAMES" in result.warnings[0]
        assert "first channel" in result.warnings[0]

    def test_unknown_bads_warn(self, four_channel_info: MeasInfoBase) -> None:
        four_channel_info.bads.append("GONE")
        result = validate_info(four_channel_info)

        assert result.is_valid is True
        assert "GONE" in result.warnings[0]

    def test_unexpected_transform_frames(self, four_channel_info: MeasInfoBase) -> None:
        four_channel_info.dev_head_t = CoordTrans.identity(FIFFV_COORD_DEVICE, FIFFV_COORD_MRI)
        result = validate_info(four_channel_info)

        assert result.is_valid is True
        assert "UNEXPECTED FRAMES" in result.warnings[0]

    def test_expected_transform_frames(self, four_channel_info: MeasInfoBase) -> None:
        four_channel_info.dev_head_t = CoordTrans.identity(FIFFV_COORD_DEVICE, FIFFV_COORD_HEAD)

        assert validate_info(four_channel_info).warnings == []


# =============================================================================
# Selection Validation Tests
# =============================================================================


class TestSelectionValidation:
    """Tests for selection checks ahead of pick_info."""

    def test_valid_selection(self, four_channel_info: MeasInfoBase) -> None:
        result = validate_selection(four_channel_info, [2, 0])

        assert result.is_valid is True
        assert result.n_selected == 2
        assert result.warnings == []

    def test_numpy_selection(self, four_channel_info: MeasInfoBase) -> None:
        sel = four_channel_info.pick_types(meg=True, eeg=True)

        assert validate_selection(four_channel_info, sel).is_valid is True

    def test_out_of_range(self, four_channel_info: MeasInfoBase) -> None:
        result = validate_selection(four_channel_info, [0, 4, -1])

        assert result.is_valid is False
        assert result.invalid_indices == [4, -1]
        assert "INVALID SELECTION" in result.errors[0]

    def test_non_integer(self, four_channel_info: MeasInfoBase) -> None:
        result = validate_selection(four_channel_info, [0, 1.5, True])

        assert result.is_valid is False
        assert len(result.invalid_indices) == 2

    def test_empty_selection_warns(self, four_channel_info: MeasInfoBase) -> None:
        result = validate_selection(four_channel_info, [])

        assert result.is_valid is True
        assert "EMPTY SELECTION" in result.warnings[0]

    def test_duplicates_warn(self, four_channel_info: MeasInfoBase) -> None:
        result = validate_selection(four_channel_info, np.array([1, 1, 3]))

        assert result.is_valid is True
        assert "DUPLICATE INDICES" in result.warnings[0]


# =============================================================================
# Config Validation Tests
# =============================================================================


class TestConfigValidation:
    """Tests for configuration file validation."""

    def test_valid_default_config(self) -> None:
        result = validate_config_file()

        assert result.is_valid is True
        assert result.config is not None
        assert "picks" in result.config

    def test_nonexistent_file_fallback(self) -> None:
        result = validate_config_file("/nonexistent/path/config.yaml")

        assert result.is_valid is True  # Falls back gracefully
        assert result.config is not None
        assert result.file_path is None
        assert "not found" in result.warnings[0].lower()

    def test_malformed_yaml(self) -> None:
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".yaml", delete=False
        ) as f:
            f.write("invalid: yaml: content: [unclosed")
            temp_path = f.name

        try:
            result = validate_config_file(temp_path)

            assert result.config is not None  # Falls back to defaults
            assert result.is_valid is False
            assert "YAML" in result.errors[0].upper()
        finally:
            Path(temp_path).unlink()

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        result = validate_config_file(path)

        assert result.config is not None
        assert len(result.warnings) > 0

    def test_missing_section_strict(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.yaml"
        path.write_text("logging:\n  level: DEBUG\n")

        lenient = validate_config_file(path)
        strict = validate_config_file(path, strict=True)

        assert lenient.is_valid is True
        assert lenient.config["picks"]["default_preset"] == "meg"
        assert strict.is_valid is False

    def test_invalid_preset(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.yaml"
        path.write_text(
            """
picks:
  default_preset: meg
presets:
  broken:
    meg: planar
  typo:
    eegs: true
"""
        )

        result = validate_config_file(path)

        assert result.is_valid is False
        assert len(result.errors) == 2
        assert "broken" in result.errors[0]
        assert "typo" in result.errors[1]

    def test_valid_custom_config(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text(
            """
picks:
  default_preset: eeg_only
  exclude_bads: false
presets:
  eeg_only:
    meg: false
    eeg: true
    exclude: ["EEG 061"]
"""
        )

        result = validate_config_file(path)

        assert result.is_valid is True
        assert result.file_path == path
        assert result.config["presets"]["eeg_only"]["exclude"] == ["EEG 061"]
