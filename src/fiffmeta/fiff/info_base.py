"""
Light Measurement Info

MeasInfoBase holds the channel layout of a recording session: the
per-channel descriptors, their names, the device/CTF-to-head transforms,
and the list of bad channels. It carries the MNE toolbox selectors
``pick_types`` and ``pick_info``; ``pick_channels`` is a free function in
:mod:`fiffmeta.fiff.pick` and is re-exposed here as a static method.

Instances have value semantics: ``copy()`` and ``pick_info()`` never share
lists, descriptors, or transform matrices with their source.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from fiffmeta.fiff.ch_info import ChannelInfo
from fiffmeta.fiff.coord_trans import CoordTrans
from fiffmeta.fiff.errors import InvalidSelectionError, MalformedInfoError
from fiffmeta.fiff.pick import MEG_PICK_VALUES, _as_name_list, pick_channels

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class MeasInfoBase:
    """
    Channel metadata of a measurement.

    Attributes
    ----------
    nchan : int
        Number of channels. Values <= 0 mark an empty instance.
    chs : list[ChannelInfo]
        Channel descriptors; list order defines the channel index.
    ch_names : list[str]
        Channel names, index-aligned with ``chs``.
    dev_head_t : CoordTrans
        Device to head coordinate transform.
    ctf_head_t : CoordTrans
        CTF head to head coordinate transform.
    bads : list[str]
        Names of channels flagged as bad.

    Examples
    --------
    >>> info = MeasInfoBase.from_channels(chs)
    >>> sel = info.pick_types(meg=True, exclude_bads=True)
    >>> meg_info = info.pick_info(sel)
    """

    nchan: int = -1
    chs: list[ChannelInfo] = field(default_factory=list)
    ch_names: list[str] = field(default_factory=list)
    dev_head_t: CoordTrans = field(default_factory=CoordTrans)
    ctf_head_t: CoordTrans = field(default_factory=CoordTrans)
    bads: list[str] = field(default_factory=list)

    pick_channels = staticmethod(pick_channels)

    @classmethod
    def from_channels(
        cls,
        chs: Iterable[ChannelInfo],
        bads: Iterable[str] = (),
        dev_head_t: CoordTrans | None = None,
        ctf_head_t: CoordTrans | None = None,
        ch_names: Iterable[str] | None = None,
    ) -> "MeasInfoBase":
        """
        Populate a measurement info in bulk from channel descriptors.

        ``nchan`` is derived from ``chs``. ``ch_names`` defaults to the
        descriptor names; a loader that reads the name list separately can
        pass it to have it checked against the descriptors. The descriptors
        and transforms are copied, so the caller keeps ownership of its
        objects.

        Raises
        ------
        MalformedInfoError
            If the assembled info fails :func:`validate_info`.
        """
        # Import here to avoid circular imports
        from fiffmeta.validation.info_validators import validate_info

        chs = [ch.copy() for ch in chs]
        if ch_names is None:
            ch_names = [ch.ch_name for ch in chs]
        info = cls(
            nchan=len(chs),
            chs=chs,
            ch_names=_as_name_list(ch_names, "ch_names"),
            dev_head_t=dev_head_t.copy() if dev_head_t is not None else CoordTrans(),
            ctf_head_t=ctf_head_t.copy() if ctf_head_t is not None else CoordTrans(),
            bads=_as_name_list(bads, "bads"),
        )

        result = validate_info(info)
        for warning in result.warnings:
            logger.warning(warning)
        if not result.is_valid:
            raise MalformedInfoError(result.errors)

        logger.debug("Loaded measurement info with %d channels, %d bad", info.nchan, len(info.bads))
        return info

    def clear(self) -> None:
        """Reset to the empty state."""
        self.nchan = -1
        self.chs = []
        self.ch_names = []
        self.dev_head_t = CoordTrans()
        self.ctf_head_t = CoordTrans()
        self.bads = []

    def is_empty(self) -> bool:
        return self.nchan <= 0

    def copy(self) -> "MeasInfoBase":
        """Deep copy; mutating the copy never affects this instance."""
        return copy.deepcopy(self)

    def __copy__(self) -> "MeasInfoBase":
        return self.copy()

    # =========================================================================
    # Channel types
    # =========================================================================

    def channel_type(self, idx: int) -> str:
        """Type name (``"grad"``, ``"eeg"``, ...) of the channel at ``idx``."""
        return self.chs[idx].channel_type

    def get_channel_types(self, picks: Iterable[int] | None = None) -> list[str]:
        """Type names of all channels, or of ``picks`` in the given order."""
        if picks is None:
            return [ch.channel_type for ch in self.chs]
        return [self.chs[int(k)].channel_type for k in np.asarray(picks).ravel()]

    # =========================================================================
    # Selection
    # =========================================================================

    def _type_matches(self, ch: ChannelInfo, meg: bool | str, eeg: bool, stim: bool) -> bool:
        if ch.is_meg:
            if meg is True:
                return True
            if isinstance(meg, str):
                return ch.channel_type == meg
            return False
        if ch.is_eeg:
            return bool(eeg)
        if ch.is_stim:
            return bool(stim)
        return False

    def pick_types(
        self,
        meg: bool | str = True,
        eeg: bool = False,
        stim: bool = False,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
        exclude_bads: bool = False,
    ) -> np.ndarray:
        """
        Create a selector to pick desired channel types from data.

        A channel is selected when its type matches one of the requested
        classes or its name is listed in ``include``. Names in ``exclude``
        are always dropped.

        Parameters
        ----------
        meg : bool or str
            True for MEG and reference MEG channels, ``"grad"`` or ``"mag"``
            for one MEG sensor type, False for none.
        eeg : bool
            Include EEG channels.
        stim : bool
            Include stimulus channels.
        include : iterable of str
            Additional channels to include. If empty, none are added.
        exclude : iterable of str
            Channels to exclude. If empty, none are excluded.
        exclude_bads : bool
            Also exclude the channels in ``bads``.

        Returns
        -------
        np.ndarray
            Selected channel indices, shape (n_selected,), dtype int, ascending.

        Examples
        --------
        >>> info.ch_names
        ['MEG001', 'MEG002', 'EEG001', 'STI001']
        >>> info.pick_types(meg=True)
        array([0, 1])
        """
        if meg not in MEG_PICK_VALUES:
            raise ValueError(f"meg must be one of {MEG_PICK_VALUES}, got {meg!r}")
        if not isinstance(meg, str):
            meg = bool(meg)

        exclude = _as_name_list(exclude, "exclude")
        if exclude_bads:
            exclude = exclude + list(self.bads)

        include_set = set(_as_name_list(include, "include"))
        exclude_set = set(exclude)

        sel = []
        included = set()
        for k, (ch, name) in enumerate(zip(self.chs, self.ch_names)):
            if name in exclude_set:
                continue
            if self._type_matches(ch, meg, eeg, stim):
                sel.append(k)
            elif name in include_set and name not in included:
                sel.append(k)
            # an included name selects its first occurrence only
            if name in include_set:
                included.add(name)
        return np.array(sel, dtype=int)

    def pick_info(self, sel: Iterable[int] | np.ndarray | None = None) -> "MeasInfoBase":
        """
        Restrict the measurement info to a selection of channels.

        Parameters
        ----------
        sel : array-like of int, optional
            Channel indices to keep, in the order they should appear in the
            result. A row vector (1, n) is accepted. None returns a copy.

        Returns
        -------
        MeasInfoBase
            New info with ``chs``, ``ch_names`` and ``nchan`` restricted to
            ``sel``, ``bads`` filtered to the remaining channels, and the
            coordinate transforms copied.

        Raises
        ------
        InvalidSelectionError
            If an entry of ``sel`` is not an integer or lies outside
            ``[0, nchan)``. This instance is left untouched.
        """
        if sel is None:
            return self.copy()

        sel = self._check_selection(sel)

        res = MeasInfoBase(
            nchan=len(sel),
            chs=[self.chs[k].copy() for k in sel],
            ch_names=[self.ch_names[k] for k in sel],
            dev_head_t=self.dev_head_t.copy(),
            ctf_head_t=self.ctf_head_t.copy(),
        )
        kept = set(res.ch_names)
        res.bads = [bad for bad in self.bads if bad in kept]

        n_dropped = len(self.bads) - len(res.bads)
        if n_dropped:
            logger.info("Dropped %d bad channel(s) not in the selection", n_dropped)
        logger.debug("Picked %d of %d channels", res.nchan, self.nchan)
        return res

    def _check_selection(self, sel: Iterable[int] | np.ndarray) -> list[int]:
        nchan = max(self.nchan, 0)
        if not isinstance(sel, np.ndarray):
            sel = list(sel)
            # numpy coerces [0, True] to int, so check entries before converting
            for value in np.asarray(sel, dtype=object).ravel():
                if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                    raise InvalidSelectionError(
                        value, nchan, f"Channel selection must hold integers, got {value!r}."
                    )
        flat = np.asarray(sel).ravel()
        if flat.size == 0:
            return []

        if not np.issubdtype(flat.dtype, np.integer):
            raise InvalidSelectionError(
                flat[0], nchan, f"Channel selection must hold integers, got dtype {flat.dtype}."
            )

        out_of_range = flat[(flat < 0) | (flat >= nchan)]
        if out_of_range.size:
            raise InvalidSelectionError(int(out_of_range[0]), nchan)
        return [int(k) for k in flat]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeasInfoBase):
            return NotImplemented
        return (
            self.nchan == other.nchan
            and self.chs == other.chs
            and self.ch_names == other.ch_names
            and self.dev_head_t == other.dev_head_t
            and self.ctf_head_t == other.ctf_head_t
            and self.bads == other.bads
        )
