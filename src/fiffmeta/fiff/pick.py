"""
Channel Selection by Name

Implements the MNE toolbox selector functions that turn channel-name
criteria into index vectors, and the PickSpec record that bundles the
arguments of a type-based pick into a configuration object.

Selectors always return a 1-D integer array of strictly increasing,
0-based channel indices. An empty array is a valid result.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, fields
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from fiffmeta.fiff.info_base import MeasInfoBase

MEG_PICK_VALUES = (True, False, "grad", "mag")


def _as_name_list(names: Iterable[str] | None, argname: str) -> list[str]:
    if names is None:
        return []
    if isinstance(names, str):
        raise TypeError(
            f"{argname} must be a sequence of channel names, not a single "
            f"string ({names!r}). Wrap it in a list."
        )
    return list(names)


def pick_channels(
    ch_names: Iterable[str],
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> np.ndarray:
    """
    Make a selector to pick desired channels from data.

    Parameters
    ----------
    ch_names : iterable of str
        The channel name list to consult.
    include : iterable of str
        Channels to include. If empty, all available channels are candidates.
    exclude : iterable of str
        Channels to exclude. If empty, nothing is excluded.

    A name that occurs more than once in ``ch_names`` selects only its
    first index.

    Returns
    -------
    np.ndarray
        Selected channel indices, shape (n_selected,), dtype int, ascending.

    Examples
    --------
    >>> pick_channels(["MEG001", "MEG002", "EEG001", "STI001"], exclude=["EEG001"])
    array([0, 1, 3])
    """
    ch_names = _as_name_list(ch_names, "ch_names")
    include_set = set(_as_name_list(include, "include"))
    exclude_set = set(_as_name_list(exclude, "exclude"))

    sel = []
    seen = set()
    for k, name in enumerate(ch_names):
        # duplicate names resolve to their first occurrence
        if name in seen:
            continue
        seen.add(name)
        if (not include_set or name in include_set) and name not in exclude_set:
            sel.append(k)
    return np.array(sel, dtype=int)


def pick_channels_regexp(ch_names: Iterable[str], regexp: str) -> np.ndarray:
    """
    Pick channels whose name matches a regular expression.

    Matching uses :func:`re.match`, so the pattern is anchored at the start
    of the name.

    Examples
    --------
    >>> pick_channels_regexp(["MEG 0111", "MEG 0112", "EEG 001"], "MEG 01.*")
    array([0, 1])
    """
    pattern = re.compile(regexp)
    sel = [k for k, name in enumerate(ch_names) if pattern.match(name)]
    return np.array(sel, dtype=int)


@dataclass(frozen=True)
class PickSpec:
    """
    Arguments of a type-based channel pick as one value.

    Attributes
    ----------
    meg : bool or str
        True for all MEG channels, ``"grad"`` or ``"mag"`` for one sensor
        type, False for none.
    eeg : bool
        Include EEG channels.
    stim : bool
        Include stimulus channels.
    include : tuple[str, ...]
        Additional channels to include by name.
    exclude : tuple[str, ...]
        Channels to exclude by name; wins over every other criterion.
    exclude_bads : bool
        Also exclude the channels listed in ``info.bads``.
    """

    meg: bool | str = True
    eeg: bool = False
    stim: bool = False
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    exclude_bads: bool = False

    def __post_init__(self) -> None:
        if self.meg not in MEG_PICK_VALUES:
            raise ValueError(
                f"meg must be one of {MEG_PICK_VALUES}, got {self.meg!r}"
            )
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "include", tuple(_as_name_list(self.include, "include")))
        object.__setattr__(self, "exclude", tuple(_as_name_list(self.exclude, "exclude")))

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "PickSpec":
        """
        Build a PickSpec from a config mapping.

        ``name`` and ``description`` keys are accepted and ignored so preset
        entries can be passed through unchanged.

        Raises
        ------
        ValueError
            If the mapping contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(params) - known - {"name", "description"}
        if unknown:
            raise ValueError(
                f"Unknown pick parameters: {sorted(unknown)}. "
                f"Valid keys: {sorted(known)}"
            )
        return cls(**{k: v for k, v in params.items() if k in known})

    def to_dict(self) -> dict[str, Any]:
        params = asdict(self)
        params["include"] = list(self.include)
        params["exclude"] = list(self.exclude)
        return params

    def apply(self, info: "MeasInfoBase") -> np.ndarray:
        """Run this pick against ``info``; see :meth:`MeasInfoBase.pick_types`."""
        return info.pick_types(
            meg=self.meg,
            eeg=self.eeg,
            stim=self.stim,
            include=self.include,
            exclude=self.exclude,
            exclude_bads=self.exclude_bads,
        )
