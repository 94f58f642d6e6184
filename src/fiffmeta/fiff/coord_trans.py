"""
Coordinate Transforms Between FIFF Frames

A rigid transform (rotation + translation) stored as 4x4 homogeneous
matrices together with the frames it maps between. Used for the
device-to-head and CTF-head-to-head transforms of a recording.

Math: p_to = R @ p_from + t
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

import numpy as np

from fiffmeta.fiff.constants import FIFFV_COORD_UNKNOWN


def _as_homogeneous(matrix: np.ndarray, name: str) -> np.ndarray:
    matrix = np.array(matrix, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError(f"{name} must have shape (4, 4), got {matrix.shape}")
    return matrix


@dataclass(eq=False)
class CoordTrans:
    """
    Rigid coordinate transform between two FIFF coordinate frames.

    Attributes
    ----------
    from_frame : int
        Source coordinate frame (``FIFFV_COORD_*``).
    to_frame : int
        Destination coordinate frame.
    trans : np.ndarray
        Forward transform, shape (4, 4).
    invtrans : np.ndarray
        Inverse transform, shape (4, 4). Computed from ``trans`` when omitted.

    Examples
    --------
    >>> t = CoordTrans.from_rotation_translation(np.eye(3), [0.0, 0.0, 0.04], 1, 4)
    >>> t.apply([0.0, 0.0, 0.0])
    array([0.  , 0.  , 0.04])
    """

    from_frame: int = FIFFV_COORD_UNKNOWN
    to_frame: int = FIFFV_COORD_UNKNOWN
    trans: np.ndarray = field(default_factory=lambda: np.eye(4))
    invtrans: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.trans = _as_homogeneous(self.trans, "trans")
        if self.invtrans is None:
            self.invtrans = np.linalg.inv(self.trans)
        else:
            self.invtrans = _as_homogeneous(self.invtrans, "invtrans")

    @classmethod
    def identity(cls, from_frame: int, to_frame: int) -> "CoordTrans":
        """Identity transform labelled with the given frames."""
        return cls(from_frame=from_frame, to_frame=to_frame)

    @classmethod
    def from_rotation_translation(
        cls,
        rotation: np.ndarray,
        translation: np.ndarray,
        from_frame: int,
        to_frame: int,
    ) -> "CoordTrans":
        """
        Build a transform from a 3x3 rotation and a translation vector.

        Parameters
        ----------
        rotation : np.ndarray
            Rotation matrix, shape (3, 3).
        translation : np.ndarray
            Translation in meters, shape (3,).
        from_frame, to_frame : int
            Coordinate frames the transform maps between.
        """
        rotation = np.asarray(rotation, dtype=np.float64)
        translation = np.asarray(translation, dtype=np.float64).ravel()
        if rotation.shape != (3, 3):
            raise ValueError(f"rotation must have shape (3, 3), got {rotation.shape}")
        if translation.shape != (3,):
            raise ValueError(
                f"translation must have 3 elements, got {translation.shape[0]}"
            )

        trans = np.eye(4)
        trans[:3, :3] = rotation
        trans[:3, 3] = translation
        return cls(from_frame=from_frame, to_frame=to_frame, trans=trans)

    @property
    def rotation(self) -> np.ndarray:
        """Rotation part of the forward transform, shape (3, 3)."""
        return self.trans[:3, :3].copy()

    @property
    def translation(self) -> np.ndarray:
        """Translation part of the forward transform, shape (3,)."""
        return self.trans[:3, 3].copy()

    def is_empty(self) -> bool:
        """True for the default transform that maps no known frames."""
        return (
            self.from_frame == FIFFV_COORD_UNKNOWN
            and self.to_frame == FIFFV_COORD_UNKNOWN
        )

    def inverse(self) -> "CoordTrans":
        """Transform mapping ``to_frame`` back to ``from_frame``."""
        return CoordTrans(
            from_frame=self.to_frame,
            to_frame=self.from_frame,
            trans=self.invtrans.copy(),
            invtrans=self.trans.copy(),
        )

    def apply(self, points: np.ndarray, move: bool = True) -> np.ndarray:
        """
        Transform points (or directions) into ``to_frame``.

        Parameters
        ----------
        points : np.ndarray
            Coordinates, shape (N, 3) or (3,).
        move : bool
            If False only the rotation is applied, as for orientation vectors.

        Returns
        -------
        np.ndarray
            Transformed coordinates with the input's shape.
        """
        points = np.asarray(points, dtype=np.float64)
        single = points.ndim == 1
        pts = np.atleast_2d(points)
        if pts.shape[1] != 3:
            raise ValueError(f"points must have shape (N, 3), got {points.shape}")

        out = pts @ self.trans[:3, :3].T
        if move:
            out = out + self.trans[:3, 3]
        return out[0] if single else out

    def copy(self) -> "CoordTrans":
        """Independent copy; matrices are not shared."""
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordTrans):
            return NotImplemented
        return (
            self.from_frame == other.from_frame
            and self.to_frame == other.to_frame
            and np.array_equal(self.trans, other.trans)
            and np.array_equal(self.invtrans, other.invtrans)
        )
