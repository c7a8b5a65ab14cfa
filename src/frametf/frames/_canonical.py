"""Canonical frame rotations.

The two fixed rotations are derived once, at import, from the roll-pitch-yaw
angles in :mod:`frametf.constants`.  Each is held in three mutually
consistent representations built from the same quaternion:

- ``quaternion``: scalar-first ``[w, x, y, z]``, shape ``(4,)``
- ``matrix``: active rotation matrix of the normalized quaternion, ``(3, 3)``
- ``affine``: homogeneous transform with zero translation, ``(4, 4)``

The tables are read-only float64 NumPy arrays so that they keep full
precision whatever dtype is configured; the transform functions cast them
to the active dtype on every call.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

import numpy as np

from frametf.constants import AIRCRAFT_BASELINK_RPY, NED_ENU_RPY
from frametf.frames.static_tf import RotationFamily

logger = logging.getLogger(__name__)


class CanonicalRotation(NamedTuple):
    """One canonical rotation in its three representations.

    Attributes:
        quaternion: Scalar-first quaternion of shape ``(4,)``.
        matrix: Active rotation matrix of shape ``(3, 3)``.
        affine: Homogeneous rotation-only transform of shape ``(4, 4)``.
    """

    quaternion: np.ndarray
    matrix: np.ndarray
    affine: np.ndarray


def _quaternion_from_rpy(roll: float, pitch: float, yaw: float) -> np.ndarray:
    cr, sr = math.cos(roll / 2.0), math.sin(roll / 2.0)
    cp, sp = math.cos(pitch / 2.0), math.sin(pitch / 2.0)
    cy, sy = math.cos(yaw / 2.0), math.sin(yaw / 2.0)

    return np.array([
        cr*cp*cy + sr*sp*sy,
        sr*cp*cy - cr*sp*sy,
        cr*sp*cy + sr*cp*sy,
        cr*cp*sy - sr*sp*cy,
    ], dtype=np.float64)


def _rotation_matrix(q: np.ndarray) -> np.ndarray:
    w, x, y, z = q / np.linalg.norm(q)

    return np.array([
        [1.0 - 2.0*(y*y + z*z), 2.0*(x*y - w*z),       2.0*(x*z + w*y)],
        [2.0*(x*y + w*z),       1.0 - 2.0*(x*x + z*z), 2.0*(y*z - w*x)],
        [2.0*(x*z - w*y),       2.0*(y*z + w*x),       1.0 - 2.0*(x*x + y*y)],
    ], dtype=np.float64)


def _build(roll: float, pitch: float, yaw: float) -> CanonicalRotation:
    q = _quaternion_from_rpy(roll, pitch, yaw)
    R = _rotation_matrix(q)
    affine = np.eye(4, dtype=np.float64)
    affine[:3, :3] = R

    for arr in (q, R, affine):
        arr.setflags(write=False)

    return CanonicalRotation(quaternion=q, matrix=R, affine=affine)


"""
+PI rotation about X (North) followed by +PI/2 about Z (Down) takes NED to
ENU; the same rotation about East then Up takes ENU back to NED.
"""
NED_ENU = _build(*NED_ENU_RPY)

"""
+PI rotation about X (Forward) takes Forward-Right-Down (aircraft) to
Forward-Left-Up (base_link) and back.
"""
AIRCRAFT_BASELINK = _build(*AIRCRAFT_BASELINK_RPY)

_BY_FAMILY = {
    RotationFamily.NED_ENU: NED_ENU,
    RotationFamily.AIRCRAFT_BASELINK: AIRCRAFT_BASELINK,
}

logger.debug(
    "Canonical rotations initialised: NED_ENU q=%s, AIRCRAFT_BASELINK q=%s",
    NED_ENU.quaternion.round(12).tolist(),
    AIRCRAFT_BASELINK.quaternion.round(12).tolist(),
)


def canonical_rotation(family: RotationFamily) -> CanonicalRotation:
    """Return the precomputed rotation for a rotation family.

    Args:
        family (RotationFamily): ``NED_ENU`` or ``AIRCRAFT_BASELINK``.

    Returns:
        CanonicalRotation: Read-only float64 representations.
    """
    return _BY_FAMILY[family]
