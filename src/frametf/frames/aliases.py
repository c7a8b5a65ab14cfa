"""Named conversions for each direction.

Thin wrappers that fix the :class:`~frametf.frames.StaticTF` selector (or
the direction of an attitude rotation) so call sites read as the frames
they convert between.  The ``transform_frame_*`` wrappers accept a vector
or a covariance, as :func:`~frametf.frames.transform_static_frame` does.
"""

from __future__ import annotations

import jax
from jax.typing import ArrayLike

from frametf.attitude import Quaternion, quaternion_conjugate
from frametf.frames._inputs import quaternion_data
from frametf.frames.dynamic import transform_frame
from frametf.frames.static import transform_orientation, transform_static_frame
from frametf.frames.static_tf import StaticTF


# Orientations

def transform_orientation_ned_enu(q: Quaternion | ArrayLike) -> Quaternion | jax.Array:
    """Orientation from NED to ENU."""
    return transform_orientation(q, StaticTF.NED_TO_ENU)


def transform_orientation_enu_ned(q: Quaternion | ArrayLike) -> Quaternion | jax.Array:
    """Orientation from ENU to NED."""
    return transform_orientation(q, StaticTF.ENU_TO_NED)


def transform_orientation_aircraft_baselink(q: Quaternion | ArrayLike) -> Quaternion | jax.Array:
    """Orientation from the aircraft body frame to base_link."""
    return transform_orientation(q, StaticTF.AIRCRAFT_TO_BASELINK)


def transform_orientation_baselink_aircraft(q: Quaternion | ArrayLike) -> Quaternion | jax.Array:
    """Orientation from base_link to the aircraft body frame."""
    return transform_orientation(q, StaticTF.BASELINK_TO_AIRCRAFT)


# Vectors and covariances, fixed frames

def transform_frame_ned_enu(x: ArrayLike) -> jax.Array:
    """Vector or covariance from NED to ENU."""
    return transform_static_frame(x, StaticTF.NED_TO_ENU)


def transform_frame_enu_ned(x: ArrayLike) -> jax.Array:
    """Vector or covariance from ENU to NED."""
    return transform_static_frame(x, StaticTF.ENU_TO_NED)


def transform_frame_aircraft_baselink(x: ArrayLike) -> jax.Array:
    """Vector or covariance from the aircraft body frame to base_link."""
    return transform_static_frame(x, StaticTF.AIRCRAFT_TO_BASELINK)


def transform_frame_baselink_aircraft(x: ArrayLike) -> jax.Array:
    """Vector or covariance from base_link to the aircraft body frame."""
    return transform_static_frame(x, StaticTF.BASELINK_TO_AIRCRAFT)


# Vectors and covariances, body <-> world through the vehicle attitude

def transform_frame_aircraft_ned(x: ArrayLike, q: Quaternion | ArrayLike) -> jax.Array:
    """Body-frame quantity into NED, given the aircraft attitude ``q`` in NED.

    Args:
        x (ArrayLike): Vector or covariance in the aircraft frame.
        q: Attitude of the aircraft frame relative to NED.

    Returns:
        jnp.ndarray: The quantity expressed in NED.
    """
    return transform_frame(x, q)


def transform_frame_ned_aircraft(x: ArrayLike, q: Quaternion | ArrayLike) -> jax.Array:
    """NED quantity into the aircraft frame, given the aircraft attitude ``q`` in NED.

    Rotates by the inverse attitude, undoing :func:`transform_frame_aircraft_ned`.
    """
    return transform_frame(x, quaternion_conjugate(quaternion_data(q)))


def transform_frame_aircraft_enu(x: ArrayLike, q: Quaternion | ArrayLike) -> jax.Array:
    """Body-frame quantity into ENU, given the attitude ``q`` of the body in ENU."""
    return transform_frame(x, q)


def transform_frame_enu_aircraft(x: ArrayLike, q: Quaternion | ArrayLike) -> jax.Array:
    """ENU quantity into the body frame, given the attitude ``q`` of the body in ENU."""
    return transform_frame(x, quaternion_conjugate(quaternion_data(q)))
