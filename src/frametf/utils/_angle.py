"""Angle conversion helpers.

Both helpers honour the ``use_degrees`` flag accepted by the roll-pitch-yaw
functions in :mod:`frametf.attitude`.  The conversion is selected with
``jnp.where`` so the flag may also be a traced boolean.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from frametf.config import get_dtype
from frametf.constants import DEG2RAD, RAD2DEG


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Return ``angle`` in radians, converting from degrees when requested.

    Args:
        angle (ArrayLike): Scalar angle or array of angles.
        use_degrees (bool): If ``True``, ``angle`` is in degrees.

    Returns:
        Angle(s) in radians, in the configured float dtype.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    return jnp.where(use_degrees, angle * DEG2RAD, angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Return ``angle`` (given in radians) in degrees when requested.

    Args:
        angle (ArrayLike): Scalar angle or array of angles in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle(s) in radians or degrees.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    return jnp.where(use_degrees, angle * RAD2DEG, angle)
