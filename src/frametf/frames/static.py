"""Transforms between the fixed NED/ENU and aircraft/base_link frames.

Every function takes a :class:`~frametf.frames.StaticTF` selector.  The
selector is reduced to its :class:`~frametf.frames.RotationFamily` and the
matching canonical rotation is applied; since both canonical rotations are
half turns, a conversion and its reverse perform the identical operation.

Orientations are composed differently for the two families:

- NED <-> ENU is a change of the world frame, so the canonical quaternion
  multiplies from the left: ``q_out = Q_ned_enu * q``.
- aircraft <-> base_link is a change of the body frame, so it multiplies
  from the right: ``q_out = q * Q_aircraft_baselink``.

All functions are compatible with ``jax.jit`` when the selector is marked
static, and with ``jax.vmap`` over the quantity argument.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from frametf.attitude import Quaternion, quaternion_multiply
from frametf.config import get_dtype
from frametf.frames._canonical import canonical_rotation
from frametf.frames._covariance import is_covariance_shape, rotate_covariance
from frametf.frames._inputs import like_input, quaternion_data, vector_data
from frametf.frames.static_tf import RotationFamily, StaticTF


def transform_orientation(q: Quaternion | ArrayLike, transform: StaticTF) -> Quaternion | jax.Array:
    """Express an orientation in the target frame of a static conversion.

    The product is not renormalized.

    Args:
        q: Orientation as a ``Quaternion`` or a scalar-first ``(4,)`` array.
        transform (StaticTF): Conversion to apply.

    Returns:
        The transformed orientation, as a ``Quaternion`` if ``q`` was one
        and as a ``(4,)`` array otherwise.

    Raises:
        ValueError: If ``transform`` is not a ``StaticTF`` value or ``q``
            is not a quaternion.

    Examples:
        ```python
        from frametf import Quaternion, StaticTF, transform_orientation
        q_enu = transform_orientation(Quaternion.identity(), StaticTF.NED_TO_ENU)
        ```
    """
    family = StaticTF(transform).family
    data = quaternion_data(q)
    Q = jnp.asarray(canonical_rotation(family).quaternion, dtype=get_dtype())

    if family is RotationFamily.NED_ENU:
        out = quaternion_multiply(Q, data)
    else:
        out = quaternion_multiply(data, Q)

    return like_input(q, out)


def transform_static_vector(vec: ArrayLike, transform: StaticTF) -> jax.Array:
    """Rotate a 3-vector into the target frame of a static conversion.

    Args:
        vec (ArrayLike): Vector of shape ``(3,)``.
        transform (StaticTF): Conversion to apply.

    Returns:
        jnp.ndarray: Rotated vector of shape ``(3,)``.

    Examples:
        ```python
        from frametf import StaticTF, transform_static_vector
        transform_static_vector([1.0, 2.0, 3.0], StaticTF.NED_TO_ENU)  # [2, 1, -3]
        ```
    """
    family = StaticTF(transform).family
    v = vector_data(vec)
    A = jnp.asarray(canonical_rotation(family).affine, dtype=get_dtype())

    return A[:3, :3] @ v + A[:3, 3]


def transform_static_covariance(cov: ArrayLike, transform: StaticTF) -> jax.Array:
    """Express a 3x3, 6x6 or 9x9 covariance in the target frame.

    Each consecutive 3D block of the state is rotated by the canonical
    rotation: ``P_out = R_block @ P @ R_block.T``.

    Args:
        cov (ArrayLike): Covariance, square or flattened row-major.
        transform (StaticTF): Conversion to apply.

    Returns:
        jnp.ndarray: Transformed covariance with the shape of ``cov``.

    Raises:
        ValueError: If ``cov`` does not have a supported shape.
    """
    family = StaticTF(transform).family
    return rotate_covariance(cov, canonical_rotation(family).matrix)


def transform_static_frame(x: ArrayLike, transform: StaticTF) -> jax.Array:
    """Apply a static conversion to a vector or a covariance.

    A ``(3,)`` input is treated as a vector; 9, 36 or 81 values, or a
    3x3, 6x6 or 9x9 matrix, as a covariance.

    Args:
        x (ArrayLike): Vector or covariance.
        transform (StaticTF): Conversion to apply.

    Returns:
        jnp.ndarray: Transformed quantity with the shape of ``x``.

    Raises:
        ValueError: If the shape of ``x`` is neither a vector nor a
            covariance.
    """
    shape = jnp.shape(x)
    if shape == (3,):
        return transform_static_vector(x, transform)
    if is_covariance_shape(shape):
        return transform_static_covariance(x, transform)
    raise ValueError(f"Cannot transform a quantity of shape {shape}: expected a 3-vector or a covariance")
