"""Transforms by an arbitrary rotation.

Used when the rotation is a live attitude rather than one of the two fixed
frame pairs.  The quaternion is normalized before its rotation matrix is
derived, so slightly non-unit measurements are tolerated.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from frametf.attitude import Quaternion, quaternion_normalize, quaternion_to_rotation_matrix
from frametf.frames._covariance import is_covariance_shape, rotate_covariance
from frametf.frames._inputs import quaternion_data, vector_data


def _rotation_matrix(q: Quaternion | ArrayLike) -> jax.Array:
    return quaternion_to_rotation_matrix(quaternion_normalize(quaternion_data(q)))


def transform_vector(vec: ArrayLike, q: Quaternion | ArrayLike) -> jax.Array:
    """Rotate a 3-vector by ``q``.

    Args:
        vec (ArrayLike): Vector of shape ``(3,)``.
        q: Rotation as a ``Quaternion`` or a scalar-first ``(4,)`` array.

    Returns:
        jnp.ndarray: ``R(q) @ vec``.
    """
    return _rotation_matrix(q) @ vector_data(vec)


def transform_covariance(cov: ArrayLike, q: Quaternion | ArrayLike) -> jax.Array:
    """Rotate a 3x3, 6x6 or 9x9 covariance by ``q``.

    Args:
        cov (ArrayLike): Covariance, square or flattened row-major.
        q: Rotation as a ``Quaternion`` or a scalar-first ``(4,)`` array.

    Returns:
        jnp.ndarray: ``R_block @ cov @ R_block.T`` with the shape of ``cov``.

    Raises:
        ValueError: If ``cov`` does not have a supported shape.

    Examples:
        ```python
        import jax.numpy as jnp
        from frametf import Quaternion, transform_covariance
        q = Quaternion.from_rpy(0.0, 0.0, 90.0, use_degrees=True)
        transform_covariance(jnp.diag(jnp.array([1.0, 2.0, 3.0])), q)  # diag(2, 1, 3)
        ```
    """
    return rotate_covariance(cov, _rotation_matrix(q))


def transform_frame(x: ArrayLike, q: Quaternion | ArrayLike) -> jax.Array:
    """Rotate a vector or a covariance by ``q``.

    Dispatches on the shape of ``x`` the same way as
    :func:`~frametf.frames.transform_static_frame`.

    Raises:
        ValueError: If the shape of ``x`` is neither a vector nor a
            covariance.
    """
    shape = jnp.shape(x)
    if shape == (3,):
        return transform_vector(x, q)
    if is_covariance_shape(shape):
        return transform_covariance(x, q)
    raise ValueError(f"Cannot transform a quantity of shape {shape}: expected a 3-vector or a covariance")
