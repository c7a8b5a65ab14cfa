"""Covariance propagation through a 3D rotation.

A 6- or 9-dimensional state is treated as consecutive 3D blocks (position,
velocity, acceleration, ...) that live in the same spatial frame.  The 3x3
rotation is tiled on the diagonal of a block rotation and the covariance is
propagated with the sandwich product ``R_block @ P @ R_block.T``, which also
carries the cross-block terms.

Covariances are accepted either flattened row-major (9, 36 or 81 values) or
square, and are returned in the shape they were given.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from frametf.config import get_dtype

COVARIANCE_DIMS = (3, 6, 9)

_FLAT_SIZES = {n * n: n for n in COVARIANCE_DIMS}


def is_covariance_shape(shape: tuple[int, ...]) -> bool:
    """Return ``True`` for the flattened or square 3/6/9 covariance shapes."""
    if len(shape) == 1:
        return shape[0] in _FLAT_SIZES
    if len(shape) == 2:
        return shape[0] == shape[1] and shape[0] in COVARIANCE_DIMS
    return False


def block_rotation(R: ArrayLike, n: int) -> jax.Array:
    """Tile a 3x3 rotation on the diagonal of an ``n x n`` matrix.

    Args:
        R (ArrayLike): Rotation matrix of shape ``(3, 3)``.
        n (int): Output dimension, one of 3, 6 or 9.

    Returns:
        jnp.ndarray: Block-diagonal matrix of shape ``(n, n)`` with zero
        off-diagonal blocks.
    """
    if n not in COVARIANCE_DIMS:
        raise ValueError(f"Block rotation dimension must be one of {COVARIANCE_DIMS}, got {n}")
    R = jnp.asarray(R, dtype=get_dtype())
    return jnp.kron(jnp.eye(n // 3, dtype=R.dtype), R)


def rotate_covariance(cov: ArrayLike, R: ArrayLike) -> jax.Array:
    """Express a covariance in a rotated frame.

    Args:
        cov (ArrayLike): Covariance of shape ``(9,)``, ``(36,)``, ``(81,)``,
            ``(3, 3)``, ``(6, 6)`` or ``(9, 9)``.
        R (ArrayLike): Active 3x3 rotation from the source to the target frame.

    Returns:
        jnp.ndarray: Rotated covariance with the same shape as ``cov``.

    Raises:
        ValueError: If ``cov`` does not have a supported shape.
    """
    cov = jnp.asarray(cov, dtype=get_dtype())
    if not is_covariance_shape(cov.shape):
        raise ValueError(
            "Covariance must be a 3x3, 6x6 or 9x9 matrix, square or flattened "
            f"row-major (9, 36 or 81 values), got shape {cov.shape}"
        )

    n = cov.shape[0] if cov.ndim == 2 else _FLAT_SIZES[cov.shape[0]]
    P = cov.reshape(n, n)
    R_block = block_rotation(R, n)

    return (R_block @ P @ R_block.T).reshape(cov.shape)
