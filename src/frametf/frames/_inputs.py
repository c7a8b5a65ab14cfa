"""Input coercion shared by the frame transforms."""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from frametf.attitude import Quaternion
from frametf.config import get_dtype


def quaternion_data(q: Quaternion | ArrayLike) -> jax.Array:
    """Return the ``(4,)`` scalar-first array behind ``q``.

    Raises:
        ValueError: If ``q`` is not a ``Quaternion`` or a 4-element array.
    """
    if isinstance(q, Quaternion):
        return jnp.asarray(q.to_vector(), dtype=get_dtype())
    q = jnp.asarray(q, dtype=get_dtype())
    if q.shape != (4,):
        raise ValueError(f"Expected a quaternion of shape (4,), got {q.shape}")
    return q


def like_input(q_in: Quaternion | ArrayLike, q_out: jax.Array) -> Quaternion | jax.Array:
    """Wrap ``q_out`` in a ``Quaternion`` when ``q_in`` was one."""
    if isinstance(q_in, Quaternion):
        return Quaternion._from_internal(q_out)
    return q_out


def vector_data(v: ArrayLike) -> jax.Array:
    """Return ``v`` as a ``(3,)`` array in the configured dtype.

    Raises:
        ValueError: If ``v`` does not have shape ``(3,)``.
    """
    v = jnp.asarray(v, dtype=get_dtype())
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-vector of shape (3,), got {v.shape}")
    return v
