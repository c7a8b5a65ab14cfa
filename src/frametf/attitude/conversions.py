"""Pure quaternion kernels used by the frame transforms.

All functions operate on raw JAX arrays (no class instances) so that the
``Quaternion`` class and the frame transform modules can share them without
circular imports.

Convention:
    Quaternion layout is scalar-first: ``[w, x, y, z]`` (shape ``(4,)``).
    Rotation matrices are active and row-major: ``v_rotated = R @ v``.
    Roll-pitch-yaw angles compose as ``qz(yaw) * qy(pitch) * qx(roll)``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from frametf.config import get_dtype
from frametf.utils import from_radians, to_radians


def _as_quaternion(q: ArrayLike) -> jax.Array:
    q = jnp.asarray(q, dtype=get_dtype())
    if q.shape != (4,):
        raise ValueError(f"Expected a quaternion of shape (4,), got {q.shape}")
    return q


# ---------------------------------------------------------------------------
# Quaternion algebra
# ---------------------------------------------------------------------------

def quaternion_multiply(q1: ArrayLike, q2: ArrayLike) -> jax.Array:
    """Hamilton product of two quaternions.

    The product is **not** renormalized; composing two unit quaternions
    yields a unit quaternion up to rounding.

    Args:
        q1 (ArrayLike): Left quaternion of shape ``(4,)`` in scalar-first order.
        q2 (ArrayLike): Right quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: Product ``q1 * q2`` of shape ``(4,)``.
    """
    q1 = _as_quaternion(q1)
    q2 = _as_quaternion(q2)
    s1, v1 = q1[0], q1[1:]
    s2, v2 = q2[0], q2[1:]

    s = s1 * s2 - jnp.dot(v1, v2)
    v = s1 * v2 + s2 * v1 + jnp.cross(v1, v2)

    return jnp.concatenate([jnp.array([s]), v])


def quaternion_conjugate(q: ArrayLike) -> jax.Array:
    """Return the conjugate ``[w, -x, -y, -z]``.

    Args:
        q (ArrayLike): Quaternion of shape ``(4,)``.

    Returns:
        jnp.ndarray: Conjugate quaternion of shape ``(4,)``.
    """
    q = _as_quaternion(q)
    return q * jnp.array([1.0, -1.0, -1.0, -1.0], dtype=q.dtype)


def quaternion_normalize(q: ArrayLike) -> jax.Array:
    """Scale a quaternion to unit norm.

    Args:
        q (ArrayLike): Quaternion of shape ``(4,)``.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)``.
    """
    q = _as_quaternion(q)
    return q / jnp.linalg.norm(q)


# ---------------------------------------------------------------------------
# Quaternion <-> Rotation Matrix
# ---------------------------------------------------------------------------

def quaternion_to_rotation_matrix(q: ArrayLike) -> jax.Array:
    """Convert a unit quaternion to the 3x3 matrix of the same rotation.

    The matrix is active: it rotates vectors, ``R @ v``.  The input is used
    as given, so callers that may hold a non-unit quaternion should pass it
    through :func:`quaternion_normalize` first.

    Args:
        q (ArrayLike): Quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    q = _as_quaternion(q)
    qs, q1, q2, q3 = q[0], q[1], q[2], q[3]

    return jnp.array([
        [qs*qs + q1*q1 - q2*q2 - q3*q3,  2.0*q1*q2 - 2.0*qs*q3,          2.0*q1*q3 + 2.0*qs*q2],
        [2.0*q1*q2 + 2.0*qs*q3,           qs*qs - q1*q1 + q2*q2 - q3*q3,  2.0*q2*q3 - 2.0*qs*q1],
        [2.0*q1*q3 - 2.0*qs*q2,           2.0*q2*q3 + 2.0*qs*q1,          qs*qs - q1*q1 - q2*q2 + q3*q3],
    ])


def rotation_matrix_to_quaternion(R: ArrayLike) -> jax.Array:
    """Convert an active 3x3 rotation matrix to a unit quaternion.

    Uses Shepperd's method with ``jax.lax.switch`` on ``argmax`` for
    numerical stability and JIT compatibility.

    Args:
        R (ArrayLike): Rotation matrix of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Quaternion of shape ``(4,)`` in scalar-first order.
    """
    R = jnp.asarray(R, dtype=get_dtype())
    if R.shape != (3, 3):
        raise ValueError(f"Expected a rotation matrix of shape (3, 3), got {R.shape}")

    # 4*w^2, 4*x^2, 4*y^2, 4*z^2
    qvec = jnp.array([
        1.0 + R[0, 0] + R[1, 1] + R[2, 2],
        1.0 + R[0, 0] - R[1, 1] - R[2, 2],
        1.0 - R[0, 0] + R[1, 1] - R[2, 2],
        1.0 - R[0, 0] - R[1, 1] + R[2, 2],
    ])

    ind_max = jnp.argmax(qvec)
    sq = jnp.sqrt(qvec[ind_max])

    def _case_w(_):
        return 0.5 * jnp.array([
            sq,
            (R[2, 1] - R[1, 2]) / sq,
            (R[0, 2] - R[2, 0]) / sq,
            (R[1, 0] - R[0, 1]) / sq,
        ])

    def _case_x(_):
        return 0.5 * jnp.array([
            (R[2, 1] - R[1, 2]) / sq,
            sq,
            (R[1, 0] + R[0, 1]) / sq,
            (R[0, 2] + R[2, 0]) / sq,
        ])

    def _case_y(_):
        return 0.5 * jnp.array([
            (R[0, 2] - R[2, 0]) / sq,
            (R[1, 0] + R[0, 1]) / sq,
            sq,
            (R[2, 1] + R[1, 2]) / sq,
        ])

    def _case_z(_):
        return 0.5 * jnp.array([
            (R[1, 0] - R[0, 1]) / sq,
            (R[0, 2] + R[2, 0]) / sq,
            (R[2, 1] + R[1, 2]) / sq,
            sq,
        ])

    return jax.lax.switch(ind_max, [_case_w, _case_x, _case_y, _case_z], None)


# ---------------------------------------------------------------------------
# Roll-Pitch-Yaw <-> Quaternion
# ---------------------------------------------------------------------------

def quaternion_from_rpy(
    roll: ArrayLike, pitch: ArrayLike, yaw: ArrayLike, use_degrees: bool = False
) -> jax.Array:
    """Build a quaternion from roll, pitch and yaw.

    Equivalent to ``qz(yaw) * qy(pitch) * qx(roll)``: the roll is applied
    first about X, then the pitch about Y, then the yaw about Z.

    Args:
        roll (ArrayLike): Rotation about X.
        pitch (ArrayLike): Rotation about Y.
        yaw (ArrayLike): Rotation about Z.
        use_degrees (bool): Interpret the angles in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    r = to_radians(roll, use_degrees) / 2.0
    p = to_radians(pitch, use_degrees) / 2.0
    y = to_radians(yaw, use_degrees) / 2.0

    cr, sr = jnp.cos(r), jnp.sin(r)
    cp, sp = jnp.cos(p), jnp.sin(p)
    cy, sy = jnp.cos(y), jnp.sin(y)

    return jnp.array([
        cr*cp*cy + sr*sp*sy,
        sr*cp*cy - cr*sp*sy,
        cr*sp*cy + sr*cp*sy,
        cr*cp*sy - sr*sp*cy,
    ])


def quaternion_to_rpy(q: ArrayLike, use_degrees: bool = False) -> jax.Array:
    """Extract roll, pitch and yaw from a quaternion.

    Inverse of :func:`quaternion_from_rpy`.  Pitch is limited to
    ``[-pi/2, pi/2]``; at the gimbal lock the split between roll and yaw
    is not unique.

    Args:
        q (ArrayLike): Quaternion of shape ``(4,)`` in scalar-first order.
        use_degrees (bool): Return the angles in degrees. Default: ``False``

    Returns:
        jnp.ndarray: ``[roll, pitch, yaw]`` of shape ``(3,)``.
    """
    q = quaternion_normalize(q)
    w, x, y, z = q[0], q[1], q[2], q[3]

    roll = jnp.arctan2(2.0 * (w*x + y*z), 1.0 - 2.0 * (x*x + y*y))
    pitch = jnp.arcsin(jnp.clip(2.0 * (w*y - z*x), -1.0, 1.0))
    yaw = jnp.arctan2(2.0 * (w*z + x*y), 1.0 - 2.0 * (y*y + z*z))

    return from_radians(jnp.array([roll, pitch, yaw]), use_degrees)


def quaternion_get_yaw(q: ArrayLike, use_degrees: bool = False) -> jax.Array:
    """Return only the yaw of a quaternion.

    Args:
        q (ArrayLike): Quaternion of shape ``(4,)`` in scalar-first order.
        use_degrees (bool): Return the angle in degrees. Default: ``False``

    Returns:
        jax.Array: Yaw angle (scalar).
    """
    q = quaternion_normalize(q)
    w, x, y, z = q[0], q[1], q[2], q[3]

    yaw = jnp.arctan2(2.0 * (w*z + x*y), 1.0 - 2.0 * (y*y + z*z))
    return from_radians(yaw, use_degrees)
