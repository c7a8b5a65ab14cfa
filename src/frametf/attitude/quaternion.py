"""Quaternion value type.

Provides the ``Quaternion`` class, a thin wrapper around a scalar-first
``[w, x, y, z]`` JAX array.  The frame transforms accept either a
``Quaternion`` or a raw array and return the same kind they were given.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from frametf.attitude._tolerance import get_attitude_epsilon
from frametf.attitude.conversions import (
    quaternion_conjugate,
    quaternion_from_rpy,
    quaternion_get_yaw,
    quaternion_multiply,
    quaternion_to_rotation_matrix,
    quaternion_to_rpy,
    rotation_matrix_to_quaternion,
)
from frametf.config import get_dtype


class Quaternion:
    """Quaternion representing a 3D rotation.

    Internal storage is a shape ``(4,)`` array in scalar-first order
    ``[w, x, y, z]``.  The quaternion is normalized on construction;
    results of products and frame transforms are kept as computed.

    This class is registered as a JAX pytree with the data array as
    the sole leaf and no auxiliary data.

    Args:
        s (float): Scalar (real) component.
        v1 (float): First vector (imaginary) component.
        v2 (float): Second vector (imaginary) component.
        v3 (float): Third vector (imaginary) component.
    """

    __slots__ = ('_data',)

    def __init__(self, s: float, v1: float, v2: float, v3: float) -> None:
        q = jnp.array([s, v1, v2, v3], dtype=get_dtype())
        self._data = q / jnp.linalg.norm(q)

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Quaternion:
        """Create from a raw JAX array without normalization.

        Args:
            data (jax.Array): Array of shape ``(4,)`` in scalar-first order.

        Returns:
            Quaternion: New instance.
        """
        obj = object.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def identity(cls) -> Quaternion:
        """Return the identity rotation."""
        return cls(1.0, 0.0, 0.0, 0.0)

    # Properties

    @property
    def w(self) -> jax.Array:
        """Scalar component."""
        return self._data[0]

    @property
    def x(self) -> jax.Array:
        """First vector component."""
        return self._data[1]

    @property
    def y(self) -> jax.Array:
        """Second vector component."""
        return self._data[2]

    @property
    def z(self) -> jax.Array:
        """Third vector component."""
        return self._data[3]

    # Factory methods

    @classmethod
    def from_vector(cls, v: ArrayLike, scalar_first: bool = True) -> Quaternion:
        """Create from a 4-element vector.

        Args:
            v (ArrayLike): Array-like of shape ``(4,)``.
            scalar_first (bool): If ``True``, ``v = [w, x, y, z]``.
                If ``False``, ``v = [x, y, z, w]``.

        Returns:
            Quaternion: New normalized quaternion.
        """
        if scalar_first:
            return cls(v[0], v[1], v[2], v[3])
        else:
            return cls(v[3], v[0], v[1], v[2])

    @classmethod
    def from_rpy(cls, roll: float, pitch: float, yaw: float, use_degrees: bool = False) -> Quaternion:
        """Create from roll, pitch and yaw (``qz(yaw) * qy(pitch) * qx(roll)``).

        Args:
            roll (float): Rotation about X.
            pitch (float): Rotation about Y.
            yaw (float): Rotation about Z.
            use_degrees (bool): Interpret the angles in degrees. Default: ``False``

        Returns:
            Quaternion: Unit quaternion.
        """
        return cls._from_internal(quaternion_from_rpy(roll, pitch, yaw, use_degrees))

    @classmethod
    def from_rotation_matrix(cls, R: ArrayLike) -> Quaternion:
        """Create from an active 3x3 rotation matrix.

        Args:
            R (ArrayLike): Rotation matrix of shape ``(3, 3)``.

        Returns:
            Quaternion: Unit quaternion.
        """
        return cls._from_internal(rotation_matrix_to_quaternion(R))

    def to_vector(self, scalar_first: bool = True) -> jax.Array:
        """Return the quaternion as a 4-element vector.

        Args:
            scalar_first (bool): If ``True``, return ``[w, x, y, z]``.
                If ``False``, return ``[x, y, z, w]``.

        Returns:
            jnp.ndarray: Array of shape ``(4,)``.
        """
        if scalar_first:
            return self._data
        else:
            return jnp.array([self._data[1], self._data[2], self._data[3], self._data[0]])

    # Methods

    def normalize(self) -> Quaternion:
        """Return a new unit-norm quaternion."""
        return Quaternion._from_internal(self._data / jnp.linalg.norm(self._data))

    def norm(self) -> jax.Array:
        """Return the Euclidean norm."""
        return jnp.linalg.norm(self._data)

    def conjugate(self) -> Quaternion:
        """Return the conjugate ``[w, -x, -y, -z]``."""
        return Quaternion._from_internal(quaternion_conjugate(self._data))

    def inverse(self) -> Quaternion:
        """Return the multiplicative inverse.

        For a unit quaternion this is the conjugate; otherwise the conjugate
        is divided by the squared norm.

        Returns:
            Quaternion: Inverse quaternion.
        """
        return Quaternion._from_internal(quaternion_conjugate(self._data) / jnp.dot(self._data, self._data))

    def to_rotation_matrix(self) -> jax.Array:
        """Return the active 3x3 rotation matrix of the normalized quaternion."""
        return quaternion_to_rotation_matrix(self._data / jnp.linalg.norm(self._data))

    def rotate(self, v: ArrayLike) -> jax.Array:
        """Rotate a 3-vector by this quaternion.

        Args:
            v (ArrayLike): Vector of shape ``(3,)``.

        Returns:
            jnp.ndarray: Rotated vector of shape ``(3,)``.
        """
        return self.to_rotation_matrix() @ jnp.asarray(v, dtype=self._data.dtype)

    def to_rpy(self, use_degrees: bool = False) -> jax.Array:
        """Return ``[roll, pitch, yaw]``."""
        return quaternion_to_rpy(self._data, use_degrees)

    def yaw(self, use_degrees: bool = False) -> jax.Array:
        """Return the yaw angle."""
        return quaternion_get_yaw(self._data, use_degrees)

    # Operators

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product (quaternion * quaternion)."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion._from_internal(quaternion_multiply(self._data, other._data))

    def __neg__(self) -> Quaternion:
        return Quaternion._from_internal(-self._data)

    def __getitem__(self, idx: int) -> jax.Array:
        return self._data[idx]

    def __eq__(self, other: object) -> bool:
        """Compare as rotations: ``q`` and ``-q`` are equal."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        eps = get_attitude_epsilon()
        d1 = self._data / jnp.linalg.norm(self._data)
        d2 = other._data / jnp.linalg.norm(other._data)
        return bool(jnp.all(jnp.abs(d1 - d2) < eps) or jnp.all(jnp.abs(d1 + d2) < eps))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return not self.__eq__(other)

    # String representations

    def __str__(self) -> str:
        return (
            f"Quaternion(w={float(self._data[0]):.6f}, "
            f"x={float(self._data[1]):.6f}, "
            f"y={float(self._data[2]):.6f}, "
            f"z={float(self._data[3]):.6f})"
        )

    def __repr__(self) -> str:
        return (
            f"Quaternion(w={float(self._data[0])}, "
            f"x={float(self._data[1])}, "
            f"y={float(self._data[2])}, "
            f"z={float(self._data[3])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Quaternion,
    lambda q: ((q._data,), None),
    lambda _, children: Quaternion._from_internal(children[0]),
)
