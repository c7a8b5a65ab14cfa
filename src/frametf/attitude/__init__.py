"""Attitude primitives for the frame transforms.

Provides the scalar-first :class:`Quaternion` value type, the raw-array
quaternion kernels it is built on, and the dtype-adaptive comparison
tolerance.
"""

from ._tolerance import get_attitude_epsilon
from .conversions import (
    quaternion_conjugate,
    quaternion_from_rpy,
    quaternion_get_yaw,
    quaternion_multiply,
    quaternion_normalize,
    quaternion_to_rotation_matrix,
    quaternion_to_rpy,
    rotation_matrix_to_quaternion,
)
from .quaternion import Quaternion

__all__ = [
    "Quaternion",
    # Kernels
    "quaternion_conjugate",
    "quaternion_from_rpy",
    "quaternion_get_yaw",
    "quaternion_multiply",
    "quaternion_normalize",
    "quaternion_to_rotation_matrix",
    "quaternion_to_rpy",
    "rotation_matrix_to_quaternion",
    # Tolerance
    "get_attitude_epsilon",
]
