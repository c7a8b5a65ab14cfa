"""
frametf converts orientations, vectors and covariances between the NED/ENU and aircraft/base_link frames, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    NED_ENU_RPY,
    AIRCRAFT_BASELINK_RPY,
)

from .config import set_dtype, get_dtype

from .attitude import (
    Quaternion,
    quaternion_from_rpy,
    quaternion_to_rpy,
    quaternion_get_yaw,
)

from .frames import (
    StaticTF,
    RotationFamily,
    transform_orientation,
    transform_static_vector,
    transform_static_covariance,
    transform_static_frame,
    transform_vector,
    transform_covariance,
    transform_frame,
    transform_orientation_ned_enu,
    transform_orientation_enu_ned,
    transform_orientation_aircraft_baselink,
    transform_orientation_baselink_aircraft,
    transform_frame_ned_enu,
    transform_frame_enu_ned,
    transform_frame_aircraft_baselink,
    transform_frame_baselink_aircraft,
    transform_frame_aircraft_ned,
    transform_frame_ned_aircraft,
    transform_frame_aircraft_enu,
    transform_frame_enu_aircraft,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "NED_ENU_RPY",
    "AIRCRAFT_BASELINK_RPY",
    # Configuration
    "set_dtype",
    "get_dtype",
    # Attitude
    "Quaternion",
    "quaternion_from_rpy",
    "quaternion_to_rpy",
    "quaternion_get_yaw",
    # Frames
    "StaticTF",
    "RotationFamily",
    "transform_orientation",
    "transform_static_vector",
    "transform_static_covariance",
    "transform_static_frame",
    "transform_vector",
    "transform_covariance",
    "transform_frame",
    "transform_orientation_ned_enu",
    "transform_orientation_enu_ned",
    "transform_orientation_aircraft_baselink",
    "transform_orientation_baselink_aircraft",
    "transform_frame_ned_enu",
    "transform_frame_enu_ned",
    "transform_frame_aircraft_baselink",
    "transform_frame_baselink_aircraft",
    "transform_frame_aircraft_ned",
    "transform_frame_ned_aircraft",
    "transform_frame_aircraft_enu",
    "transform_frame_enu_aircraft",
]
