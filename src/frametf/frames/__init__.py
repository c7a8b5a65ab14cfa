"""Frame transformations.

This sub-module converts orientations, vectors and covariances between the
frames used on aerial vehicles:

- **Static transforms**: NED <-> ENU (world frame) and aircraft <-> base_link
  (body frame), selected with :class:`StaticTF`.
- **Dynamic transforms**: rotation of vectors and covariances by an
  arbitrary attitude quaternion.
- **Named conversions**: one function per direction for both of the above.
"""

from ._canonical import AIRCRAFT_BASELINK, NED_ENU, CanonicalRotation, canonical_rotation
from ._covariance import block_rotation
from .aliases import (
    transform_frame_aircraft_baselink,
    transform_frame_aircraft_enu,
    transform_frame_aircraft_ned,
    transform_frame_baselink_aircraft,
    transform_frame_enu_aircraft,
    transform_frame_enu_ned,
    transform_frame_ned_aircraft,
    transform_frame_ned_enu,
    transform_orientation_aircraft_baselink,
    transform_orientation_baselink_aircraft,
    transform_orientation_enu_ned,
    transform_orientation_ned_enu,
)
from .dynamic import transform_covariance, transform_frame, transform_vector
from .static import (
    transform_orientation,
    transform_static_covariance,
    transform_static_frame,
    transform_static_vector,
)
from .static_tf import RotationFamily, StaticTF

__all__ = [
    # Selectors
    "StaticTF",
    "RotationFamily",
    # Canonical rotations
    "CanonicalRotation",
    "NED_ENU",
    "AIRCRAFT_BASELINK",
    "canonical_rotation",
    "block_rotation",
    # Static transforms
    "transform_orientation",
    "transform_static_vector",
    "transform_static_covariance",
    "transform_static_frame",
    # Dynamic transforms
    "transform_vector",
    "transform_covariance",
    "transform_frame",
    # Named conversions
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
