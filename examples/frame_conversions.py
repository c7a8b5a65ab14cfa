# /// script
# requires-python = ">=3.10"
# dependencies = ["frametf"]
#
# [tool.uv.sources]
# frametf = { path = ".." }
# ///
"""Convert a PX4-style NED/aircraft state estimate into ROS ENU/base_link.

Takes an attitude, a velocity and a 6x6 position/velocity covariance
reported in NED with an aircraft (Forward-Right-Down) body frame and
expresses them in ENU with a base_link (Forward-Left-Up) body frame.

Requires frametf to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/frame_conversions.py
"""

import jax.numpy as jnp

from frametf import (
    Quaternion,
    set_dtype,
    transform_frame_aircraft_ned,
    transform_frame_ned_enu,
    transform_orientation_aircraft_baselink,
    transform_orientation_ned_enu,
)


def main() -> None:
    set_dtype(jnp.float64)

    # Flying north-east, nose 5 deg up
    q_ned_aircraft = Quaternion.from_rpy(0.0, 5.0, 45.0, use_degrees=True)
    v_body = jnp.array([12.0, 0.5, -0.2])
    cov_ned = jnp.diag(jnp.array([0.5, 0.8, 2.0, 0.05, 0.05, 0.1]))

    q_enu_baselink = transform_orientation_aircraft_baselink(transform_orientation_ned_enu(q_ned_aircraft))
    v_ned = transform_frame_aircraft_ned(v_body, q_ned_aircraft)
    v_enu = transform_frame_ned_enu(v_ned)
    cov_enu = transform_frame_ned_enu(cov_ned)

    print(f"attitude  NED/aircraft : {q_ned_aircraft}")
    print(f"attitude  ENU/base_link: {q_enu_baselink}")
    print(f"rpy (deg) ENU/base_link: {q_enu_baselink.to_rpy(use_degrees=True)}")
    print(f"velocity  NED          : {v_ned}")
    print(f"velocity  ENU          : {v_enu}")
    print(f"variances ENU          : {jnp.diag(cov_enu)}")


if __name__ == "__main__":
    main()
