"""Tests for the named per-direction conversions."""

import math

import jax
import jax.numpy as jnp
import pytest

import frametf
from frametf import (
    Quaternion,
    StaticTF,
    transform_frame_aircraft_baselink,
    transform_frame_aircraft_enu,
    transform_frame_aircraft_ned,
    transform_frame_baselink_aircraft,
    transform_frame_enu_aircraft,
    transform_frame_enu_ned,
    transform_frame_ned_aircraft,
    transform_frame_ned_enu,
    transform_orientation,
    transform_orientation_aircraft_baselink,
    transform_orientation_baselink_aircraft,
    transform_orientation_enu_ned,
    transform_orientation_ned_enu,
    transform_static_frame,
)

ATOL = 1e-12


def _random_covariance(n, seed=0):
    A = jax.random.normal(jax.random.PRNGKey(seed), (n, n), dtype=jnp.float64)
    return A @ A.T + n * jnp.eye(n)


@pytest.mark.parametrize(
    "fn, tf",
    [
        (transform_orientation_ned_enu, StaticTF.NED_TO_ENU),
        (transform_orientation_enu_ned, StaticTF.ENU_TO_NED),
        (transform_orientation_aircraft_baselink, StaticTF.AIRCRAFT_TO_BASELINK),
        (transform_orientation_baselink_aircraft, StaticTF.BASELINK_TO_AIRCRAFT),
    ],
)
def test_orientation_aliases(fn, tf):
    q = Quaternion.from_rpy(0.3, 0.2, 0.1)
    assert fn(q) == transform_orientation(q, tf)


@pytest.mark.parametrize(
    "fn, tf",
    [
        (transform_frame_ned_enu, StaticTF.NED_TO_ENU),
        (transform_frame_enu_ned, StaticTF.ENU_TO_NED),
        (transform_frame_aircraft_baselink, StaticTF.AIRCRAFT_TO_BASELINK),
        (transform_frame_baselink_aircraft, StaticTF.BASELINK_TO_AIRCRAFT),
    ],
)
@pytest.mark.parametrize("shape", [(3,), (9,), (6, 6), (81,)])
def test_frame_aliases(fn, tf, shape):
    x = jnp.arange(1.0, 1.0 + math.prod(shape)).reshape(shape)
    assert jnp.allclose(fn(x), transform_static_frame(x, tf), atol=ATOL)


def test_ned_enu_velocity():
    """1 m/s north, 2 m/s east, 0.5 m/s down."""
    out = transform_frame_ned_enu(jnp.array([1.0, 2.0, 0.5]))
    assert jnp.allclose(out, jnp.array([2.0, 1.0, -0.5]), atol=ATOL)
    assert jnp.allclose(transform_frame_enu_ned(out), jnp.array([1.0, 2.0, 0.5]), atol=ATOL)


class TestBodyWorld:
    def test_aircraft_ned_forward_axis(self):
        """Heading east (yaw +90 deg in NED): body forward is NED east."""
        q = Quaternion.from_rpy(0.0, 0.0, 90.0, use_degrees=True)
        out = transform_frame_aircraft_ned(jnp.array([1.0, 0.0, 0.0]), q)
        assert jnp.allclose(out, jnp.array([0.0, 1.0, 0.0]), atol=ATOL)

    def test_ned_aircraft_undoes_aircraft_ned(self):
        q = Quaternion.from_rpy(0.1, -0.2, 2.0)
        v = jnp.array([3.0, -1.0, 0.25])
        assert jnp.allclose(transform_frame_ned_aircraft(transform_frame_aircraft_ned(v, q), q), v, atol=ATOL)

    def test_enu_aircraft_undoes_aircraft_enu_covariance(self):
        q = jnp.array([0.9, 0.1, -0.3, 0.2])
        P = _random_covariance(9, seed=3)
        out = transform_frame_enu_aircraft(transform_frame_aircraft_enu(P, q), q)
        assert jnp.allclose(out, P, atol=1e-10)

    def test_ned_aircraft_is_inverse_rotation(self):
        q = Quaternion.from_rpy(0.0, 0.0, 90.0, use_degrees=True)
        out = transform_frame_ned_aircraft(jnp.array([0.0, 1.0, 0.0]), q)
        assert jnp.allclose(out, jnp.array([1.0, 0.0, 0.0]), atol=ATOL)


def test_top_level_exports():
    for name in frametf.__all__:
        assert hasattr(frametf, name)
