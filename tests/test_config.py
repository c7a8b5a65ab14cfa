"""Tests for the frametf.config module."""

import logging

import jax
import jax.numpy as jnp
import pytest

from frametf.attitude import Quaternion, get_attitude_epsilon
from frametf.config import get_dtype, set_dtype
from frametf.frames import StaticTF, transform_covariance, transform_static_vector

pytestmark = pytest.mark.order("first")


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float32 before and after each test."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float32)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True

    def test_change_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="frametf.config")
        set_dtype(jnp.float64)
        assert "float32 to float64" in caplog.text


class TestAttitudeEpsilon:
    def test_float32_tolerance(self):
        assert get_attitude_epsilon() == 1e-6

    def test_float64_tolerance(self):
        set_dtype(jnp.float64)
        assert get_attitude_epsilon() == 1e-12

    def test_float16_tolerance(self):
        set_dtype(jnp.float16)
        assert get_attitude_epsilon() == 1e-3


class TestTransformsFollowDtype:
    def test_static_vector_float32(self):
        out = transform_static_vector([1.0, 2.0, 3.0], StaticTF.NED_TO_ENU)
        assert out.dtype == jnp.float32
        assert jnp.allclose(out, jnp.array([2.0, 1.0, -3.0]), atol=1e-6)

    def test_static_vector_float64(self):
        set_dtype(jnp.float64)
        out = transform_static_vector([1.0, 2.0, 3.0], StaticTF.NED_TO_ENU)
        assert out.dtype == jnp.float64
        assert jnp.allclose(out, jnp.array([2.0, 1.0, -3.0]), atol=1e-15)

    def test_dynamic_covariance_float32(self):
        q = Quaternion.from_rpy(0.0, 0.0, 90.0, use_degrees=True)
        out = transform_covariance(jnp.eye(3), q)
        assert out.dtype == jnp.float32
        assert jnp.allclose(out, jnp.eye(3), atol=1e-6)
