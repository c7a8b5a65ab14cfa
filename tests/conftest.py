import jax.numpy as jnp
import pytest

from frametf.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    The frame conversions are checked to 1e-12, which needs float64.
    test_config.py has its own autouse fixture that switches to float32.
    """
    set_dtype(jnp.float64)
