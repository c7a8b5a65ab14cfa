"""Tests for the precomputed NED/ENU and aircraft/base_link rotations."""

import math

import jax.numpy as jnp
import numpy as np
import pytest

from frametf.attitude import quaternion_from_rpy, quaternion_to_rotation_matrix
from frametf.constants import AIRCRAFT_BASELINK_RPY, NED_ENU_RPY
from frametf.frames import (
    AIRCRAFT_BASELINK,
    NED_ENU,
    RotationFamily,
    StaticTF,
    block_rotation,
    canonical_rotation,
)

SQRT2_2 = math.sqrt(2.0) / 2.0
ATOL = 1e-12


class TestNedEnu:
    def test_quaternion(self):
        assert np.allclose(NED_ENU.quaternion, [0.0, SQRT2_2, SQRT2_2, 0.0], atol=ATOL)

    def test_matrix_swaps_north_east_and_flips_down(self):
        expected = np.array([
            [0.0, 1.0, 0.0],
            [1.0, 0.0, 0.0],
            [0.0, 0.0, -1.0],
        ])
        assert np.allclose(NED_ENU.matrix, expected, atol=ATOL)

    def test_affine_has_no_translation(self):
        assert np.allclose(NED_ENU.affine[:3, :3], NED_ENU.matrix, atol=ATOL)
        assert np.allclose(NED_ENU.affine[:3, 3], 0.0)
        assert np.allclose(NED_ENU.affine[3], [0.0, 0.0, 0.0, 1.0])


class TestAircraftBaselink:
    def test_quaternion(self):
        assert np.allclose(AIRCRAFT_BASELINK.quaternion, [0.0, 1.0, 0.0, 0.0], atol=ATOL)

    def test_matrix_flips_right_and_down(self):
        assert np.allclose(AIRCRAFT_BASELINK.matrix, np.diag([1.0, -1.0, -1.0]), atol=ATOL)

    def test_affine_has_no_translation(self):
        assert np.allclose(AIRCRAFT_BASELINK.affine[:3, :3], AIRCRAFT_BASELINK.matrix, atol=ATOL)
        assert np.allclose(AIRCRAFT_BASELINK.affine[:3, 3], 0.0)


@pytest.mark.parametrize("rot, rpy", [(NED_ENU, NED_ENU_RPY), (AIRCRAFT_BASELINK, AIRCRAFT_BASELINK_RPY)])
class TestConsistency:
    def test_quaternion_matches_kernel(self, rot, rpy):
        assert jnp.allclose(quaternion_from_rpy(*rpy), rot.quaternion, atol=ATOL)

    def test_matrix_matches_kernel(self, rot, rpy):
        assert jnp.allclose(quaternion_to_rotation_matrix(rot.quaternion), rot.matrix, atol=ATOL)

    def test_unit_norm(self, rot, rpy):
        assert np.linalg.norm(rot.quaternion) == pytest.approx(1.0, abs=ATOL)

    def test_self_inverse(self, rot, rpy):
        assert np.allclose(rot.matrix @ rot.matrix, np.eye(3), atol=ATOL)

    def test_proper_rotation(self, rot, rpy):
        assert np.linalg.det(rot.matrix) == pytest.approx(1.0, abs=ATOL)

    def test_read_only(self, rot, rpy):
        with pytest.raises(ValueError):
            rot.matrix[0, 0] = 5.0
        with pytest.raises(ValueError):
            rot.quaternion[0] = 5.0
        with pytest.raises(ValueError):
            rot.affine[0, 3] = 5.0

    def test_float64(self, rot, rpy):
        assert rot.quaternion.dtype == np.float64
        assert rot.matrix.dtype == np.float64


class TestFamilies:
    def test_lookup(self):
        assert canonical_rotation(RotationFamily.NED_ENU) is NED_ENU
        assert canonical_rotation(RotationFamily.AIRCRAFT_BASELINK) is AIRCRAFT_BASELINK

    def test_every_selector_has_a_family(self):
        for tf in StaticTF:
            assert canonical_rotation(tf.family) in (NED_ENU, AIRCRAFT_BASELINK)

    def test_directions_share_family(self):
        assert StaticTF.NED_TO_ENU.family is StaticTF.ENU_TO_NED.family is RotationFamily.NED_ENU
        assert (
            StaticTF.AIRCRAFT_TO_BASELINK.family
            is StaticTF.BASELINK_TO_AIRCRAFT.family
            is RotationFamily.AIRCRAFT_BASELINK
        )

    def test_reverse(self):
        for tf in StaticTF:
            assert tf.reverse.reverse is tf
            assert tf.reverse is not tf
            assert tf.reverse.family is tf.family

    def test_selector_values(self):
        assert [tf.name for tf in StaticTF] == [
            "NED_TO_ENU",
            "ENU_TO_NED",
            "AIRCRAFT_TO_BASELINK",
            "BASELINK_TO_AIRCRAFT",
        ]
        assert len(RotationFamily) == 2


class TestBlockRotation:
    @pytest.mark.parametrize("n", [3, 6, 9])
    def test_tiling(self, n):
        R_block = block_rotation(NED_ENU.matrix, n)
        assert R_block.shape == (n, n)
        for i in range(n // 3):
            for j in range(n // 3):
                block = R_block[3 * i:3 * i + 3, 3 * j:3 * j + 3]
                expected = NED_ENU.matrix if i == j else np.zeros((3, 3))
                assert jnp.allclose(block, expected, atol=ATOL)

    def test_orthonormal(self):
        R_block = block_rotation(NED_ENU.matrix, 9)
        assert jnp.allclose(R_block @ R_block.T, jnp.eye(9), atol=ATOL)

    def test_bad_dimension_raises(self):
        with pytest.raises(ValueError, match="must be one of"):
            block_rotation(NED_ENU.matrix, 4)
