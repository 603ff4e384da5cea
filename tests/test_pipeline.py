"""Tests for the one-call generation pipeline and the public API."""

import numpy as np
import pytest

from fault_terrain import ConfigurationError, generate_terrain, make_rng


class TestGenerateTerrain:
    def test_fixed_seed_is_bit_identical(self):
        a = generate_terrain(16, -0.75, 0.75, -0.75, 0.75, 200, 0.003, seed=1234)
        b = generate_terrain(16, -0.75, 0.75, -0.75, 0.75, 200, 0.003, seed=1234)
        assert np.array_equal(a.positions, b.positions)
        assert np.array_equal(a.normals, b.normals)

    def test_rng_takes_precedence_over_seed(self):
        a = generate_terrain(8, -1.0, 1.0, -1.0, 1.0, 40, 0.01, seed=1, rng=make_rng(99))
        b = generate_terrain(8, -1.0, 1.0, -1.0, 1.0, 40, 0.01, seed=99)
        assert np.array_equal(a.positions, b.positions)

    def test_zero_iterations_gives_flat_terrain_with_up_normals(self):
        terrain = generate_terrain(6, -1.0, 1.0, -1.0, 1.0, 0, 0.5, seed=0)
        assert np.all(terrain.positions[:, 2] == 0.0)
        np.testing.assert_allclose(terrain.normals, np.tile([0.0, 0.0, 1.0], (49, 1)))
        assert terrain.min_z == 0.0
        assert terrain.max_z == 0.0

    def test_normals_reflect_final_geometry(self):
        terrain = generate_terrain(10, -1.0, 1.0, -1.0, 1.0, 100, 0.02, seed=5)
        assert not np.allclose(terrain.normals, [0.0, 0.0, 1.0])
        np.testing.assert_allclose(np.linalg.norm(terrain.normals, axis=1), 1.0)

    def test_iterations_recorded(self):
        terrain = generate_terrain(4, -1.0, 1.0, -1.0, 1.0, 25, 0.01, seed=3)
        assert terrain.iterations_applied == 25

    def test_invalid_grid_raises(self):
        with pytest.raises(ConfigurationError):
            generate_terrain(0, -1.0, 1.0, -1.0, 1.0, 10, 0.01)

    def test_negative_iterations_raises(self):
        with pytest.raises(ConfigurationError):
            generate_terrain(4, -1.0, 1.0, -1.0, 1.0, -5, 0.01)

    def test_negative_seed_raises(self):
        with pytest.raises(ConfigurationError, match="seed"):
            generate_terrain(2, -1.0, 1.0, -1.0, 1.0, 3, 0.01, seed=-1)
