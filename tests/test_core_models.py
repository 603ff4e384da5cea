"""Tests for core models."""
import numpy as np
import pytest
from pydantic import ValidationError


class TestGridSpec:
    def test_derived_quantities(self):
        from fault_terrain.core.models import GridSpec
        spec = GridSpec(div=4, min_x=-1.0, max_x=1.0, min_y=0.0, max_y=2.0)
        assert spec.delta_x == pytest.approx(0.5)
        assert spec.delta_y == pytest.approx(0.5)
        assert spec.side == 5
        assert spec.vertex_count == 25
        assert spec.face_count == 32
        assert spec.edge_count == 96

    def test_div_must_be_positive(self):
        from fault_terrain.core.models import GridSpec
        with pytest.raises(ValidationError):
            GridSpec(div=0, min_x=-1.0, max_x=1.0, min_y=-1.0, max_y=1.0)

    def test_max_x_must_exceed_min_x(self):
        from fault_terrain.core.models import GridSpec
        with pytest.raises(ValidationError):
            GridSpec(div=2, min_x=1.0, max_x=1.0, min_y=-1.0, max_y=1.0)

    def test_nan_bound_rejected(self):
        from fault_terrain.core.models import GridSpec
        with pytest.raises(ValidationError):
            GridSpec(div=2, min_x=-1.0, max_x=1.0, min_y=float("nan"), max_y=1.0)

    def test_frozen(self):
        from fault_terrain.core.models import GridSpec
        spec = GridSpec(div=2, min_x=-1.0, max_x=1.0, min_y=-1.0, max_y=1.0)
        with pytest.raises(ValidationError):
            spec.div = 3


def _buffers(**overrides):
    from fault_terrain.core.models import TerrainBuffers
    fields = dict(
        positions=np.zeros(9),
        normals=np.zeros(9),
        triangle_indices=np.array([0, 1, 2]),
        edge_indices=np.array([0, 1, 1, 2, 2, 0]),
        min_z=0.0,
        max_z=0.0,
    )
    fields.update(overrides)
    return TerrainBuffers(**fields)


class TestTerrainBuffers:
    def test_valid_buffers(self):
        b = _buffers()
        assert b.vertex_count == 3
        assert b.triangle_count == 1
        assert b.edge_count == 3

    def test_flattens_2d_input(self):
        b = _buffers(positions=np.zeros((3, 3)), normals=np.zeros((3, 3)))
        assert b.positions.shape == (9,)

    def test_normals_must_match_positions(self):
        with pytest.raises(ValidationError):
            _buffers(normals=np.zeros(6))

    def test_positions_must_be_multiple_of_three(self):
        with pytest.raises(ValidationError):
            _buffers(positions=np.zeros(8), normals=np.zeros(8))

    def test_triangle_indices_must_be_multiple_of_three(self):
        with pytest.raises(ValidationError):
            _buffers(triangle_indices=np.array([0, 1]))

    def test_edge_indices_must_be_pairs(self):
        with pytest.raises(ValidationError):
            _buffers(edge_indices=np.array([0, 1, 2]))

    def test_index_must_reference_existing_vertex(self):
        with pytest.raises(ValidationError):
            _buffers(triangle_indices=np.array([0, 1, 3]))

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            _buffers(edge_indices=np.array([0, -1]))

    def test_non_array_rejected(self):
        with pytest.raises(ValidationError):
            _buffers(positions=[0.0] * 9)
