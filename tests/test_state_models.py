"""Tests for state Pydantic models."""
import pytest
from pydantic import ValidationError


class TestTerrainParams:
    def test_defaults(self):
        from fault_terrain.state import TerrainParams
        p = TerrainParams()
        assert p.div == 200
        assert (p.min_x, p.max_x, p.min_y, p.max_y) == (-0.75, 0.75, -0.75, 0.75)
        assert p.iterations == 1000
        assert p.delta == pytest.approx(0.003)
        assert p.seed is None

    def test_grid_spec(self):
        from fault_terrain.state import TerrainParams
        spec = TerrainParams(div=4).grid_spec()
        assert spec.div == 4
        assert spec.vertex_count == 25

    def test_div_must_be_positive(self):
        from fault_terrain.state import TerrainParams
        with pytest.raises(ValidationError):
            TerrainParams(div=0)

    def test_inverted_bounds_rejected(self):
        from fault_terrain.state import TerrainParams
        with pytest.raises(ValidationError):
            TerrainParams(min_x=1.0, max_x=-1.0)

    def test_negative_iterations_rejected(self):
        from fault_terrain.state import TerrainParams
        with pytest.raises(ValidationError):
            TerrainParams(iterations=-1)

    def test_non_finite_delta_rejected(self):
        from fault_terrain.state import TerrainParams
        with pytest.raises(ValidationError):
            TerrainParams(delta=float("inf"))

    def test_negative_seed_rejected(self):
        from fault_terrain.state import TerrainParams
        with pytest.raises(ValidationError):
            TerrainParams(seed=-1)

    def test_div_is_not_coerced_from_string(self):
        from fault_terrain.state import TerrainParams
        with pytest.raises(ValidationError):
            TerrainParams(div="3")

    def test_assignment_is_validated(self):
        from fault_terrain.state import TerrainParams
        p = TerrainParams()
        with pytest.raises(ValidationError):
            p.max_y = -5.0


class TestSessionState:
    def test_summary_without_terrain(self):
        from fault_terrain.state import SessionState
        s = SessionState()
        summary = s.summary()
        assert set(summary) == {"grid", "fault", "shading", "terrain"}
        assert summary["terrain"] == {"generated": False}

    def test_summary_with_terrain(self):
        from fault_terrain.state import SessionState
        from fault_terrain.core.grid import build_grid
        s = SessionState()
        s.terrain = build_grid(2, -1.0, 1.0, -1.0, 1.0)
        t = s.summary()["terrain"]
        assert t["generated"] is True
        assert t["vertices"] == 9
        assert t["faces"] == 8
        assert t["edges"] == 24

    def test_clear_terrain(self):
        from fault_terrain.state import SessionState
        from fault_terrain.core.grid import build_grid
        from fault_terrain.core.topology import export_buffers
        s = SessionState()
        s.terrain = build_grid(2, -1.0, 1.0, -1.0, 1.0)
        s.buffers = export_buffers(s.terrain)
        s.clear_terrain()
        assert s.terrain is None
        assert s.buffers is None
