"""Tests for tool prerequisite helpers."""
import pytest


def test_require_state_raises_when_terrain_not_generated():
    from fault_terrain.tools._prereqs import require_state
    from fault_terrain.state import SessionState

    mock_state = SessionState()
    with pytest.raises(ValueError, match="generate_terrain"):
        require_state(mock_state, terrain=True)


def test_require_state_raises_when_buffers_missing():
    from fault_terrain.tools._prereqs import require_state
    from fault_terrain.state import SessionState
    from fault_terrain.core.grid import build_grid

    mock_state = SessionState()
    mock_state.terrain = build_grid(2, -1.0, 1.0, -1.0, 1.0)
    require_state(mock_state, terrain=True)
    with pytest.raises(ValueError, match="buffers"):
        require_state(mock_state, terrain=True, buffers=True)


def test_require_state_passes_when_generated():
    from fault_terrain.tools._prereqs import require_state
    from fault_terrain.state import SessionState
    from fault_terrain.core.grid import build_grid
    from fault_terrain.core.topology import export_buffers

    mock_state = SessionState()
    mock_state.terrain = build_grid(2, -1.0, 1.0, -1.0, 1.0)
    mock_state.buffers = export_buffers(mock_state.terrain)
    # Should not raise
    require_state(mock_state, terrain=True, buffers=True)


def test_require_state_no_flags_does_not_raise():
    from fault_terrain.tools._prereqs import require_state
    from fault_terrain.state import SessionState

    mock_state = SessionState()
    # No flags, never raises
    require_state(mock_state)
