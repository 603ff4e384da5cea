"""Prerequisite checking helpers for MCP tools."""


def require_state(state, *, terrain: bool = False, buffers: bool = False) -> None:
    """Raise ValueError with a descriptive message if required state is not set.

    Usage in a tool:
        try:
            require_state(state, terrain=True)
        except ValueError as e:
            return f"Error: {e}"
    """
    if terrain and state.terrain is None:
        raise ValueError(
            "Generate a terrain first with generate_terrain."
        )
    if buffers and state.buffers is None:
        raise ValueError(
            "No exported buffers yet; run generate_terrain to produce them."
        )
