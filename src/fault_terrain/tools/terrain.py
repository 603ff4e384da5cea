"""Parameter tools: set_grid, set_fault_params."""

from typing import Optional

from mcp.server.fastmcp import FastMCP

from ..state import state, TerrainParams


def register_terrain_tools(mcp: FastMCP):

    @mcp.tool()
    def set_grid(
        div: int,
        min_x: float = -0.75,
        max_x: float = 0.75,
        min_y: float = -0.75,
        max_y: float = 0.75,
    ) -> str:
        """Set the terrain grid: div cells per axis over [min_x,max_x] x [min_y,max_y].

        Produces (div+1)^2 vertices and 2*div^2 triangles.
        Clears any previously generated terrain.
        **Next:** set_fault_params (optional), then generate_terrain.

        Args:
            div: Cells per axis (>= 1)
            min_x: Minimum x coordinate
            max_x: Maximum x coordinate (must exceed min_x)
            min_y: Minimum y coordinate
            max_y: Maximum y coordinate (must exceed min_y)
        """
        try:
            params = TerrainParams(
                **{
                    **state.params.model_dump(),
                    "div": div, "min_x": min_x, "max_x": max_x,
                    "min_y": min_y, "max_y": max_y,
                }
            )
        except ValueError as e:
            return f"Error: {e}"

        state.params = params
        state.clear_terrain()
        spec = params.grid_spec()
        return (
            f"Grid set: {div}x{div} cells over x=[{min_x}, {max_x}], y=[{min_y}, {max_y}] "
            f"({spec.vertex_count} vertices, {spec.face_count} faces)"
        )

    @mcp.tool()
    def set_fault_params(
        iterations: int = 1000,
        delta: float = 0.003,
        seed: Optional[int] = None,
    ) -> str:
        """Set the fault formation parameters used by generate_terrain.

        More iterations give rougher terrain. Heights stay within [-1, 1].
        Clears any previously generated terrain.
        **Next:** generate_terrain.

        Args:
            iterations: Number of random fault passes (>= 0)
            delta: Height step per pass on each side of the fault
            seed: Non-negative random seed for reproducible terrain (omit for random)
        """
        try:
            params = TerrainParams(
                **{
                    **state.params.model_dump(),
                    "iterations": iterations, "delta": delta, "seed": seed,
                }
            )
        except ValueError as e:
            return f"Error: {e}"

        state.params = params
        state.clear_terrain()
        return f"Fault params set: iterations={iterations}, delta={delta}, seed={seed}"
