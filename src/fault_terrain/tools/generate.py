"""Generation tool: generate_terrain."""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp import Context

from ..state import state
from ..core.fault import make_rng, run_fault_formation
from ..core.grid import build_grid
from ..core.normals import recompute_normals
from ..core.topology import export_buffers

logger = logging.getLogger(__name__)

MAX_PROGRESS_BATCHES = 10


def _batches(iterations: int, n_batches: int) -> list[int]:
    """Split iterations into n_batches near-equal positive chunks."""
    if iterations <= 0:
        return []
    n_batches = min(n_batches, iterations)
    base, extra = divmod(iterations, n_batches)
    return [base + (1 if i < extra else 0) for i in range(n_batches)]


def register_generate_tools(mcp: FastMCP):

    @mcp.tool()
    async def generate_terrain(ctx: Context) -> str:
        """Generate the terrain mesh from the current grid and fault params.

        Builds the flat grid, runs fault formation, then recomputes vertex
        normals and exports render buffers.
        **Next:** get_render_plan, export_obj or export_3mf.

        Re-run this after changing parameters. Reports progress per batch of
        fault passes.
        """
        p = state.params
        batches = _batches(p.iterations, MAX_PROGRESS_BATCHES)
        total = 1 + len(batches) + 1
        current = 0

        try:
            terrain = build_grid(p.div, p.min_x, p.max_x, p.min_y, p.max_y)
            # One generator across batches keeps the plane sequence identical to a single run
            rng = make_rng(p.seed)
        except ValueError as e:
            return f"Error: {e}"
        current += 1
        await ctx.report_progress(current, total)

        for n in batches:
            run_fault_formation(terrain, n, p.delta, rng=rng)
            current += 1
            await ctx.report_progress(current, total)

        degenerate = recompute_normals(terrain)
        state.terrain = terrain
        state.buffers = export_buffers(terrain)
        current += 1
        await ctx.report_progress(current, total)

        if degenerate:
            logger.warning("Generated terrain has %d zero-area faces", degenerate)

        return (
            f"Terrain generated: {terrain.vertex_count} vertices, {terrain.face_count} faces, "
            f"{terrain.edge_count} edges, {terrain.iterations_applied} fault passes. "
            f"Height range: [{terrain.min_z:.4f}, {terrain.max_z:.4f}]"
        )
