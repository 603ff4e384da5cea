"""Render plan tool: get_render_plan."""

import json
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..render import plan_draw_calls, shading_uniforms
from ._prereqs import require_state


def register_render_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_render_plan(mode: str = "wirepoly") -> str:
        """Return the draw calls and shading uniforms for rendering the terrain.

        **Requires:** generate_terrain.

        Args:
            mode: 'polygon' for shaded triangles, 'wireframe' for edges only,
                  'wirepoly' for shaded triangles with dark edges (default).
        """
        try:
            require_state(state, buffers=True)
            calls = plan_draw_calls(state.buffers, mode, state.shading)
        except ValueError as e:
            return f"Error: {e}"

        b = state.buffers
        return json.dumps({
            "mode": mode,
            "buffers": {
                "vertices": b.vertex_count,
                "triangle_indices": len(b.triangle_indices),
                "edge_indices": len(b.edge_indices),
                "index_type": str(b.triangle_indices.dtype),
            },
            "draw_calls": [c.model_dump() for c in calls],
            "uniforms": shading_uniforms(state.shading, b.min_z, b.max_z),
        }, indent=2)
