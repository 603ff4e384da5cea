"""Export tools: export_obj, export_3mf."""

import logging
import os
from pathlib import Path
from mcp.server.fastmcp import FastMCP

from ..state import state
from ..exporters.obj import export_obj as do_export_obj
from ..exporters.threemf import export_3mf as do_export_3mf
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def _validate_output_path(output_path: str) -> None:
    """Raise ValueError if output_path resolves outside the user's home directory."""
    resolved = Path(output_path).resolve()
    home = Path.home().resolve()
    try:
        resolved.relative_to(home)
    except ValueError:
        raise ValueError(
            f"Output path {output_path!r} is outside the home directory. "
            "Use a path within your home directory."
        )


def _prepare_export(output_path: str) -> None:
    require_state(state, terrain=True, buffers=True)
    _validate_output_path(output_path)
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)


def register_export_tools(mcp: FastMCP):

    @mcp.tool()
    def export_obj(output_path: str) -> str:
        """Export the terrain as a Wavefront OBJ file with vertex normals.

        Args:
            output_path: Where to save the .obj file (absolute path)
        """
        try:
            _prepare_export(output_path)
        except ValueError as e:
            return f"Error: {e}"

        result = do_export_obj(state.buffers, output_path)
        return f"OBJ exported to {output_path} ({result['vertices']} vertices, {result['faces']} faces)"

    @mcp.tool()
    def export_3mf(output_path: str) -> str:
        """Export the terrain surface as a 3MF file coloured with the material diffuse.

        Args:
            output_path: Where to save the .3mf file (absolute path)
        """
        try:
            _prepare_export(output_path)
        except ValueError as e:
            return f"Error: {e}"

        result = do_export_3mf(state.buffers, output_path, color=state.shading.material.diffuse)
        logger.info("3MF exported to %s", output_path)
        return f"3MF exported to {output_path} ({result['objects']} objects)"
