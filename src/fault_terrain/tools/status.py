"""Status tool: get_status."""

import json
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state


def register_status_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_status() -> str:
        """Return a summary of the current session.

        Shows the grid and fault parameters, shading settings, and whether a
        terrain has been generated along with its size and height range.
        """
        return json.dumps(state.summary(), indent=2)
