"""MCP server for fault-terrain.

Registers all tools and runs via stdio transport.
"""

import json
import logging
import sys

from mcp.server.fastmcp import FastMCP

from .state import state
from .tools.terrain import register_terrain_tools
from .tools.generate import register_generate_tools
from .tools.render import register_render_tools
from .tools.export import register_export_tools
from .tools.session import register_session_tools
from .tools.status import register_status_tools

mcp = FastMCP(
    "fault-terrain",
    instructions="Generate procedural terrain meshes by fault formation and export them for rendering",
)

# Register all tool groups
register_terrain_tools(mcp)
register_generate_tools(mcp)
register_render_tools(mcp)
register_export_tools(mcp)
register_session_tools(mcp)
register_status_tools(mcp)


@mcp.resource("state://session")
def session_state() -> str:
    """Current session summary as JSON."""
    return json.dumps(state.summary(), indent=2)


def main():
    # stdout carries the stdio transport
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
