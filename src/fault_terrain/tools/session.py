"""Session persistence tools: save_session, load_session."""

import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..state import state, TerrainParams
from ..render import ShadingParams

logger = logging.getLogger(__name__)


def _default_path() -> Path:
    return Path.home() / ".cache" / "fault-terrain" / "session.json"


def register_session_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def save_session(path: str | None = None) -> str:
        """Save the current parameters to a JSON file for later resumption.

        Saves grid and fault params (including the seed) and shading settings.
        Does NOT save the generated terrain; with a seed set, generate_terrain
        reproduces it exactly after loading.

        Args:
            path: Where to save. Default: ~/.cache/fault-terrain/session.json
        """
        save_path = Path(path) if path else _default_path()
        save_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "params": state.params.model_dump(),
            "shading": state.shading.model_dump(),
        }

        with open(save_path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info("Session saved to %s", save_path)
        return f"Session saved to {save_path}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_session(path: str | None = None) -> str:
        """Load previously saved parameters from a JSON file.

        Restores grid/fault params and shading settings, and clears any
        generated terrain.
        **Next:** generate_terrain.

        Args:
            path: Path to load from. Default: ~/.cache/fault-terrain/session.json
        """
        load_path = Path(path) if path else _default_path()

        if not load_path.exists():
            return f"Error: Session file not found at {load_path}"

        try:
            with open(load_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            return f"Error: Invalid session file: {e}"

        try:
            params = TerrainParams(**data["params"]) if data.get("params") else TerrainParams()
            shading = ShadingParams(**data["shading"]) if data.get("shading") else ShadingParams()
        except ValidationError as e:
            return f"Error: Invalid session values: {e}"

        state.params = params
        state.shading = shading
        state.clear_terrain()

        logger.info("Session loaded from %s", load_path)
        return (
            f"Session restored from {load_path}. "
            "Restored: params, shading. "
            "Still needed: generate_terrain."
        )
