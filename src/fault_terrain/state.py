"""Session state for the fault-terrain MCP server.

Holds the grid and fault parameters, shading settings, and the most recently
generated terrain with its exported buffers.
"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator, ConfigDict

from fault_terrain.core.grid import make_grid_spec
from fault_terrain.core.models import GridSpec, Terrain, TerrainBuffers
from fault_terrain.render import ShadingParams


class TerrainParams(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    div: int = Field(default=200, gt=0, le=2000, strict=True)
    min_x: float = -0.75
    max_x: float = 0.75
    min_y: float = -0.75
    max_y: float = 0.75
    iterations: int = Field(default=1000, ge=0)
    delta: float = Field(default=0.003, allow_inf_nan=False)
    seed: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_grid(self) -> "TerrainParams":
        self.grid_spec()
        return self

    def grid_spec(self) -> GridSpec:
        return make_grid_spec(self.div, self.min_x, self.max_x, self.min_y, self.max_y)


class SessionState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    params: TerrainParams = Field(default_factory=TerrainParams)
    shading: ShadingParams = Field(default_factory=ShadingParams)
    terrain: Optional[Terrain] = None
    buffers: Optional[TerrainBuffers] = None

    def clear_terrain(self) -> None:
        self.terrain = None
        self.buffers = None

    def summary(self) -> dict:
        p = self.params
        return {
            "grid": {
                "div": p.div,
                "min_x": p.min_x,
                "max_x": p.max_x,
                "min_y": p.min_y,
                "max_y": p.max_y,
            },
            "fault": {
                "iterations": p.iterations,
                "delta": p.delta,
                "seed": p.seed,
            },
            "shading": self.shading.model_dump(),
            "terrain": {
                "generated": True,
                "vertices": self.terrain.vertex_count,
                "faces": self.terrain.face_count,
                "edges": self.terrain.edge_count,
                "iterations_applied": self.terrain.iterations_applied,
                "min_z": self.terrain.min_z,
                "max_z": self.terrain.max_z,
                "degenerate_faces": self.terrain.degenerate_faces,
            } if self.terrain is not None else {"generated": False},
        }


# Global session state, one per MCP server process
state = SessionState()
