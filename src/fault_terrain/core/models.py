"""Pydantic models for the terrain grid, its owned buffers and export snapshots."""

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GridSpec(BaseModel):
    """Regular lattice of (div+1) x (div+1) vertices over [min_x,max_x] x [min_y,max_y]."""
    model_config = ConfigDict(frozen=True)

    div: int = Field(gt=0, strict=True)
    min_x: float = Field(allow_inf_nan=False)
    max_x: float = Field(allow_inf_nan=False)
    min_y: float = Field(allow_inf_nan=False)
    max_y: float = Field(allow_inf_nan=False)

    @model_validator(mode="after")
    def check_max_x_gt_min_x(self) -> "GridSpec":
        if self.max_x <= self.min_x:
            raise ValueError(f"max_x ({self.max_x}) must be greater than min_x ({self.min_x})")
        return self

    @model_validator(mode="after")
    def check_max_y_gt_min_y(self) -> "GridSpec":
        if self.max_y <= self.min_y:
            raise ValueError(f"max_y ({self.max_y}) must be greater than min_y ({self.min_y})")
        return self

    @property
    def delta_x(self) -> float:
        return (self.max_x - self.min_x) / self.div

    @property
    def delta_y(self) -> float:
        return (self.max_y - self.min_y) / self.div

    @property
    def side(self) -> int:
        """Vertices per row (and per column)."""
        return self.div + 1

    @property
    def vertex_count(self) -> int:
        return self.side * self.side

    @property
    def face_count(self) -> int:
        return 2 * self.div * self.div

    @property
    def edge_count(self) -> int:
        return 3 * self.face_count


class Terrain(BaseModel):
    """Owned geometry buffers of a fault-formation terrain.

    ``positions`` and ``normals`` are (N, 3) float64 arrays indexed by
    ``i * (div + 1) + j``; ``faces`` (F, 3) and ``edges`` (E, 2) are uint32
    and fixed at construction. Only the z column of ``positions`` changes.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    spec: GridSpec
    positions: np.ndarray
    normals: np.ndarray
    faces: np.ndarray
    edges: np.ndarray
    min_z: float = 0.0
    max_z: float = 0.0
    degenerate_faces: int = 0
    iterations_applied: int = 0

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def get_min_z(self) -> float:
        return self.min_z

    def get_max_z(self) -> float:
        return self.max_z


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


class TerrainBuffers(BaseModel):
    """Flat, tightly packed snapshot for upload to a rendering backend.

    Arrays are private copies marked non-writeable. Index arrays are uint32
    so grids with more than 65536 vertices stay addressable.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    positions: np.ndarray
    normals: np.ndarray
    triangle_indices: np.ndarray
    edge_indices: np.ndarray
    min_z: float
    max_z: float

    @field_validator("positions", "normals")
    @classmethod
    def float_buffer_must_be_flat_float32(cls, v: np.ndarray) -> np.ndarray:
        return _readonly(np.ascontiguousarray(v, dtype=np.float32).reshape(-1).copy())

    @field_validator("triangle_indices", "edge_indices")
    @classmethod
    def index_buffer_must_be_flat_uint32(cls, v: np.ndarray) -> np.ndarray:
        if v.size and v.min() < 0:
            raise ValueError("Index buffers cannot hold negative indices")
        return _readonly(np.ascontiguousarray(v, dtype=np.uint32).reshape(-1).copy())

    @model_validator(mode="after")
    def buffers_must_be_consistent(self) -> "TerrainBuffers":
        if len(self.positions) % 3:
            raise ValueError(f"positions length {len(self.positions)} is not a multiple of 3")
        if len(self.normals) != len(self.positions):
            raise ValueError(
                f"normals length {len(self.normals)} does not match "
                f"positions length {len(self.positions)}"
            )
        if len(self.triangle_indices) % 3:
            raise ValueError(
                f"triangle_indices length {len(self.triangle_indices)} is not a multiple of 3"
            )
        if len(self.edge_indices) % 2:
            raise ValueError(f"edge_indices length {len(self.edge_indices)} is not a multiple of 2")
        n_verts = self.vertex_count
        for name in ("triangle_indices", "edge_indices"):
            idx = getattr(self, name)
            if idx.size and int(idx.max()) >= n_verts:
                raise ValueError(
                    f"{name} references vertex {int(idx.max())} but only {n_verts} vertices exist"
                )
        return self

    @property
    def vertex_count(self) -> int:
        return len(self.positions) // 3

    @property
    def triangle_count(self) -> int:
        return len(self.triangle_indices) // 3

    @property
    def edge_count(self) -> int:
        return len(self.edge_indices) // 2
