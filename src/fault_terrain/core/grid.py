"""Grid builder: flat vertex arena and fixed triangulation for a terrain."""

import logging

import numpy as np
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import GridSpec, Terrain
from .topology import build_edges

logger = logging.getLogger(__name__)


def make_grid_spec(div: int, min_x: float, max_x: float, min_y: float, max_y: float) -> GridSpec:
    """Validate grid parameters, raising ConfigurationError on bad input."""
    try:
        return GridSpec(div=div, min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid grid parameters: {e}") from e


def vertex_index(spec: GridSpec, i: int, j: int) -> int:
    """Flat index of the vertex at row i, column j."""
    if not (0 <= i <= spec.div and 0 <= j <= spec.div):
        raise IndexError(f"Grid coordinate ({i}, {j}) outside 0..{spec.div}")
    return i * spec.side + j


def grid_positions(spec: GridSpec) -> np.ndarray:
    """Flat (N, 3) vertex array with z = 0, row-major over (i, j)."""
    cols = np.arange(spec.side, dtype=np.float64)
    xs = spec.min_x + spec.delta_x * cols
    ys = spec.min_y + spec.delta_y * cols
    positions = np.zeros((spec.vertex_count, 3), dtype=np.float64)
    # Row i holds y_i for every column j
    positions[:, 0] = np.tile(xs, spec.side)
    positions[:, 1] = np.repeat(ys, spec.side)
    return positions


def grid_faces(spec: GridSpec) -> np.ndarray:
    """Two triangles per cell, cell-major, winding fixed so flat normals point +z."""
    side = spec.side
    rows, cols = np.meshgrid(np.arange(spec.div), np.arange(spec.div), indexing="ij")
    vid = (rows * side + cols).reshape(-1).astype(np.int64)

    faces = np.empty((spec.face_count, 3), dtype=np.uint32)
    # Triangle A: (vid, vid+1, vid+div+1)
    faces[0::2, 0] = vid
    faces[0::2, 1] = vid + 1
    faces[0::2, 2] = vid + side
    # Triangle B: (vid+1, vid+1+div+1, vid+div+1)
    faces[1::2, 0] = vid + 1
    faces[1::2, 1] = vid + 1 + side
    faces[1::2, 2] = vid + side
    return faces


def build_grid(div: int, min_x: float, max_x: float, min_y: float, max_y: float) -> Terrain:
    """Build a flat terrain grid with upward normals and its triangulation.

    Raises:
        ConfigurationError: if div <= 0 or either axis range is empty,
            inverted or non-finite.
    """
    spec = make_grid_spec(div, min_x, max_x, min_y, max_y)
    positions = grid_positions(spec)
    normals = np.zeros_like(positions)
    normals[:, 2] = 1.0
    faces = grid_faces(spec)
    edges = build_edges(faces)

    logger.info(
        "Built %dx%d terrain grid: %d vertices, %d faces, %d edges",
        spec.div, spec.div, len(positions), len(faces), len(edges),
    )
    return Terrain(
        spec=spec,
        positions=positions,
        normals=normals,
        faces=faces,
        edges=edges,
    )


def get_vertex(terrain: Terrain, i: int, j: int) -> np.ndarray:
    """Copy of the (x, y, z) position at grid coordinate (i, j)."""
    return terrain.positions[vertex_index(terrain.spec, i, j)].copy()


def get_normal(terrain: Terrain, i: int, j: int) -> np.ndarray:
    """Copy of the normal at grid coordinate (i, j)."""
    return terrain.normals[vertex_index(terrain.spec, i, j)].copy()
