"""Edge derivation and flat buffer export for rendering backends."""

import numpy as np

from .models import Terrain, TerrainBuffers


def build_edges(faces: np.ndarray) -> np.ndarray:
    """Edge list (a,b), (b,c), (c,a) for every face, in face order.

    Shared sides appear once per adjacent triangle; no deduplication is done,
    so the result suits line rendering but not adjacency queries.
    """
    faces = np.asarray(faces, dtype=np.uint32).reshape(-1, 3)
    edges = np.empty((len(faces), 3, 2), dtype=np.uint32)
    edges[:, 0] = faces[:, [0, 1]]
    edges[:, 1] = faces[:, [1, 2]]
    edges[:, 2] = faces[:, [2, 0]]
    return edges.reshape(-1, 2)


def export_buffers(terrain: Terrain) -> TerrainBuffers:
    """Snapshot the terrain's geometry as flat float32/uint32 arrays."""
    return TerrainBuffers(
        positions=terrain.positions,
        normals=terrain.normals,
        triangle_indices=terrain.faces,
        edge_indices=terrain.edges,
        min_z=terrain.min_z,
        max_z=terrain.max_z,
    )
