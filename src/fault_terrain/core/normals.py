"""Per-vertex normal reconstruction by area-weighted face normal accumulation."""

import logging
import warnings

import numpy as np

from ..errors import DegenerateGeometryWarning
from .models import Terrain

logger = logging.getLogger(__name__)


def face_normals(positions: np.ndarray, faces: np.ndarray) -> np.ndarray:
    """Unnormalized (p2 - p1) x (p3 - p1) for every face.

    The magnitude is twice the triangle area, so larger faces weigh more when
    these are summed at shared vertices.
    """
    p1 = positions[faces[:, 0]]
    p2 = positions[faces[:, 1]]
    p3 = positions[faces[:, 2]]
    return np.cross(p2 - p1, p3 - p1)


def accumulate_vertex_normals(positions: np.ndarray, faces: np.ndarray) -> tuple[np.ndarray, int]:
    """Vertex normals from scratch, plus the number of zero-area faces.

    Vertices whose incident faces are all degenerate get the zero vector.
    """
    fn = face_normals(positions, faces)
    degenerate = int(np.count_nonzero(~fn.any(axis=1)))

    normals = np.zeros_like(positions, dtype=np.float64)
    for corner in range(3):
        np.add.at(normals, faces[:, corner], fn)

    lengths = np.linalg.norm(normals, axis=1)
    nonzero = lengths > 0
    normals[nonzero] /= lengths[nonzero, np.newaxis]
    return normals, degenerate


def recompute_normals(terrain: Terrain) -> int:
    """Rebuild every vertex normal from the terrain's current heights.

    Returns the number of zero-area faces found. When there are any, a
    DegenerateGeometryWarning is issued; their vertices rely on other
    incident faces and stay at zero if none contribute.
    """
    normals, degenerate = accumulate_vertex_normals(
        terrain.positions, terrain.faces.astype(np.intp)
    )
    terrain.normals[:] = normals
    terrain.degenerate_faces = degenerate

    if degenerate:
        warnings.warn(
            f"{degenerate} zero-area face(s) contributed no normal",
            DegenerateGeometryWarning,
            stacklevel=2,
        )
    logger.debug("Recomputed %d vertex normals (%d degenerate faces)", len(normals), degenerate)
    return degenerate
