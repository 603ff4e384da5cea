"""Wavefront OBJ export of a terrain surface with per-vertex normals."""

import logging

from ..core.models import TerrainBuffers

logger = logging.getLogger(__name__)


def export_obj(buffers: TerrainBuffers, output_path: str, name: str = "terrain") -> dict:
    """Write positions, normals and triangles as an OBJ file.

    OBJ indices are 1-based; each face corner references the vertex and the
    normal with the same index (``f a//a b//b c//c``).
    """
    positions = buffers.positions.reshape(-1, 3)
    normals = buffers.normals.reshape(-1, 3)
    triangles = buffers.triangle_indices.reshape(-1, 3)

    if len(positions) == 0 or len(triangles) == 0:
        raise ValueError("No mesh data to export")

    with open(output_path, "w") as f:
        f.write("# fault-terrain OBJ export\n")
        f.write(f"# height range [{buffers.min_z:.6f}, {buffers.max_z:.6f}]\n")
        f.write(f"o {name}\n")
        for v in positions:
            f.write(f"v {v[0]:.6f} {v[1]:.6f} {v[2]:.6f}\n")
        for n in normals:
            f.write(f"vn {n[0]:.6f} {n[1]:.6f} {n[2]:.6f}\n")
        for tri in triangles:
            a, b, c = (int(i) + 1 for i in tri)
            f.write(f"f {a}//{a} {b}//{b} {c}//{c}\n")

    logger.info(
        "Exported OBJ with %d vertices and %d faces to %s",
        len(positions), len(triangles), output_path,
    )
    return {"success": True, "filepath": output_path, "vertices": len(positions), "faces": len(triangles)}
