"""Terrain mesh core: grid building, fault formation, normals and export."""

from .fault import apply_fault, make_rng, run_fault_formation
from .grid import build_grid, get_normal, get_vertex, make_grid_spec, vertex_index
from .models import GridSpec, Terrain, TerrainBuffers
from .normals import face_normals, recompute_normals
from .pipeline import generate_terrain
from .topology import build_edges, export_buffers

__all__ = [
    "GridSpec",
    "Terrain",
    "TerrainBuffers",
    "build_grid",
    "make_grid_spec",
    "vertex_index",
    "get_vertex",
    "get_normal",
    "make_rng",
    "apply_fault",
    "run_fault_formation",
    "face_normals",
    "recompute_normals",
    "build_edges",
    "export_buffers",
    "generate_terrain",
]
