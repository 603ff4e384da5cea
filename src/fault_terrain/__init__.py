"""fault-terrain - procedural terrain meshes by fault formation.

Example:
    >>> from fault_terrain import build_grid, run_fault_formation, recompute_normals
    >>> from fault_terrain import export_buffers, make_rng
    >>> terrain = build_grid(200, -0.75, 0.75, -0.75, 0.75)
    >>> run_fault_formation(terrain, 1000, 0.003, rng=make_rng(42))
    >>> recompute_normals(terrain)
    >>> buffers = export_buffers(terrain)
"""

from fault_terrain.core import (
    GridSpec,
    Terrain,
    TerrainBuffers,
    apply_fault,
    build_edges,
    build_grid,
    export_buffers,
    generate_terrain,
    get_normal,
    get_vertex,
    make_rng,
    recompute_normals,
    run_fault_formation,
)
from fault_terrain.errors import (
    ConfigurationError,
    DegenerateGeometryWarning,
    FaultTerrainError,
)

__version__ = "0.1.0"

__all__ = [
    # Core pipeline
    "build_grid",
    "run_fault_formation",
    "apply_fault",
    "recompute_normals",
    "build_edges",
    "export_buffers",
    "generate_terrain",
    "make_rng",
    "get_vertex",
    "get_normal",
    # Models
    "GridSpec",
    "Terrain",
    "TerrainBuffers",
    # Errors
    "FaultTerrainError",
    "ConfigurationError",
    "DegenerateGeometryWarning",
]
