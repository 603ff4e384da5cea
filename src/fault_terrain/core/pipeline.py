"""One-call terrain generation: build, perturb, then rebuild normals."""

import logging
from typing import Optional

import numpy as np

from .fault import make_rng, run_fault_formation
from .grid import build_grid
from .models import Terrain
from .normals import recompute_normals

logger = logging.getLogger(__name__)


def generate_terrain(
    div: int,
    min_x: float,
    max_x: float,
    min_y: float,
    max_y: float,
    iterations: int,
    delta: float,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> Terrain:
    """Build a grid, run fault formation and recompute normals, in that order.

    ``rng`` takes precedence over ``seed`` when both are given.
    """
    terrain = build_grid(div, min_x, max_x, min_y, max_y)
    run_fault_formation(terrain, iterations, delta, rng=rng if rng is not None else make_rng(seed))
    recompute_normals(terrain)
    logger.info(
        "Generated terrain: %d fault passes, height range [%.4f, %.4f]",
        iterations, terrain.min_z, terrain.max_z,
    )
    return terrain
