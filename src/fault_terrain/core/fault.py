"""Fault formation: perturb terrain heights with random vertical cutting planes.

Each pass picks a point p inside the grid's bounding box and a direction
n = (cos theta, sin theta, 0). Vertices with (v - p) . n > 0 are raised by
delta, all others (ties included) are lowered by delta. Repeating this many
times builds up ridges and valleys that read as mountain ranges; more passes
give rougher terrain.

Heights are kept within [-1, 1]. A vertex whose step would leave that range
keeps its previous height for the pass (the step is reverted, not clamped to
the bound).
"""

import logging
import math
from numbers import Integral, Real
from typing import Optional

import numpy as np

from ..errors import ConfigurationError
from .models import Terrain

logger = logging.getLogger(__name__)

HEIGHT_LIMIT = 1.0


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Random source for fault planes; pass a seed for reproducible terrain."""
    try:
        return np.random.default_rng(seed)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid random seed {seed!r}: {e}") from e


def apply_fault(
    terrain: Terrain,
    point: tuple[float, float],
    angle: float,
    delta: float,
) -> None:
    """Apply one fault pass through ``point`` with plane normal at ``angle`` radians.

    Mutates terrain heights and widens ``min_z``/``max_z``; normals are left
    stale until ``recompute_normals`` runs.
    """
    px, py = point
    nx = math.cos(angle)
    ny = math.sin(angle)

    x = terrain.positions[:, 0]
    y = terrain.positions[:, 1]
    z = terrain.positions[:, 2]

    d = (x - px) * nx + (y - py) * ny
    raise_mask = d > 0

    stepped = np.where(raise_mask, z + delta, z - delta)
    in_range = np.abs(stepped) <= HEIGHT_LIMIT
    new_z = np.where(in_range, stepped, z)
    terrain.positions[:, 2] = new_z

    if raise_mask.any():
        terrain.max_z = max(terrain.max_z, float(new_z[raise_mask].max()))
    if not raise_mask.all():
        terrain.min_z = min(terrain.min_z, float(new_z[~raise_mask].min()))


def _validate_run(iterations, delta) -> None:
    if isinstance(iterations, bool) or not isinstance(iterations, Integral):
        raise ConfigurationError(f"iterations must be an integer, got {iterations!r}")
    if iterations < 0:
        raise ConfigurationError(f"iterations must be >= 0, got {iterations}")
    if isinstance(delta, bool) or not isinstance(delta, Real) or not math.isfinite(delta):
        raise ConfigurationError(f"delta must be a finite number, got {delta!r}")


def run_fault_formation(
    terrain: Terrain,
    iterations: int,
    delta: float,
    rng: Optional[np.random.Generator] = None,
) -> Terrain:
    """Run ``iterations`` random fault passes of magnitude ``delta``.

    Per pass the plane is drawn from ``rng`` as px, py, theta, in that order,
    so splitting a run across several calls sharing one generator yields the
    same heights as a single call. Cost is O(iterations * vertex_count).

    Args:
        terrain: Terrain to mutate in place.
        iterations: Number of passes, >= 0. Zero leaves the terrain untouched.
        delta: Height step applied on each side of the plane.
        rng: Random source. A fresh unseeded generator is used when omitted.

    Returns:
        The same terrain, for chaining.

    Raises:
        ConfigurationError: if iterations is negative or not an integer, or
            delta is not finite.
    """
    _validate_run(iterations, delta)
    if iterations == 0:
        return terrain
    if rng is None:
        rng = make_rng()

    spec = terrain.spec
    for _ in range(iterations):
        px = rng.uniform(spec.min_x, spec.max_x)
        py = rng.uniform(spec.min_y, spec.max_y)
        theta = rng.uniform(0.0, 2.0 * math.pi)
        apply_fault(terrain, (px, py), theta, delta)

    terrain.iterations_applied += int(iterations)
    logger.debug(
        "Applied %d fault passes (delta=%s); height range now [%.4f, %.4f]",
        iterations, delta, terrain.min_z, terrain.max_z,
    )
    return terrain
