# rivers.py - steepest-descent river tracing from highland sources
from __future__ import annotations

import logging
import random
from typing import List, Mapping, Set

from .config import RIVER_MAX_STEPS, RIVER_SOURCE_MARGIN, RIVER_TRIALS
from .hexgrid import CellId, GridIndex, ring_neighbors

logger = logging.getLogger(__name__)


def trace_river(start: CellId, elevation: Mapping[CellId, float], sea_level: float,
                grid: GridIndex, max_steps: int = RIVER_MAX_STEPS) -> List[CellId]:
    """Follow the lowest strictly-lower neighbour from ``start``.

    The walk stops at or below ``sea_level``, at a local minimum, or after
    ``max_steps`` cells.  Neighbours outside ``elevation`` are ignored.
    """
    path: List[CellId] = []
    current = start
    for _ in range(max_steps):
        path.append(current)
        here = elevation[current]
        if here <= sea_level:
            break
        best = None
        best_h = here
        for n in ring_neighbors(grid, current, 1):
            h = elevation.get(n)
            if h is not None and h < best_h:
                best, best_h = n, h
        if best is None:
            break
        current = best
    return path


def simulate_rivers(elevation: Mapping[CellId, float], sea_level: float, grid: GridIndex,
                    rng: random.Random, trials: int = RIVER_TRIALS,
                    max_steps: int = RIVER_MAX_STEPS) -> Set[CellId]:
    """Union of cells visited by ``trials`` random river walks.

    Sources are drawn uniformly from cells higher than
    ``sea_level + RIVER_SOURCE_MARGIN``; with no such cell there are no rivers.
    """
    threshold = sea_level + RIVER_SOURCE_MARGIN
    candidates = [c for c, h in elevation.items() if h > threshold]
    rivers: Set[CellId] = set()
    if not candidates:
        logger.debug("no river sources above %.2f", threshold)
        return rivers

    for _ in range(trials):
        source = rng.choice(candidates)
        rivers.update(trace_river(source, elevation, sea_level, grid, max_steps))
    logger.debug("%d river cells from %d sources", len(rivers), len(candidates))
    return rivers
