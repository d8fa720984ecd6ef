# plates.py - nearest-center plate partition with flat base elevations
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .config import PLATE_COUNT_RANGE, PLATE_ELEVATION_RANGE
from .hexgrid import CellId, LatLon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plate:
    center: CellId
    base_elevation: float


def generate_plates(cells: Sequence[CellId], rng: random.Random) -> List[Plate]:
    """Pick 8-12 plate centers (with replacement) and their base elevations."""
    lo, hi = PLATE_COUNT_RANGE
    count = rng.randint(lo, hi)
    centers = [rng.choice(cells) for _ in range(count)]
    e_lo, e_hi = PLATE_ELEVATION_RANGE
    return [Plate(c, rng.uniform(e_lo, e_hi)) for c in centers]


def partition_plates(cells: Sequence[CellId], coords: Sequence[LatLon],
                     rng: random.Random) -> Dict[CellId, Plate]:
    """Assign every cell to the plate whose center is nearest.

    Distance is the squared planar ``dlat**2 + dlon**2`` in degrees, which is
    knowingly distorted near the poles and across the antimeridian.  Ties go
    to the plate generated first.  Duplicate centers simply leave the later
    plate with no cells.
    """
    if not cells:
        return {}
    plates = generate_plates(cells, rng)
    pos = {c: ll for c, ll in zip(cells, coords)}

    lat = np.array([ll[0] for ll in coords], dtype=np.float64)
    lon = np.array([ll[1] for ll in coords], dtype=np.float64)
    c_lat = np.array([pos[p.center][0] for p in plates], dtype=np.float64)
    c_lon = np.array([pos[p.center][1] for p in plates], dtype=np.float64)

    d2 = (lat[:, None] - c_lat[None, :]) ** 2 + (lon[:, None] - c_lon[None, :]) ** 2
    nearest = np.argmin(d2, axis=1)  # first minimum wins

    logger.debug("partitioned %d cells into %d plates", len(cells), len(plates))
    return {c: plates[int(k)] for c, k in zip(cells, nearest)}


def plate_sizes(plate_map: Dict[CellId, Plate]) -> List[Tuple[Plate, int]]:
    """Cells per plate in first-seen order; handy for diagnostics."""
    counts: Dict[int, Tuple[Plate, int]] = {}
    for plate in plate_map.values():
        key = id(plate)
        prev = counts.get(key)
        counts[key] = (plate, (prev[1] if prev else 0) + 1)
    return list(counts.values())
