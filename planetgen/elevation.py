# elevation.py - choose an elevation source once, then sample it per cell
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Union

from .config import TECTONIC_DETAIL_WEIGHT
from .hexgrid import CellId, LatLon
from .noise import NoiseField
from .plates import Plate, partition_plates, plate_sizes
from .raster import RasterSampler

logger = logging.getLogger(__name__)


class ElevationMethod(str, Enum):
    NOISE = "noise"
    TECTONIC = "tectonic"
    RASTER = "raster"

    @classmethod
    def parse(cls, value: Union["ElevationMethod", str, None]) -> "ElevationMethod":
        """Resolve ``value`` to a method; anything unrecognised means noise."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        if value is not None:
            logger.warning("unknown elevation method %r; using noise", value)
        return cls.NOISE


@dataclass(frozen=True)
class NoiseSource:
    noise: NoiseField


@dataclass(frozen=True)
class TectonicSource:
    noise: NoiseField
    plates: Dict[CellId, Plate]


@dataclass(frozen=True)
class RasterSource:
    sampler: RasterSampler


ElevationSource = Union[NoiseSource, TectonicSource, RasterSource]


def select_source(method: ElevationMethod, noise: NoiseField,
                  cells: Sequence[CellId], coords: Sequence[LatLon],
                  raster: Optional[RasterSampler], rng: random.Random) -> ElevationSource:
    """Build the elevation source for one generation run.

    A loaded raster wins regardless of ``method``.  Plates are only
    partitioned when the tectonic method is actually used.
    """
    if raster is not None:
        return RasterSource(raster)
    if method is ElevationMethod.RASTER:
        logger.warning("raster elevation requested but no height map loaded; using noise")
        return NoiseSource(noise)
    if method is ElevationMethod.TECTONIC:
        plates = partition_plates(cells, coords, rng)
        if logger.isEnabledFor(logging.DEBUG):
            sizes = [n for _, n in plate_sizes(plates)]
            logger.debug("plate sizes: %s", sizes)
        return TectonicSource(noise, plates)
    return NoiseSource(noise)


def compute_elevation(source: ElevationSource, cell: CellId, lat: float, lon: float) -> float:
    """Normalized elevation in [0, 1] for one cell."""
    if isinstance(source, RasterSource):
        value = source.sampler.sample(lat, lon)
    elif isinstance(source, TectonicSource):
        base = source.plates[cell].base_elevation
        value = base + source.noise.sample_sphere(lat, lon) * TECTONIC_DETAIL_WEIGHT
    else:
        value = (source.noise.sample_sphere(lat, lon) + 1.0) / 2.0
    return max(0.0, min(1.0, value))
