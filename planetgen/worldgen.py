# worldgen.py - one-shot pipeline: grid -> elevation -> rivers -> climate -> biomes
from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from . import config
from .biomes import Biome, classify_biome
from .climate import calculate_insolation, calculate_moisture, calculate_temperature
from .elevation import ElevationMethod, compute_elevation, select_source
from .hexgrid import CellId, GridIndex, H3GridIndex, centroids, expand_cells
from .noise import NoiseField, SeedLike
from .raster import RasterSampler, load_height_map
from .rivers import simulate_rivers
from .safe_parse import clamp_param, coerce_param, coerce_resolution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellRecord:
    id: CellId
    lat: float
    lon: float
    elevation: float
    temperature: float
    moisture: float
    biome: Biome
    is_river: bool = False


@dataclass(frozen=True)
class WorldParams:
    resolution: int = 0
    sea_level: float = 0.5
    sunlight: float = 1.0
    axial_tilt: float = 23.5
    rotation_speed: float = 1.0
    rotation_period: float = 1.0
    orbital_period: float = 365.0
    method: ElevationMethod = ElevationMethod.NOISE

    @classmethod
    def sanitized(cls, resolution: Any = 0, method: Any = ElevationMethod.NOISE,
                  **values: Any) -> "WorldParams":
        """Coerce raw inputs to numbers, logging a warning for each fix-up.

        Only ``sea_level`` and the grid resolution are range-checked; the
        physical parameters are used as given.
        """
        unknown = set(values) - set(config.PARAM_DEFAULTS)
        if unknown:
            raise TypeError(f"unknown generation parameters: {sorted(unknown)}")

        res = coerce_resolution(resolution, config.RESOLUTION_RANGE)
        if res > config.HIGH_RESOLUTION_WARNING:
            logger.warning("resolution %d generates ~%d cells; this may be slow",
                           res, 122 * 7 ** res)

        clean: Dict[str, float] = {}
        for name, default in config.PARAM_DEFAULTS.items():
            value = coerce_param(name, values.get(name), default)
            if name in config.PARAM_RANGES:
                value = clamp_param(name, value, config.PARAM_RANGES[name])
            clean[name] = value
        return cls(resolution=res, method=ElevationMethod.parse(method), **clean)


class WorldGenerator:
    """Owns the noise field, optional height map and grid for world generation.

    Nothing is shared between generator instances; reseeding one does not
    affect another.
    """

    def __init__(self, seed: SeedLike = config.DEFAULT_SEED, grid: Optional[GridIndex] = None):
        self.grid: GridIndex = grid if grid is not None else H3GridIndex()
        self.noise = NoiseField(seed)
        self.height_map: Optional[RasterSampler] = None

    def set_seed(self, seed: SeedLike) -> None:
        """Replace the noise field; affects only subsequent generations."""
        self.noise = NoiseField(seed)

    def load_height_map(self, source: Union[bytes, bytearray, str]) -> RasterSampler:
        """Decode and keep a height map; raises ``HeightMapError`` on failure."""
        sampler = load_height_map(source)
        self.height_map = sampler
        return sampler

    def clear_height_map(self) -> None:
        self.height_map = None

    def generate_world(self, resolution: int, sea_level: float = 0.5, sunlight: float = 1.0,
                       axial_tilt: float = 23.5, rotation_speed: float = 1.0,
                       rotation_period: float = 1.0, orbital_period: float = 365.0,
                       method: Union[ElevationMethod, str] = ElevationMethod.NOISE) -> List[CellRecord]:
        params = WorldParams.sanitized(
            resolution=resolution, method=method, sea_level=sea_level, sunlight=sunlight,
            axial_tilt=axial_tilt, rotation_speed=rotation_speed,
            rotation_period=rotation_period, orbital_period=orbital_period,
        )
        return self.generate(params)

    def generate(self, params: WorldParams) -> List[CellRecord]:
        """Run the pipeline for already-sanitized ``params``.

        The returned list follows :func:`expand_cells` order, so index ``i``
        always names the same cell for a given resolution.
        """
        cells = expand_cells(self.grid, params.resolution)
        coords = centroids(self.grid, cells)
        logger.debug("expanded %d cells at resolution %d", len(cells), params.resolution)
        logger.debug("noise seed %08x (fraction %.6f)", self.noise.seed_int, self.noise.seed_fraction)

        plate_rng = random.Random(self.noise.seed_int + config.PLATE_SEED_OFFSET)
        source = select_source(params.method, self.noise, cells, coords, self.height_map, plate_rng)

        elevation: Dict[CellId, float] = {}
        for cell, (lat, lon) in zip(cells, coords):
            elevation[cell] = compute_elevation(source, cell, lat, lon)

        river_rng = random.Random(self.noise.seed_int + config.RIVER_SEED_OFFSET)
        rivers = simulate_rivers(elevation, params.sea_level, self.grid, river_rng)

        records: List[CellRecord] = []
        for cell, (lat, lon) in zip(cells, coords):
            h = elevation[cell]
            is_river = cell in rivers
            insolation = calculate_insolation(lat, lon, params.axial_tilt, params.sunlight,
                                              params.rotation_period, params.orbital_period)
            temp = calculate_temperature(insolation, h, params.sea_level)
            moisture = calculate_moisture(lat, h, params.sea_level, params.rotation_speed)
            if is_river:
                moisture = min(1.0, moisture + config.RIVER_MOISTURE_BONUS)
            biome = classify_biome(temp, moisture, h, params.sea_level, is_river)
            records.append(CellRecord(cell, lat, lon, h, temp, moisture, biome, is_river))

        logger.info("generated %d cells (resolution %d, %s elevation, %d river cells)",
                    len(records), params.resolution, type(source).__name__, len(rivers))
        return records


def generate_world(resolution: int, *, seed: SeedLike = config.DEFAULT_SEED,
                   grid: Optional[GridIndex] = None, **kwargs: Any) -> List[CellRecord]:
    """Convenience wrapper: fresh generator, one world."""
    return WorldGenerator(seed, grid).generate_world(resolution, **kwargs)


def describe_cell(cell: CellRecord) -> str:
    """Human readable one-cell summary."""
    return (
        f"Biome: {cell.biome.name}\n"
        f"Temp: {cell.temperature:.1f}°C\n"
        f"Moisture: {cell.moisture * 100:.0f}%\n"
        f"Height: {cell.elevation:.2f}\n"
        f"Lat/Lon: {cell.lat:.1f}, {cell.lon:.1f}"
    )


def summarize_world(records: Sequence[CellRecord], sea_level: float) -> Dict[str, Any]:
    n = len(records)
    land = sum(1 for r in records if r.elevation > sea_level)
    biomes = Counter(r.biome.name for r in records)
    return {
        "cells": n,
        "land_fraction": land / n if n else 0.0,
        "river_cells": sum(1 for r in records if r.is_river),
        "mean_temperature": sum(r.temperature for r in records) / n if n else 0.0,
        "biomes": dict(sorted(biomes.items())),
    }
