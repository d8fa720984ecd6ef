# planetgen/__init__.py
# Package init for spherical world generation modules

from .hexgrid import GridIndex, H3GridIndex, CellId, expand_cells, ring_neighbors
from .noise import NoiseField, seed_hash, random_seed
from .raster import RasterSampler, HeightMapError, load_height_map
from .plates import Plate, partition_plates
from .elevation import ElevationMethod, select_source, compute_elevation
from .rivers import simulate_rivers, trace_river
from .climate import calculate_insolation, calculate_temperature, calculate_moisture
from .biomes import Biome, BIOME_COLORS, biome_color, classify_biome
from .worldgen import (
    CellRecord,
    WorldParams,
    WorldGenerator,
    generate_world,
    describe_cell,
    summarize_world,
)

__all__ = [
    "GridIndex", "H3GridIndex", "CellId", "expand_cells", "ring_neighbors",
    "NoiseField", "seed_hash", "random_seed",
    "RasterSampler", "HeightMapError", "load_height_map",
    "Plate", "partition_plates",
    "ElevationMethod", "select_source", "compute_elevation",
    "simulate_rivers", "trace_river",
    "calculate_insolation", "calculate_temperature", "calculate_moisture",
    "Biome", "BIOME_COLORS", "biome_color", "classify_biome",
    "CellRecord", "WorldParams", "WorldGenerator", "generate_world",
    "describe_cell", "summarize_world",
]
