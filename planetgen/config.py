"""
World generation tuning knobs.
Safe to tweak without touching pipeline code.
"""

from typing import Dict, Tuple

DEFAULT_SEED: str = "world-sim"

# Noise: (frequency multiplier, weight) per octave, summed then divided by total weight
NOISE_OCTAVES: Tuple[Tuple[float, float], ...] = ((1.0, 1.0), (2.0, 0.5), (4.0, 0.25))

# Large primes offsetting the master seed hash for each random stream
PLATE_SEED_OFFSET: int = 54321
RIVER_SEED_OFFSET: int = 98761

# Tectonics
PLATE_COUNT_RANGE: Tuple[int, int] = (8, 12)          # inclusive
PLATE_ELEVATION_RANGE: Tuple[float, float] = (0.1, 0.9)
TECTONIC_DETAIL_WEIGHT: float = 0.1                   # noise added on top of plate base

# Rivers
RIVER_TRIALS: int = 50
RIVER_MAX_STEPS: int = 100
RIVER_SOURCE_MARGIN: float = 0.3   # sources must sit this far above sea level
RIVER_MOISTURE_BONUS: float = 0.3

# Climate
TIDAL_LOCK_THRESHOLD: float = 0.1  # |rotation - orbital| below this => locked
BASE_TEMP_C: float = -20.0
INSOLATION_TEMP_GAIN_C: float = 50.0
LAPSE_RATE_C: float = 80.0         # per unit of elevation above sea level
HADLEY_CELL_WIDTH_DEG: float = 30.0
MOISTURE_BAND_SCALE: float = 0.8
MOISTURE_BAND_FLOOR: float = 0.1
OROGRAPHIC_GAIN: float = 0.5

# Biome thresholds (°C / moisture fraction)
BIOME_THRESHOLDS: Dict[str, float] = {
    "ice_max_temp": -5.0,
    "tundra_max_temp": 5.0,
    "tropical_min_temp": 20.0,
    "temperate_min_temp": 10.0,
    "rainforest_min_moisture": 0.8,
    "savanna_min_moisture": 0.4,
    "temperate_forest_min_moisture": 0.6,
    "grassland_min_moisture": 0.3,
    "taiga_min_moisture": 0.5,
}

# Generation parameter defaults
PARAM_DEFAULTS: Dict[str, float] = {
    "sea_level": 0.5,
    "sunlight": 1.0,
    "axial_tilt": 23.5,
    "rotation_speed": 1.0,
    "rotation_period": 1.0,
    "orbital_period": 365.0,
}
# Inclusive bounds; parameters not listed here are not range-checked
PARAM_RANGES: Dict[str, Tuple[float, float]] = {
    "sea_level": (0.0, 1.0),
}
RESOLUTION_RANGE: Tuple[int, int] = (0, 15)
HIGH_RESOLUTION_WARNING: int = 4   # cell count ~ 122 * 7**resolution
