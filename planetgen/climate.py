# climate.py - insolation, temperature and moisture per cell
from __future__ import annotations

import math

from .config import (
    BASE_TEMP_C, HADLEY_CELL_WIDTH_DEG, INSOLATION_TEMP_GAIN_C, LAPSE_RATE_C,
    MOISTURE_BAND_FLOOR, MOISTURE_BAND_SCALE, OROGRAPHIC_GAIN, TIDAL_LOCK_THRESHOLD,
)

_MIN_ROTATION_SPEED = 1e-6


def is_tidally_locked(rotation_period: float, orbital_period: float) -> bool:
    return abs(rotation_period - orbital_period) < TIDAL_LOCK_THRESHOLD


def calculate_insolation(lat: float, lon: float, axial_tilt: float, sunlight: float,
                         rotation_period: float, orbital_period: float) -> float:
    """Relative incoming sunlight at (lat, lon).

    Tidally locked worlds use a fixed substellar point at (0, 0) and have a
    permanently dark hemisphere.  Otherwise insolation only depends on
    latitude.  ``axial_tilt`` is accepted but seasons are not modelled.
    """
    lat_r = math.radians(lat)
    if is_tidally_locked(rotation_period, orbital_period):
        dot = max(0.0, math.cos(lat_r) * math.cos(math.radians(lon)))
        return dot * sunlight
    return math.cos(lat_r) * sunlight


def calculate_temperature(insolation: float, elevation: float, sea_level: float) -> float:
    """Surface temperature in °C; lapse rate applies above sea level only."""
    altitude = max(0.0, elevation - sea_level)
    return BASE_TEMP_C + insolation * INSOLATION_TEMP_GAIN_C - altitude * LAPSE_RATE_C


def calculate_moisture(lat: float, elevation: float, sea_level: float,
                       rotation_speed: float) -> float:
    """Hadley-band moisture plus orographic lift, clamped to [0, 1].

    Faster rotation narrows the circulation cells, giving more bands.
    """
    cell_width = HADLEY_CELL_WIDTH_DEG / math.sqrt(max(rotation_speed, _MIN_ROTATION_SPEED))
    phase = (abs(lat) / cell_width) * math.pi
    base = (math.cos(phase) + 1.0) / 2.0 * MOISTURE_BAND_SCALE + MOISTURE_BAND_FLOOR
    base += max(0.0, elevation - sea_level) * OROGRAPHIC_GAIN
    return max(0.0, min(1.0, base))
