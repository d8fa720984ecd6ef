from __future__ import annotations
from enum import IntEnum
from typing import Tuple, Union

from .config import BIOME_THRESHOLDS


class Biome(IntEnum):
    OCEAN = 0
    ICE = 1
    TUNDRA = 2
    TROPICAL_RAINFOREST = 3
    SAVANNA = 4
    DESERT = 5
    TEMPERATE_FOREST = 6
    GRASSLAND = 7
    TAIGA = 8
    RIVER = 9


BIOME_COLORS = {
    Biome.OCEAN: "#1da2d8",
    Biome.ICE: "#ffffff",
    Biome.TUNDRA: "#b7c2c4",
    Biome.TROPICAL_RAINFOREST: "#005c09",
    Biome.SAVANNA: "#a5bd2b",
    Biome.DESERT: "#e0c380",
    Biome.TEMPERATE_FOREST: "#2d8a2d",
    Biome.GRASSLAND: "#6da832",
    Biome.TAIGA: "#5b7c61",
    Biome.RIVER: "#2f6fd6",
}
UNKNOWN_COLOR = "#ff00ff"


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    c = color.lstrip("#")
    return int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16)


def biome_color(biome: Union[Biome, int, str]) -> Tuple[int, int, int]:
    """RGB colour for ``biome`` (enum, int value or name); magenta if unknown."""
    try:
        if isinstance(biome, str):
            key = Biome[biome.upper()]
        else:
            key = Biome(int(biome))
    except (KeyError, ValueError):
        return hex_to_rgb(UNKNOWN_COLOR)
    return hex_to_rgb(BIOME_COLORS[key])


def _table_biome(temperature: float, moisture: float) -> Biome:
    t = BIOME_THRESHOLDS
    if temperature < t["ice_max_temp"]:
        return Biome.ICE
    if temperature < t["tundra_max_temp"]:
        return Biome.TUNDRA
    if temperature > t["tropical_min_temp"]:
        if moisture > t["rainforest_min_moisture"]:
            return Biome.TROPICAL_RAINFOREST
        if moisture > t["savanna_min_moisture"]:
            return Biome.SAVANNA
        return Biome.DESERT
    if temperature > t["temperate_min_temp"]:
        if moisture > t["temperate_forest_min_moisture"]:
            return Biome.TEMPERATE_FOREST
        if moisture > t["grassland_min_moisture"]:
            return Biome.GRASSLAND
        return Biome.DESERT  # cold desert
    if moisture > t["taiga_min_moisture"]:
        return Biome.TAIGA
    return Biome.TUNDRA


def classify_biome(temperature: float, moisture: float, elevation: float,
                   sea_level: float, is_river: bool = False) -> Biome:
    """Whittaker-style lookup with ocean first and a river override on land."""
    if elevation <= sea_level:
        return Biome.OCEAN
    if is_river:
        return Biome.RIVER
    return _table_biome(temperature, moisture)
