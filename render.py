from __future__ import annotations

import os
from typing import Dict, Sequence, Tuple

import numpy as np
from PIL import Image

from planetgen.biomes import biome_color
from planetgen.hexgrid import H3GridIndex
from planetgen.worldgen import CellRecord

BACKGROUND = (16, 18, 24)


def render_equirect(records: Sequence[CellRecord], grid: H3GridIndex, resolution: int,
                    width: int = 720, height: int = 360) -> Image.Image:
    """Paint an equirectangular biome map.

    Every pixel takes the colour of the cell containing its center; pixels
    whose cell is not in ``records`` keep the background colour.
    """
    colors: Dict[str, Tuple[int, int, int]] = {r.id: biome_color(r.biome) for r in records}
    pixels = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:, :] = BACKGROUND

    for py in range(height):
        lat = 90.0 - (py + 0.5) * 180.0 / height
        for px in range(width):
            lon = -180.0 + (px + 0.5) * 360.0 / width
            col = colors.get(grid.cell_at(lat, lon, resolution))
            if col is not None:
                pixels[py, px] = col
    return Image.fromarray(pixels, "RGB")


def save_preview(records: Sequence[CellRecord], grid: H3GridIndex, resolution: int,
                 path_png: str, width: int = 720, height: int = 360) -> None:
    img = render_equirect(records, grid, resolution, width, height)
    os.makedirs(os.path.dirname(path_png) or ".", exist_ok=True)
    img.save(path_png)
