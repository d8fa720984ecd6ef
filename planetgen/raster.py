# raster.py - grayscale height maps decoded from image bytes
from __future__ import annotations

import io
import logging
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

_SIXTEEN_BIT_MODES = {"I;16", "I;16B", "I;16L", "I"}


class HeightMapError(Exception):
    """Raised when image bytes cannot be turned into a height map."""


class RasterSampler:
    """Nearest-neighbour equirectangular lookup into a 2D grayscale buffer.

    ``pixels`` is indexed ``[row, column]``; row 0 is latitude +90 and column 0
    is longitude -180.  Samples are divided by ``channel_max`` so the result
    lies in [0, 1].
    """

    def __init__(self, pixels: np.ndarray, channel_max: float = 255.0):
        pixels = np.asarray(pixels)
        if pixels.ndim != 2 or pixels.size == 0:
            raise HeightMapError(f"expected a non-empty 2D buffer, got shape {pixels.shape}")
        self.pixels = pixels
        self.height, self.width = pixels.shape
        self.channel_max = float(channel_max)

    def sample(self, lat: float, lon: float) -> float:
        x = ((lon + 180.0) / 360.0) * self.width
        y = ((90.0 - lat) / 180.0) * self.height
        px = max(0, min(self.width - 1, int(np.floor(x))))
        py = max(0, min(self.height - 1, int(np.floor(y))))
        v = float(self.pixels[py, px]) / self.channel_max
        return max(0.0, min(1.0, v))


def sampler_from_image(img: Image.Image) -> RasterSampler:
    """Build a sampler from a decoded Pillow image (first/luma channel)."""
    if img.mode in _SIXTEEN_BIT_MODES:
        return RasterSampler(np.asarray(img.convert("I"), dtype=np.int32), 65535.0)
    return RasterSampler(np.asarray(img.convert("L"), dtype=np.uint8), 255.0)


def load_height_map(source: Union[bytes, bytearray, str]) -> RasterSampler:
    """Decode image bytes (or a file path) into a :class:`RasterSampler`.

    Any decode failure surfaces as a single :class:`HeightMapError`.
    """
    try:
        if isinstance(source, str):
            img = Image.open(source)
        else:
            img = Image.open(io.BytesIO(bytes(source)))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise HeightMapError(f"could not decode height map: {exc}") from exc
    if img.width == 0 or img.height == 0:
        raise HeightMapError("height map image is empty")
    sampler = sampler_from_image(img)
    logger.debug("loaded %dx%d height map (mode %s)", sampler.width, sampler.height, img.mode)
    return sampler
