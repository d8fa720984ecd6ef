# noise.py - seeded coherent 3D noise sampled on the unit sphere
from __future__ import annotations

import math
import random
import string
from typing import Union

from opensimplex import OpenSimplex

from .config import DEFAULT_SEED, NOISE_OCTAVES

SeedLike = Union[str, bytes]

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF


def seed_hash(seed: SeedLike) -> int:
    """32-bit FNV-1a hash of ``seed`` (strings are UTF-8 encoded)."""
    data = seed.encode("utf-8") if isinstance(seed, str) else bytes(seed)
    h = FNV_OFFSET_BASIS
    for b in data:
        h ^= b
        h = (h * FNV_PRIME) & _MASK32
    return h


def random_seed(length: int = 6) -> str:
    """Short random base-36 seed for "randomize" style front ends."""
    alphabet = string.digits + string.ascii_lowercase
    return "".join(random.choice(alphabet) for _ in range(length))


class NoiseField:
    """Multi-octave OpenSimplex noise with a string/bytes seed.

    The field is an explicit value: whoever owns it decides when to reseed,
    and reseeding only affects samples taken afterwards.
    """

    def __init__(self, seed: SeedLike = DEFAULT_SEED):
        self.seed(seed)

    def seed(self, seed: SeedLike) -> None:
        self.seed_int = seed_hash(seed)
        self.seed_fraction = self.seed_int / 4294967296.0
        self._gen = OpenSimplex(seed=self.seed_int)

    def sample3(self, x: float, y: float, z: float) -> float:
        v = float(self._gen.noise3(x, y, z))
        return max(-1.0, min(1.0, v))

    def sample_sphere(self, lat: float, lon: float) -> float:
        """Fractal noise at (lat, lon) degrees, in [-1, 1].

        Sampling happens in Cartesian space on the unit sphere, so there is
        no seam at the poles or along the antimeridian.
        """
        lat_r = math.radians(lat)
        lon_r = math.radians(lon)
        cos_lat = math.cos(lat_r)
        x = cos_lat * math.cos(lon_r)
        y = cos_lat * math.sin(lon_r)
        z = math.sin(lat_r)

        total = 0.0
        weight_sum = 0.0
        for freq, weight in NOISE_OCTAVES:
            total += self.sample3(x * freq, y * freq, z * freq) * weight
            weight_sum += weight
        return total / weight_sum
