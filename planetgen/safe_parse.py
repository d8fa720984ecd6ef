"""Coercion of raw generation parameters (CLI strings, numpy scalars, ...).

Nothing here raises: a value that cannot be read as a finite number is
replaced by the parameter's default and a warning names the parameter.
"""
from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Tuple

logger = logging.getLogger(__name__)


def _parse_real(value: Any) -> float:
    """Float for ``value``, or NaN when it is not a real number."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, (str, bytes)):
        try:
            return float(value.strip())
        except ValueError:
            return math.nan
    return math.nan


def coerce_param(name: str, value: Any, default: float) -> float:
    """Finite float for parameter ``name``; ``None`` means "use the default"."""
    if value is None:
        return default
    f = _parse_real(value)
    if not math.isfinite(f):
        logger.warning("%s=%r is not a finite number; using %r", name, value, default)
        return default
    return f


def coerce_resolution(value: Any, bounds: Tuple[int, int]) -> int:
    """Grid resolution as an int inside the grid's valid ``bounds``.

    Whole-valued floats (``2.0``, ``np.float64(3)``) are accepted; fractional
    ones are truncated with a warning.
    """
    lo, _ = bounds
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        res = int(value)
    else:
        f = coerce_param("resolution", value, float(lo))
        res = int(f)
        if res != f:
            logger.warning("resolution=%r is not whole; using %d", value, res)
    return int(clamp_param("resolution", res, bounds))


def clamp_param(name: str, value: float, bounds: Tuple[float, float]) -> float:
    """Clamp ``value`` into ``bounds``, warning when it had to move."""
    lo, hi = bounds
    clamped = max(lo, min(hi, value))
    if clamped != value:
        logger.warning("%s=%r outside [%r, %r]; using %r", name, value, lo, hi, clamped)
    return clamped
