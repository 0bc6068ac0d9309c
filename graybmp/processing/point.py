from __future__ import annotations

import math
from typing import List

from ..grid import SampleGrid


def clamp8(value: int) -> int:
    return min(255, max(0, value))


INVERSE_LUT = tuple(255 - value for value in range(256))


def brightness_lut(delta: int) -> List[int]:
    return [clamp8(value + delta) for value in range(256)]


def contrast_lut(factor: float) -> List[int]:
    # int() truncates toward zero
    return [clamp8(int(value * factor)) for value in range(256)]


def invert(grid: SampleGrid) -> SampleGrid:
    return grid.remap(INVERSE_LUT)


def adjust_brightness(grid: SampleGrid, delta: int) -> SampleGrid:
    """Add ``delta`` to every sample, saturating at 0 and 255."""
    delta = int(delta)
    if delta == 0:
        return grid.copy()
    return grid.remap(brightness_lut(delta))


def adjust_contrast(grid: SampleGrid, factor: float) -> SampleGrid:
    """Scale every sample by ``factor``; results above 255 saturate."""
    factor = float(factor)
    if not math.isfinite(factor) or factor < 0:
        raise ValueError(f"Contrast factor must be a finite non-negative number, got {factor}")
    return grid.remap(contrast_lut(factor))
