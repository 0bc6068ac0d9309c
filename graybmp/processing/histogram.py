from __future__ import annotations

from typing import Callable, Iterator, List, Sequence, Tuple

from ..grid import SampleGrid
from .point import clamp8

Histogram = List[int]


def build_histogram(grid: SampleGrid) -> Histogram:
    return grid.histogram()


def occupied_bounds(histogram: Sequence[int]) -> Tuple[int, int]:
    """Return the lowest and highest intensities with a nonzero count."""
    occupied = [value for value, count in enumerate(histogram) if count]
    if not occupied:
        raise ValueError("Histogram is empty")
    return occupied[0], occupied[-1]


def validate_threshold(threshold: int) -> int:
    threshold = int(threshold)
    if not 0 <= threshold <= 255:
        raise ValueError(f"Threshold must be within 0..255, got {threshold}")
    return threshold


def binarize(grid: SampleGrid, threshold: int) -> SampleGrid:
    threshold = validate_threshold(threshold)
    lut = [0 if value < threshold else 255 for value in range(256)]
    return grid.remap(lut)


def stretch(grid: SampleGrid) -> SampleGrid:
    """Linearly rescale the occupied intensity range onto 0..255.

    A uniform grid has no range to rescale and is returned unchanged.
    """
    low, high = occupied_bounds(build_histogram(grid))
    if high == low:
        return grid.copy()
    span = high - low
    lut = [clamp8(int((value - low) / span * 255)) for value in range(256)]
    return grid.remap(lut)


def equalization_lut(histogram: Sequence[int]) -> List[int]:
    total = sum(histogram)
    if total == 0:
        raise ValueError("Histogram is empty")
    lut = []
    cumulative = 0
    for count in histogram:
        cumulative += count
        lut.append(clamp8(255 * cumulative // total))
    return lut


def equalize(grid: SampleGrid) -> SampleGrid:
    return grid.remap(equalization_lut(build_histogram(grid)))


def format_histogram(histogram: Sequence[int]) -> Iterator[str]:
    for value, count in enumerate(histogram):
        yield f"{value} {count}"


def dump_histogram(histogram: Sequence[int], sink: Callable[[str], object] = print) -> None:
    for line in format_histogram(histogram):
        sink(line)
