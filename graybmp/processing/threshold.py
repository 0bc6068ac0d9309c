from __future__ import annotations

import logging
from typing import Sequence, Tuple

from ..config import SETTINGS, EngineSettings
from .histogram import occupied_bounds

log = logging.getLogger(__name__)


def _class_mean(histogram: Sequence[int], start: int, stop: int) -> int:
    count = 0
    weighted = 0
    for value in range(start, stop):
        count += histogram[value]
        weighted += value * histogram[value]
    return weighted // max(count, 1)


def _split_means(histogram: Sequence[int], low: int, high: int, threshold: int) -> Tuple[int, int]:
    return (
        _class_mean(histogram, low, threshold + 1),
        _class_mean(histogram, threshold + 1, high + 1),
    )


def gonzalez_threshold(histogram: Sequence[int], settings: EngineSettings = SETTINGS) -> int:
    """
    Iterative two-class threshold (Gonzalez & Woods).

    Starts halfway between the darkest and brightest occupied bins, then keeps
    moving the threshold to the midpoint of the two class means until it moves
    by less than ``settings.gonzalez_epsilon``.
    """
    low, high = occupied_bounds(histogram)
    if low == high:
        return low
    threshold = (low + high) // 2

    for iteration in range(1, settings.gonzalez_max_iterations + 1):
        lower_mean, upper_mean = _split_means(histogram, low, high, threshold)
        candidate = (lower_mean + upper_mean) // 2
        log.debug(
            "gonzalez iteration %d: T=%d means=(%d, %d) -> %d",
            iteration, threshold, lower_mean, upper_mean, candidate,
        )
        converged = abs(candidate - threshold) < settings.gonzalez_epsilon
        threshold = candidate
        if converged:
            return threshold

    log.warning(
        "Gonzalez threshold did not converge after %d iterations; using %d",
        settings.gonzalez_max_iterations, threshold,
    )
    return threshold
