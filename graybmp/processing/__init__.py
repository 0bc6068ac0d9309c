"""Sample-grid transforms: point maps, histogram operations and 3x3 filters."""

from .convolution import combine_max, correlate3x3, prewitt_magnitude, sobel_magnitude
from .histogram import (
    binarize,
    build_histogram,
    dump_histogram,
    equalize,
    format_histogram,
    occupied_bounds,
    stretch,
)
from .kernels import KERNELS, Kernel, PostProcess
from .pipeline import OPERATIONS, Operation, OperationResult, get_operation, run_operation
from .point import adjust_brightness, adjust_contrast, invert
from .threshold import gonzalez_threshold

__all__ = [
    "combine_max",
    "correlate3x3",
    "prewitt_magnitude",
    "sobel_magnitude",
    "binarize",
    "build_histogram",
    "dump_histogram",
    "equalize",
    "format_histogram",
    "occupied_bounds",
    "stretch",
    "KERNELS",
    "Kernel",
    "PostProcess",
    "OPERATIONS",
    "Operation",
    "OperationResult",
    "get_operation",
    "run_operation",
    "adjust_brightness",
    "adjust_contrast",
    "invert",
    "gonzalez_threshold",
]
