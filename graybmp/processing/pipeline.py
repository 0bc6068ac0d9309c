from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from ..config import SETTINGS, EngineSettings
from ..grid import SampleGrid
from .convolution import correlate3x3, prewitt_magnitude, sobel_magnitude
from .histogram import Histogram, binarize, build_histogram, equalize, stretch
from .kernels import (
    AVERAGE,
    GAUSSIAN,
    LAPLACIAN,
    LAPLACIAN_HPF,
    PREWITT_X,
    PREWITT_Y,
    SOBEL_X,
    SOBEL_Y,
)
from .point import adjust_brightness, adjust_contrast, invert
from .threshold import gonzalez_threshold

log = logging.getLogger(__name__)


def _whole_number(value: Any) -> int:
    number = float(value)
    if not number.is_integer():
        raise ValueError
    return int(number)


def _finite_number(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError
    return number


PARAM_TYPES: Dict[str, Tuple[Callable[[Any], Any], str]] = {
    "delta": (_whole_number, "a whole number"),
    "factor": (_finite_number, "a finite number"),
    "threshold": (_whole_number, "a whole number"),
}


@dataclass(frozen=True)
class OperationResult:
    operation: "Operation"
    grid: Optional[SampleGrid] = None
    histogram: Optional[Histogram] = None
    threshold: Optional[int] = None


@dataclass(frozen=True)
class Operation:
    code: int
    tag: str
    label: str
    params: Tuple[str, ...]
    handler: Callable[..., Dict[str, Any]]

    @property
    def produces_image(self) -> bool:
        return self.tag != "histogram"


def _grid_op(func: Callable[..., SampleGrid]) -> Callable[..., Dict[str, Any]]:
    def handler(grid: SampleGrid, settings: EngineSettings, **params: Any) -> Dict[str, Any]:
        return {"grid": func(grid, **params)}

    return handler


def _kernel_op(kernel) -> Callable[..., Dict[str, Any]]:
    return _grid_op(lambda grid: correlate3x3(grid, kernel))


def _histogram(grid: SampleGrid, settings: EngineSettings) -> Dict[str, Any]:
    return {"histogram": build_histogram(grid)}


def _gonzalez(grid: SampleGrid, settings: EngineSettings) -> Dict[str, Any]:
    threshold = gonzalez_threshold(build_histogram(grid), settings=settings)
    log.info("Gonzalez threshold estimated at %d", threshold)
    return {"grid": binarize(grid, threshold), "threshold": threshold}


_TABLE = (
    ("inverse", "Inverse", (), _grid_op(invert)),
    ("brightness", "Brightness", ("delta",), _grid_op(adjust_brightness)),
    ("contrast", "Contrast", ("factor",), _grid_op(adjust_contrast)),
    ("histogram", "Histogram dump", (), _histogram),
    ("gonzalez-binarization", "Binarization (Gonzalez threshold)", (), _gonzalez),
    ("binarization", "Binarization (manual threshold)", ("threshold",), _grid_op(binarize)),
    ("stretching", "Histogram stretching", (), _grid_op(stretch)),
    ("equalization", "Histogram equalization", (), _grid_op(equalize)),
    ("average", "Average filter", (), _kernel_op(AVERAGE)),
    ("gaussian", "Gaussian filter", (), _kernel_op(GAUSSIAN)),
    ("laplacian", "Laplacian edges", (), _kernel_op(LAPLACIAN)),
    ("prewitt-x", "Prewitt X edges", (), _kernel_op(PREWITT_X)),
    ("prewitt-y", "Prewitt Y edges", (), _kernel_op(PREWITT_Y)),
    ("prewitt", "Prewitt edge magnitude", (), _grid_op(prewitt_magnitude)),
    ("sobel-x", "Sobel X edges", (), _kernel_op(SOBEL_X)),
    ("sobel-y", "Sobel Y edges", (), _kernel_op(SOBEL_Y)),
    ("sobel", "Sobel edge magnitude", (), _grid_op(sobel_magnitude)),
    ("laplacian-hpf", "Laplacian high-pass", (), _kernel_op(LAPLACIAN_HPF)),
)

OPERATIONS: Tuple[Operation, ...] = tuple(
    Operation(code, tag, label, params, handler)
    for code, (tag, label, params, handler) in enumerate(_TABLE, start=1)
)

_BY_TAG: Dict[str, Operation] = {op.tag: op for op in OPERATIONS}
_BY_CODE: Dict[int, Operation] = {op.code: op for op in OPERATIONS}


def get_operation(selector: Union[str, int]) -> Operation:
    """Look up an operation by tag (``"sobel"``) or menu code (``17``)."""
    if isinstance(selector, int):
        operation = _BY_CODE.get(selector)
    else:
        key = selector.strip().lower().replace("_", "-")
        operation = _BY_CODE.get(int(key)) if key.isdigit() else _BY_TAG.get(key)
    if operation is None:
        raise ValueError(f"Unknown operation: {selector!r}")
    return operation


def coerce_params(operation: Operation, raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Pick and convert the parameters ``operation`` needs from ``raw``.

    Unrelated keys are ignored. A missing or unparsable parameter is a
    ``ValueError``.
    """
    params: Dict[str, Any] = {}
    for name in operation.params:
        value = raw.get(name)
        if value is None or value == "":
            raise ValueError(f"Operation '{operation.tag}' requires parameter '{name}'")
        convert, expected = PARAM_TYPES[name]
        try:
            params[name] = convert(value)
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"Parameter '{name}' expects {expected}, got {value!r}") from None
    return params


def run_operation(
    selector: Union[str, int, Operation],
    grid: SampleGrid,
    settings: EngineSettings = SETTINGS,
    **raw_params: Any,
) -> OperationResult:
    operation = selector if isinstance(selector, Operation) else get_operation(selector)
    params = coerce_params(operation, raw_params)
    log.debug(
        "running %s on %dx%d grid with %s",
        operation.tag, grid.width, grid.height, params or "no parameters",
    )
    outputs = operation.handler(grid, settings, **params)
    return OperationResult(operation=operation, **outputs)
