from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

Weights = Tuple[Tuple[int, int, int], Tuple[int, int, int], Tuple[int, int, int]]


class PostProcess(Enum):
    DIRECT = "direct"
    SCALED_MAGNITUDE = "scaled-magnitude"
    CLAMPED = "clamped"


@dataclass(frozen=True)
class Kernel:
    """A 3x3 correlation kernel and the rule that turns its sum into a sample.

    ``weights`` are integers; the effective weight of each tap is
    ``weights[m][n] / divisor``.
    """

    name: str
    weights: Weights
    policy: PostProcess = PostProcess.DIRECT
    divisor: int = 1
    scale: int = 1

    def finish(self, weighted_sum: int) -> int:
        value = int(weighted_sum / self.divisor)
        if self.policy is PostProcess.SCALED_MAGNITUDE:
            value = abs(value) // self.scale
        return min(255, max(0, value))


AVERAGE = Kernel(
    "average",
    ((1, 1, 1),
     (1, 1, 1),
     (1, 1, 1)),
    divisor=9,
)

GAUSSIAN = Kernel(
    "gaussian",
    ((1, 2, 1),
     (2, 4, 2),
     (1, 2, 1)),
    divisor=16,
)

LAPLACIAN = Kernel(
    "laplacian",
    ((-1, -1, -1),
     (-1, 8, -1),
     (-1, -1, -1)),
    policy=PostProcess.SCALED_MAGNITUDE,
    scale=8,
)

LAPLACIAN_HPF = Kernel(
    "laplacian-hpf",
    ((-1, -1, -1),
     (-1, 9, -1),
     (-1, -1, -1)),
    policy=PostProcess.CLAMPED,
)

PREWITT_X = Kernel(
    "prewitt-x",
    ((-1, 0, 1),
     (-1, 0, 1),
     (-1, 0, 1)),
    policy=PostProcess.SCALED_MAGNITUDE,
    scale=3,
)

PREWITT_Y = Kernel(
    "prewitt-y",
    ((-1, -1, -1),
     (0, 0, 0),
     (1, 1, 1)),
    policy=PostProcess.SCALED_MAGNITUDE,
    scale=3,
)

SOBEL_X = Kernel(
    "sobel-x",
    ((-1, 0, 1),
     (-2, 0, 2),
     (-1, 0, 1)),
    policy=PostProcess.SCALED_MAGNITUDE,
    scale=4,
)

SOBEL_Y = Kernel(
    "sobel-y",
    ((-1, -2, -1),
     (0, 0, 0),
     (1, 2, 1)),
    policy=PostProcess.SCALED_MAGNITUDE,
    scale=4,
)

KERNELS: Mapping[str, Kernel] = MappingProxyType({
    kernel.name: kernel
    for kernel in (
        AVERAGE,
        GAUSSIAN,
        LAPLACIAN,
        LAPLACIAN_HPF,
        PREWITT_X,
        PREWITT_Y,
        SOBEL_X,
        SOBEL_Y,
    )
})
