from __future__ import annotations

from PIL import ImageChops

from ..grid import SampleGrid
from .kernels import PREWITT_X, PREWITT_Y, SOBEL_X, SOBEL_Y, Kernel


def correlate3x3(grid: SampleGrid, kernel: Kernel) -> SampleGrid:
    """
    Apply ``kernel`` to every interior pixel of ``grid``.

    The kernel is used as authored (correlation, no flip). The outermost ring
    of the output is never written and stays 0, so grids with fewer than three
    rows or columns come back all zero.
    """
    width, height = grid.size
    out = SampleGrid.blank_like(grid)
    if width < 3 or height < 3:
        return out

    src = grid.samples
    dst = out.samples
    (a0, a1, a2), (b0, b1, b2), (c0, c1, c2) = kernel.weights

    for row in range(1, height - 1):
        above = (row - 1) * width
        here = row * width
        below = (row + 1) * width
        for col in range(1, width - 1):
            left = col - 1
            right = col + 1
            weighted = (
                src[above + left] * a0 + src[above + col] * a1 + src[above + right] * a2
                + src[here + left] * b0 + src[here + col] * b1 + src[here + right] * b2
                + src[below + left] * c0 + src[below + col] * c1 + src[below + right] * c2
            )
            dst[here + col] = kernel.finish(weighted)
    return out


def combine_max(grid_x: SampleGrid, grid_y: SampleGrid) -> SampleGrid:
    """Pointwise maximum of two directional edge responses."""
    if not grid_x.same_shape(grid_y):
        raise ValueError(
            f"Cannot combine a {grid_x.width}x{grid_x.height} grid "
            f"with a {grid_y.width}x{grid_y.height} grid"
        )
    lighter = ImageChops.lighter(grid_x.to_image(), grid_y.to_image())
    return SampleGrid.from_image(lighter)


def prewitt_magnitude(grid: SampleGrid) -> SampleGrid:
    return combine_max(correlate3x3(grid, PREWITT_X), correlate3x3(grid, PREWITT_Y))


def sobel_magnitude(grid: SampleGrid) -> SampleGrid:
    return combine_max(correlate3x3(grid, SOBEL_X), correlate3x3(grid, SOBEL_Y))
