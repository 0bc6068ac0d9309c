from __future__ import annotations

import io
import os
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, List, Optional, Union

from PIL import Image, UnidentifiedImageError

from ..grid import SampleGrid

BitmapSource = Union[str, "os.PathLike[str]", bytes, BinaryIO]

SUPPORTED_MODES = ("L", "P")


class UnsupportedBitmapError(ValueError):
    pass


@dataclass
class Bitmap:
    """Decoded 8-bit bitmap: the sample grid plus what is needed to re-encode it.

    ``palette`` is the flat RGB palette of a ``"P"`` image and ``None`` for
    ``"L"`` images, whose palette is the implicit grayscale ramp.
    """

    grid: SampleGrid
    mode: str = "L"
    palette: Optional[List[int]] = None
    info: Dict[str, Any] = field(default_factory=dict)


def _open(source: BitmapSource) -> Image.Image:
    if isinstance(source, (str, os.PathLike)):
        # missing files surface as OSError, not as a decode failure
        with open(source, "rb") as handle:
            source = handle.read()
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        img = Image.open(source)
        img.load()
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as exc:
        raise UnsupportedBitmapError(f"Not a readable bitmap: {exc}") from exc
    return img


def load_bitmap(source: BitmapSource) -> Bitmap:
    img = _open(source)
    if img.format != "BMP":
        raise UnsupportedBitmapError(f"Expected a BMP container, got {img.format}")
    if img.mode not in SUPPORTED_MODES:
        raise UnsupportedBitmapError(
            f"Only 8-bit grayscale or palettized bitmaps are supported, got mode {img.mode}"
        )
    width, height = img.size
    info = {"dpi": img.info["dpi"]} if "dpi" in img.info else {}
    return Bitmap(
        grid=SampleGrid(width, height, img.tobytes()),
        mode=img.mode,
        palette=img.getpalette() if img.mode == "P" else None,
        info=info,
    )


def to_image(bitmap: Bitmap, grid: SampleGrid) -> Image.Image:
    if not grid.same_shape(bitmap.grid):
        raise ValueError(
            f"Output grid is {grid.width}x{grid.height}, "
            f"source bitmap is {bitmap.grid.width}x{bitmap.grid.height}"
        )
    img = Image.frombytes(bitmap.mode, grid.size, bytes(grid.samples))
    if bitmap.palette is not None:
        img.putpalette(bitmap.palette)
    return img


def encode_bitmap(bitmap: Bitmap, grid: SampleGrid) -> bytes:
    buffer = io.BytesIO()
    to_image(bitmap, grid).save(buffer, "BMP", **bitmap.info)
    return buffer.getvalue()


def save_bitmap(bitmap: Bitmap, grid: SampleGrid, target: Union[str, "os.PathLike[str]"]) -> None:
    data = encode_bitmap(bitmap, grid)
    with open(target, "wb") as handle:
        handle.write(data)
