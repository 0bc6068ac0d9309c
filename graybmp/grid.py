from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from PIL import Image


@dataclass(eq=True)
class SampleGrid:
    """Row-major raster of unsigned 8-bit samples.

    ``samples[row * width + col]`` holds the intensity at ``(row, col)``. A
    grid created without samples is zero-filled, which is the state every
    output buffer starts in before a transform writes to it.
    """

    width: int
    height: int
    samples: bytearray = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        expected = self.width * self.height
        if self.samples is None:
            self.samples = bytearray(expected)
            return
        # bytearray() rejects anything outside 0..255
        self.samples = bytearray(self.samples)
        if len(self.samples) != expected:
            raise ValueError(
                f"Sample buffer holds {len(self.samples)} values, "
                f"expected {expected} for {self.width}x{self.height}"
            )

    @classmethod
    def blank_like(cls, other: "SampleGrid") -> "SampleGrid":
        return cls(other.width, other.height)

    @classmethod
    def filled(cls, width: int, height: int, value: int) -> "SampleGrid":
        return cls(width, height, bytes([value]) * (width * height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "SampleGrid":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")
        return cls(width, height, bytes(value for row in rows for value in row))

    @classmethod
    def from_image(cls, img: Image.Image) -> "SampleGrid":
        if img.mode != "L":
            img = img.convert("L")
        width, height = img.size
        return cls(width, height, img.tobytes())

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def __len__(self) -> int:
        return len(self.samples)

    def index(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"({row}, {col}) is outside a {self.width}x{self.height} grid"
            )
        return row * self.width + col

    def get(self, row: int, col: int) -> int:
        return self.samples[self.index(row, col)]

    def set(self, row: int, col: int, value: int) -> None:
        self.samples[self.index(row, col)] = value

    def rows(self) -> Iterable[bytearray]:
        for row in range(self.height):
            start = row * self.width
            yield self.samples[start:start + self.width]

    def same_shape(self, other: "SampleGrid") -> bool:
        return self.width == other.width and self.height == other.height

    def copy(self) -> "SampleGrid":
        return SampleGrid(self.width, self.height, self.samples)

    def to_image(self) -> Image.Image:
        return Image.frombytes("L", self.size, bytes(self.samples))

    def remap(self, lut: Sequence[int]) -> "SampleGrid":
        """Return a new grid with every sample replaced by ``lut[sample]``."""
        if len(lut) != 256:
            raise ValueError(f"Lookup table needs 256 entries, got {len(lut)}")
        return SampleGrid.from_image(self.to_image().point(list(lut)))

    def histogram(self) -> list[int]:
        return self.to_image().histogram()
