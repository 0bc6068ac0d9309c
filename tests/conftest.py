import io

import pytest
from PIL import Image

from graybmp.grid import SampleGrid


def encode_gray_bmp(grid: SampleGrid) -> bytes:
    buffer = io.BytesIO()
    grid.to_image().save(buffer, "BMP")
    return buffer.getvalue()


@pytest.fixture
def ramp_grid() -> SampleGrid:
    # 16x16, every intensity exactly once
    return SampleGrid(16, 16, bytes(range(256)))


@pytest.fixture
def gray_bmp(ramp_grid) -> bytes:
    return encode_gray_bmp(ramp_grid)


@pytest.fixture
def bmp_file(tmp_path, gray_bmp):
    path = tmp_path / "input.bmp"
    path.write_bytes(gray_bmp)
    return path


@pytest.fixture
def rgb_bmp() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (3, 3), color=(10, 20, 30)).save(buffer, "BMP")
    return buffer.getvalue()


@pytest.fixture
def encode_bmp():
    return encode_gray_bmp
