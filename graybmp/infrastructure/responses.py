from __future__ import annotations

import io
from typing import Mapping, Optional

from flask import send_file

from ..grid import SampleGrid
from .bitmap import Bitmap, encode_bitmap


def send_bitmap(
    bitmap: Bitmap,
    grid: SampleGrid,
    download_name: str = "output.bmp",
    headers: Optional[Mapping[str, str]] = None,
):
    response = send_file(
        io.BytesIO(encode_bitmap(bitmap, grid)),
        mimetype="image/bmp",
        download_name=download_name,
    )
    if headers:
        response.headers.update(headers)
    return response
