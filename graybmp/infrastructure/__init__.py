"""Container and input-source helpers."""

from .bitmap import Bitmap, UnsupportedBitmapError, encode_bitmap, load_bitmap, save_bitmap
from .source import LOADER, SourceLoader, is_remote

__all__ = [
    "Bitmap",
    "UnsupportedBitmapError",
    "encode_bitmap",
    "load_bitmap",
    "save_bitmap",
    "LOADER",
    "SourceLoader",
    "is_remote",
]
