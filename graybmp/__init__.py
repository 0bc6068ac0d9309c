"""Grayscale 8-bit bitmap transformation engine."""

from .app import APP_VERSION, app, create_app
from .grid import SampleGrid
from . import infrastructure, processing

__version__ = APP_VERSION

__all__ = [
    "APP_VERSION",
    "__version__",
    "SampleGrid",
    "app",
    "create_app",
    "infrastructure",
    "processing",
]
