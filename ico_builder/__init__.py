"""ico-builder: pack square PNG images into multi-resolution Windows icons."""

from .errors import (
    BufferAllocationFailure,
    ErrorKind,
    IconError,
    InvalidInput,
    ResizeFailure,
    make_error,
)
from .pipeline import assemble_icon, to_ico
from .raster import RasterImage
from .source import PillowRasterSource, RasterSource, ResampleKernel

__version__ = "0.1.0"

__all__ = [
    # Errors
    "BufferAllocationFailure",
    "ErrorKind",
    "IconError",
    "InvalidInput",
    "ResizeFailure",
    "make_error",
    # Data
    "RasterImage",
    # Raster source
    "PillowRasterSource",
    "RasterSource",
    "ResampleKernel",
    # Conversion
    "assemble_icon",
    "to_ico",
]
