"""Raster source adapter: decoding and resampling through Pillow."""

from __future__ import annotations

import io
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Protocol

from loguru import logger
from PIL import Image, UnidentifiedImageError

from .errors import ErrorKind, make_error
from .raster import RasterImage


class ResampleKernel(Enum):
    """Interpolation kernels understood by the raster backend."""

    CUBIC = "cubic"

    @property
    def pillow_filter(self) -> Image.Resampling:
        return _PILLOW_FILTERS[self]


_PILLOW_FILTERS = {
    ResampleKernel.CUBIC: Image.Resampling.BICUBIC,
}


class RasterSource(Protocol):
    """What the conversion pipeline needs from an image backend."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def format(self) -> str | None: ...

    def resize(
        self, width: int, height: int, kernel: ResampleKernel = ResampleKernel.CUBIC
    ) -> "RasterSource": ...

    def to_raster(self) -> RasterImage: ...


class PillowRasterSource:
    """RasterSource backed by a ``PIL.Image.Image``.

    The image is held in RGBA mode so every resample runs on full color
    samples; Pillow falls back to nearest-neighbour for palette and
    bilevel images. Resized copies keep the format tag of the image they
    were derived from, so a resampled PNG still reports ``"PNG"``.
    """

    def __init__(self, image: Image.Image, format_tag: str | None = None) -> None:
        if format_tag is None:
            format_tag = image.format
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self._image = image
        self._format = format_tag

    @classmethod
    def open(cls, source: str | Path | BinaryIO) -> "PillowRasterSource":
        """Decode an image file.

        Raises:
            FileNotFoundError: If ``source`` is a path that does not exist
            InvalidInput: If Pillow cannot identify or fully decode the data
        """
        try:
            image = Image.open(source)
        except UnidentifiedImageError as e:
            logger.debug(f"Could not identify image {source!r}: {e}")
            raise make_error(ErrorKind.INVALID_INPUT) from e
        try:
            image.load()
        except (OSError, SyntaxError) as e:
            image.close()
            logger.debug(f"Could not decode image {source!r}: {e}")
            raise make_error(ErrorKind.INVALID_INPUT) from e
        logger.debug(f"Opened {image.format} {image.mode} image {image.width}x{image.height}")
        return cls(image)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PillowRasterSource":
        return cls.open(io.BytesIO(data))

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def format(self) -> str | None:
        return self._format

    def resize(
        self, width: int, height: int, kernel: ResampleKernel = ResampleKernel.CUBIC
    ) -> "PillowRasterSource":
        """Return a resampled copy; the original is left untouched.

        Raises:
            ResizeFailure: If Pillow rejects the request
        """
        try:
            resized = self._image.resize((width, height), kernel.pillow_filter)
        except MemoryError as e:
            raise make_error(ErrorKind.BUFFER_ALLOCATION_FAILURE) from e
        except (OSError, ValueError) as e:
            raise make_error(ErrorKind.RESIZE_FAILURE, f"({width}x{height}): {e}") from e
        return PillowRasterSource(resized, format_tag=self._format)

    def to_raster(self) -> RasterImage:
        """Decode to a top-down RGBA8 raster."""
        image = self._image
        try:
            data = image.tobytes()
        except MemoryError as e:
            raise make_error(ErrorKind.BUFFER_ALLOCATION_FAILURE) from e
        return RasterImage(width=image.width, height=image.height, data=data)
