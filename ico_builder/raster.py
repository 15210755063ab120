"""Immutable RGBA8 raster passed from the image backend to the encoders."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .errors import ErrorKind, make_error

BYTES_PER_PIXEL = 4
MAX_ICON_SIZE = 256


@dataclass(frozen=True)
class RasterImage:
    """A square RGBA8 image stored top-down, row-major.

    Attributes:
        width: Width in pixels (1..256)
        height: Height in pixels, always equal to width
        data: Raw pixel bytes, ``width * height * 4`` long
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width != self.height or not 0 < self.width <= MAX_ICON_SIZE:
            logger.debug(f"Rejected raster of {self.width}x{self.height}")
            raise make_error(ErrorKind.INVALID_INPUT)
        # Freeze mutable buffers so the raster cannot change underneath an encoder
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != self.byte_length:
            logger.debug(
                f"Raster buffer is {len(self.data)} bytes, expected {self.byte_length}"
            )
            raise make_error(ErrorKind.INVALID_INPUT)

    @classmethod
    def square(cls, size: int, data: bytes) -> "RasterImage":
        return cls(width=size, height=size, data=data)

    @property
    def byte_length(self) -> int:
        return self.width * self.height * BYTES_PER_PIXEL

    def row(self, y: int) -> bytes:
        """Return scanline ``y`` (top-down) as ``width * 4`` bytes."""
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of range for height {self.height}")
        stride = self.width * BYTES_PER_PIXEL
        return self.data[y * stride:(y + 1) * stride]

    def pixel(self, row: int, column: int) -> tuple[int, int, int, int]:
        """Return the ``(r, g, b, a)`` sample at the given position."""
        if not 0 <= row < self.height or not 0 <= column < self.width:
            raise IndexError(
                f"Pixel ({row}, {column}) out of range for {self.width}x{self.height}"
            )
        pos = (row * self.width + column) * BYTES_PER_PIXEL
        r, g, b, a = self.data[pos:pos + BYTES_PER_PIXEL]
        return r, g, b, a
