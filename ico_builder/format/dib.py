"""Device-independent bitmap payload: color map followed by transparency mask.

Both maps are stored bottom-up, so source row ``y`` lands on line
``height - 1 - y``.
"""

from __future__ import annotations

from loguru import logger

from ..errors import ErrorKind, make_error
from ..raster import BYTES_PER_PIXEL, RasterImage


def row_stride(width: int) -> int:
    """Byte width of one mask scanline, padded to a 32-bit boundary."""
    if width % 32 == 0:
        return width // 8
    return 4 * (width // 32 + 1)


def mask_size(width: int) -> int:
    return row_stride(width) * width


def _allocate(size: int) -> bytearray:
    try:
        return bytearray(size)
    except MemoryError as e:
        raise make_error(ErrorKind.BUFFER_ALLOCATION_FAILURE, f"({size} bytes)") from e


def _write_color_map(image: RasterImage, out: bytearray) -> None:
    width, height = image.width, image.height
    line_bytes = width * BYTES_PER_PIXEL
    for y in range(height):
        src = image.row(y)
        start = (height - 1 - y) * line_bytes
        end = start + line_bytes
        # RGBA -> BGRA
        out[start:end:4] = src[2::4]
        out[start + 1:end:4] = src[1::4]
        out[start + 2:end:4] = src[0::4]
        out[start + 3:end:4] = src[3::4]


def _write_transparency_mask(image: RasterImage, out: bytearray, start: int) -> None:
    width, height = image.width, image.height
    stride = row_stride(width)
    for y in range(height):
        base = start + (height - 1 - y) * stride
        for x, alpha in enumerate(image.row(y)[3::4]):
            # Any coverage counts as opaque
            if alpha == 0:
                out[base + x // 8] |= 0x80 >> (x % 8)


def encode_dib(image: RasterImage) -> bytes:
    """Encode an RGBA8 raster as a 32-bit icon bitmap payload.

    Args:
        image: Square source raster, top-down

    Returns:
        ``width*width*4`` bytes of BGRA color map followed by the 1-bpp mask

    Raises:
        BufferAllocationFailure: If the payload buffer cannot be allocated
    """
    raw_size = image.byte_length
    out = _allocate(raw_size + mask_size(image.width))
    _write_color_map(image, out)
    _write_transparency_mask(image, out, raw_size)
    logger.debug(f"Encoded {image.width}x{image.height} DIB ({len(out)} bytes)")
    return bytes(out)
