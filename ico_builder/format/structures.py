"""Fixed-size records of the ICO container.

Layouts follow the ICO and BMP file format descriptions:
- ICONDIR header (6 bytes)
- ICONDIRENTRY directory record (16 bytes)
- BITMAPINFOHEADER (40 bytes)

All multi-byte fields are little-endian.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

FILE_HEADER_FORMAT = "<HHH"
DIRECTORY_ENTRY_FORMAT = "<BBBBHHII"
BITMAP_INFO_HEADER_FORMAT = "<IiiHHIIiiII"

FILE_HEADER_SIZE = struct.calcsize(FILE_HEADER_FORMAT)
DIRECTORY_ENTRY_SIZE = struct.calcsize(DIRECTORY_ENTRY_FORMAT)
BITMAP_INFO_HEADER_SIZE = struct.calcsize(BITMAP_INFO_HEADER_FORMAT)

ICON_RESOURCE_TYPE = 1
COLOR_PLANES = 1
BITS_PER_PIXEL = 32


@dataclass(frozen=True)
class DirectoryEntry:
    """One image record of the icon directory."""

    width: int
    data_size: int
    file_offset: int

    @property
    def size_byte(self) -> int:
        # 256 does not fit in a byte; the format stores it as 0
        return self.width if self.width < 256 else 0

    def to_bytes(self) -> bytes:
        return struct.pack(
            DIRECTORY_ENTRY_FORMAT,
            self.size_byte,
            self.size_byte,
            0,  # no color palette
            0,  # reserved
            COLOR_PLANES,
            BITS_PER_PIXEL,
            self.data_size,
            self.file_offset,
        )


def build_file_header(image_count: int) -> bytes:
    """Return the 6-byte container header for ``image_count`` images."""
    return struct.pack(FILE_HEADER_FORMAT, 0, ICON_RESOURCE_TYPE, image_count)


def build_directory_entry(raw_size: int, width: int, offset: int) -> DirectoryEntry:
    """Build the directory record of one image.

    Args:
        raw_size: Byte length of the image's RGBA8 pixel buffer
        width: Image width in pixels
        offset: Position of the image's info header from the start of the file

    Returns:
        DirectoryEntry declaring ``raw_size + 40`` bytes of data
    """
    return DirectoryEntry(
        width=width,
        data_size=raw_size + BITMAP_INFO_HEADER_SIZE,
        file_offset=offset,
    )


def build_bitmap_info_header(width: int) -> bytes:
    """Return the 40-byte BITMAPINFOHEADER for a square image.

    The height field is doubled because the payload stacks the color map
    and the transparency mask, as icon bitmaps always declare.
    """
    return struct.pack(
        BITMAP_INFO_HEADER_FORMAT,
        BITMAP_INFO_HEADER_SIZE,
        width,
        width * 2,
        COLOR_PLANES,
        BITS_PER_PIXEL,
        0,  # BI_RGB, uncompressed
        0,  # image size, may be 0 for BI_RGB
        0,  # horizontal resolution
        0,  # vertical resolution
        0,  # colors used
        0,  # important colors
    )
