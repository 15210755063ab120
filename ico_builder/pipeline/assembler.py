"""Assembly of the icon container from an ordered list of rasters."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ..format import (
    BITMAP_INFO_HEADER_SIZE,
    DIRECTORY_ENTRY_SIZE,
    FILE_HEADER_SIZE,
    DirectoryEntry,
    build_bitmap_info_header,
    build_directory_entry,
    build_file_header,
    encode_dib,
)
from ..raster import RasterImage


class IconAssembler:
    """Accumulates images and tracks where each one lands in the file.

    The image count is fixed up front because the directory, which precedes
    all payloads, determines the offset of the first image.

    Attributes:
        image_count: Number of images the container declares
        include_mask_in_size: Declare the full payload size (mask included)
            in directory entries instead of the color map size only
    """

    def __init__(self, image_count: int, include_mask_in_size: bool = False) -> None:
        if image_count < 1:
            raise ValueError(f"An icon needs at least one image, got {image_count}")
        self.image_count = image_count
        self.include_mask_in_size = include_mask_in_size
        self._entries: list[DirectoryEntry] = []
        self._bodies: list[bytes] = []
        self._total_length = FILE_HEADER_SIZE + DIRECTORY_ENTRY_SIZE * image_count
        self._running_offset = self._total_length

    @property
    def entries(self) -> list[DirectoryEntry]:
        return list(self._entries)

    @property
    def total_length(self) -> int:
        return self._total_length

    @property
    def running_offset(self) -> int:
        """File offset at which the next image will be written."""
        return self._running_offset

    def add(self, image: RasterImage) -> DirectoryEntry:
        """Encode ``image`` and reserve its place in the container.

        Raises:
            ValueError: If more images are added than were declared
        """
        if len(self._entries) >= self.image_count:
            raise ValueError(f"Icon already holds {self.image_count} images")

        payload = encode_dib(image)
        raw_size = image.byte_length
        if self.include_mask_in_size:
            raw_size = len(payload)
        entry = build_directory_entry(raw_size, image.width, self._running_offset)

        self._entries.append(entry)
        self._bodies.append(build_bitmap_info_header(image.width))
        self._bodies.append(payload)

        self._total_length += DIRECTORY_ENTRY_SIZE + BITMAP_INFO_HEADER_SIZE + len(payload)
        self._running_offset += BITMAP_INFO_HEADER_SIZE + len(payload)
        logger.debug(
            f"Added {image.width}px image at offset {entry.file_offset} "
            f"(declared {entry.data_size} bytes, payload {len(payload)} bytes)"
        )
        return entry

    def to_bytes(self) -> bytes:
        """Concatenate header, directory and image data.

        Raises:
            ValueError: If fewer images were added than declared
        """
        if len(self._entries) != self.image_count:
            raise ValueError(
                f"Icon declares {self.image_count} images but {len(self._entries)} were added"
            )
        parts = [build_file_header(self.image_count)]
        parts.extend(entry.to_bytes() for entry in self._entries)
        parts.extend(self._bodies)
        data = b"".join(parts)
        if len(data) != self._total_length:
            raise RuntimeError(
                f"Assembled {len(data)} bytes, expected {self._total_length}"
            )
        return data


def assemble_icon(
    images: Iterable[RasterImage], include_mask_in_size: bool = False
) -> bytes:
    """Build an icon container from images in directory order."""
    images = list(images)
    assembler = IconAssembler(len(images), include_mask_in_size=include_mask_in_size)
    for image in images:
        assembler.add(image)
    return assembler.to_bytes()
