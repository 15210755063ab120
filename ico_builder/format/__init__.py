"""Binary encoders for the ICO container.

This package provides:
- structures: file header, directory entry and bitmap info header records
- dib: color map and transparency mask payload
"""

from .dib import encode_dib, mask_size, row_stride
from .structures import (
    BITMAP_INFO_HEADER_SIZE,
    DIRECTORY_ENTRY_SIZE,
    FILE_HEADER_SIZE,
    DirectoryEntry,
    build_bitmap_info_header,
    build_directory_entry,
    build_file_header,
)

__all__ = [
    # Records
    "BITMAP_INFO_HEADER_SIZE",
    "DIRECTORY_ENTRY_SIZE",
    "FILE_HEADER_SIZE",
    "DirectoryEntry",
    "build_bitmap_info_header",
    "build_directory_entry",
    "build_file_header",
    # Payload
    "encode_dib",
    "mask_size",
    "row_stride",
]
