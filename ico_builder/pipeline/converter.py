"""Top-level conversion from a source image to ICO bytes."""

from __future__ import annotations

from loguru import logger

from ..source import RasterSource
from .assembler import assemble_icon
from .resolution import select_resolutions


def to_ico(
    source: RasterSource,
    max_workers: int = 4,
    include_mask_in_size: bool = False,
) -> bytes:
    """Convert a square PNG into a 48/32/16/256 pixel icon container.

    Args:
        source: Decoded source image
        max_workers: Thread count for resampling
        include_mask_in_size: Count mask bytes in each directory entry's size

    Returns:
        Complete ICO file contents

    Raises:
        InvalidInput: If the source is not a square PNG
        ResizeFailure: If any resample fails
        BufferAllocationFailure: If a pixel buffer cannot be allocated
    """
    images = select_resolutions(source, max_workers=max_workers)
    rasters = [image.to_raster() for image in images]
    data = assemble_icon(rasters, include_mask_in_size=include_mask_in_size)
    logger.info(
        f"Built icon with sizes {[r.width for r in rasters]} ({len(data)} bytes)"
    )
    return data

