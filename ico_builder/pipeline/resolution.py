"""Selection of the embedded resolutions and validation of the source."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from ..errors import ErrorKind, make_error
from ..source import RasterSource, ResampleKernel

SUPPORTED_FORMAT = "PNG"
CANONICAL_SIZE = 256
ICON_SIZES = (48, 32, 16)
RESAMPLE_KERNEL = ResampleKernel.CUBIC


def validate_source(source: RasterSource) -> None:
    """Reject sources that are not square PNG images.

    Raises:
        InvalidInput: If the format is unsupported or width != height
    """
    fmt = (source.format or "").upper()
    if fmt != SUPPORTED_FORMAT or source.width != source.height:
        logger.debug(f"Rejected {fmt or 'unknown'} source {source.width}x{source.height}")
        raise make_error(ErrorKind.INVALID_INPUT)


def canonicalize(source: RasterSource) -> RasterSource:
    """Return the 256x256 image every other size is derived from."""
    if source.width == CANONICAL_SIZE:
        return source
    logger.debug(f"Resampling {source.width}px source to {CANONICAL_SIZE}px")
    return source.resize(CANONICAL_SIZE, CANONICAL_SIZE, RESAMPLE_KERNEL)


def select_resolutions(source: RasterSource, max_workers: int = 4) -> list[RasterSource]:
    """Validate ``source`` and produce the ordered list of images to embed.

    The smaller sizes are resampled concurrently from the canonical image.
    Results are collected in ``ICON_SIZES`` order regardless of which task
    finishes first, with the canonical image appended last.

    Args:
        source: Decoded source image
        max_workers: Thread count for the resample tasks

    Returns:
        Images for 48, 32, 16 and 256 pixels, in that order

    Raises:
        InvalidInput: If the source is not a square PNG
        ResizeFailure: Propagated from the backend; aborts the whole list
    """
    validate_source(source)
    canonical = canonicalize(source)

    def resample(size: int) -> RasterSource:
        return canonical.resize(size, size, RESAMPLE_KERNEL)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="resample") as pool:
        # map() yields in submission order and re-raises the first failure
        resized = list(pool.map(resample, ICON_SIZES))

    return resized + [canonical]
