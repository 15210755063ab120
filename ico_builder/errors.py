"""Error types raised while building icon containers."""

from __future__ import annotations

from enum import Enum


class IconError(Exception):
    """Base class for all icon conversion failures."""


class InvalidInput(IconError):
    """The source image is not a supported, square raster."""


class ResizeFailure(IconError):
    """The raster backend could not produce a resampled image."""


class BufferAllocationFailure(IconError):
    """An output or pixel buffer could not be allocated."""


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    RESIZE_FAILURE = "resize_failure"
    BUFFER_ALLOCATION_FAILURE = "buffer_allocation_failure"


_ERROR_TYPES: dict[ErrorKind, type[IconError]] = {
    ErrorKind.INVALID_INPUT: InvalidInput,
    ErrorKind.RESIZE_FAILURE: ResizeFailure,
    ErrorKind.BUFFER_ALLOCATION_FAILURE: BufferAllocationFailure,
}

_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: "Source must be a square PNG image.",
    ErrorKind.RESIZE_FAILURE: "Failed to resample source image.",
    ErrorKind.BUFFER_ALLOCATION_FAILURE: "Failed to allocate pixel buffer.",
}


def make_error(kind: ErrorKind, detail: str | None = None) -> IconError:
    """Build a new exception instance for the given error kind.

    Args:
        kind: Which failure occurred
        detail: Optional text appended to the fixed message

    Returns:
        A fresh exception; instances are never shared between calls
    """
    message = _DEFAULT_MESSAGES[kind]
    if detail:
        message = f"{message} {detail}"
    return _ERROR_TYPES[kind](message)
