"""Conversion pipeline: resolution selection, assembly and the top-level entry."""

from .assembler import IconAssembler, assemble_icon
from .converter import to_ico
from .resolution import (
    CANONICAL_SIZE,
    ICON_SIZES,
    canonicalize,
    select_resolutions,
    validate_source,
)

__all__ = [
    # Resolution selection
    "CANONICAL_SIZE",
    "ICON_SIZES",
    "canonicalize",
    "select_resolutions",
    "validate_source",
    # Assembly
    "IconAssembler",
    "assemble_icon",
    # Conversion
    "to_ico",
]
