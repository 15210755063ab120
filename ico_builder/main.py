"""CLI entry point for ico-builder.

Converts a square PNG into a Windows icon holding 48, 32, 16 and 256 pixel
images.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from .errors import IconError
from .pipeline import to_ico
from .settings import load_conversion_settings
from .source import PillowRasterSource


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ico-builder",
        description="Pack a square PNG into a multi-resolution .ico file.",
    )
    parser.add_argument("source", type=Path, help="square PNG image")
    parser.add_argument("dest", type=Path, help="output .ico path")
    parser.add_argument("--config", type=Path, default=None, help="settings YAML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    parser.add_argument(
        "--true-size",
        action="store_true",
        help="count transparency mask bytes in directory entry sizes",
    )
    return parser


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return a process exit status."""
    args = _build_parser().parse_args(argv)
    settings = load_conversion_settings(args.config)
    _configure_logging("DEBUG" if args.verbose else settings["log_level"])

    if not args.source.exists():
        logger.error(f"Source image not found: {args.source}")
        return 1

    try:
        source = PillowRasterSource.open(args.source)
        data = to_ico(
            source,
            max_workers=settings["max_workers"],
            include_mask_in_size=args.true_size or settings["include_mask_in_size"],
        )
    except IconError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    try:
        args.dest.parent.mkdir(parents=True, exist_ok=True)
        args.dest.write_bytes(data)
    except OSError as e:
        logger.error(f"Failed to write {args.dest}: {e}")
        return 1
    logger.info(f"Wrote {args.dest} ({len(data):,} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
