"""Shared pytest fixtures for ico-builder tests."""

import io
from unittest.mock import Mock

import pytest
from PIL import Image

from ico_builder.raster import RasterImage
from ico_builder.source import PillowRasterSource


def solid_raster(size, rgba):
    """Square raster filled with a single RGBA color."""
    return RasterImage.square(size, bytes(rgba) * (size * size))


def png_bytes(image):
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def make_raster():
    """Factory for solid-color rasters."""
    return solid_raster


@pytest.fixture
def red_png_256():
    """256x256 fully opaque solid red PNG, encoded."""
    return png_bytes(Image.new("RGBA", (256, 256), (255, 0, 0, 255)))


@pytest.fixture
def red_source_256(red_png_256):
    return PillowRasterSource.from_bytes(red_png_256)


@pytest.fixture
def mock_source():
    """Factory for RasterSource doubles that resize into solid rasters."""

    def factory(size=256, fmt="png", rgba=(0, 0, 0, 255), height=None):
        source = Mock()
        source.width = size
        source.height = size if height is None else height
        source.format = fmt
        source.to_raster.side_effect = lambda: solid_raster(size, rgba)
        source.resize.side_effect = lambda w, h, kernel=None: factory(w, fmt, rgba)
        return source

    return factory


@pytest.fixture
def encode_png():
    """Encode a PIL image as PNG bytes."""
    return png_bytes


@pytest.fixture
def truncated_png():
    """PNG whose header decodes but whose pixel data is cut short."""
    gradient = Image.merge(
        "RGBA",
        (
            Image.linear_gradient("L"),
            Image.linear_gradient("L").rotate(90),
            Image.radial_gradient("L"),
            Image.new("L", (256, 256), 255),
        ),
    )
    data = png_bytes(gradient)
    return data[: len(data) // 2]
