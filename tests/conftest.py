"""Test configuration and fixtures for photo_resizer.

This module provides:
- Synthetic test images (JPEGs in several shapes, an MPF-tagged JPEG, PNG, corrupt file)
- Resizer fixtures with a capturing reporter
"""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from photo_resizer import ImageResizer

# ============================================================================
# Helpers
# ============================================================================


def make_image(width: int, height: int) -> Image.Image:
    """Build a colourful RGB test image with a grid pattern."""
    img = Image.new("RGB", (width, height), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    draw.rectangle([0, 0, width // 2, height // 2], fill=(220, 40, 40))
    draw.rectangle([width // 2, height // 2, width, height], fill=(40, 200, 60))
    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    return img


def write_jpeg(path: Path, width: int, height: int) -> Path:
    make_image(width, height).save(path, "JPEG", quality=90)
    return path


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def landscape_jpeg(tmp_path: Path) -> Path:
    """1200x800 JPEG."""
    return write_jpeg(tmp_path / "landscape.jpg", 1200, 800)


@pytest.fixture
def portrait_jpeg(tmp_path: Path) -> Path:
    """600x900 JPEG."""
    return write_jpeg(tmp_path / "portrait.jpg", 600, 900)


@pytest.fixture
def square_jpeg(tmp_path: Path) -> Path:
    """500x500 JPEG."""
    return write_jpeg(tmp_path / "square.jpg", 500, 500)


@pytest.fixture
def png_image(tmp_path: Path) -> Path:
    """A valid image that is not a JPEG (saved with a .jpg name)."""
    path = tmp_path / "actually_png.jpg"
    make_image(400, 300).save(path, "PNG")
    return path


@pytest.fixture
def corrupt_jpeg(tmp_path: Path) -> Path:
    """A .jpg file with no image content."""
    path = tmp_path / "corrupt.jpg"
    _ = path.write_bytes(b"this is not an image at all\n" * 20)
    return path


@pytest.fixture
def exif_jpeg(tmp_path: Path) -> Path:
    """640x480 JPEG carrying Make/Model/Software EXIF tags."""
    path = tmp_path / "exif.jpg"
    exif = Image.Exif()
    exif[0x010F] = "TestMake"
    exif[0x0110] = "TestModel"
    exif[0x0131] = "photo_resizer tests"
    make_image(640, 480).save(path, "JPEG", quality=90, exif=exif.tobytes())
    return path


@pytest.fixture
def mpo_jpeg(tmp_path: Path) -> Path:
    """800x600 JPEG with a second frame behind an MPF header (opens as MPO)."""
    path = tmp_path / "camera.jpg"
    make_image(800, 600).save(
        path, format="MPO", save_all=True, append_images=[make_image(800, 600)]
    )
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    out = tmp_path / "output"
    out.mkdir()
    return out


# ============================================================================
# Resizer Fixtures
# ============================================================================


@pytest.fixture
def reported() -> list[str]:
    """Messages captured from the resizer's reporter."""
    return []


@pytest.fixture
def resizer(reported: list[str]) -> ImageResizer:
    """Resizer with default settings whose reporter records messages."""
    return ImageResizer(reporter=reported.append)
