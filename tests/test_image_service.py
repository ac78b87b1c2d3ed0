"""
Tests for asset loading and dimension extraction.
"""
from pathlib import Path

import pytest
from PIL import Image

from b64image.models.image_model import Dimensions
from b64image.services.errors import UnreadableFile, UnsupportedExtension
from b64image.services.image_service import ImageService


@pytest.fixture
def service() -> ImageService:
    return ImageService()


def test_load_asset(service: ImageService, png_file: Path):
    asset = service.load_asset(png_file)
    assert asset.display_name == "logo.png"
    assert asset.extension == "png"
    assert asset.byte_size == png_file.stat().st_size


def test_load_asset_missing_file(service: ImageService, tmp_path: Path):
    with pytest.raises(UnreadableFile):
        service.load_asset(tmp_path / "missing.png")


def test_load_asset_unsupported_extension(service: ImageService, tmp_path: Path):
    path = tmp_path / "image.bmp"
    path.write_bytes(b"BM")
    with pytest.raises(UnsupportedExtension):
        service.load_asset(path)


def test_load_asset_extension_is_case_insensitive(service: ImageService, tmp_path: Path):
    path = tmp_path / "SHOUT.PNG"
    path.write_bytes(b"")
    assert service.load_asset(path).extension == "png"


@pytest.mark.parametrize("text, expected", [
    ("800 x 600", Dimensions("800", "600")),
    ("800 x 600 pixels", Dimensions("800", "600")),
    ("\u202a1920 x 1080\u202c", Dimensions("1920", "1080")),
    ("32x32", Dimensions("32", "32")),
    ("64", Dimensions("64", "64")),
    ("x", Dimensions("", "")),
])
def test_extract_dimensions(service: ImageService, text: str, expected: Dimensions):
    assert service.extract_dimensions(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "н/д"])
def test_extract_dimensions_empty(service: ImageService, text: str):
    assert service.extract_dimensions(text) is None


def test_read_dimension_text(service: ImageService, png_file: Path, ico_file: Path):
    assert service.read_dimension_text(png_file) == "8 x 6"
    assert service.read_dimension_text(ico_file) == "16 x 16"


def test_read_dimension_text_not_an_image(service: ImageService, bogus_png_file: Path):
    assert service.read_dimension_text(bogus_png_file) == ""


def test_read_dimension_text_beyond_pixel_limit(service: ImageService, huge_header_png_file: Path):
    limit = Image.MAX_IMAGE_PIXELS
    assert service.read_dimension_text(huge_header_png_file) == "20000 x 20000"
    assert Image.MAX_IMAGE_PIXELS == limit
