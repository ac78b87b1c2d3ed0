"""
Global fixtures live here

Real image files are written with Pillow so the sniffer sees genuine signatures.
"""
import base64
import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image

from b64image.config.settings import Settings
from b64image.services.pipeline_service import InsertPipeline

SVG_TEXT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">'
    '<rect width="10" height="10" fill="red"/></svg>\n'
)


def _save(path: Path, fmt: str, size=(8, 6), mode="RGB") -> Path:
    Image.new(mode, size, color=(255, 0, 0) if mode == "RGB" else (255, 0, 0, 255)).save(path, format=fmt)
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    return _save(tmp_path / "logo.png", "PNG")


@pytest.fixture
def gif_file(tmp_path: Path) -> Path:
    return _save(tmp_path / "anim.gif", "GIF")


@pytest.fixture
def jpg_file(tmp_path: Path) -> Path:
    return _save(tmp_path / "photo.jpg", "JPEG")


@pytest.fixture
def ico_file(tmp_path: Path) -> Path:
    return _save(tmp_path / "favicon.ico", "ICO", size=(16, 16), mode="RGBA")


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    path = tmp_path / "icon.svg"
    path.write_text(SVG_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def bogus_png_file(tmp_path: Path) -> Path:
    """A .png whose Base64 starts with 'XXXX'."""
    path = tmp_path / "fake.png"
    path.write_bytes(base64.b64decode("XXXXAAAA"))
    return path


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


@pytest.fixture
def huge_header_png_file(tmp_path: Path) -> Path:
    """A well-formed 20000x20000 PNG with only IHDR and IEND (far above Pillow's pixel limit)."""
    path = tmp_path / "poster.png"
    ihdr = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", ihdr) + _png_chunk(b"IEND", b""))
    return path


@pytest.fixture
def big_png_file(tmp_path: Path) -> Path:
    """A .png of exactly 20000 bytes (valid signature, padded)."""
    path = tmp_path / "big.png"
    _save(path, "PNG")
    data = path.read_bytes()
    path.write_bytes(data + b"\0" * (20000 - len(data)))
    return path


@pytest.fixture
def make_pipeline():
    """
    Factory for pipelines with a fixed dimension text, so tests don't depend on
    what Pillow reports for tiny generated files.
    """
    def factory(dimension_text: str = "800 x 600", **settings) -> InsertPipeline:
        return InsertPipeline(settings=Settings(**settings), dimension_reader=lambda _path: dimension_text)
    return factory
