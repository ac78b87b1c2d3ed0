"""Модели данных конвейера вставки base64-изображения.

Принципы:
- SRP: только структура данных, без логики кодирования и рендеринга.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


SUPPORTED_EXTENSIONS = ("gif", "png", "jpg", "svg", "ico")


class MediaType(str, Enum):
    """Подтип `image/*`, определённый по сигнатуре base64."""
    PNG = "png"
    GIF = "gif"
    JPEG = "jpeg"
    SVG = "svg+xml"
    ICON = "x-icon"
    UNKNOWN = "unknown"

    @property
    def is_vector(self) -> bool:
        return self is MediaType.SVG


class CodeContext(str, Enum):
    """Режим кода активного редактора: определяет шаблон вывода."""
    PLAIN = "plain"
    STYLESHEET = "stylesheet"
    MARKUP = "markup"
    SCRIPT = "script"
    PHP = "php"
    ASP = "asp"
    MARKUP_DATA = "markup-data"

    @classmethod
    def from_extension(cls, extension: str) -> "CodeContext":
        """Подбирает контекст по расширению документа (".css", "html", ...)."""
        ext = extension.lower().lstrip(".")
        return _EXTENSION_CONTEXTS.get(ext, cls.PLAIN)


_EXTENSION_CONTEXTS = {
    "css": CodeContext.STYLESHEET,
    "scss": CodeContext.STYLESHEET,
    "less": CodeContext.STYLESHEET,
    "html": CodeContext.MARKUP,
    "htm": CodeContext.MARKUP,
    "xhtml": CodeContext.MARKUP,
    "js": CodeContext.SCRIPT,
    "mjs": CodeContext.SCRIPT,
    "ts": CodeContext.SCRIPT,
    "c": CodeContext.SCRIPT,
    "cpp": CodeContext.SCRIPT,
    "java": CodeContext.SCRIPT,
    "cs": CodeContext.SCRIPT,
    "php": CodeContext.PHP,
    "asp": CodeContext.ASP,
    "aspx": CodeContext.ASP,
    "xml": CodeContext.MARKUP_DATA,
    "wml": CodeContext.MARKUP_DATA,
    "svg": CodeContext.MARKUP_DATA,
}


@dataclass(frozen=True)
class ImageAsset:
    """Выбранный файл изображения.

    Fields:
        path: Путь к исходному файлу.
        display_name: Имя файла для комментариев и `alt`.
        extension: Расширение в нижнем регистре без точки.
        byte_size: Размер файла в байтах.
    """
    path: Path
    display_name: str
    extension: str
    byte_size: int


@dataclass(frozen=True)
class EncodedPayload:
    """Base64-данные и распознанный по ним тип."""
    media_type: MediaType
    base64: str

    @property
    def is_valid(self) -> bool:
        return self.media_type is not MediaType.UNKNOWN

    @property
    def data_uri(self) -> str:
        return f"data:image/{self.media_type.value};base64,{self.base64}"


@dataclass(frozen=True)
class Dimensions:
    """Размеры растрового изображения в виде строк (как их отдаёт хост)."""
    width: str
    height: str

    @classmethod
    def empty(cls) -> "Dimensions":
        # у векторных изображений нет собственного размера
        return cls(width="", height="")

    @property
    def is_empty(self) -> bool:
        return not self.width and not self.height


@dataclass(frozen=True)
class PipelineResult:
    """Результат одного успешного прогона конвейера."""
    asset: ImageAsset
    payload: EncodedPayload
    dimensions: Dimensions
    snippet: str
