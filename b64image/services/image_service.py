"""Чтение файла изображения с диска и извлечение его размеров.

Принципы:
- SRP: класс отвечает только за доступ к файлу и его метаданным.
- OCP: новые источники метаданных можно добавить отдельными методами.
- LSP/ISP: возвращает `ImageAsset`/`Dimensions` с предсказуемыми полями.
"""
from __future__ import annotations

import logging
import re
import warnings
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from b64image.models.image_model import SUPPORTED_EXTENSIONS, Dimensions, ImageAsset
from b64image.services.errors import UnreadableFile, UnsupportedExtension

logger = logging.getLogger(__name__)

_NOT_DIMENSION_CHARS = re.compile(r"[^\dx ]")
_DIGIT_RUN = re.compile(r"\d+")


class ImageService:
    def load_asset(self, file_path: str | Path) -> ImageAsset:
        """Описывает выбранный файл без чтения его содержимого.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageAsset` с именем, расширением и размером файла.

        Raises:
            UnreadableFile: если путь не существует или не указывает на файл.
            UnsupportedExtension: если расширение не из `SUPPORTED_EXTENSIONS`.
        """
        path = Path(file_path)
        extension = path.suffix.lower().lstrip(".")
        if extension not in SUPPORTED_EXTENSIONS:
            raise UnsupportedExtension(f"Неподдерживаемое расширение: {path.name}")

        try:
            byte_size = path.stat().st_size
        except OSError as exc:
            raise UnreadableFile(f"Файл не найден: {path}") from exc
        if not path.is_file():
            raise UnreadableFile(f"Не является файлом: {path}")

        return ImageAsset(path=path, display_name=path.name, extension=extension, byte_size=byte_size)

    def read_bytes(self, asset: ImageAsset) -> bytes:
        try:
            return asset.path.read_bytes()
        except OSError as exc:
            raise UnreadableFile(f"Не удалось прочитать файл: {asset.path}") from exc

    def read_dimension_text(self, path: Path) -> str:
        """Возвращает размеры в виде "800 x 600" или пустую строку.

        Pillow читает только заголовок файла; пиксели не декодируются, поэтому
        проверка на decompression bomb на время чтения отключена.
        """
        max_pixels = Image.MAX_IMAGE_PIXELS
        try:
            Image.MAX_IMAGE_PIXELS = None
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", Image.DecompressionBombWarning)
                with Image.open(path) as image:
                    width, height = image.size
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
            logger.debug("Pillow не распознал %s", path)
            return ""
        finally:
            Image.MAX_IMAGE_PIXELS = max_pixels
        return f"{width} x {height}"

    def extract_dimensions(self, text: str) -> Optional[Dimensions]:
        """Выделяет ширину и высоту из свободного текста хоста.

        Из строки удаляется всё, кроме цифр, буквы "x" и пробела. Ширина:
        первая группа цифр, высота: последняя ("800 x 600 pixels" -> 800, 600).

        Returns:
            `Dimensions` или `None`, если после очистки ничего не осталось.
        """
        cleaned = _NOT_DIMENSION_CHARS.sub("", text)
        if cleaned == "":
            return None

        runs = _DIGIT_RUN.findall(cleaned)
        if not runs:
            return Dimensions.empty()
        return Dimensions(width=runs[0], height=runs[-1])
