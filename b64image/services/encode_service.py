"""Кодирование байтов в base64 и распознавание типа по закодированным данным.

Принципы:
- SRP: только base64 и сигнатуры, без чтения файлов и шаблонов.
- OCP: новый формат добавляется строкой в `_SIGNATURES`, алгоритм не меняется.
"""
from __future__ import annotations

import base64
import re

from b64image.models.image_model import EncodedPayload, MediaType


# первые 4 символа base64 от магических байтов каждого формата
_SIGNATURES = {
    "iVBO": MediaType.PNG,
    "R0lG": MediaType.GIF,
    "/9j/": MediaType.JPEG,
    "PD94": MediaType.SVG,
    "AAAB": MediaType.ICON,
}

_LINEBREAKS = re.compile(r"[\r\n]")


class EncodeService:
    def encode(self, data: bytes) -> str:
        """Кодирует байты в стандартный base64 с переносом строк через 76 символов.

        Args:
            data: Исходные байты файла (может быть пустым).

        Returns:
            Строка base64; для пустого входа пустая строка.
        """
        return base64.encodebytes(data).decode("ascii").rstrip("\n")

    def sniff(self, encoded: str) -> MediaType:
        """Определяет тип изображения по первым 4 символам base64.

        Неизвестная сигнатура даёт `MediaType.UNKNOWN`; тип по умолчанию не угадывается.
        """
        return _SIGNATURES.get(encoded[:4], MediaType.UNKNOWN)

    def strip_linebreaks(self, text: str) -> str:
        return _LINEBREAKS.sub("", text)

    def build_payload(self, data: bytes) -> EncodedPayload:
        """Кодирует байты и сразу распознаёт тип."""
        encoded = self.encode(data)
        return EncodedPayload(media_type=self.sniff(encoded), base64=encoded)
