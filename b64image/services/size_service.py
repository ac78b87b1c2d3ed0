"""Человекочитаемый размер файла для предупреждения о больших изображениях."""
from __future__ import annotations


UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

# файлы больше 10 KB вставляются только после подтверждения
LARGE_FILE_THRESHOLD = 10240


def humanize_bytes(byte_count: int) -> str:
    """Преобразует число байтов в короткую запись, например "19.53 KB".

    Raises:
        ValueError: если `byte_count` отрицательный.
    """
    if byte_count < 0:
        raise ValueError(f"Размер не может быть отрицательным: {byte_count}")

    i = 0
    while i < len(UNITS) - 1 and byte_count >= 1024 ** (i + 1):
        i += 1

    value = round(byte_count / 1024 ** i, 2)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {UNITS[i]}"


def is_large(byte_count: int) -> bool:
    return byte_count > LARGE_FILE_THRESHOLD
