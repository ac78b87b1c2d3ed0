"""Причины, по которым конвейер ничего не вставляет.

Каждое исключение здесь означает управляемый no-op: вызывающая сторона
логирует причину и не показывает пользователю ошибку.
"""
from __future__ import annotations


class PipelineAbort(Exception):
    """Базовый класс: прогон прерван, вставлять нечего."""


class UserAbort(PipelineAbort):
    """Файл не выбран или пользователь отказался вставлять большой файл."""


class UnrecognizedFormat(PipelineAbort):
    """Сигнатура base64 не соответствует ни одному поддерживаемому типу."""


class MissingDimensions(PipelineAbort):
    """Для растрового файла не удалось получить размеры."""


class UnreadableFile(PipelineAbort):
    """Файл отсутствует или не читается."""


class UnsupportedExtension(PipelineAbort):
    """Расширение файла не входит в список поддерживаемых."""
