"""Конвейер: файл -> base64 -> тип -> размеры -> подтверждение -> шаблон.

SOLID:
- SRP: класс только упорядочивает шаги; каждый шаг живёт в своём сервисе.
- DIP: выбор файла и подтверждение приходят как простые callables, поэтому
  конвейер не знает про UI и тестируется без дисплея.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from b64image.config.settings import Settings
from b64image.models.image_model import CodeContext, Dimensions, PipelineResult
from b64image.services.encode_service import EncodeService
from b64image.services.errors import MissingDimensions, PipelineAbort, UnrecognizedFormat, UserAbort
from b64image.services.image_service import ImageService
from b64image.services.size_service import humanize_bytes, is_large
from b64image.services.template_service import TemplateService

logger = logging.getLogger(__name__)

PickFile = Callable[[], Optional[Union[str, Path]]]
Confirm = Callable[[str], bool]


def large_file_message(size_text: str) -> str:
    return (
        f"Выбранное изображение довольно большое ({size_text})\n"
        "Вы действительно хотите его вставить?"
    )


@dataclass
class InsertPipeline:
    """Строит текст для вставки из выбранного файла изображения.

    Ответственности:
    - Кодирование и распознавание типа через `EncodeService`.
    - Размеры растровых изображений через `ImageService`.
    - Подтверждение для файлов больше `LARGE_FILE_THRESHOLD`.
    - Рендеринг через `TemplateService` с учётом `Settings`.
    """
    settings: Settings = field(default_factory=Settings)
    image_service: ImageService = field(default_factory=ImageService)
    encode_service: EncodeService = field(default_factory=EncodeService)
    template_service: TemplateService = field(default_factory=TemplateService)
    # источник текста размеров ("800 x 600"); по умолчанию Pillow
    dimension_reader: Optional[Callable[[Path], str]] = None
    # текст вопроса о большом файле по его размеру ("19.53 KB")
    confirm_message: Callable[[str], str] = large_file_message

    def run(self, pick_file: PickFile, confirm: Confirm, context: CodeContext) -> Optional[PipelineResult]:
        """Полный прогон с выбором файла; любая причина прерывания даёт `None`."""
        try:
            file_path = pick_file()
            if not file_path:
                raise UserAbort("Файл не выбран")
            return self.build(file_path, context, confirm)
        except PipelineAbort as exc:
            logger.info("Вставка отменена (%s): %s", type(exc).__name__, exc)
            return None

    def build(self, file_path: Union[str, Path], context: CodeContext, confirm: Confirm) -> PipelineResult:
        """Выполняет шаги конвейера для уже выбранного файла.

        Raises:
            PipelineAbort: один из подклассов, если вставлять нечего.
        """
        asset = self.image_service.load_asset(file_path)
        logger.debug("Выбран %s (%d байт)", asset.path, asset.byte_size)

        payload = self.encode_service.build_payload(self.image_service.read_bytes(asset))
        if not payload.is_valid:
            raise UnrecognizedFormat(f"Неизвестная сигнатура {payload.base64[:4]!r} в {asset.display_name}")

        if payload.media_type.is_vector:
            dimensions = Dimensions.empty()
        else:
            read_text = self.dimension_reader or self.image_service.read_dimension_text
            extracted = self.image_service.extract_dimensions(read_text(asset.path))
            if extracted is None:
                raise MissingDimensions(f"Нет размеров у {asset.display_name}")
            dimensions = extracted

        if is_large(asset.byte_size):
            if not confirm(self.confirm_message(humanize_bytes(asset.byte_size))):
                raise UserAbort("Пользователь отказался вставлять большой файл")

        data_uri = payload.data_uri
        stripped_data_uri = self.encode_service.strip_linebreaks(data_uri)
        if self.settings.strip_linebreaks:
            data_uri = stripped_data_uri

        snippet = self.template_service.render(
            context,
            data_uri=data_uri,
            stripped_data_uri=stripped_data_uri,
            name=asset.display_name,
            dimensions=dimensions,
            wrap=self.settings.wrap_by_context,
        )
        logger.info("Сформирован фрагмент %s для %s (%s)", context.value, asset.display_name, payload.media_type.value)
        return PipelineResult(asset=asset, payload=payload, dimensions=dimensions, snippet=snippet)
