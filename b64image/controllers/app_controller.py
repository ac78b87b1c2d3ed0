"""Контроллер приложения: связывает UI с конвейером вставки.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики кодирования).
- DIP: конвейер получает выбор файла и подтверждение как callables.
Clean Code:
- Обработчики компактны; вся логика вынесена в `InsertPipeline`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import TclError, filedialog, messagebox
from typing import Optional

import customtkinter as ctk

from b64image.config.settings import Settings, save_settings
from b64image.models.image_model import CodeContext
from b64image.services.pipeline_service import InsertPipeline
from b64image.ui.bottom_bar import BottomBar
from b64image.ui.editor_view import EditorView
from b64image.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)

IMAGE_FILETYPES = (("Web image files only", "*.gif *.png *.jpg *.svg *.ico"),)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Запуск `InsertPipeline` с диалогами tkinter в роли коллабораторов.
    - Сохранение переключателей настроек.
    """
    editor: EditorView
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    settings_dir: Path

    _pipeline: InsertPipeline = field(default_factory=InsertPipeline)
    _last_dir: Optional[Path] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий и синхронизирует UI с настройками."""
        self.sidebar.on_insert_image = self._handle_insert_image
        self.sidebar.on_settings_change = self._handle_settings_change
        self.bottom.on_context_change = self._handle_context_change

        self.sidebar.set_settings(self._pipeline.settings)

    # ---- Handlers ----
    def _handle_insert_image(self) -> None:
        context = self.bottom.get_code_context()
        result = self._pipeline.run(pick_file=self._ask_image_file, confirm=self._ask_confirm, context=context)
        if result is None:
            self.bottom.set_status("Ничего не вставлено")
            return

        self._last_dir = result.asset.path.parent
        self.editor.insert_at_cursor(result.snippet)
        self.sidebar.set_result_info(result)
        self.bottom.set_status(f"Вставлено: {result.asset.display_name}")

    def _handle_settings_change(self, settings: Settings) -> None:
        self._pipeline.settings = settings
        path = save_settings(self.settings_dir, settings)
        logger.debug("Настройки сохранены в %s", path)

    def _handle_context_change(self, context: CodeContext) -> None:
        self.bottom.set_status(f"Режим кода: {context.value}")

    # ---- Collaborators ----
    def _ask_image_file(self) -> Optional[str]:
        try:
            file_path = filedialog.askopenfilename(
                parent=self.window,
                title="Выберите файл изображения",
                initialdir=str(self._last_dir) if self._last_dir else None,
                filetypes=IMAGE_FILETYPES,
            )
        except TclError:
            # Silent fail if dialog cannot open
            return None
        return file_path or None

    def _ask_confirm(self, message: str) -> bool:
        return bool(messagebox.askyesno(title="Большое изображение", message=message, parent=self.window))
