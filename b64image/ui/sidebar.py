"""Боковая панель: вставка изображения, настройки и информация о последнем файле.

Принципы:
- SRP: управляет только UI настроек, не содержит логики конвейера.
- ISP: отдаёт значения через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from b64image.config.settings import Settings
from b64image.models.image_model import PipelineResult
from b64image.services.size_service import humanize_bytes


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: действие, настройки, информация."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_insert_image: Optional[Callable[[], None]] = None
        self.on_settings_change: Optional[Callable[[Settings], None]] = None

        # Controls
        self._title = ctk.CTkLabel(self, text="Инструменты", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._insert_btn = ctk.CTkButton(self, text="Вставить Base64-изображение…", command=self._emit_insert_image)
        self._insert_btn.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Settings section
        self._settings_title = ctk.CTkLabel(self, text="Настройки", font=ctk.CTkFont(size=16, weight="bold"))
        self._settings_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._strip_var = ctk.BooleanVar(value=True)
        self._wrap_var = ctk.BooleanVar(value=True)
        self._strip_switch = ctk.CTkSwitch(
            self, text="Убрать переводы строк из Base64", variable=self._strip_var, command=self._emit_settings_change
        )
        self._wrap_switch = ctk.CTkSwitch(
            self, text="Оборачивать по режиму кода", variable=self._wrap_var, command=self._emit_settings_change
        )
        self._strip_switch.grid(row=3, column=0, padx=8, pady=(0, 4), sticky="w")
        self._wrap_switch.grid(row=4, column=0, padx=8, pady=(0, 10), sticky="w")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=5, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._type_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=250, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_type = ctk.CTkLabel(self, textvariable=self._type_val, anchor="w", justify="left")

        self._info_path.grid(row=6, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=7, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=8, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_type.grid(row=9, column=0, padx=8, pady=(0, 10), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # public API
    def set_settings(self, settings: Settings) -> None:
        self._strip_var.set(settings.strip_linebreaks)
        self._wrap_var.set(settings.wrap_by_context)

    def get_settings(self) -> Settings:
        return Settings(strip_linebreaks=bool(self._strip_var.get()), wrap_by_context=bool(self._wrap_var.get()))

    def set_result_info(self, result: PipelineResult) -> None:
        asset = result.asset
        self._path_val.set(f"Файл: {asset.path}")
        self._size_val.set(f"Размер: {humanize_bytes(asset.byte_size)}")
        if result.dimensions.is_empty:
            self._dims_val.set("Размеры: нет (вектор)")
        else:
            self._dims_val.set(f"Размеры: {result.dimensions.width}×{result.dimensions.height}")
        self._type_val.set(f"Тип: image/{result.payload.media_type.value}")

    # events
    def _emit_insert_image(self) -> None:
        if self.on_insert_image:
            self.on_insert_image()

    def _emit_settings_change(self) -> None:
        if self.on_settings_change:
            self.on_settings_change(self.get_settings())
