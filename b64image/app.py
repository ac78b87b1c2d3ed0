from pathlib import Path
from typing import Optional

import customtkinter as ctk

from b64image.config.settings import default_settings_dir, load_settings
from b64image.controllers.app_controller import AppController
from b64image.services.pipeline_service import InsertPipeline
from b64image.ui.bottom_bar import BottomBar
from b64image.ui.editor_view import EditorView
from b64image.ui.sidebar import Sidebar


class InsertBase64ImageApp(ctk.CTk):
    def __init__(self, settings_dir: Optional[Path] = None) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Insert Base64 Image")
        self.minsize(900, 600)

        # root layout: left editor, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._editor = EditorView(self)
        self._editor.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        settings_dir = settings_dir or default_settings_dir()
        self._controller = AppController(
            editor=self._editor,
            sidebar=self._sidebar,
            bottom=self._bottom,
            window=self,
            settings_dir=settings_dir,
            _pipeline=InsertPipeline(settings=load_settings(settings_dir)),
        )
        self._controller.bind_events()
