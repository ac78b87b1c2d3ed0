from __future__ import annotations

from typing import Callable, Dict, Optional

import customtkinter as ctk

from b64image.models.image_model import CodeContext

# подписи режимов в меню
CONTEXT_LABELS: Dict[CodeContext, str] = {
    CodeContext.PLAIN: "Текст",
    CodeContext.STYLESHEET: "CSS",
    CodeContext.MARKUP: "HTML",
    CodeContext.SCRIPT: "JavaScript / C",
    CodeContext.PHP: "PHP",
    CodeContext.ASP: "ASP",
    CodeContext.MARKUP_DATA: "XML / WML",
}


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=48, **kwargs)

        # callbacks
        self.on_context_change: Optional[Callable[[CodeContext], None]] = None

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(2, weight=1)  # status stretches

        self._context_label = ctk.CTkLabel(self, text="Режим кода")
        self._context_label.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._labels_to_context = {label: ctx for ctx, label in CONTEXT_LABELS.items()}
        self._context_menu = ctk.CTkOptionMenu(
            self, values=list(CONTEXT_LABELS.values()), command=self._on_context_select
        )
        self._context_menu.set(CONTEXT_LABELS[CodeContext.MARKUP])
        self._context_menu.grid(row=0, column=1, padx=6, pady=8, sticky="w")

        self._status = ctk.StringVar(value="Готово")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status, anchor="e")
        self._status_label.grid(row=0, column=2, padx=(6, 12), pady=8, sticky="ew")

    # public API (sync from controller)
    def get_code_context(self) -> CodeContext:
        return self._labels_to_context.get(self._context_menu.get(), CodeContext.PLAIN)

    def set_status(self, text: str) -> None:
        self._status.set(text)

    # events
    def _on_context_select(self, value: str) -> None:
        context = self._labels_to_context.get(value)
        if context is not None and self.on_context_change:
            self.on_context_change(context)
