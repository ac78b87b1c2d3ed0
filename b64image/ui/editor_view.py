"""Поверхность редактора: текстовая область, в которую вставляется результат.

Принципы:
- SRP: отвечает только за текст и позицию курсора.
- Чистый код: чёткое разделение публичного API и внутренних деталей tk.Text.
"""
from __future__ import annotations

import tkinter as tk

import customtkinter as ctk


class EditorView(ctk.CTkFrame):
    """Текстовая область с вставкой в позицию курсора (с заменой выделения)."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._text = tk.Text(
            self,
            wrap="none",
            undo=True,
            highlightthickness=0,
            bg=self._get_text_bg(),
            fg=self._get_text_fg(),
            insertbackground=self._get_text_fg(),
            font=("Courier New", 11),
        )
        self._text.grid(row=0, column=0, sticky="nsew")

        self._yscroll = ctk.CTkScrollbar(self, command=self._text.yview)
        self._yscroll.grid(row=0, column=1, sticky="ns")
        self._xscroll = ctk.CTkScrollbar(self, orientation="horizontal", command=self._text.xview)
        self._xscroll.grid(row=1, column=0, sticky="ew")
        self._text.configure(yscrollcommand=self._yscroll.set, xscrollcommand=self._xscroll.set)

    # public API
    def insert_at_cursor(self, text: str) -> None:
        """Вставляет текст в позицию курсора; выделенный фрагмент заменяется."""
        if self._text.tag_ranges("sel"):
            self._text.delete("sel.first", "sel.last")
        self._text.insert("insert", text)
        self._text.see("insert")
        self._text.focus_set()

    # helpers
    def _get_text_bg(self) -> str:
        return "#1e1e1e" if ctk.get_appearance_mode() == "Dark" else "#ffffff"

    def _get_text_fg(self) -> str:
        return "#d4d4d4" if ctk.get_appearance_mode() == "Dark" else "#1e1e1e"
