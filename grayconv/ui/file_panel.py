"""Панель файлов: выбор входного и выходного пути, запуск конвертации.

Принципы:
- SRP: управляет только полями ввода и кнопками, не содержит логики конвертации.
- ISP: отдаёт значения через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk


class FilePanel(ctk.CTkFrame):
    """Панель с путями к файлам и кнопкой «Конвертировать»."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=320, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_browse_input: Optional[Callable[[], None]] = None
        self.on_browse_output: Optional[Callable[[], None]] = None
        self.on_convert: Optional[Callable[[], None]] = None

        self._title = ctk.CTkLabel(self, text="Файлы", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, columnspan=2, padx=8, pady=(8, 4), sticky="w")

        # Input
        self._input_label = ctk.CTkLabel(self, text="Исходное изображение (PNG, JPEG):")
        self._input_label.grid(row=1, column=0, columnspan=2, padx=8, pady=(4, 2), sticky="w")
        self._input_val = ctk.StringVar(value="")
        self._input_entry = ctk.CTkEntry(self, textvariable=self._input_val)
        self._input_entry.grid(row=2, column=0, padx=(8, 4), pady=(0, 8), sticky="ew")
        self._input_btn = ctk.CTkButton(self, text="…", width=32, command=self._emit_browse_input)
        self._input_btn.grid(row=2, column=1, padx=(0, 8), pady=(0, 8))

        # Output
        self._output_label = ctk.CTkLabel(self, text="Результат (PNG, JPEG):")
        self._output_label.grid(row=3, column=0, columnspan=2, padx=8, pady=(4, 2), sticky="w")
        self._output_val = ctk.StringVar(value="")
        self._output_entry = ctk.CTkEntry(self, textvariable=self._output_val)
        self._output_entry.grid(row=4, column=0, padx=(8, 4), pady=(0, 8), sticky="ew")
        self._output_btn = ctk.CTkButton(self, text="…", width=32, command=self._emit_browse_output)
        self._output_btn.grid(row=4, column=1, padx=(0, 8), pady=(0, 8))

        self._convert_btn = ctk.CTkButton(self, text="Конвертировать", command=self._emit_convert)
        self._convert_btn.grid(row=5, column=0, columnspan=2, padx=8, pady=(8, 12), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def get_input_path(self) -> str:
        return self._input_val.get().strip()

    def get_output_path(self) -> str:
        return self._output_val.get().strip()

    def set_input_path(self, path: str) -> None:
        self._input_val.set(path)

    def set_output_path(self, path: str) -> None:
        self._output_val.set(path)

    # ---- Events ----
    def _emit_browse_input(self) -> None:
        if self.on_browse_input:
            self.on_browse_input()

    def _emit_browse_output(self) -> None:
        if self.on_browse_output:
            self.on_browse_output()

    def _emit_convert(self) -> None:
        if self.on_convert:
            self.on_convert()
