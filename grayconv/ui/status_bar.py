from __future__ import annotations

import customtkinter as ctk

ERROR_COLOR = "#D9534F"


class StatusBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=40, **kwargs)

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._status_val = ctk.StringVar(value="Выберите изображение")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_val, anchor="w")
        self._status_label.grid(row=0, column=0, padx=10, pady=8, sticky="ew")
        self._default_color = self._status_label.cget("text_color")

    # public API (sync from controller)
    def set_status(self, text: str, is_error: bool = False) -> None:
        self._status_val.set(text)
        self._status_label.configure(text_color=ERROR_COLOR if is_error else self._default_color)
