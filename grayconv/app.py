import customtkinter as ctk

from grayconv.controllers.app_controller import AppController
from grayconv.ui.file_panel import FilePanel
from grayconv.ui.preview import PreviewPane
from grayconv.ui.status_bar import StatusBar

WINDOW_TITLE = "Grayscale Converter"
MIN_SIZE = (820, 480)


class ConverterApp(ctk.CTk):
    def __init__(self) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title(WINDOW_TITLE)
        self.minsize(*MIN_SIZE)

        # root layout: left files panel, right preview
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._panel = FilePanel(self)
        self._panel.grid(row=0, column=0, sticky="ns", padx=(12, 6), pady=(12, 6))

        self._preview = PreviewPane(self)
        self._preview.grid(row=0, column=1, sticky="nsew", padx=(6, 12), pady=(12, 6))

        self._status = StatusBar(self)
        self._status.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(panel=self._panel, preview=self._preview, status=self._status)
        self._controller.bind_events()
