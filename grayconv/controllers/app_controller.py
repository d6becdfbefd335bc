"""Контроллер приложения: оркестрация UI и конвертера.

SOLID:
- SRP: только связывает панель файлов, предпросмотр и статус с конвертером.
- DIP: виджеты и конвертер передаются снаружи, поэтому контроллер тестируется без окна.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import TclError, filedialog
from typing import TYPE_CHECKING, Optional

from grayconv.models.errors import ConversionError, ConversionResult
from grayconv.models.image_model import SourceImage
from grayconv.services.codec_service import supported_extensions
from grayconv.services.converter_service import GrayscaleConverter

if TYPE_CHECKING:
    from grayconv.ui.file_panel import FilePanel
    from grayconv.ui.preview import PreviewPane
    from grayconv.ui.status_bar import StatusBar

logger = logging.getLogger(__name__)

GRAY_SUFFIX = "_gray"


def suggest_output_path(input_path: str | Path) -> Path:
    """Предлагает путь результата рядом с исходником: `<stem>_gray.png`."""
    path = Path(input_path)
    return path.with_name(f"{path.stem}{GRAY_SUFFIX}.png")


def describe_source(source: SourceImage) -> str:
    """Краткое описание исходника: формат, режим файла и размер, например "PNG, P, 5×4"."""
    return f"{source.format}, {source.mode}, {source.bounds.width}×{source.bounds.height}"


def _filetypes() -> tuple:
    patterns = " ".join(f"*{ext}" for ext in supported_extensions())
    return (("Images", patterns), ("All files", "*.*"))


@dataclass
class AppController:
    """Связывает элементы UI с конвертером.

    Ответственности:
    - Бинд событий панели файлов (UI -> контроллер).
    - Выбор путей через системные диалоги.
    - Запуск конвертации и вывод результата в статус и предпросмотр.
    """
    panel: FilePanel
    preview: PreviewPane
    status: StatusBar

    converter: GrayscaleConverter = field(default_factory=GrayscaleConverter)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий панели файлов."""
        self.panel.on_browse_input = self._handle_browse_input
        self.panel.on_browse_output = self._handle_browse_output
        self.panel.on_convert = self._handle_convert

    # ---- Handlers ----
    def _handle_browse_input(self) -> None:
        try:
            file_path = filedialog.askopenfilename(title="Выберите изображение", filetypes=_filetypes())
        except TclError:
            # Silent fail if dialog cannot open
            return
        if not file_path:
            return

        self.panel.set_input_path(file_path)
        if not self.panel.get_output_path():
            self.panel.set_output_path(str(suggest_output_path(file_path)))
        source = self._preview_source(file_path)
        if source is None:
            self.status.set_status(f"Выбрано: {file_path}")
        else:
            self.status.set_status(f"Выбрано: {file_path} ({describe_source(source)})")

    def _handle_browse_output(self) -> None:
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить как", defaultextension=".png", filetypes=_filetypes()
            )
        except TclError:
            return
        if file_path:
            self.panel.set_output_path(file_path)

    def _handle_convert(self) -> None:
        input_path = self.panel.get_input_path()
        output_path = self.panel.get_output_path()
        if not input_path:
            self.status.set_status("Не выбран исходный файл", is_error=True)
            return
        if not output_path:
            output_path = str(suggest_output_path(input_path))
            self.panel.set_output_path(output_path)

        result = self.converter.try_convert(input_path, output_path)
        self._show_result(result)

    # ---- Helpers ----
    def _show_result(self, result: ConversionResult) -> None:
        """Обновляет статус и предпросмотр по итогам конвертации."""
        if not result.ok:
            self.status.set_status(f"Ошибка: {result.error}", is_error=True)
            self.preview.set_processed_image(None)
            return

        self.preview.set_image(result.source.pil_image)
        self.preview.set_processed_image(result.image.pil_image)
        self.status.set_status(f"Grayscale image saved to {result.output_path}")

    def _preview_source(self, input_path: str) -> Optional[SourceImage]:
        """Показывает исходник в предпросмотре; нечитаемый файл просто не показывается."""
        try:
            source = self.converter.image_service.load_image(input_path)
        except ConversionError as exc:
            logger.debug("no preview for %s: %s", input_path, exc)
            self.preview.set_image(None)
            return None
        self.preview.set_image(source.pil_image)
        return source
