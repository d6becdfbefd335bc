"""Конвертация цветного изображения в оттенки серого: файл -> файл.

Конвейер линейный и без состояния: открыть -> декодировать -> преобразовать
-> создать -> закодировать -> закрыть. Повторов и частичного восстановления
нет; первая же ошибка возвращается вызывающему как `ConversionError`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from grayconv.models.errors import ConversionError, ConversionResult
from grayconv.models.image_model import GrayscaleImage, SourceImage
from grayconv.services.image_service import ImageService
from grayconv.services.process_service import ProcessService

logger = logging.getLogger(__name__)


class GrayscaleConverter:
    def __init__(
        self,
        image_service: ImageService | None = None,
        process_service: ProcessService | None = None,
    ) -> None:
        self._image_service = image_service or ImageService()
        self._process_service = process_service or ProcessService()

    @property
    def image_service(self) -> ImageService:
        return self._image_service

    def convert(self, input_path: str | Path, output_path: str | Path) -> GrayscaleImage:
        """Конвертирует изображение и сохраняет результат.

        Args:
            input_path: Цветное изображение (.png, .jpg, .jpeg).
            output_path: Куда записать результат; формат определяется расширением.

        Returns:
            Записанное `GrayscaleImage`.

        Raises:
            ConversionError: подкласс, соответствующий стадии сбоя.
        """
        _source, gray = self._run(input_path, output_path)
        return gray

    def try_convert(self, input_path: str | Path, output_path: str | Path) -> ConversionResult:
        """То же, что `convert`, но ошибка конвертации возвращается в результате, а не бросается."""
        try:
            source, gray = self._run(input_path, output_path)
        except ConversionError as exc:
            logger.warning("conversion %s -> %s failed: %s", input_path, output_path, exc)
            return ConversionResult(output_path=Path(output_path), error=exc)
        return ConversionResult(output_path=Path(output_path), source=source, image=gray)

    def _run(self, input_path: str | Path, output_path: str | Path) -> Tuple[SourceImage, GrayscaleImage]:
        source = self._image_service.load_image(input_path)
        gray = self._process_service.to_grayscale(source)
        self._image_service.save_image(gray, output_path)
        logger.info("Grayscale image saved to %s", output_path)
        return source, gray


def convert_to_grayscale(input_path: str | Path, output_path: str | Path) -> None:
    """Конвертирует `input_path` в оттенки серого и сохраняет в `output_path`.

    Raises:
        ConversionError: при любой ошибке открытия, декодирования, создания или кодирования.
    """
    GrayscaleConverter().convert(input_path, output_path)
