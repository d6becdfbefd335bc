"""Загрузка изображений с диска и сохранение результатов.

Принципы:
- SRP: класс отвечает только за файловый ввод-вывод и выбор кодека по расширению.
- DIP: декодирование/кодирование делегируется `CodecService`.
"""
from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from grayconv.models.errors import (
    CreateFailedError,
    OpenFailedError,
    UnsupportedInputFormatError,
    UnsupportedOutputFormatError,
)
from grayconv.models.image_model import Bounds, GrayscaleImage, SourceImage
from grayconv.services.codec_service import CodecService, codec_for_path

logger = logging.getLogger(__name__)


def _to_rgba(image: Image.Image) -> Image.Image:
    """Приводит декодированное изображение к 8-битному RGBA.

    16-битные градации серого ("I;16*", "I") масштабируются старшим байтом,
    а не обрезаются до 255, как это делает `convert("RGBA")`.
    """
    if image.mode == "RGBA":
        return image
    if image.mode.startswith("I"):
        arr = np.asarray(image, dtype=np.uint32) >> 8
        image = Image.fromarray(arr.astype(np.uint8))
    return image.convert("RGBA")


class ImageService:
    def __init__(self, codec_service: CodecService | None = None) -> None:
        self._codecs = codec_service or CodecService()

    def load_image(self, file_path: str | Path) -> SourceImage:
        """Открывает файл, выбирает декодер по расширению и декодирует изображение.

        Args:
            file_path: Путь до файла изображения (.png, .jpg, .jpeg).

        Returns:
            `SourceImage` c `PIL.Image.Image` в режиме RGBA и его границами.

        Raises:
            OpenFailedError: если файл не удалось открыть на чтение.
            UnsupportedInputFormatError: если расширение не PNG/JPEG; поток при этом не читается.
            DecodeFailedError: если содержимое файла не декодируется.
        """
        path = Path(file_path)
        try:
            reader = path.open("rb")
        except OSError as exc:
            raise OpenFailedError(f"error opening the image {path}", path, exc) from exc

        with reader:
            codec = codec_for_path(path)
            if codec is None:
                raise UnsupportedInputFormatError(f"unsupported image format: {path}", path)
            decoded = self._codecs.decode(reader, codec, path)

        pil_image = _to_rgba(decoded)
        return SourceImage(
            path=path,
            pil_image=pil_image,
            bounds=Bounds.of(pil_image),
            format=codec.name,
            mode=decoded.mode,
        )

    def save_image(self, image: GrayscaleImage, file_path: str | Path) -> None:
        """Записывает изображение в файл; формат определяется расширением.

        Расширение проверяется до создания файла, поэтому при неподдерживаемом
        формате пустой файл не остаётся.

        Raises:
            UnsupportedOutputFormatError: если расширение не PNG/JPEG.
            CreateFailedError: если файл не удалось создать или перезаписать.
            EncodeFailedError: если кодирование прервалось; файл может остаться обрезанным.
        """
        path = Path(file_path)
        codec = codec_for_path(path)
        if codec is None:
            raise UnsupportedOutputFormatError(f"unsupported output image format: {path}", path)

        try:
            writer = path.open("wb")
        except OSError as exc:
            raise CreateFailedError(f"error creating the output file {path}", path, exc) from exc

        with writer:
            self._codecs.encode(image.pil_image, writer, codec, path)
