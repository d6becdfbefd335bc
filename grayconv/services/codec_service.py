"""Выбор кодека по расширению файла и декодирование/кодирование через Pillow.

Принципы:
- SRP: сервис только диспетчеризует форматы; сами кодеки реализованы в Pillow.
- OCP: новый формат добавляется новой записью `Codec` в `CODECS_BY_EXTENSION`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Mapping, Optional, Tuple

from PIL import Image

from grayconv.models.errors import DecodeFailedError, EncodeFailedError

logger = logging.getLogger(__name__)

JPEG_QUALITY = 75


@dataclass(frozen=True)
class Codec:
    """Пара декодер/кодировщик для одного формата.

    Fields:
        name: Человекочитаемое имя формата.
        pil_format: Имя формата в Pillow (для `Image.open(formats=...)` и `save(format=...)`).
        extensions: Расширения файлов в нижнем регистре, с точкой.
        save_options: Параметры, передаваемые в `Image.save`.
    """
    name: str
    pil_format: str
    extensions: Tuple[str, ...]
    save_options: Mapping[str, Any] = field(default_factory=dict)


PNG = Codec(name="PNG", pil_format="PNG", extensions=(".png",))
JPEG = Codec(
    name="JPEG",
    pil_format="JPEG",
    extensions=(".jpg", ".jpeg"),
    save_options={"quality": JPEG_QUALITY},
)

CODECS_BY_EXTENSION: Dict[str, Codec] = {
    ext: codec for codec in (PNG, JPEG) for ext in codec.extensions
}


def codec_for_path(path: str | Path) -> Optional[Codec]:
    """Возвращает кодек по расширению пути (без учёта регистра) или None."""
    return CODECS_BY_EXTENSION.get(Path(path).suffix.lower())


def supported_extensions() -> List[str]:
    return sorted(CODECS_BY_EXTENSION)


class CodecService:
    def decode(self, stream: BinaryIO, codec: Codec, path: str | Path) -> Image.Image:
        """Декодирует поток байтов выбранным кодеком и полностью загружает пиксели.

        Args:
            stream: Открытый на чтение бинарный поток.
            codec: Кодек, выбранный по расширению входного файла.
            path: Путь к файлу (для сообщений об ошибке).

        Returns:
            Загруженное изображение PIL в исходном режиме файла.

        Raises:
            DecodeFailedError: если данные повреждены, обрезаны или не соответствуют формату.
        """
        try:
            image = Image.open(stream, formats=[codec.pil_format])
            # Image.open ленивый: ошибки в данных пикселей всплывают только при load()
            image.load()
        except (Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
            raise DecodeFailedError(f"error decoding the image {path}", path, exc) from exc
        logger.debug("decoded %s as %s (%s, %dx%d)", path, codec.name, image.mode, *image.size)
        return image

    def encode(self, image: Image.Image, stream: BinaryIO, codec: Codec, path: str | Path) -> None:
        """Кодирует изображение в поток выбранным кодеком.

        Raises:
            EncodeFailedError: если Pillow не смог записать изображение;
                файл по `path` при этом может остаться обрезанным.
        """
        try:
            image.save(stream, format=codec.pil_format, **codec.save_options)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeFailedError(
                f"error encoding grayscale image (output may be left truncated) {path}", path, exc
            ) from exc
        logger.debug("encoded %s as %s", path, codec.name)
