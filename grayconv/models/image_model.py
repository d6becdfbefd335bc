"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PIL import Image


@dataclass(frozen=True)
class Bounds:
    """Прямоугольник допустимых координат пикселей.

    Fields:
        x: Левая граница (для декодированных файлов всегда 0).
        y: Верхняя граница (для декодированных файлов всегда 0).
        width: Ширина, px.
        height: Высота, px.
    """
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def of(cls, image: Image.Image) -> "Bounds":
        """Строит границы по размеру изображения PIL."""
        width, height = image.size
        return cls(x=0, y=0, width=width, height=height)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class SourceImage:
    """Исходное цветное изображение, приведённое к RGBA.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Декодированное изображение PIL (режим "RGBA").
        bounds: Границы пиксельной сетки.
        format: Имя кодека, которым файл был декодирован ("PNG" | "JPEG").
        mode: Исходный режим PIL до приведения к RGBA, например "P" или "RGB".
    """
    path: Path
    pil_image: Image.Image
    bounds: Bounds
    format: str
    mode: str


@dataclass(frozen=True)
class GrayscaleImage:
    """Одноканальное изображение яркости (режим "L", без альфа-канала).

    Fields:
        pil_image: Изображение PIL в режиме "L".
        bounds: Границы, совпадающие с границами исходного изображения.
    """
    pil_image: Image.Image
    bounds: Bounds
