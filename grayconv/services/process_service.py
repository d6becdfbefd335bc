from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
from PIL import Image

from grayconv.models.image_model import Bounds, GrayscaleImage, SourceImage

logger = logging.getLogger(__name__)

# ITU-R BT.601: Y = 0.299 R + 0.587 G + 0.114 B, в тысячных долях
BT601_WEIGHTS: Tuple[int, int, int] = (299, 587, 114)


class ProcessService:
    def luma(self, rgb: np.ndarray) -> np.ndarray:
        """
        Яркость по BT.601 для массива (H, W, 3|4) uint8, альфа-канал игнорируется.
        Y = (299*R + 587*G + 114*B + 500) // 1000, с округлением к ближайшему целому.
        Возвращает массив (H, W) uint8.
        """
        if rgb.ndim != 3 or rgb.shape[2] < 3:
            raise ValueError(f"ожидался массив (H, W, 3|4), получено {rgb.shape}")
        # int32: взвешенная сумма доходит до 255 * 1000
        channels = rgb[..., :3].astype(np.int32)
        wr, wg, wb = BT601_WEIGHTS
        y = (wr * channels[..., 0] + wg * channels[..., 1] + wb * channels[..., 2] + 500) // 1000
        return y.astype(np.uint8)

    def to_grayscale(self, source: SourceImage) -> GrayscaleImage:
        """
        Преобразование исходного изображения в оттенки серого (8-бит, L).
        Каждый пиксель результата зависит только от соответствующего пикселя источника.
        """
        arr = np.asarray(source.pil_image)
        gray = Image.fromarray(self.luma(arr))
        bounds = Bounds.of(gray)
        if bounds != source.bounds:
            raise ValueError(f"границы изменились при конвертации: {source.bounds} -> {bounds}")
        logger.debug("converted %dx%d pixels to luma", bounds.width, bounds.height)
        return GrayscaleImage(pil_image=gray, bounds=bounds)
