"""Предпросмотр «до/после»: исходное изображение и результат конвертации.

Принципы:
- SRP: отвечает только за отображение, изображения получает от контроллера.
"""
from __future__ import annotations

from typing import Optional, Tuple

import customtkinter as ctk
from PIL import Image

PREVIEW_SIZE: Tuple[int, int] = (360, 360)


def _fit(image: Image.Image, box: Tuple[int, int]) -> Tuple[int, int]:
    """Размер, при котором изображение целиком помещается в `box` с сохранением пропорций."""
    w, h = image.size
    scale = min(box[0] / max(1, w), box[1] / max(1, h), 1.0)
    return max(1, int(w * scale)), max(1, int(h * scale))


class PreviewPane(ctk.CTkFrame):
    """Две подписанные миниатюры: исходник слева, результат справа."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure((0, 1), weight=1)

        self._before_title = ctk.CTkLabel(self, text="До", font=ctk.CTkFont(size=14, weight="bold"))
        self._after_title = ctk.CTkLabel(self, text="После", font=ctk.CTkFont(size=14, weight="bold"))
        self._before_title.grid(row=0, column=0, padx=8, pady=(8, 4))
        self._after_title.grid(row=0, column=1, padx=8, pady=(8, 4))

        self._before = ctk.CTkLabel(self, text="—")
        self._after = ctk.CTkLabel(self, text="—")
        self._before.grid(row=1, column=0, padx=8, pady=(0, 8), sticky="nsew")
        self._after.grid(row=1, column=1, padx=8, pady=(0, 8), sticky="nsew")

        # keep references, otherwise Tk drops the images
        self._before_image: Optional[ctk.CTkImage] = None
        self._after_image: Optional[ctk.CTkImage] = None

    # ---- Public API ----
    def set_image(self, image: Optional[Image.Image]) -> None:
        """Показывает исходное изображение и сбрасывает результат."""
        self._before_image = self._show(self._before, image)
        self.set_processed_image(None)

    def set_processed_image(self, image: Optional[Image.Image]) -> None:
        """Показывает результат конвертации (None очищает панель)."""
        self._after_image = self._show(self._after, image)

    # ---- Internals ----
    def _show(self, label: ctk.CTkLabel, image: Optional[Image.Image]) -> Optional[ctk.CTkImage]:
        if image is None:
            label.configure(image=None, text="—")
            return None
        ctk_image = ctk.CTkImage(light_image=image, dark_image=image, size=_fit(image, PREVIEW_SIZE))
        label.configure(image=ctk_image, text="")
        return ctk_image
