from pathlib import Path
from typing import Callable, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image

Pixel = Tuple[int, int, int, int]


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Writes an RGBA image built from a row-major pixel list and returns its path."""

    def _make(name: str, size: Tuple[int, int], pixels: Sequence[Pixel], fmt: str = "PNG") -> Path:
        arr = np.array(pixels, dtype=np.uint8).reshape(size[1], size[0], 4)
        image = Image.fromarray(arr)
        if fmt == "JPEG" or fmt == "BMP":
            image = image.convert("RGB")
        path = tmp_path / name
        image.save(path, format=fmt)
        return path

    return _make


@pytest.fixture
def noise_png(tmp_path: Path) -> Path:
    """A 64x48 RGBA PNG filled with deterministic noise."""
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(48, 64, 4), dtype=np.uint8)
    path = tmp_path / "noise.png"
    Image.fromarray(arr).save(path, format="PNG")
    return path
