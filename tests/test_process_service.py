"""Tests for the BT.601 luma transform."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from grayconv.models.image_model import Bounds, SourceImage
from grayconv.services.process_service import ProcessService


def _source(arr: np.ndarray) -> SourceImage:
    image = Image.fromarray(arr)
    return SourceImage(path=Path("memory.png"), pil_image=image, bounds=Bounds.of(image), format="PNG", mode="RGBA")


class TestLuma:
    """Tests for ProcessService.luma."""

    def test_primary_colors(self) -> None:
        """Red, green, blue and white map to the rounded BT.601 weights."""
        arr = np.array(
            [[[255, 0, 0, 255], [0, 255, 0, 255]], [[0, 0, 255, 255], [255, 255, 255, 255]]],
            dtype=np.uint8,
        )

        result = ProcessService().luma(arr)

        assert result.tolist() == [[76, 150], [29, 255]]
        assert result.dtype == np.uint8

    def test_alpha_does_not_affect_result(self) -> None:
        """Pixels with equal RGB and different alpha give the same intensity."""
        arr = np.array([[[10, 200, 90, 0], [10, 200, 90, 128], [10, 200, 90, 255]]], dtype=np.uint8)

        result = ProcessService().luma(arr)

        assert len(set(result.ravel().tolist())) == 1

    def test_gray_input_is_unchanged(self) -> None:
        """R == G == B == v yields exactly v for every v."""
        values = np.arange(256, dtype=np.uint8)
        arr = np.stack([values, values, values], axis=-1).reshape(1, 256, 3)

        result = ProcessService().luma(arr)

        assert result.ravel().tolist() == list(range(256))

    def test_matches_per_pixel_formula(self) -> None:
        """Vectorised result equals a plain per-pixel loop."""
        rng = np.random.default_rng(7)
        arr = rng.integers(0, 256, size=(9, 13, 4), dtype=np.uint8)

        result = ProcessService().luma(arr)

        for y in range(arr.shape[0]):
            for x in range(arr.shape[1]):
                r, g, b, _a = (int(v) for v in arr[y, x])
                assert result[y, x] == (299 * r + 587 * g + 114 * b + 500) // 1000

    def test_rejects_single_channel_array(self) -> None:
        with pytest.raises(ValueError):
            ProcessService().luma(np.zeros((4, 4), dtype=np.uint8))


class TestToGrayscale:
    """Tests for ProcessService.to_grayscale."""

    def test_preserves_bounds_and_drops_alpha(self) -> None:
        arr = np.zeros((5, 7, 4), dtype=np.uint8)
        source = _source(arr)

        gray = ProcessService().to_grayscale(source)

        assert gray.bounds == source.bounds
        assert gray.bounds.size == (7, 5)
        assert gray.pil_image.mode == "L"
