"""Synthetic skins built with numpy; no binary fixtures."""

from __future__ import annotations

import io
from typing import Callable, Tuple

import numpy as np
import pytest
from PIL import Image as PILImage

from skin_converter.models.skin_image import SkinImage

SKIN_TONE = (200, 150, 120, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


def solid(width: int, height: int, color: Tuple[int, int, int, int] = SKIN_TONE) -> np.ndarray:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :] = color
    return pixels


def fill(pixels: np.ndarray, x: int, y: int, w: int, h: int, color) -> None:
    pixels[y:y + h, x:x + w] = color


def to_png(pixels: np.ndarray) -> bytes:
    buffer = io.BytesIO()
    PILImage.fromarray(pixels).save(buffer, format="PNG")
    return buffer.getvalue()


def from_png(data: bytes) -> np.ndarray:
    with PILImage.open(io.BytesIO(data)) as img:
        return np.array(img.convert("RGBA"))


@pytest.fixture
def make_skin() -> Callable[..., SkinImage]:
    def _make(width: int = 64, height: int = 64, color=SKIN_TONE) -> SkinImage:
        pixels = solid(width, height, color)
        return SkinImage(pixels=pixels, natural_size=(width, height))
    return _make


@pytest.fixture
def noisy_pixels() -> Callable[[int, int], np.ndarray]:
    """Opaque random pixels, never fully black or white."""
    def _make(width: int, height: int, seed: int = 0) -> np.ndarray:
        rng = np.random.default_rng(seed)
        pixels = rng.integers(1, 255, size=(height, width, 4), dtype=np.uint8)
        pixels[..., 3] = 255
        return pixels
    return _make
