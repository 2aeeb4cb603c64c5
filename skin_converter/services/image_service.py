from typing import Tuple
import cv2
import numpy as np
from PIL import Image as PILImage

OPAQUE = 0xFF
TRANSPARENT_BLACK = np.zeros(4, dtype=np.uint8)


class ImageService:
    """Pixel helpers over (H, W, 4) uint8 RGBA arrays.  No skin geometry here."""

    @staticmethod
    def new_canvas(width: int, height: int) -> np.ndarray:
        """Fully transparent RGBA canvas."""
        return np.zeros((height, width, 4), dtype=np.uint8)

    @staticmethod
    def get_area(pixels: np.ndarray, x: int, y: int, w: int, h: int) -> np.ndarray:
        return pixels[y:y + h, x:x + w].copy()

    @staticmethod
    def put_area(pixels: np.ndarray, patch: np.ndarray, x: int, y: int) -> None:
        """Overwrite pixels with *patch* (no blending), like putImageData."""
        h, w = patch.shape[:2]
        pixels[y:y + h, x:x + w] = patch

    @staticmethod
    def _alpha_composite(dst: np.ndarray, src: np.ndarray) -> np.ndarray:
        """Source-over with straight alpha."""
        out = PILImage.alpha_composite(
            PILImage.fromarray(np.ascontiguousarray(dst)),
            PILImage.fromarray(np.ascontiguousarray(src)),
        )
        return np.asarray(out, dtype=np.uint8)

    def composite_area(self, pixels: np.ndarray, patch: np.ndarray, x: int, y: int) -> None:
        """Draw *patch* over pixels at (x, y), like drawImage."""
        h, w = patch.shape[:2]
        region = pixels[y:y + h, x:x + w]
        pixels[y:y + h, x:x + w] = self._alpha_composite(region, patch)

    @staticmethod
    def mirror(patch: np.ndarray) -> np.ndarray:
        """Flip about the vertical axis."""
        return cv2.flip(np.ascontiguousarray(patch), 1)

    @staticmethod
    def clear_area(pixels: np.ndarray, x: int, y: int, w: int, h: int) -> None:
        pixels[y:y + h, x:x + w] = TRANSPARENT_BLACK

    @staticmethod
    def has_transparency(pixels: np.ndarray) -> bool:
        """True if any pixel is not fully opaque."""
        return bool((pixels[..., 3] != OPAQUE).any())

    @staticmethod
    def white_mask(pixels: np.ndarray) -> np.ndarray:
        """Exactly pure white (R=G=B=255), alpha ignored."""
        return (pixels[..., :3] == 0xFF).all(axis=-1)

    @staticmethod
    def black_mask(pixels: np.ndarray) -> np.ndarray:
        return (pixels[..., :3] == 0).all(axis=-1)

    def remove_white(self, pixels: np.ndarray) -> int:
        """
        Key pure-white pixels to transparent black in place.

        Returns:
            (int): how many pixels were keyed out.
        """
        mask = self.white_mask(pixels)
        pixels[mask] = TRANSPARENT_BLACK
        return int(mask.sum())

    @staticmethod
    def resize_nearest(pixels: np.ndarray, size: Tuple[int, int]) -> np.ndarray:
        """Nearest-neighbour rescale to (width, height); never interpolates."""
        return cv2.resize(np.ascontiguousarray(pixels), size, interpolation=cv2.INTER_NEAREST_EXACT)
