import logging
import numpy as np

from ..errors import SizeTooSmallError
from .image_service import ImageService

logger = logging.getLogger(__name__)

MIN_HEAD_SIZE = 8


class HeadService:
    """
    Cuts the face of the head cube out of a skin, puts the hat on it and
    rescales it, keeping hard pixel edges.
    """

    def __init__(self):
        self.image_service = ImageService()

    @staticmethod
    def check_size(size: int) -> None:
        if size < MIN_HEAD_SIZE:
            raise SizeTooSmallError(
                f"the size of the head must be equal to or more than eight. Received: {size}"
            )
        if size % MIN_HEAD_SIZE:
            logger.debug(f"Head size {size} is not a multiple of 8, pixels will be uneven")

    def get_transparent_hat(self, pixels: np.ndarray) -> np.ndarray:
        """
        Front of the hat layer.  A fully opaque hat is treated as a legacy
        placeholder: its pure-white pixels become transparent.
        """
        one_head = pixels.shape[1] // 8
        hat = self.image_service.get_area(pixels, 5 * one_head, one_head, one_head, one_head)
        if not self.image_service.has_transparency(hat):
            self.image_service.remove_white(hat)
        return hat

    def compose_head(self, pixels: np.ndarray) -> np.ndarray:
        """Face with hat, at the skin's native resolution (width / 8 square)."""
        one_head = pixels.shape[1] // 8
        canvas = self.image_service.new_canvas(one_head, one_head)
        face = self.image_service.get_area(pixels, one_head, one_head, one_head, one_head)
        self.image_service.composite_area(canvas, face, 0, 0)
        self.image_service.composite_area(canvas, self.get_transparent_hat(pixels), 0, 0)
        return canvas

    def render_head(self, pixels: np.ndarray, size: int) -> np.ndarray:
        self.check_size(size)
        return self.image_service.resize_nearest(self.compose_head(pixels), (size, size))
