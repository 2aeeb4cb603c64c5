import logging
import numpy as np

from ..models.regions import COPY_AREAS, CopyArea
from ..models.skin_format import SkinFormat
from .image_service import ImageService

logger = logging.getLogger(__name__)


class GeometryService:
    """
    Builds the modern square layout out of a legacy 2:1 skin by mirroring the
    right arm / right leg into the empty left limb slots.
    """

    def __init__(self):
        self.image_service = ImageService()

    def to_square_canvas(self, pixels: np.ndarray) -> np.ndarray:
        """Draw the skin at (0, 0) on a transparent width x width canvas."""
        width = pixels.shape[1]
        canvas = self.image_service.new_canvas(width, width)
        self.image_service.put_area(canvas, pixels, 0, 0)
        return canvas

    def copy_area(
        self,
        pixels: np.ndarray,
        area: CopyArea,
        scale: int,
        scratch: np.ndarray,
    ) -> None:
        """
        Capture the source slice into *scratch*, then draw it horizontally
        mirrored into the destination rectangle.  The reflection axis is the
        destination's right edge: source column c lands on dst_x + w - 1 - c.
        """
        src_x, src_y, w, h, dst_x, dst_y = area.to_pixels(scale)

        self.image_service.put_area(scratch, self.image_service.get_area(pixels, src_x, src_y, w, h), 0, 0)
        mirrored = self.image_service.mirror(scratch[:h, :w])
        self.image_service.composite_area(pixels, mirrored, dst_x, dst_y)

    def convert_to_square(self, pixels: np.ndarray, skin_format: SkinFormat) -> None:
        """Fill the second arm and leg on a square canvas, in place."""
        size = 16 * skin_format.scale
        scratch = self.image_service.new_canvas(size, size)

        for limb in ("arm", "leg"):
            for name in ("top", "bottom", "outer", "front", "inner", "back"):
                self.copy_area(pixels, COPY_AREAS[limb][name], skin_format.scale, scratch)

        logger.debug(f"Remapped legacy limbs at scale {skin_format.scale}")
