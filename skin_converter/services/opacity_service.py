import logging
import numpy as np

from ..models.regions import HAT_AREA, OPAQUE_OVERLAY_AREAS, Rect
from ..models.skin_format import SkinFormat
from .image_service import ImageService

logger = logging.getLogger(__name__)


class OpacityService:
    """
    Old skins were painted without an alpha channel and used pure white as
    "nothing here" on the overlay layers.  Turns that white into transparency.
    """

    def __init__(self):
        self.image_service = ImageService()

    def has_transparency(self, pixels: np.ndarray, skin_format: SkinFormat) -> bool:
        """Look for alpha usage in the primary area (16 x 16 or 16 x 8 grid units)."""
        w = skin_format.scale * 16
        h = w if skin_format.square else w // 2
        return self.image_service.has_transparency(pixels[:h, :w])

    def remove_white(self, pixels: np.ndarray, area: Rect, scale: int) -> int:
        x, y, w, h = area.to_pixels(scale)
        return self.image_service.remove_white(pixels[y:y + h, x:x + w])

    def fix_opaque(self, pixels: np.ndarray, skin_format: SkinFormat) -> bool:
        """
        Key out white overlay pixels in place when the skin has no transparency.

        Returns:
            True if the skin was treated as opaque and keyed, False if it already
            uses transparency (nothing is touched then).
        """
        if self.has_transparency(pixels, skin_format):
            return False

        areas = [HAT_AREA]
        if skin_format.square:
            areas.extend(OPAQUE_OVERLAY_AREAS.values())

        keyed = sum(self.remove_white(pixels, area, skin_format.scale) for area in areas)
        logger.debug(f"Opaque skin: keyed {keyed} white overlay pixels in {len(areas)} areas")
        return True
