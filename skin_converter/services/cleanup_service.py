import logging
from typing import Iterable, List
import numpy as np

from ..models.regions import SLIM_AREAS, UNUSED_AREAS, Rect
from ..models.skin_format import LimbVariant, SkinFormat
from .image_service import ImageService

logger = logging.getLogger(__name__)


class CleanupService:
    """Blanks atlas cells the modern model never samples."""

    def __init__(self):
        self.image_service = ImageService()

    @staticmethod
    def areas_to_clear(variant: LimbVariant, was_square: bool) -> List[Rect]:
        areas = [*UNUSED_AREAS["head_hat"].values(), *UNUSED_AREAS["body"].values()]

        if variant is LimbVariant.SLIM:
            areas.extend(SLIM_AREAS["right_arm"].values())
            areas.extend(SLIM_AREAS["left_arm"].values())

        if was_square:
            # second body layer and the strip under it only exist on square sources
            if variant is LimbVariant.SLIM:
                areas.extend(SLIM_AREAS["left_arm"].values())
            areas.extend(UNUSED_AREAS["body2"].values())
            areas.extend(UNUSED_AREAS["bottom"].values())

        return areas

    def clear_areas(self, pixels: np.ndarray, areas: Iterable[Rect], scale: int) -> None:
        for area in areas:
            self.image_service.clear_area(pixels, *area.to_pixels(scale))

    def clear_unused_area(
        self,
        pixels: np.ndarray,
        skin_format: SkinFormat,
        variant: LimbVariant,
    ) -> None:
        """*skin_format* is the format of the source, before any remap."""
        areas = self.areas_to_clear(variant, skin_format.square)
        self.clear_areas(pixels, areas, skin_format.scale)
        logger.debug(f"Cleared {len(areas)} unused areas")
