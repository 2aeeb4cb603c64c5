import logging
import numpy as np

from ..models.regions import SLIM_AREAS, Rect
from ..models.skin_format import LimbVariant, SkinFormat, SlimSampleCounts
from .image_service import ImageService

logger = logging.getLogger(__name__)

TOP_WEIGHT = 1
SIDE_WEIGHT = 2
SLIM_SCORE_THRESHOLD = 4


class SlimService:
    """
    Tells slim (3px) arms from classic (4px) ones.

    A slim skin leaves a 1-unit strip on top and on the side of each arm
    unpainted: fully transparent, or solid black / solid white on old editors.

    Each unused top strip scores 1 and each unused side strip scores 2, over
    both arms.  A score of 4 or more is slim: both sides, or both tops and one
    side.  One whole arm alone (3) stays classic.
    """

    def __init__(self):
        self.image_service = ImageService()

    def sample_area(self, pixels: np.ndarray, area: Rect, scale: int) -> SlimSampleCounts:
        x, y, w, h = area.to_pixels(scale)
        patch = pixels[y:y + h, x:x + w]
        return SlimSampleCounts(
            total_pixels=w * h,
            transparent=int((patch[..., 3] != 0xFF).sum()),
            black=int(self.image_service.black_mask(patch).sum()),
            white=int(self.image_service.white_mask(patch).sum()),
        )

    def is_unused_area(self, pixels: np.ndarray, area: Rect, scale: int) -> bool:
        return self.sample_area(pixels, area, scale).is_unused

    def arm_score(self, pixels: np.ndarray, arm: str, scale: int) -> int:
        areas = SLIM_AREAS[arm]
        score = 0
        if self.is_unused_area(pixels, areas["top"], scale):
            score += TOP_WEIGHT
        if self.is_unused_area(pixels, areas["side"], scale):
            score += SIDE_WEIGHT
        return score

    def detect_variant(self, pixels: np.ndarray, skin_format: SkinFormat) -> LimbVariant:
        """Needs the square layout: both arms must be present."""
        score = sum(self.arm_score(pixels, arm, skin_format.scale) for arm in ("right_arm", "left_arm"))
        variant = LimbVariant.SLIM if score >= SLIM_SCORE_THRESHOLD else LimbVariant.CLASSIC
        logger.debug(f"Slim score {score}/{SLIM_SCORE_THRESHOLD} -> {variant.value}")
        return variant
