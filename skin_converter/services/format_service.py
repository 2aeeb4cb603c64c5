from __future__ import annotations
import logging
from typing import Tuple

from ..errors import DimensionMismatchError, InvalidDimensionsError
from ..models.skin_format import SkinFormat
from ..models.skin_image import SkinImage

logger = logging.getLogger(__name__)

GRID_UNITS = 16
MODERN_WIDTH = 64


class FormatService:
    """
    Validates raw skin dimensions and derives the SkinFormat.
    Pure checks, no pixel access.
    """

    @staticmethod
    def is_valid_size(width: int, height: int) -> bool:
        return (
            width > 0
            and height > 0
            and width % 2 == 0
            and height % 2 == 0
            and width % 64 == 0
            and height % 32 == 0
            and (width == height or width == 2 * height)
        )

    def check_sizes(
        self,
        width: int,
        height: int,
        natural_width: int | None = None,
        natural_height: int | None = None,
    ) -> None:
        """
        Raise unless (width, height) is an accepted skin size.

        natural_width / natural_height are the dimensions the decoder reports
        in the file header; when given they must match the decoded raster.
        """
        if natural_width is not None and natural_height is not None:
            if (natural_width, natural_height) != (width, height):
                raise DimensionMismatchError(
                    "The natural size of the image is not equal to the size of the attribute. "
                    f"Natural: {natural_width}x{natural_height}, decoded: {width}x{height}"
                )

        if not self.is_valid_size(width, height):
            raise InvalidDimensionsError(f"Wrong image size. Received: {width}x{height}")

    @staticmethod
    def get_format(width: int, height: int) -> SkinFormat:
        return SkinFormat(
            hd=width > MODERN_WIDTH,
            square=width == height,
            scale=width // GRID_UNITS,
        )

    def classify(self, skin: SkinImage) -> SkinFormat:
        """check_sizes + get_format for a decoded skin."""
        natural: Tuple[int | None, int | None] = skin.natural_size or (None, None)
        self.check_sizes(skin.width, skin.height, *natural)
        skin_format = self.get_format(skin.width, skin.height)
        logger.debug(f"Skin {skin.width}x{skin.height} classified as {skin_format}")
        return skin_format
