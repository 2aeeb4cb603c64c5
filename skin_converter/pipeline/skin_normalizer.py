# pipeline/skin_normalizer.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import os

import numpy as np
from dotenv import load_dotenv

from ..models.results import ConvertedSkin, ReturnType, SkinSource
from ..models.skin_format import LimbVariant, SkinFormat
from ..models.skin_image import SkinImage
from ..repositories.skin_repository import SkinRepository
from ..services.cleanup_service import CleanupService
from ..services.format_service import FormatService
from ..services.geometry_service import GeometryService
from ..services.opacity_service import OpacityService
from ..services.slim_service import SlimService

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# env‑vars
load_dotenv()
DEFAULT_RETURN_TYPE = os.getenv("SKIN_RETURN_TYPE", ReturnType.BUFFER_PNG.value)


@dataclass
class NormalizedSkin:
    pixels: np.ndarray          # canonical square atlas
    skin_format: SkinFormat     # format of the source, before remap
    variant: LimbVariant
    remapped: bool


# ------------------------------------------------------------------
def normalize_skin(
    skin: SkinImage,
    *,
    format_service: FormatService = FormatService(),
    opacity_service: OpacityService = OpacityService(),
    geometry_service: GeometryService = GeometryService(),
    slim_service: SlimService = SlimService(),
    cleanup_service: CleanupService = CleanupService(),
) -> NormalizedSkin:
    """
    In-memory conversion of one decoded skin:
        • validate size, derive format
        • key out white on fully opaque skins
        • rebuild the left limbs of a legacy 2:1 skin
        • detect slim / classic arms
        • blank the unused cells
    The input SkinImage is left untouched; a fresh canvas is returned.
    """
    skin_format = format_service.classify(skin)

    pixels = geometry_service.to_square_canvas(skin.pixels)
    opacity_service.fix_opaque(pixels, skin_format)

    remapped = not skin_format.square
    if remapped:
        geometry_service.convert_to_square(pixels, skin_format)

    variant = slim_service.detect_variant(pixels, skin_format)
    cleanup_service.clear_unused_area(pixels, skin_format, variant)

    logger.info(
        f"Normalized {skin.width}x{skin.height} skin "
        f"(hd={skin_format.hd}, legacy={remapped}, variant={variant.value})"
    )
    return NormalizedSkin(pixels=pixels, skin_format=skin_format, variant=variant, remapped=remapped)


def convert_skin(
    source: SkinSource,
    return_type: ReturnType | str = DEFAULT_RETURN_TYPE,
    *,
    skin_repository: SkinRepository = SkinRepository(),
) -> ConvertedSkin:
    """Decode *source*, normalize it and encode the canonical atlas."""
    return_type = ReturnType.parse(return_type)
    skin = skin_repository.load(source)
    normalized = normalize_skin(skin)

    return ConvertedSkin(
        slim=normalized.variant is LimbVariant.SLIM,
        hd=normalized.skin_format.hd,
        skin_source=source,
        data_type=return_type,
        data=skin_repository.encode(normalized.pixels, return_type),
    )
