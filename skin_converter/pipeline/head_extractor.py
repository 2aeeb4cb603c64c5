# pipeline/head_extractor.py
from __future__ import annotations
import logging
import os

import numpy as np
from dotenv import load_dotenv

from ..models.results import ReturnType, SkinHead, SkinSource
from ..models.skin_image import SkinImage
from ..repositories.skin_repository import SkinRepository
from ..services.format_service import FormatService
from ..services.head_service import HeadService

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# env‑vars
load_dotenv()
DEFAULT_RETURN_TYPE = os.getenv("SKIN_RETURN_TYPE", ReturnType.BUFFER_PNG.value)
DEFAULT_HEAD_SIZE = int(os.getenv("SKIN_HEAD_SIZE", "8"))


def extract_head(
    skin: SkinImage,
    size: int = DEFAULT_HEAD_SIZE,
    *,
    format_service: FormatService = FormatService(),
    head_service: HeadService = HeadService(),
) -> np.ndarray:
    """Face + hat of *skin* as a size x size RGBA array.  Needs no prior conversion."""
    head_service.check_size(size)
    format_service.classify(skin)
    head = head_service.render_head(skin.pixels, size)
    logger.info(f"Extracted {size}x{size} head from {skin.width}x{skin.height} skin")
    return head


def get_skin_head(
    source: SkinSource,
    size: int = DEFAULT_HEAD_SIZE,
    return_type: ReturnType | str = DEFAULT_RETURN_TYPE,
    *,
    skin_repository: SkinRepository = SkinRepository(),
) -> SkinHead:
    """Decode *source* and encode its head thumbnail."""
    return_type = ReturnType.parse(return_type)
    HeadService.check_size(size)
    skin = skin_repository.load(source)
    head = extract_head(skin, size)

    return SkinHead(
        size=size,
        skin_source=source,
        data_type=return_type,
        data=skin_repository.encode(head, return_type),
    )
