from __future__ import annotations
from pathlib import Path
from typing import Union

from .errors import InvalidInputTypeError
from .models.results import ConvertedSkin, ReturnType, SkinHead, SkinSource
from .pipeline.head_extractor import DEFAULT_HEAD_SIZE, get_skin_head
from .pipeline.skin_normalizer import DEFAULT_RETURN_TYPE, convert_skin


class MinecraftSkinConverter:
    """
    Converts one skin to the modern 64x64 layout (at its own resolution) and
    renders head avatars from it.

    Args:
        skin_source: filesystem path, ``data:`` URI or the encoded image bytes.
        return_type: "buffer/png" (bytes), "base64/png" (data URL) or
            "raw/rgba" (numpy array).
    """

    def __init__(
        self,
        skin_source: SkinSource,
        return_type: Union[ReturnType, str] = DEFAULT_RETURN_TYPE,
    ):
        if not isinstance(skin_source, (str, Path, bytes, bytearray)):
            raise InvalidInputTypeError("skinpath must be type of string, Path or bytes")

        self.skin_source = skin_source
        self.return_type = ReturnType.parse(return_type)
        self.is_slim: bool | None = None  # set by convert_skin()

    def convert_skin(self) -> ConvertedSkin:
        result = convert_skin(self.skin_source, self.return_type)
        self.is_slim = result.slim
        return result

    def get_skin_head(self, size: int = DEFAULT_HEAD_SIZE) -> SkinHead:
        """Head avatar rescaled from width/8 to size x size (a multiple of 8 is recommended)."""
        return get_skin_head(self.skin_source, size, self.return_type)
