from __future__ import annotations

import base64
import binascii
import io
import os
from pathlib import Path
from typing import Iterable, Iterator, Union

import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError
from dotenv import load_dotenv

from ..errors import DecodeFailureError, InvalidInputTypeError
from ..models.results import ReturnType, SkinData
from ..models.skin_image import SkinImage

# Load environment variables
load_dotenv()

DATA_URI_PREFIX = "data:"
PNG_DATA_URL_PREFIX = "data:image/png;base64,"


class SkinRepository:
    """
    Handles decoding sources into SkinImage entities and encoding pixels back.
    """
    def __init__(self):
        exts = os.getenv("VALID_IMAGE_EXTENSIONS", ".png")
        self.VALID_EXTS = {ext.strip().lower() for ext in exts.split(",") if ext.strip()}

    @staticmethod
    def _read_source(source: Union[str, Path, bytes, bytearray]) -> bytes:
        if isinstance(source, (bytes, bytearray)):
            return bytes(source)

        if isinstance(source, str) and source.startswith(DATA_URI_PREFIX):
            header, sep, payload = source.partition(",")
            if not sep or not header.endswith(";base64"):
                raise DecodeFailureError(f"unsupported data URI: {header[:40]}")
            try:
                return base64.b64decode(payload, validate=True)
            except (binascii.Error, ValueError) as err:
                raise DecodeFailureError(f"invalid base64 payload in data URI: {err}") from err

        if isinstance(source, (str, Path)):
            path = Path(source)
            try:
                return path.read_bytes()
            except OSError as err:
                raise DecodeFailureError(f"unexpected error while loading the image: {err}") from err

        raise InvalidInputTypeError("skin source must be a path, a data URI or bytes")

    def load(self, source: Union[str, Path, bytes, bytearray]) -> SkinImage:
        """Decode *source* into an RGBA SkinImage."""
        raw = self._read_source(source)
        try:
            with PILImage.open(io.BytesIO(raw)) as pil_img:
                natural_size = pil_img.size
                pixels = np.array(pil_img.convert("RGBA"), dtype=np.uint8)
        except (UnidentifiedImageError, PILImage.DecompressionBombError, OSError, SyntaxError) as err:
            raise DecodeFailureError(f"unexpected error while loading the image: {err}") from err

        return SkinImage(pixels=pixels, source=source, natural_size=natural_size)

    @staticmethod
    def encode_png(pixels: np.ndarray) -> bytes:
        buffer = io.BytesIO()
        PILImage.fromarray(np.ascontiguousarray(pixels)).save(buffer, format="PNG")
        return buffer.getvalue()

    def encode(self, pixels: np.ndarray, return_type: ReturnType) -> SkinData:
        """Shape the output according to the caller's return type."""
        return_type = ReturnType.parse(return_type)
        if return_type is ReturnType.RAW_RGBA:
            return pixels.copy()

        png = self.encode_png(pixels)
        if return_type is ReturnType.BASE64_PNG:
            return PNG_DATA_URL_PREFIX + base64.b64encode(png).decode("ascii")
        return png

    @staticmethod
    def save(data: bytes, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    def iter_dir(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Path]:
        """
        Yield skin file paths one at a time.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if p.is_file() and p.suffix.lower() in allowed:
                yield p
