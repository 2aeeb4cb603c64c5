from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union
import numpy as np

from ..errors import InvalidInputTypeError


class ReturnType(str, Enum):
    BUFFER_PNG = "buffer/png"    # PNG bytes
    BASE64_PNG = "base64/png"    # data:image/png;base64,... string
    RAW_RGBA = "raw/rgba"        # canonical np.ndarray, no encoding

    @classmethod
    def parse(cls, value: Union["ReturnType", str]) -> "ReturnType":
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(f'"{member.value}"' for member in cls)
            raise InvalidInputTypeError(f"returnType must be one of {allowed}, got {value!r}") from None


SkinData = Union[bytes, str, np.ndarray]
SkinSource = Union[str, Path, bytes, bytearray]


@dataclass
class ConvertedSkin:
    slim: bool
    hd: bool
    skin_source: SkinSource
    data_type: ReturnType
    data: SkinData


@dataclass
class SkinHead:
    size: int
    skin_source: SkinSource
    data_type: ReturnType
    data: SkinData
