from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union
import numpy as np


@dataclass
class SkinImage:
    """
    Simple data object: RGBA pixels (+ source reference for bookkeeping).
    No decoding logic outside the repository.
    """
    pixels: np.ndarray # Shape (H, W, 4), dtype uint8, RGBA order.
    source: Union[str, Path, bytes, None] = None # Where the skin came from.
    natural_size: Tuple[int, int] | None = None # (width, height) reported by the file header.

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])
