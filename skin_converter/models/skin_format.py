from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SkinFormat:
    """
    Shape of a validated skin atlas.

    scale converts one unit of the 16x16 logical grid into pixels
    (4 for a 64px wide skin, 8 for 128px, ...).
    """
    hd: bool
    square: bool
    scale: int


class LimbVariant(str, Enum):
    CLASSIC = "classic"
    SLIM = "slim"


@dataclass
class SlimSampleCounts:
    """Per-rectangle counters gathered while sampling the arm overlay."""
    total_pixels: int = 0
    transparent: int = 0
    black: int = 0
    white: int = 0

    @property
    def is_unused(self) -> bool:
        return self.total_pixels > 0 and self.total_pixels in (
            self.transparent,
            self.black,
            self.white,
        )
