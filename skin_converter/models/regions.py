from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """
    Rectangle in the 16x16 logical grid.

    divisor lets a region be written on a finer grid: the slim arm strips are
    expressed in 64-unit coordinates and use divisor=4.
    """
    x: int
    y: int
    w: int
    h: int
    divisor: int = 1

    def to_pixels(self, scale: int) -> Tuple[int, int, int, int]:
        d = self.divisor
        return self.x * scale // d, self.y * scale // d, self.w * scale // d, self.h * scale // d


@dataclass(frozen=True)
class CopyArea:
    """Source rectangle (src_x, src_y, w, h) mirrored into (dst_x, dst_y)."""
    src_x: int
    src_y: int
    w: int
    h: int
    dst_x: int
    dst_y: int

    def to_pixels(self, scale: int) -> Tuple[int, int, int, int, int, int]:
        return tuple(v * scale for v in (self.src_x, self.src_y, self.w, self.h, self.dst_x, self.dst_y))


def _frozen(**regions) -> MappingProxyType:
    return MappingProxyType(regions)


# ── White-keyed overlay strips (only used on fully opaque skins) ─────
HAT_AREA = Rect(8, 0, 8, 4)
OPAQUE_OVERLAY_AREAS = _frozen(
    right_leg_body_right_arm=Rect(0, 8, 15, 4),
    left_leg=Rect(0, 12, 4, 4),
    left_arm=Rect(12, 12, 4, 4),
)

# ── Cells the modern layout never samples ────────────────────────────
UNUSED_AREAS = _frozen(
    head_hat=_frozen(
        left=Rect(0, 0, 2, 2),
        middle=Rect(6, 0, 4, 2),
        right=Rect(14, 0, 2, 2),
    ),
    body=_frozen(
        left=Rect(0, 4, 1, 1),
        middle1=Rect(3, 4, 2, 1),
        middle2=Rect(9, 4, 2, 1),
        right=Rect(13, 4, 1, 1),
        right_side=Rect(14, 4, 2, 4),
    ),
    body2=_frozen(
        left=Rect(0, 8, 1, 1),
        middle1=Rect(3, 8, 2, 1),
        middle2=Rect(9, 8, 2, 1),
        right=Rect(13, 8, 1, 1),
        right_side=Rect(14, 8, 2, 4),
    ),
    bottom=_frozen(
        left=Rect(0, 12, 1, 1),
        middle1=Rect(3, 12, 2, 1),
        middle2=Rect(7, 12, 2, 1),
        middle3=Rect(11, 12, 2, 1),
        right=Rect(15, 12, 1, 1),
    ),
)

# Strips a slim model leaves empty, on the 64-unit grid.
SLIM_AREAS = _frozen(
    right_arm=_frozen(
        top=Rect(50, 16, 2, 4, divisor=4),
        side=Rect(54, 20, 2, 12, divisor=4),
    ),
    left_arm=_frozen(
        top=Rect(42, 48, 2, 4, divisor=4),
        side=Rect(46, 52, 2, 12, divisor=4),
    ),
)

# ── Legacy (64x32) → modern second limb, mirrored ────────────────────
COPY_AREAS = _frozen(
    arm=_frozen(
        top=CopyArea(11, 4, 1, 1, 9, 12),
        bottom=CopyArea(12, 4, 1, 1, 10, 12),
        outer=CopyArea(10, 5, 1, 3, 10, 13),
        front=CopyArea(11, 5, 1, 3, 9, 13),
        inner=CopyArea(12, 5, 1, 3, 8, 13),
        back=CopyArea(13, 5, 1, 3, 11, 13),
    ),
    leg=_frozen(
        top=CopyArea(1, 4, 1, 1, 5, 12),
        bottom=CopyArea(2, 4, 1, 1, 6, 12),
        outer=CopyArea(0, 5, 1, 3, 6, 13),
        front=CopyArea(1, 5, 1, 3, 5, 13),
        inner=CopyArea(2, 5, 1, 3, 4, 13),
        back=CopyArea(3, 5, 1, 3, 7, 13),
    ),
)
