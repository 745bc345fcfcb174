"""Orientation-aware bounding box math.

All boxes are :class:`NormalizedBox` values in unit coordinates with a
top-left origin. Detector boxes live in the upright (display) frame;
:func:`box_to_raw` maps them into the stored pixel buffer.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Tuple

from moodscan.types import NormalizedBox, Orientation

UNIT_BOX = NormalizedBox(0.0, 0.0, 1.0, 1.0)

# Snap tolerance for float→pixel conversion (0.25 * 640 may land on 159.99999)
_PIXEL_EPS = 1e-6


def _standardize(x: float, y: float, w: float, h: float) -> Tuple[float, float, float, float]:
    if w < 0:
        x, w = x + w, -w
    if h < 0:
        y, h = y + h, -h
    return x, y, w, h


def intersect_unit(x: float, y: float, w: float, h: float) -> NormalizedBox:
    """Intersect a rectangle with the unit square.

    Disjoint rectangles collapse to a zero-area box on the square's border
    instead of raising.
    """
    x, y, w, h = _standardize(x, y, w, h)
    x0 = min(max(x, 0.0), 1.0)
    y0 = min(max(y, 0.0), 1.0)
    x1 = min(max(x + w, 0.0), 1.0)
    y1 = min(max(y + h, 0.0), 1.0)
    return NormalizedBox(x0, y0, max(0.0, x1 - x0), max(0.0, y1 - y0))


def scale_box(box: NormalizedBox, scale_factor: float) -> NormalizedBox:
    """Scale a box around its center, then clip it to the unit square.

    Args:
        box: Input rectangle.
        scale_factor: Multiplier for width and height (> 1 enlarges).

    Returns:
        New box with the same center (unless clipped) and scaled extent.
    """
    cx, cy = box.center
    new_w = box.width * scale_factor
    new_h = box.height * scale_factor
    return intersect_unit(cx - new_w / 2, cy - new_h / 2, new_w, new_h)


# Upright (u, v) → raw (x, y), both normalized. Inverse of imaging.apply_orientation.
_TO_RAW: Dict[Orientation, Callable[[float, float], Tuple[float, float]]] = {
    Orientation.UP: lambda u, v: (u, v),
    Orientation.UP_MIRRORED: lambda u, v: (1.0 - u, v),
    Orientation.DOWN: lambda u, v: (1.0 - u, 1.0 - v),
    Orientation.DOWN_MIRRORED: lambda u, v: (u, 1.0 - v),
    Orientation.LEFT_MIRRORED: lambda u, v: (v, u),
    Orientation.RIGHT: lambda u, v: (v, 1.0 - u),
    Orientation.RIGHT_MIRRORED: lambda u, v: (1.0 - v, 1.0 - u),
    Orientation.LEFT: lambda u, v: (1.0 - v, u),
}


def box_to_raw(box: NormalizedBox, orientation: Orientation) -> NormalizedBox:
    """Map a box from the upright frame into raw buffer coordinates."""
    to_raw = _TO_RAW[Orientation(orientation)]
    ax, ay = to_raw(box.x, box.y)
    bx, by = to_raw(box.x + box.width, box.y + box.height)
    return NormalizedBox(min(ax, bx), min(ay, by), abs(bx - ax), abs(by - ay))


def to_pixel_rect(box: NormalizedBox, width: int, height: int) -> Tuple[int, int, int, int]:
    """Convert a normalized box to an integral pixel rect (x, y, w, h).

    Edges are rounded outward and clamped to the image extent, so the
    result never exceeds the image and may be empty.
    """
    x0 = math.floor(box.x * width + _PIXEL_EPS)
    y0 = math.floor(box.y * height + _PIXEL_EPS)
    x1 = math.ceil((box.x + box.width) * width - _PIXEL_EPS)
    y1 = math.ceil((box.y + box.height) * height - _PIXEL_EPS)

    x0 = min(max(x0, 0), width)
    y0 = min(max(y0, 0), height)
    x1 = min(max(x1, x0), width)
    y1 = min(max(y1, y0), height)
    return (x0, y0, x1 - x0, y1 - y0)


__all__ = ["UNIT_BOX", "intersect_unit", "scale_box", "box_to_raw", "to_pixel_rect"]
