"""Pixel-level helpers: orientation, aspect-preserving resize, loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np

from moodscan.types import Image, Orientation

logger = logging.getLogger(__name__)

EXIF_ORIENTATION_TAG = 0x0112


def apply_orientation(pixels: np.ndarray, orientation: Orientation) -> np.ndarray:
    """Transform a stored pixel buffer into display (upright) order."""
    o = Orientation(orientation)
    if o == Orientation.UP:
        out = pixels
    elif o == Orientation.UP_MIRRORED:
        out = pixels[:, ::-1]
    elif o == Orientation.DOWN:
        out = pixels[::-1, ::-1]
    elif o == Orientation.DOWN_MIRRORED:
        out = pixels[::-1]
    elif o == Orientation.LEFT_MIRRORED:
        out = np.swapaxes(pixels, 0, 1)
    elif o == Orientation.RIGHT:
        out = np.rot90(pixels, -1)
    elif o == Orientation.RIGHT_MIRRORED:
        out = np.swapaxes(pixels[::-1, ::-1], 0, 1)
    else:  # LEFT
        out = np.rot90(pixels, 1)
    return np.ascontiguousarray(out)


def center_crop_and_scale(image: np.ndarray, size: Tuple[int, int]) -> np.ndarray:
    """Resize to ``size`` (width, height) without distorting proportions.

    The largest centered region with the target aspect ratio is cut out
    first, then scaled. The image is never stretched non-uniformly.
    """
    h, w = image.shape[:2]
    if h == 0 or w == 0:
        raise ValueError(f"cannot resize empty image of shape {image.shape}")

    tw, th = size
    if w * th > h * tw:
        # Too wide: trim left/right
        crop_w = max(1, int(round(h * tw / th)))
        x0 = (w - crop_w) // 2
        region = image[:, x0:x0 + crop_w]
    else:
        crop_h = max(1, int(round(w * th / tw)))
        y0 = (h - crop_h) // 2
        region = image[y0:y0 + crop_h, :]

    rh, rw = region.shape[:2]
    interp = cv2.INTER_AREA if rw > tw or rh > th else cv2.INTER_LINEAR
    return cv2.resize(region, (tw, th), interpolation=interp)


def read_exif_orientation(path: Union[str, Path]) -> Orientation:
    """Read the EXIF orientation tag of an image file (UP if absent)."""
    from PIL import Image as PILImage

    try:
        with PILImage.open(path) as im:
            value = im.getexif().get(EXIF_ORIENTATION_TAG)
    except OSError as e:
        logger.warning("Could not read EXIF from %s (%s), assuming upright", path, e)
        return Orientation.UP
    return Orientation.from_exif(value)


def load_image(path: Union[str, Path], orientation: Union[Orientation, int, None] = None) -> Image:
    """Load a photo as raw pixels plus orientation tag.

    Args:
        path: Image file path.
        orientation: Explicit orientation; read from EXIF when None.

    Raises:
        IOError: If the file cannot be decoded.
    """
    flags = cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION
    pixels = cv2.imread(str(path), flags)
    if pixels is None:
        raise IOError(f"Cannot open image: {path}")

    if orientation is None:
        orientation = read_exif_orientation(path)
    orientation = Orientation(orientation)
    logger.debug("Loaded %s: %dx%d, orientation=%s",
                 path, pixels.shape[1], pixels.shape[0], orientation.name)
    return Image(pixels=pixels, orientation=orientation)


__all__ = [
    "apply_orientation",
    "center_crop_and_scale",
    "read_exif_orientation",
    "load_image",
]
