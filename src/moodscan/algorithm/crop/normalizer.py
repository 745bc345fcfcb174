"""Face crop extraction for the classifier.

The gated box is expanded by a fixed margin (hair, chin, forehead), clipped
to the image, cut out of the raw buffer and rotated upright.
"""

from __future__ import annotations

import logging
from typing import Optional

from moodscan.geometry import box_to_raw, scale_box, to_pixel_rect
from moodscan.imaging import apply_orientation
from moodscan.types import FaceCandidate, Image, NormalizedCrop, Orientation

logger = logging.getLogger(__name__)

DEFAULT_CROP_SCALE = 1.2


class CropNormalizer:
    """Builds :class:`NormalizedCrop` values from a gated face.

    Args:
        scale: Margin factor applied around the face center.
        keep_display: Also return an oriented copy for debugging.
    """

    def __init__(self, scale: float = DEFAULT_CROP_SCALE, keep_display: bool = True):
        self.scale = scale
        self.keep_display = keep_display

    def normalize_crop(
        self,
        image: Image,
        face: FaceCandidate,
        orientation: Optional[Orientation] = None,
    ) -> NormalizedCrop:
        """Extract the expanded face region in upright pixel order.

        Degenerate (near-empty) regions are returned as-is.
        """
        if orientation is None:
            orientation = image.orientation

        box = scale_box(face.box, self.scale)
        raw_box = box_to_raw(box, orientation)
        x, y, w, h = to_pixel_rect(raw_box, image.width, image.height)

        region = image.pixels[y:y + h, x:x + w]
        upright = apply_orientation(region, orientation)
        if w == 0 or h == 0:
            logger.debug("Degenerate face crop %s", (x, y, w, h))

        return NormalizedCrop(
            pixels=upright,
            box=box,
            pixel_rect=(x, y, w, h),
            display=upright.copy() if self.keep_display else None,
        )


__all__ = ["CropNormalizer", "DEFAULT_CROP_SCALE"]
