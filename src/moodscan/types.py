"""Core data types for single-photo mood analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np


class Orientation(IntEnum):
    """EXIF orientation tag (0x0112) of a photo.

    Values describe how the raw pixel buffer must be transformed to be
    displayed upright.
    """

    UP = 1
    UP_MIRRORED = 2
    DOWN = 3
    DOWN_MIRRORED = 4
    LEFT_MIRRORED = 5
    RIGHT = 6
    RIGHT_MIRRORED = 7
    LEFT = 8

    @property
    def swaps_axes(self) -> bool:
        """True when the upright image has width and height exchanged."""
        return self >= Orientation.LEFT_MIRRORED

    @classmethod
    def from_exif(cls, value: Any) -> "Orientation":
        """Parse a raw EXIF value; missing or unknown values mean UP."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return cls.UP


@dataclass(frozen=True)
class NormalizedBox:
    """Axis-aligned rectangle in unit coordinates (top-left origin).

    Attributes:
        x: Left edge [0, 1].
        y: Top edge [0, 1].
        width: Width relative to image width.
        height: Height relative to image height.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True, eq=False)
class Image:
    """Caller-owned photo: raw pixel buffer plus its orientation tag.

    Attributes:
        pixels: BGR uint8 array (H, W, 3) in stored (not displayed) order.
        orientation: How ``pixels`` must be transformed to appear upright.
    """

    pixels: np.ndarray
    orientation: Orientation = Orientation.UP

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def upright(self) -> np.ndarray:
        """Return the display-oriented pixels."""
        from moodscan.imaging import apply_orientation

        return apply_orientation(self.pixels, self.orientation)


@dataclass(frozen=True)
class FaceCandidate:
    """A single face detection that passed the confidence gate.

    Attributes:
        box: Face rectangle in the upright image frame.
        confidence: Detector confidence [0, 1].
    """

    box: NormalizedBox
    confidence: float


@dataclass(frozen=True, eq=False)
class NormalizedCrop:
    """Face region extracted for classification.

    Attributes:
        pixels: Upright BGR crop handed to the classifier.
        box: Expanded, unit-clipped box in the upright frame.
        pixel_rect: (x, y, w, h) of the region in the raw buffer.
        display: Oriented-for-display copy kept for debugging.
    """

    pixels: np.ndarray
    box: NormalizedBox
    pixel_rect: Tuple[int, int, int, int]
    display: Optional[np.ndarray] = None


@dataclass(frozen=True, eq=False)
class AnalysisResult:
    """Outcome of one successful analysis.

    Attributes:
        top_label: Most probable emotion label.
        top_confidence: Probability of ``top_label``.
        distribution: Probability for every vocabulary label (sums to 1).
        debug_crop: Oriented face crop, if requested.
        face: The gated face the result was computed from.
        timing: Per-stage wall time in milliseconds.
    """

    top_label: str
    top_confidence: float
    distribution: Dict[str, float]
    debug_crop: Optional[np.ndarray] = None
    face: Optional[FaceCandidate] = None
    timing: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view (without the debug image)."""
        out: Dict[str, Any] = {
            "top_label": self.top_label,
            "top_confidence": self.top_confidence,
            "distribution": dict(self.distribution),
        }
        if self.face is not None:
            out["face"] = {
                "box": list(self.face.box.as_tuple()),
                "confidence": self.face.confidence,
            }
        if self.timing:
            out["timing_ms"] = {k: round(v, 2) for k, v in self.timing.items()}
        return out


__all__ = [
    "Orientation",
    "NormalizedBox",
    "Image",
    "FaceCandidate",
    "NormalizedCrop",
    "AnalysisResult",
]
