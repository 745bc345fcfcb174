"""Deterministic fakes for testing code that uses moodscan.

Example:
    >>> from moodscan.testing import FakeDetector, FakeModel, make_image
    >>> detector = FakeDetector.with_confidences([0.9])
    >>> classifier = EmotionClassifier(FakeModel([0, 0, 0, 3, 0, 0, 0]))
    >>> result = MoodAnalyzer(detector, classifier).analyze(make_image())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from moodscan.backends.base import DetectedFace
from moodscan.types import Image, NormalizedBox, Orientation


def make_image(
    width: int = 640,
    height: int = 480,
    orientation: Orientation = Orientation.UP,
    pattern: bool = False,
) -> Image:
    """Create a BGR test image.

    Args:
        pattern: Fill with a position-dependent gradient instead of black,
            so crops and rotations can be compared pixel-wise.
    """
    if pattern:
        ys, xs = np.mgrid[0:height, 0:width]
        pixels = np.stack(
            [xs % 256, ys % 256, (xs * 7 + ys * 13) % 256], axis=-1
        ).astype(np.uint8)
    else:
        pixels = np.zeros((height, width, 3), dtype=np.uint8)
    return Image(pixels=pixels, orientation=orientation)


@dataclass
class FakeDetector:
    """Detector returning fixed detections and recording its inputs."""

    faces: List[DetectedFace] = field(default_factory=list)
    error: Optional[BaseException] = None
    calls: List[Tuple[int, int]] = field(default_factory=list)
    initialized: bool = False

    @classmethod
    def with_confidences(
        cls,
        confidences: Sequence[float],
        box: NormalizedBox = NormalizedBox(0.25, 0.25, 0.5, 0.5),
    ) -> "FakeDetector":
        return cls(faces=[DetectedFace(box=box, confidence=c) for c in confidences])

    def initialize(self, device: str = "cpu") -> None:
        self.initialized = True

    def detect(self, image: np.ndarray) -> List[DetectedFace]:
        self.calls.append(tuple(image.shape[:2]))
        if self.error is not None:
            raise self.error
        return list(self.faces)

    def cleanup(self) -> None:
        self.initialized = False


@dataclass
class FakeModel:
    """Classification model returning a fixed output."""

    output: Any = None
    input_size: Tuple[int, int] = (224, 224)
    error: Optional[BaseException] = None
    inputs: List[np.ndarray] = field(default_factory=list)

    def infer(self, image: np.ndarray) -> Any:
        self.inputs.append(image)
        if self.error is not None:
            raise self.error
        return self.output


__all__ = ["make_image", "FakeDetector", "FakeModel"]
