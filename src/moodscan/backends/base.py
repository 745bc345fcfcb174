"""Backend protocol definitions for face detection and emotion models."""

from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Tuple

import numpy as np

from moodscan.types import NormalizedBox


@dataclass(frozen=True)
class DetectedFace:
    """Raw result from a face detection backend.

    Attributes:
        box: Face rectangle normalized to the upright image.
        confidence: Detection confidence [0, 1].
    """

    box: NormalizedBox
    confidence: float


class FaceDetectionBackend(Protocol):
    """Protocol for face-rectangle detectors.

    Implementations receive the upright BGR image and must be swappable
    without changing gate logic. Examples: InsightFace SCRFD, YuNet.
    """

    def initialize(self, device: str = "cpu") -> None:
        """Initialize the backend and load models."""
        ...

    def detect(self, image: np.ndarray) -> List[DetectedFace]:
        """Detect all faces in an image, without thresholding."""
        ...

    def cleanup(self) -> None:
        """Release resources and unload models."""
        ...


class ClassificationModel(Protocol):
    """Protocol for opaque emotion classification models.

    ``infer`` must behave as a pure function of its input crop.
    """

    @property
    def input_size(self) -> Tuple[int, int]:
        """Expected input (width, height)."""
        ...

    def infer(self, image: np.ndarray) -> Optional[Any]:
        """Return raw logits for a BGR crop already sized to ``input_size``."""
        ...


__all__ = ["DetectedFace", "FaceDetectionBackend", "ClassificationModel"]
