"""Face gate: exactly one confident face or a typed failure.

Runs the injected detector on the upright image, keeps detections with
confidence strictly above the threshold, then applies the count policy:

- 0 faces → :class:`NoFaceDetected`
- 1 face  → :class:`FaceCandidate`
- 2+      → :class:`MultipleFacesDetected`
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from moodscan.backends.base import DetectedFace, FaceDetectionBackend
from moodscan.errors import AnalysisError, MultipleFacesDetected, NoFaceDetected, ProcessingError
from moodscan.types import FaceCandidate, Image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FaceGateConfig:
    """Gate thresholds.

    Attributes:
        confidence_threshold: Detections must score strictly above this.
    """

    confidence_threshold: float = 0.5


class FaceGate:
    """Single-face eligibility gate over an injected detector.

    Holds no per-call state; one instance may serve any number of images.
    """

    def __init__(self, detector: FaceDetectionBackend, config: Optional[FaceGateConfig] = None):
        self._detector = detector
        self.config = config or FaceGateConfig()

    def qualifying(self, detections: List[DetectedFace]) -> List[DetectedFace]:
        """Detections whose confidence is strictly above the threshold."""
        threshold = self.config.confidence_threshold
        return [d for d in detections if d.confidence > threshold]

    def detect_single_face(self, image: Image) -> FaceCandidate:
        """Detect the one face to analyze.

        Raises:
            NoFaceDetected: No detection cleared the threshold.
            MultipleFacesDetected: Two or more detections cleared it.
            ProcessingError: The detector itself failed.
        """
        try:
            detections = self._detector.detect(image.upright())
        except AnalysisError:
            raise
        except Exception as e:
            raise ProcessingError(e) from e

        faces = self.qualifying(list(detections or []))
        if not faces:
            logger.debug(
                "No faces above confidence %.2f (%d raw detections)",
                self.config.confidence_threshold, len(detections or []),
            )
            raise NoFaceDetected()

        if len(faces) > 1:
            logger.debug("Detected %d faces, rejecting", len(faces))
            raise MultipleFacesDetected(len(faces))

        face = faces[0]
        logger.debug("Detected 1 face with confidence %.3f", face.confidence)
        return FaceCandidate(box=face.box, confidence=float(face.confidence))


__all__ = ["FaceGate", "FaceGateConfig"]
