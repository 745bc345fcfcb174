"""High-level API for moodscan.

    >>> import moodscan as ms
    >>> result = ms.analyze("selfie.jpg")
    >>> print(result.top_label, f"{result.top_confidence:.0%}")

All analysis goes through a single path:
    ms.analyze() → MoodAnalyzer.analyze()
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, Optional, Union

from moodscan.algorithm.classifier import EmotionClassifier, load_classifier
from moodscan.algorithm.crop import CropNormalizer
from moodscan.algorithm.distribution import to_distribution
from moodscan.algorithm.face_gate import FaceGate
from moodscan.backends.base import FaceDetectionBackend
from moodscan.config import AnalysisConfig
from moodscan.errors import AnalysisError, ModelLoadError, ProcessingError
from moodscan.imaging import load_image
from moodscan.types import AnalysisResult, Image

logger = logging.getLogger(__name__)


class MoodAnalyzer:
    """Single-face emotion analysis pipeline.

    Stages run in order and each may end the call with one
    :class:`AnalysisError`: face gate → crop → classifier → distribution.
    The analyzer keeps no per-call state, so concurrent calls on
    different images are independent.

    Args:
        detector: Face detection backend.
        classifier: Loaded emotion classifier handle.
        config: Thresholds and options.
    """

    def __init__(
        self,
        detector: FaceDetectionBackend,
        classifier: EmotionClassifier,
        config: Optional[AnalysisConfig] = None,
    ):
        self.config = config or AnalysisConfig()
        self.detector = detector
        self.classifier = classifier
        self.gate = FaceGate(detector, self.config.gate_config())
        self.normalizer = CropNormalizer(
            scale=self.config.crop_scale,
            keep_display=self.config.return_debug_crop,
        )

    def initialize(self) -> None:
        self.detector.initialize(self.config.device)

    def cleanup(self) -> None:
        self.detector.cleanup()
        cleanup = getattr(self.classifier.model, "cleanup", None)
        if callable(cleanup):
            cleanup()

    def __enter__(self) -> "MoodAnalyzer":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cleanup()

    def analyze(self, image: Image) -> AnalysisResult:
        """Analyze one photo.

        Raises:
            NoFaceDetected, MultipleFacesDetected, ObservationError,
            ProcessingError: See :mod:`moodscan.errors`.
        """
        timing: Dict[str, float] = {}
        try:
            t0 = time.perf_counter()
            face = self.gate.detect_single_face(image)
            t1 = time.perf_counter()
            timing["detect"] = (t1 - t0) * 1000

            crop = self.normalizer.normalize_crop(image, face, image.orientation)
            t2 = time.perf_counter()
            timing["crop"] = (t2 - t1) * 1000

            logits = self.classifier.classify(crop)
            t3 = time.perf_counter()
            timing["classify"] = (t3 - t2) * 1000

            dist = to_distribution(logits, self.classifier.vocabulary)
            timing["distribution"] = (time.perf_counter() - t3) * 1000
        except AnalysisError as e:
            logger.info("Analysis rejected: %s", e)
            raise
        except Exception as e:
            logger.error("Analysis failed: %s", e)
            raise ProcessingError(e) from e

        logger.debug(
            "Analysis done: %s (%.3f) detect=%.1fms classify=%.1fms",
            dist.top_label, dist.top_confidence, timing["detect"], timing["classify"],
        )
        return AnalysisResult(
            top_label=dist.top_label,
            top_confidence=dist.top_confidence,
            distribution=dist.probabilities,
            debug_crop=crop.display,
            face=face,
            timing=timing,
        )


def load_analyzer(
    model_path: Optional[Union[str, Path]] = None,
    config: Optional[AnalysisConfig] = None,
    detector: Optional[FaceDetectionBackend] = None,
) -> MoodAnalyzer:
    """Build and initialize the default InsightFace + ONNX analyzer.

    Raises:
        ModelLoadError: A model could not be loaded.
    """
    config = config or AnalysisConfig()
    classifier = load_classifier(model_path, device=config.device)

    if detector is None:
        from moodscan.backends.insightface import InsightFaceDetector
        from moodscan.paths import get_models_dir
        detector = InsightFaceDetector(models_dir=get_models_dir())

    analyzer = MoodAnalyzer(detector, classifier, config)
    try:
        analyzer.initialize()
    except Exception as e:
        raise ModelLoadError(f"Failed to initialize face detector: {e}") from e
    return analyzer


def analyze(
    image: Union[Image, str, Path],
    analyzer: Optional[MoodAnalyzer] = None,
) -> AnalysisResult:
    """Analyze a photo with an existing analyzer or a freshly loaded one.

    Args:
        image: :class:`Image` or path to an image file.
        analyzer: Reused across calls when given; otherwise one is loaded
            and released around this call.
    """
    if not isinstance(image, Image):
        try:
            image = load_image(image)
        except OSError as e:
            raise ProcessingError(e) from e

    if analyzer is not None:
        return analyzer.analyze(image)

    analyzer = load_analyzer()
    try:
        return analyzer.analyze(image)
    finally:
        analyzer.cleanup()


__all__ = ["MoodAnalyzer", "load_analyzer", "analyze"]
