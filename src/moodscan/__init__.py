"""moodscan - Single-photo facial emotion analysis.

Quick Start:
    >>> import moodscan as ms
    >>> result = ms.analyze("selfie.jpg")
    >>> print(result.top_label, result.distribution)

Reusing loaded models:
    >>> analyzer = ms.load_analyzer()
    >>> for path in paths:
    ...     result = ms.analyze(path, analyzer=analyzer)
"""

from moodscan.algorithm.vocabulary import EMOTION_LABELS, LabelVocabulary
from moodscan.config import AnalysisConfig
from moodscan.errors import (
    AnalysisError,
    ModelLoadError,
    MultipleFacesDetected,
    NoFaceDetected,
    ObservationError,
    ProcessingError,
)
from moodscan.main import MoodAnalyzer, analyze, load_analyzer
from moodscan.types import AnalysisResult, FaceCandidate, Image, NormalizedBox, Orientation

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "analyze",
    "load_analyzer",
    "MoodAnalyzer",
    "AnalysisConfig",
    # Types
    "AnalysisResult",
    "FaceCandidate",
    "Image",
    "NormalizedBox",
    "Orientation",
    "EMOTION_LABELS",
    "LabelVocabulary",
    # Errors
    "AnalysisError",
    "NoFaceDetected",
    "MultipleFacesDetected",
    "ObservationError",
    "ProcessingError",
    "ModelLoadError",
]
