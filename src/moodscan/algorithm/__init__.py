"""Pipeline stages: face gate, crop, classifier adapter, distribution."""

from moodscan.algorithm.classifier import EmotionClassifier, load_classifier
from moodscan.algorithm.crop import CropNormalizer
from moodscan.algorithm.distribution import Distribution, softmax, to_distribution
from moodscan.algorithm.face_gate import FaceGate, FaceGateConfig
from moodscan.algorithm.vocabulary import EMOTION_LABELS, LabelVocabulary

__all__ = [
    "EmotionClassifier",
    "load_classifier",
    "CropNormalizer",
    "Distribution",
    "softmax",
    "to_distribution",
    "FaceGate",
    "FaceGateConfig",
    "EMOTION_LABELS",
    "LabelVocabulary",
]
