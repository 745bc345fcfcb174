"""Emotion classifier adapter.

Wraps an opaque :class:`ClassificationModel` bound to the vocabulary that
names its outputs. The crop is resized with center-crop-and-scale before
inference and the model output is validated into a flat logits vector.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np

from moodscan.algorithm.vocabulary import EMOTION_LABELS, LabelVocabulary
from moodscan.backends.base import ClassificationModel
from moodscan.errors import AnalysisError, ModelLoadError, ObservationError, ProcessingError
from moodscan.imaging import center_crop_and_scale
from moodscan.types import NormalizedCrop

logger = logging.getLogger(__name__)


class EmotionClassifier:
    """Ready-to-use classifier handle.

    Args:
        model: Model exposing ``input_size`` and ``infer``.
        vocabulary: Labels in model output order.
    """

    def __init__(self, model: ClassificationModel, vocabulary: LabelVocabulary = EMOTION_LABELS):
        self.model = model
        self.vocabulary = vocabulary

    def classify(self, crop: Union[NormalizedCrop, np.ndarray]) -> np.ndarray:
        """Run the model on a face crop and return its raw logits.

        Raises:
            ObservationError: Output missing or not a vector of the
                vocabulary's length.
            ProcessingError: Resize or model invocation failed.
        """
        pixels = crop.pixels if isinstance(crop, NormalizedCrop) else crop
        try:
            resized = center_crop_and_scale(pixels, tuple(self.model.input_size))
            output = self.model.infer(resized)
        except AnalysisError:
            raise
        except Exception as e:
            raise ProcessingError(e) from e

        return self._to_logits(output)

    def _to_logits(self, output: Any) -> np.ndarray:
        if output is None:
            raise ObservationError("model produced no result")

        try:
            arr = np.asarray(output, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ObservationError(f"model output is not numeric: {e}") from e

        # Allow leading batch dims of size 1, e.g. [1, 7]
        if arr.ndim > 1 and any(d != 1 for d in arr.shape[:-1]):
            raise ObservationError(f"unexpected model output shape {arr.shape}")
        logits = arr.reshape(-1)

        if logits.size != len(self.vocabulary):
            raise ObservationError(
                f"model returned {logits.size} values, vocabulary has {len(self.vocabulary)}"
            )
        if not np.all(np.isfinite(logits)):
            raise ObservationError("model output contains NaN or infinity")
        return logits


def load_classifier(
    model_path: Optional[Union[str, Path]] = None,
    device: str = "cpu",
    vocabulary: LabelVocabulary = EMOTION_LABELS,
) -> EmotionClassifier:
    """Load the ONNX emotion model once and return a classifier handle.

    Raises:
        ModelLoadError: The model file is missing or cannot be loaded.
    """
    from moodscan.backends.onnx import OnnxEmotionModel

    if model_path is None:
        from moodscan.paths import default_model_path
        model_path = default_model_path()

    model = OnnxEmotionModel(Path(model_path))
    try:
        model.initialize(device)
    except Exception as e:
        raise ModelLoadError(f"Failed to load emotion model {model_path}: {e}") from e
    return EmotionClassifier(model, vocabulary)


__all__ = ["EmotionClassifier", "load_classifier"]
