"""Raw logits → probability distribution over the emotion vocabulary."""

from __future__ import annotations

import logging
from typing import Dict, NamedTuple, Sequence

import numpy as np

from moodscan.algorithm.vocabulary import EMOTION_LABELS, LabelVocabulary
from moodscan.errors import ObservationError

logger = logging.getLogger(__name__)


class Distribution(NamedTuple):
    """Top label, its probability, and the full label → probability map."""

    top_label: str
    top_confidence: float
    probabilities: Dict[str, float]


def softmax(logits: Sequence[float]) -> np.ndarray:
    """Numerically stable softmax.

    The maximum is subtracted before exponentiating so that large logits
    cannot overflow.

    Raises:
        ObservationError: If ``logits`` is empty or not finite.
    """
    x = np.asarray(logits, dtype=np.float64).ravel()
    if x.size == 0:
        raise ObservationError("empty logits vector")
    if not np.all(np.isfinite(x)):
        raise ObservationError("logits contain NaN or infinity")

    exps = np.exp(x - x.max())
    return exps / exps.sum()


def argmax(probabilities: np.ndarray) -> int:
    """Index of the largest value; the first one wins on ties."""
    if len(probabilities) == 0:
        raise ObservationError("argmax of empty vector")
    return int(np.argmax(probabilities))


def to_distribution(
    logits: Sequence[float],
    vocabulary: LabelVocabulary = EMOTION_LABELS,
) -> Distribution:
    """Convert raw classifier output into a labeled probability distribution.

    Args:
        logits: Unnormalized classifier output, one value per label.
        vocabulary: Labels in classifier output order.

    Returns:
        Distribution with the arg-max label as the top result.

    Raises:
        ObservationError: On empty, non-finite or wrong-length input.
    """
    probs = softmax(logits)
    probabilities = vocabulary.pair(probs)

    top = argmax(probs)
    top_label = vocabulary[top]
    top_confidence = float(probs[top])
    logger.debug("Top emotion %s (%.3f)", top_label, top_confidence)
    return Distribution(top_label, top_confidence, probabilities)


__all__ = ["Distribution", "softmax", "argmax", "to_distribution"]
