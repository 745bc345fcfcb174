"""Ordered emotion label vocabulary.

Index ``i`` of a vocabulary names output index ``i`` of the classifier it
is bound to. The pairing is made in one place (:meth:`LabelVocabulary.pair`)
and refuses vectors of the wrong length instead of truncating.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Sequence, Tuple

from moodscan.errors import ObservationError


@dataclass(frozen=True)
class LabelVocabulary:
    """Fixed, ordered sequence of unique labels."""

    labels: Tuple[str, ...]

    def __post_init__(self):
        if not self.labels:
            raise ValueError("vocabulary must not be empty")
        if len(set(self.labels)) != len(self.labels):
            raise ValueError(f"vocabulary labels must be unique: {self.labels}")

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __getitem__(self, index: int) -> str:
        return self.labels[index]

    def index(self, label: str) -> int:
        return self.labels.index(label)

    def pair(self, values: Sequence[float]) -> Dict[str, float]:
        """Map each label to the value at the same index."""
        if len(values) != len(self.labels):
            raise ObservationError(
                f"expected {len(self.labels)} values for vocabulary, got {len(values)}"
            )
        return {label: float(v) for label, v in zip(self.labels, values)}


# Alphabetical order of the training class folders.
EMOTION_LABELS = LabelVocabulary(
    ("angry", "disgust", "fear", "happy", "neutral", "sad", "surprise")
)


__all__ = ["LabelVocabulary", "EMOTION_LABELS"]
