"""Tests for softmax and the label distribution builder."""

import math

import numpy as np
import pytest

from moodscan.algorithm.distribution import argmax, softmax, to_distribution
from moodscan.algorithm.vocabulary import EMOTION_LABELS, LabelVocabulary
from moodscan.errors import ObservationError

RNG = np.random.default_rng(7)
RANDOM_VECTORS = [RNG.normal(scale=s, size=7) for s in (0.1, 1.0, 10.0, 100.0) for _ in range(5)]


# ── softmax ──────────────────────────────────────────────────────────

class TestSoftmax:
    @pytest.mark.parametrize("logits", RANDOM_VECTORS)
    def test_is_distribution(self, logits):
        p = softmax(logits)
        assert np.all(p >= 0.0) and np.all(p <= 1.0)
        assert p.sum() == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize("shift", [-1000.0, -3.5, 0.0, 42.0, 1e4])
    def test_shift_invariant(self, shift):
        logits = np.array([2.0, 0.0, 0.0, 5.0, 1.0, 0.0, 0.0])
        assert softmax(logits + shift) == pytest.approx(softmax(logits), abs=1e-9)

    def test_large_logits_do_not_overflow(self):
        p = softmax([1000.0, 999.0, 0.0])
        assert np.all(np.isfinite(p))
        assert p[0] == pytest.approx(1 / (1 + math.exp(-1)), abs=1e-9)

    def test_uniform(self):
        assert softmax([3.0] * 7) == pytest.approx([1 / 7] * 7)

    def test_empty_raises(self):
        with pytest.raises(ObservationError):
            softmax([])

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_raises(self, bad):
        with pytest.raises(ObservationError):
            softmax([0.0, bad, 1.0])


class TestArgmax:
    def test_first_index_wins_ties(self):
        assert argmax(np.array([0.1, 0.4, 0.4, 0.1])) == 1

    def test_empty_raises(self):
        with pytest.raises(ObservationError):
            argmax(np.array([]))


# ── to_distribution ──────────────────────────────────────────────────

class TestToDistribution:
    def test_happy_scenario(self):
        top_label, top_conf, dist = to_distribution([2.0, 0.0, 0.0, 5.0, 1.0, 0.0, 0.0])
        expected = 1.0 / (1.0 + math.exp(-3) + math.exp(-4) + 4 * math.exp(-5))
        assert top_label == "happy"
        assert top_conf == pytest.approx(expected, abs=1e-9)
        assert top_conf == pytest.approx(0.9132, abs=1e-3)
        assert sum(dist.values()) == pytest.approx(1.0, abs=1e-6)

    def test_covers_all_labels_in_order(self):
        _, _, dist = to_distribution([0.0] * 7)
        assert list(dist) == list(EMOTION_LABELS)

    @pytest.mark.parametrize("logits", RANDOM_VECTORS)
    def test_top_label_is_max_probability(self, logits):
        top_label, top_conf, dist = to_distribution(logits)
        best = max(dist.values())
        assert dist[top_label] == best == top_conf
        assert top_label == EMOTION_LABELS[int(np.argmax(softmax(logits)))]

    def test_tie_picks_first_label(self):
        top_label, _, _ = to_distribution([0.0, 3.0, 3.0, 0.0, 0.0, 0.0, 0.0])
        assert top_label == "disgust"

    def test_each_label_gets_its_own_index(self):
        for i, label in enumerate(EMOTION_LABELS):
            logits = [0.0] * 7
            logits[i] = 10.0
            assert to_distribution(logits).top_label == label

    def test_length_mismatch_raises(self):
        with pytest.raises(ObservationError):
            to_distribution([1.0, 2.0, 3.0])

    def test_empty_raises(self):
        with pytest.raises(ObservationError):
            to_distribution([])

    def test_custom_vocabulary(self):
        vocab = LabelVocabulary(("calm", "excited"))
        result = to_distribution([0.0, 1.0], vocab)
        assert result.top_label == "excited"
        assert set(result.probabilities) == {"calm", "excited"}


class TestLabelVocabulary:
    def test_default_labels(self):
        assert tuple(EMOTION_LABELS) == (
            "angry", "disgust", "fear", "happy", "neutral", "sad", "surprise",
        )
        assert len(EMOTION_LABELS) == 7

    def test_duplicates_rejected(self):
        with pytest.raises(ValueError):
            LabelVocabulary(("a", "a"))

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            LabelVocabulary(())

    def test_pair_refuses_short_vector(self):
        with pytest.raises(ObservationError):
            EMOTION_LABELS.pair([0.5] * 6)
