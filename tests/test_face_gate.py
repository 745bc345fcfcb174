"""Tests for FaceGate (single-face eligibility policy)."""

import pytest

from moodscan.algorithm.face_gate import FaceGate, FaceGateConfig
from moodscan.backends.base import DetectedFace
from moodscan.errors import MultipleFacesDetected, NoFaceDetected, ProcessingError
from moodscan.testing import FakeDetector, make_image
from moodscan.types import FaceCandidate, NormalizedBox, Orientation


def _gate(confidences, **kw):
    return FaceGate(FakeDetector.with_confidences(confidences), FaceGateConfig(**kw))


class TestFaceGatePolicy:
    def test_no_detections(self):
        with pytest.raises(NoFaceDetected):
            _gate([]).detect_single_face(make_image())

    def test_single_face(self):
        face = _gate([0.9]).detect_single_face(make_image())
        assert isinstance(face, FaceCandidate)
        assert face.confidence == pytest.approx(0.9)
        assert face.box == NormalizedBox(0.25, 0.25, 0.5, 0.5)

    def test_two_faces(self):
        with pytest.raises(MultipleFacesDetected) as exc_info:
            _gate([0.6, 0.7]).detect_single_face(make_image())
        assert exc_info.value.count == 2

    def test_below_threshold_is_no_face(self):
        with pytest.raises(NoFaceDetected):
            _gate([0.49]).detect_single_face(make_image())

    def test_exact_threshold_excluded(self):
        with pytest.raises(NoFaceDetected):
            _gate([0.5]).detect_single_face(make_image())

    def test_low_confidence_faces_ignored_in_count(self):
        face = _gate([0.3, 0.95, 0.5]).detect_single_face(make_image())
        assert face.confidence == pytest.approx(0.95)

    def test_custom_threshold(self):
        with pytest.raises(MultipleFacesDetected):
            _gate([0.3, 0.4], confidence_threshold=0.2).detect_single_face(make_image())

    def test_default_threshold(self):
        assert FaceGateConfig().confidence_threshold == 0.5


class TestFaceGateDetector:
    def test_detector_sees_upright_image(self):
        detector = FakeDetector.with_confidences([0.9])
        gate = FaceGate(detector)
        gate.detect_single_face(make_image(640, 480, orientation=Orientation.RIGHT))
        assert detector.calls == [(640, 480)]

    def test_detector_failure_wrapped(self):
        cause = IOError("decode failed")
        detector = FakeDetector(error=cause)
        with pytest.raises(ProcessingError) as exc_info:
            FaceGate(detector).detect_single_face(make_image())
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    def test_detector_returning_none_is_no_face(self):
        class NoneDetector(FakeDetector):
            def detect(self, image):
                return None

        with pytest.raises(NoFaceDetected):
            FaceGate(NoneDetector()).detect_single_face(make_image())

    def test_repeated_calls_independent(self):
        detector = FakeDetector.with_confidences([0.9])
        gate = FaceGate(detector)
        gate.detect_single_face(make_image())
        detector.faces = []
        with pytest.raises(NoFaceDetected):
            gate.detect_single_face(make_image())
        detector.faces = [DetectedFace(NormalizedBox(0.1, 0.1, 0.2, 0.2), 0.8)]
        assert gate.detect_single_face(make_image()).confidence == pytest.approx(0.8)
