"""Analysis configuration."""

from dataclasses import dataclass

from moodscan.algorithm.crop import DEFAULT_CROP_SCALE
from moodscan.algorithm.face_gate import FaceGateConfig


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for :class:`moodscan.main.MoodAnalyzer`.

    Attributes:
        face_confidence_threshold: Detections must score strictly above this.
        crop_scale: Margin factor around the detected face.
        return_debug_crop: Attach the oriented crop to results.
        device: Inference device for backends ("cpu", "cuda:0").
    """

    face_confidence_threshold: float = 0.5
    crop_scale: float = DEFAULT_CROP_SCALE
    return_debug_crop: bool = True
    device: str = "cpu"

    def gate_config(self) -> FaceGateConfig:
        return FaceGateConfig(confidence_threshold=self.face_confidence_threshold)


__all__ = ["AnalysisConfig"]
