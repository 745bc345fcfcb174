"""ONNX Runtime backend for 7-class emotion classification.

Expected model: [1, 3, H, W] RGB float input (ImageNet normalize)
→ [1, 7] logits in ``EMOTION_LABELS`` order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import cv2
import numpy as np

logger = logging.getLogger(__name__)

# ImageNet normalization constants
IMAGENET_MEAN = np.array([0.485, 0.456, 0.406], dtype=np.float32)
IMAGENET_STD = np.array([0.229, 0.224, 0.225], dtype=np.float32)

DEFAULT_INPUT_SIZE = (256, 256)


class OnnxEmotionModel:
    """Emotion logits from an ONNX image classifier.

    Args:
        model_path: Path to the ``.onnx`` file.
        input_size: (width, height) fallback when the model input is dynamic.
    """

    def __init__(self, model_path: Path, input_size: Optional[Tuple[int, int]] = None):
        self._model_path = Path(model_path)
        self._input_size = input_size or DEFAULT_INPUT_SIZE
        self._session = None
        self._input_name: str = ""

    @property
    def input_size(self) -> Tuple[int, int]:
        return self._input_size

    def initialize(self, device: str = "cpu") -> None:
        """Load the model into an inference session."""
        if self._session is not None:
            return

        import onnxruntime as ort

        if not self._model_path.exists():
            raise FileNotFoundError(f"Emotion model not found at {self._model_path}")

        providers = ["CPUExecutionProvider"]
        if "cuda" in device.lower():
            providers = ["CUDAExecutionProvider", "CPUExecutionProvider"]

        self._session = ort.InferenceSession(str(self._model_path), providers=providers)
        model_input = self._session.get_inputs()[0]
        self._input_name = model_input.name

        # NCHW: use static spatial dims when the model declares them
        shape = model_input.shape
        if len(shape) == 4 and isinstance(shape[2], int) and isinstance(shape[3], int):
            self._input_size = (shape[3], shape[2])
        logger.info("Emotion model loaded from %s (input %dx%d)",
                    self._model_path, *self._input_size)

    def _preprocess(self, image: np.ndarray) -> np.ndarray:
        """BGR uint8 → normalized NCHW float32 tensor."""
        rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        img = rgb.astype(np.float32) / 255.0
        img = (img - IMAGENET_MEAN) / IMAGENET_STD
        img = np.transpose(img, (2, 0, 1))[np.newaxis, ...]
        return img.astype(np.float32)

    def infer(self, image: np.ndarray) -> Optional[np.ndarray]:
        if self._session is None:
            raise RuntimeError("Model not initialized. Call initialize() first.")
        outputs = self._session.run(None, {self._input_name: self._preprocess(image)})
        if not outputs:
            return None
        return outputs[0]

    def cleanup(self) -> None:
        self._session = None
        logger.info("Emotion model released")


__all__ = ["OnnxEmotionModel", "IMAGENET_MEAN", "IMAGENET_STD", "DEFAULT_INPUT_SIZE"]
