"""InsightFace SCRFD backend for face detection."""

import contextlib
import io
import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from moodscan.backends.base import DetectedFace
from moodscan.types import NormalizedBox

logger = logging.getLogger(__name__)


class InsightFaceDetector:
    """Face detection backend using InsightFace SCRFD.

    The detector's own threshold is kept low so that confidence gating
    happens in :class:`moodscan.algorithm.face_gate.FaceGate`.

    Args:
        model_name: Model pack name (default: "buffalo_l").
        det_size: Detection input size (width, height).
        det_thresh: Minimum score the detector reports at all.
        models_dir: Root for downloaded model packs.

    Example:
        >>> backend = InsightFaceDetector()
        >>> backend.initialize("cpu")
        >>> faces = backend.detect(image)
        >>> backend.cleanup()
    """

    def __init__(
        self,
        model_name: str = "buffalo_l",
        det_size: tuple[int, int] = (640, 640),
        det_thresh: float = 0.2,
        models_dir: Optional[Path] = None,
    ):
        self._model_name = model_name
        self._det_size = det_size
        self._det_thresh = det_thresh
        self._models_dir = models_dir
        self._app: Optional[object] = None
        self._initialized = False

    def initialize(self, device: str = "cpu") -> None:
        """Initialize InsightFace app with the SCRFD detector only."""
        if self._initialized:
            return

        try:
            from insightface.app import FaceAnalysis
            import onnxruntime as ort
        except ImportError:
            raise ImportError(
                "insightface is required for InsightFaceDetector. "
                "Install with: pip install moodscan[insightface]"
            )

        ort.set_default_logger_severity(3)

        if device.startswith("cuda") and "CUDAExecutionProvider" in ort.get_available_providers():
            ctx_id = int(device.split(":")[-1]) if ":" in device else 0
            providers = ["CUDAExecutionProvider", "CPUExecutionProvider"]
        else:
            if device.startswith("cuda"):
                logger.warning("CUDAExecutionProvider not available, falling back to CPU")
            ctx_id = -1
            providers = ["CPUExecutionProvider"]

        fa_kwargs = dict(
            name=self._model_name,
            providers=providers,
            allowed_modules=["detection"],
        )
        if self._models_dir is not None:
            fa_kwargs["root"] = str(self._models_dir / "insightface")

        # insightface prints model discovery to stdout
        with contextlib.redirect_stdout(io.StringIO()):
            self._app = FaceAnalysis(**fa_kwargs)
            self._app.prepare(ctx_id=ctx_id, det_thresh=self._det_thresh, det_size=self._det_size)
        self._initialized = True
        logger.info("InsightFace detector initialized (model=%s, providers=%s)",
                    self._model_name, providers)

    def detect(self, image: np.ndarray) -> List[DetectedFace]:
        """Detect faces and return boxes normalized to ``image``."""
        if not self._initialized or self._app is None:
            raise RuntimeError("Backend not initialized. Call initialize() first.")

        h, w = image.shape[:2]
        bboxes, _ = self._app.det_model.detect(image, max_num=0, metric="default")

        faces = []
        for row in bboxes:
            x1, y1, x2, y2, score = (float(v) for v in row[:5])
            faces.append(DetectedFace(
                box=NormalizedBox(x1 / w, y1 / h, (x2 - x1) / w, (y2 - y1) / h),
                confidence=score,
            ))
        logger.debug("InsightFace returned %d detections", len(faces))
        return faces

    def cleanup(self) -> None:
        """Release InsightFace resources."""
        self._app = None
        self._initialized = False
        logger.info("InsightFace detector cleaned up")


__all__ = ["InsightFaceDetector"]
