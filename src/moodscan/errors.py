"""Failure outcomes of the mood analysis pipeline.

Exactly one of these is raised when an analysis does not produce a
result. None of them are retried by the pipeline.
"""

from typing import Optional


class AnalysisError(Exception):
    """Base class for per-call analysis failures."""

    user_message = "Could not analyze this photo. Please try again."


class NoFaceDetected(AnalysisError):
    """No face cleared the detection confidence threshold."""

    user_message = "No face was found. Please use a clearer photo of your face."

    def __init__(self, message: str = "no face detected"):
        super().__init__(message)


class MultipleFacesDetected(AnalysisError):
    """More than one face cleared the threshold; the subject is ambiguous."""

    user_message = "More than one face was found. Please use a photo with only you in it."

    def __init__(self, count: int):
        super().__init__(f"{count} faces detected, expected exactly one")
        self.count = count


class ObservationError(AnalysisError):
    """Classifier output could not be interpreted as a label distribution."""

    def __init__(self, reason: str = "uninterpretable classifier output"):
        super().__init__(reason)
        self.reason = reason


class ProcessingError(AnalysisError):
    """Any other underlying failure, wrapping the original exception."""

    def __init__(self, cause: BaseException, message: Optional[str] = None):
        super().__init__(message or f"processing failed: {cause!r}")
        self.cause = cause


class ModelLoadError(RuntimeError):
    """Classification model could not be loaded at startup."""


__all__ = [
    "AnalysisError",
    "NoFaceDetected",
    "MultipleFacesDetected",
    "ObservationError",
    "ProcessingError",
    "ModelLoadError",
]
