"""Detector and classifier backends.

Heavy backends import their ML runtimes lazily, so importing this
package only requires numpy and OpenCV.
"""

from moodscan.backends.base import ClassificationModel, DetectedFace, FaceDetectionBackend

__all__ = ["ClassificationModel", "DetectedFace", "FaceDetectionBackend"]
