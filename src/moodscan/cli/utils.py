"""CLI logging helpers."""

import logging
import os

# Third-party loggers that are chatty at INFO
NOISY_LOGGERS = ("onnxruntime", "insightface", "PIL", "matplotlib")


def configure_log_levels(level: int = logging.WARNING) -> None:
    """Quiet third-party loggers while keeping moodscan at INFO."""
    os.environ.setdefault("OPENCV_LOG_LEVEL", "ERROR")
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)
    logging.getLogger("moodscan").setLevel(logging.INFO)


__all__ = ["configure_log_levels", "NOISY_LOGGERS"]
