"""Home and model directory resolution.

Models live in ``~/.moodscan/models`` by default. Override with
``MOODSCAN_MODELS_DIR`` or ``MOODSCAN_HOME``.
"""

import os
from pathlib import Path

DEFAULT_MODEL_RELPATH = Path("emotion") / "emotion.onnx"


def get_home_dir() -> Path:
    """Return the moodscan home directory, creating it if needed.

    Resolution order:
        1. ``MOODSCAN_HOME`` environment variable.
        2. ``~/.moodscan`` (default).
    """
    home = os.environ.get("MOODSCAN_HOME")
    home_dir = Path(home) if home else Path.home() / ".moodscan"
    home_dir.mkdir(parents=True, exist_ok=True)
    return home_dir


def get_models_dir() -> Path:
    """Return the models directory, creating it if needed.

    Resolution order:
        1. ``MOODSCAN_MODELS_DIR`` (absolute, or relative to CWD).
        2. ``{home}/models``.
    """
    env_val = os.environ.get("MOODSCAN_MODELS_DIR")
    if env_val:
        models_dir = Path(env_val)
        if not models_dir.is_absolute():
            models_dir = Path.cwd() / models_dir
    else:
        models_dir = get_home_dir() / "models"
    models_dir.mkdir(parents=True, exist_ok=True)
    return models_dir


def default_model_path() -> Path:
    """Location of the bundled emotion classifier."""
    return get_models_dir() / DEFAULT_MODEL_RELPATH


__all__ = ["get_home_dir", "get_models_dir", "default_model_path"]
