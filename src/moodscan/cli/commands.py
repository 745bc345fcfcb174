"""Handlers for ``moodscan analyze`` and ``moodscan info``."""

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_ANALYSIS_ERROR = 2


def format_result(result) -> str:
    """Human-readable summary with the distribution sorted by probability."""
    lines = [f"Mood: {result.top_label} ({result.top_confidence:.1%})"]
    for label, prob in sorted(result.distribution.items(), key=lambda kv: -kv[1]):
        bar = "#" * int(round(prob * 40))
        lines.append(f"  {label:<9} {prob:6.1%} {bar}")
    return "\n".join(lines)


def run_analyze(args: argparse.Namespace, analyzer=None) -> int:
    """Handle ``moodscan analyze``. Returns the process exit code."""
    from moodscan.config import AnalysisConfig
    from moodscan.errors import AnalysisError, ModelLoadError
    from moodscan.imaging import load_image
    from moodscan.main import load_analyzer

    try:
        image = load_image(args.path, orientation=args.orientation)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    owns_analyzer = analyzer is None
    if owns_analyzer:
        config = AnalysisConfig(
            face_confidence_threshold=args.threshold,
            return_debug_crop=bool(args.save_crop),
            device=args.device,
        )
        try:
            analyzer = load_analyzer(args.model, config=config)
        except (ModelLoadError, ImportError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_LOAD_ERROR

    try:
        result = analyzer.analyze(image)
    except AnalysisError as e:
        logger.debug("Analysis error detail: %r", e)
        print(f"Error: {e.user_message}", file=sys.stderr)
        return EXIT_ANALYSIS_ERROR
    finally:
        if owns_analyzer:
            analyzer.cleanup()

    if args.save_crop and result.debug_crop is not None:
        import cv2

        if cv2.imwrite(args.save_crop, result.debug_crop):
            logger.info("Face crop saved to %s", args.save_crop)
        else:
            logger.warning("Could not write face crop to %s", args.save_crop)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_result(result))
    return EXIT_OK


def run_info(args: argparse.Namespace) -> None:
    """Show vocabulary, defaults and model locations."""
    from moodscan import __version__
    from moodscan.algorithm.vocabulary import EMOTION_LABELS
    from moodscan.config import AnalysisConfig
    from moodscan.paths import default_model_path, get_models_dir

    cfg = AnalysisConfig()
    model_path = default_model_path()
    print(f"MoodScan {__version__}")
    print("=" * 60)
    print(f"  Labels:               {', '.join(EMOTION_LABELS)}")
    print(f"  Face threshold:       > {cfg.face_confidence_threshold}")
    print(f"  Crop scale:           {cfg.crop_scale}")
    print(f"  Models dir:           {get_models_dir()}")
    status = "found" if model_path.exists() else "MISSING"
    print(f"  Emotion model:        {model_path} ({status})")


__all__ = ["run_analyze", "run_info", "format_result"]
