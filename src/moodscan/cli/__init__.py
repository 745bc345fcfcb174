"""Command-line interface for moodscan."""

import argparse
import logging
import sys

from moodscan.types import Orientation


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moodscan",
        description="MoodScan - Facial emotion analysis for a single photo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  moodscan analyze selfie.jpg                     # Label + distribution
  moodscan analyze selfie.jpg --json              # Machine-readable output
  moodscan analyze selfie.jpg --save-crop face.png
  moodscan info                                   # Labels, thresholds, model paths
""",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands")

    an = sub.add_parser("analyze", help="Analyze the emotion in a photo")
    an.add_argument("path", help="Path to image file")
    an.add_argument(
        "--orientation", type=int, choices=[int(o) for o in Orientation], default=None,
        help="EXIF orientation (1-8). Default: read from the file",
    )
    an.add_argument("--model", type=str, default=None, help="Path to emotion ONNX model")
    an.add_argument("--device", type=str, default="cpu", help="Device for ML (default: cpu)")
    an.add_argument(
        "--threshold", type=float, default=0.5,
        help="Face detection confidence threshold (default: 0.5)",
    )
    an.add_argument("--save-crop", type=str, metavar="PATH", help="Write the face crop image")
    an.add_argument("--json", action="store_true", help="Print result as JSON")
    an.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    info = sub.add_parser("info", help="Show labels, thresholds and model location")
    info.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    return parser


def main():
    """Entry point for ``moodscan`` CLI."""
    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    from moodscan.cli.utils import configure_log_levels

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)
        configure_log_levels()

    from moodscan.cli import commands

    if args.command == "analyze":
        sys.exit(commands.run_analyze(args))
    elif args.command == "info":
        commands.run_info(args)


if __name__ == "__main__":
    main()
