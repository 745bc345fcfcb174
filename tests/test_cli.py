"""Tests for the moodscan CLI."""

import argparse
import json

import cv2
import numpy as np
import pytest

from moodscan.algorithm.classifier import EmotionClassifier
from moodscan.cli import _build_parser
from moodscan.cli.commands import (
    EXIT_ANALYSIS_ERROR,
    EXIT_LOAD_ERROR,
    EXIT_OK,
    format_result,
    run_analyze,
    run_info,
)
from moodscan.imaging import load_image
from moodscan.main import MoodAnalyzer
from moodscan.testing import FakeDetector, FakeModel


class TestCLIParser:
    def test_analyze_basic(self):
        args = _build_parser().parse_args(["analyze", "photo.jpg"])
        assert args.command == "analyze"
        assert args.path == "photo.jpg"
        assert args.orientation is None
        assert args.threshold == 0.5
        assert args.device == "cpu"
        assert args.json is False

    def test_analyze_options(self):
        args = _build_parser().parse_args([
            "analyze", "photo.jpg", "--orientation", "6", "--model", "m.onnx",
            "--save-crop", "c.png", "--json", "-v",
        ])
        assert args.orientation == 6
        assert args.model == "m.onnx"
        assert args.save_crop == "c.png"
        assert args.json and args.verbose

    def test_invalid_orientation(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["analyze", "photo.jpg", "--orientation", "9"])

    def test_info(self):
        assert _build_parser().parse_args(["info"]).command == "info"

    def test_no_command(self):
        assert _build_parser().parse_args([]).command is None


def _args(path, **kw):
    defaults = dict(
        path=str(path), orientation=None, model=None, device="cpu",
        threshold=0.5, save_crop=None, json=False, verbose=False,
    )
    defaults.update(kw)
    return argparse.Namespace(**defaults)


def _analyzer(confidences):
    model = FakeModel(output=[2.0, 0.0, 0.0, 5.0, 1.0, 0.0, 0.0])
    return MoodAnalyzer(FakeDetector.with_confidences(confidences), EmotionClassifier(model))


@pytest.fixture
def photo(tmp_path):
    path = tmp_path / "photo.png"
    cv2.imwrite(str(path), np.full((120, 160, 3), 90, np.uint8))
    return path


class TestRunAnalyze:
    def test_text_output(self, photo, capsys):
        code = run_analyze(_args(photo), analyzer=_analyzer([0.9]))
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert out.startswith("Mood: happy")
        assert "surprise" in out

    def test_json_output(self, photo, capsys):
        code = run_analyze(_args(photo, json=True), analyzer=_analyzer([0.9]))
        data = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert data["top_label"] == "happy"
        assert sum(data["distribution"].values()) == pytest.approx(1.0)

    def test_multiple_faces_message(self, photo, capsys):
        code = run_analyze(_args(photo), analyzer=_analyzer([0.8, 0.9]))
        assert code == EXIT_ANALYSIS_ERROR
        assert "More than one face" in capsys.readouterr().err

    def test_no_face_message(self, photo, capsys):
        code = run_analyze(_args(photo), analyzer=_analyzer([]))
        assert code == EXIT_ANALYSIS_ERROR
        assert "No face was found" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        code = run_analyze(_args(tmp_path / "missing.png"), analyzer=_analyzer([0.9]))
        assert code == EXIT_LOAD_ERROR
        assert "Cannot open image" in capsys.readouterr().err

    def test_save_crop(self, photo, tmp_path):
        crop_path = tmp_path / "crop.png"
        code = run_analyze(_args(photo, save_crop=str(crop_path)), analyzer=_analyzer([0.9]))
        assert code == EXIT_OK
        saved = cv2.imread(str(crop_path))
        assert saved is not None
        assert saved.shape[:2] == (72, 96)

    def test_model_load_failure(self, photo, tmp_path, capsys):
        code = run_analyze(_args(photo, model=str(tmp_path / "nope.onnx")))
        assert code == EXIT_LOAD_ERROR
        assert "nope.onnx" in capsys.readouterr().err


class TestFormatResult:
    def test_sorted_by_probability(self, photo):
        result = _analyzer([0.9]).analyze(load_image(photo))
        lines = format_result(result).splitlines()
        assert lines[1].split()[0] == "happy"
        assert lines[2].split()[0] == "angry"


class TestRunInfo:
    def test_prints_labels_and_model_status(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("MOODSCAN_MODELS_DIR", str(tmp_path))
        run_info(argparse.Namespace(verbose=False))
        out = capsys.readouterr().out
        assert "angry, disgust, fear, happy, neutral, sad, surprise" in out
        assert "MISSING" in out
