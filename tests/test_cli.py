"""
Tests for the command-line entry point.
"""

import asyncio
from pathlib import Path

from backend.app.cli import analyze_file, guess_mime_type, main
from backend.app.vision.prompts import DEMO_COMMANDS, DEMO_RECOGNITION_RESULT


def test_guess_mime_type():
    assert guess_mime_type(Path("problem.jpg")) == "image/jpeg"
    assert guess_mime_type(Path("problem.png")) == "image/png"
    assert guess_mime_type(Path("problem")) == "image/png"


def test_analyze_file_demo_mode(tmp_path, png_bytes, demo_settings):
    image_path = tmp_path / "problem.png"
    image_path.write_bytes(png_bytes)

    result = asyncio.run(analyze_file(image_path, demo_settings))

    assert result.ocr_result == DEMO_RECOGNITION_RESULT
    assert result.commands == DEMO_COMMANDS


def test_main_prints_commands(tmp_path, png_bytes, monkeypatch, capsys):
    monkeypatch.setenv("TEST_MODE", "true")
    image_path = tmp_path / "problem.png"
    image_path.write_bytes(png_bytes)

    assert main([str(image_path), "--show-ocr", "--log-level", "ERROR"]) == 0

    out = capsys.readouterr().out
    assert DEMO_RECOGNITION_RESULT in out
    assert out.rstrip().endswith(DEMO_COMMANDS)


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.png"), "--log-level", "ERROR"]) == 1
