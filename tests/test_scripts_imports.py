"""
Tests for scripts to ensure they import project modules and run end to end.
"""
import importlib.util
import logging
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]


def _load_script(name: str):
    script_path = REPO_ROOT / "scripts" / f"{name}.py"
    assert script_path.exists(), f"scripts/{name}.py should exist"
    spec = importlib.util.spec_from_file_location(name, str(script_path))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("One two three four five. Six seven eight.\n\nNine ten.\n", encoding="utf-8")
    return path


def test_inspect_chunking_word_mode(sample_file, capsys):
    script = _load_script("inspect_chunking")
    exit_code = script.main(["--text-file", str(sample_file), "--size", "5", "--no-spacy"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Segmenter: regex" in out
    assert '"chunk_count": 2' in out
    assert "[01]" in out


def test_inspect_chunking_line_mode(sample_file, capsys):
    script = _load_script("inspect_chunking")
    exit_code = script.main(["--text-file", str(sample_file), "--mode", "lines", "--size", "1", "--no-spacy"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Chunks: 2" in out


def test_build_config_overrides(sample_file):
    script = _load_script("inspect_chunking")
    args = script.parse_args([
        "--text-file", str(sample_file), "--strategy", "hard", "--locale", "es", "--no-spacy", "--debug",
    ])
    cfg = script.build_config(args)
    assert cfg.default_strategy == "hard"
    assert cfg.default_locale == "es"
    assert cfg.use_locale_segmenter is False
    assert cfg.debug_chunking is True


def test_inspect_chunking_uses_configured_log_level(sample_file, monkeypatch, capsys):
    monkeypatch.setenv("TEXTCHUNKER_ENV", "development")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    script = _load_script("inspect_chunking")
    assert script.main(["--text-file", str(sample_file), "--no-spacy"]) == 0
    assert logging.getLogger().level == logging.ERROR


def test_inspect_chunking_debug_flag_overrides_log_level(sample_file, monkeypatch, capsys):
    monkeypatch.setenv("TEXTCHUNKER_ENV", "development")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    script = _load_script("inspect_chunking")
    assert script.main(["--text-file", str(sample_file), "--no-spacy", "--debug"]) == 0
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.parametrize("name, expected", [("warning", logging.WARNING), (" info ", logging.INFO), ("LOUD", logging.INFO)])
def test_resolve_log_level(name, expected):
    script = _load_script("inspect_chunking")
    assert script.resolve_log_level(name) == expected
