"""
Tests for the command-line entry point (no window is opened).
"""

from pathlib import Path

import pytest

from wrapsnake import main as main_mod
from wrapsnake.config import DEFAULT_MAP


def test_defaults_to_bundled_map():
    cfg = main_mod.parse_args([])
    assert cfg.map_path == DEFAULT_MAP
    assert cfg.seed is None
    assert (cfg.width, cfg.height) == (30, 30)


def test_map_and_seed_arguments():
    cfg = main_mod.parse_args(["maps/2.txt", "--seed", "7"])
    assert cfg.map_path == Path("maps/2.txt")
    assert cfg.seed == 7


def test_missing_map_exits_with_error(tmp_path, monkeypatch):
    def no_window(*args, **kwargs):
        pytest.fail("window opened for a bad map")

    monkeypatch.setattr(main_mod.pygame, "init", no_window)
    assert main_mod.main([str(tmp_path / "missing.txt")]) == 1


def test_malformed_map_exits_with_error(tmp_path, monkeypatch):
    path = tmp_path / "bad.txt"
    path.write_text("# ?\n")
    monkeypatch.setattr(main_mod.pygame, "init", lambda: pytest.fail("window opened"))
    assert main_mod.main([str(path)]) == 1


def test_non_utf8_map_exits_with_error(tmp_path, monkeypatch):
    path = tmp_path / "bin.txt"
    path.write_bytes(b"# \xff\n")
    monkeypatch.setattr(main_mod.pygame, "init", lambda: pytest.fail("window opened"))
    assert main_mod.main([str(path)]) == 1


def test_parse_args_leaves_logging_alone(monkeypatch):
    monkeypatch.setattr(main_mod.logging, "basicConfig",
                        lambda **kwargs: pytest.fail("logging configured"))
    cfg = main_mod.parse_args(["-v"])
    assert cfg.verbose
