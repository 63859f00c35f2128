"""Tests for argument parsing and dispatch."""

import logging

import pytest

from cli.app import build_parser, main
from cli.settings import Settings


class TestParser:
    def test_xeo_arguments(self):
        args = build_parser().parse_args(["xeo", "setup.xeo", "--reverse"])

        assert args.command == "xeo"
        assert str(args.path) == "setup.xeo"
        assert args.reverse is True
        assert args.check is False

    def test_reverse_and_check_are_exclusive(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["xeo", "s.xeo", "--reverse", "--check"])

        assert exc_info.value.code == 2

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])

        assert exc_info.value.code == 2

    def test_add_requires_package(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["add"])


class TestMain:
    def test_version(self, capsys, settings):
        assert main(["version"], settings=settings) == 0

        assert "v0.0.1" in capsys.readouterr().out

    def test_no_color_flag(self, capsys, tmp_path):
        settings = Settings(home_dir=tmp_path, color=True)

        main(["--no-color", "update"], settings=settings)

        assert capsys.readouterr().out == "refreshing package database...\n"

    def test_init(self, capsys, settings):
        main(["init"], settings=settings)

        assert settings.sentinel_dir.is_dir()
        assert "initializing xeon..." in capsys.readouterr().out

    def test_xeo_forward_then_reverse(self, capsys, settings, workspace):
        script = workspace / "build.xeo"
        script.write_text("mkdir build\nmake build/app.txt\nprint built\n")

        assert main(["xeo", str(script)], settings=settings) == 0
        assert (workspace / "build" / "app.txt").exists()
        assert "built" in capsys.readouterr().out

        assert main(["xeo", str(script), "--reverse"], settings=settings) == 0
        assert not (workspace / "build").exists()

    def test_blank_script_is_silent(self, capsys, caplog, settings, workspace):
        """Verify a whitespace-only script runs without warnings or errors."""
        script = workspace / "empty.xeo"
        script.write_text("   \n")

        for flags in ([], ["--reverse"]):
            assert main(["--no-color", "xeo", str(script), *flags], settings=settings) == 0

        assert capsys.readouterr().err == ""
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestConfigurationErrors:
    """Bad environment configuration is reported, never a traceback."""

    def test_invalid_log_level_exits_two(self, capsys, monkeypatch, workspace):
        monkeypatch.setenv("XEON_LOG_LEVEL", "chatty")

        assert main(["--no-color", "version"]) == 2

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "xeon: invalid configuration:" in captured.err
        assert "Unknown log level: chatty" in captured.err
