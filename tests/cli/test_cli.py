"""Simple tests for the txtidy CLI entry point."""

import os
from unittest.mock import patch

import pytest

from txtidy._version import version_line
from txtidy.cli._io import resolve_root_dir
from txtidy.cli.main import build_parser, main
from txtidy.core.engine import RunResult
from txtidy.core.errors import ConfigError, WalkError


class TestBuildParser:
    def test_defaults(self):
        args = build_parser().parse_args(["*.txt"])
        assert args.patterns == ["*.txt"]
        assert args.dir is None
        assert args.verbose is False
        assert args.visit_all is False
        assert args.version is False
        assert args.exclude == []

    def test_short_flags(self):
        args = build_parser().parse_args(["-d", "src", "-v", "-a", "-V", "*.md", "*.txt"])
        assert args.dir == "src"
        assert args.verbose is True
        assert args.visit_all is True
        assert args.version is True
        assert args.patterns == ["*.md", "*.txt"]

    def test_exclude_is_repeatable(self):
        args = build_parser().parse_args(["--exclude", "build", "--exclude", "dist", "*"])
        assert args.exclude == ["build", "dist"]


class TestCLIMain:
    """Tests for the main entry point and its exit codes."""

    def test_version_prints_one_line_and_exits_zero(self, capsys):
        assert main(["--version"]) == 0
        out = capsys.readouterr().out
        assert out == version_line() + "\n"
        assert out.startswith("txtidy ")

    def test_version_needs_no_patterns(self, tmp_path, capsys):
        assert main(["-V", "-d", str(tmp_path / "missing")]) == 0

    def test_no_patterns_is_fatal(self, tmp_path, capsys):
        exit_code = main(["-d", str(tmp_path)])

        assert exit_code == 1
        err = capsys.readouterr().err
        assert "usage: txtidy" in err
        assert "Error: no file pattern have been given." in err

    def test_missing_root_is_fatal(self, tmp_path, capsys):
        missing = tmp_path / "missing"

        exit_code = main(["-d", str(missing), "*.txt"])

        assert exit_code == 1
        assert capsys.readouterr().err == f"Error: the given root directory '{missing}' could not be found.\n"

    def test_root_must_be_a_directory(self, tmp_path, capsys):
        f = tmp_path / "file.txt"
        f.write_bytes(b"x  \n")

        assert main(["-d", str(f), "*.txt"]) == 1
        assert f.read_bytes() == b"x  \n"

    def test_invalid_pattern_is_fatal_before_any_write(self, tmp_path, capsys):
        (tmp_path / "a.txt").write_bytes(b"dirty  \n")

        exit_code = main(["-d", str(tmp_path), "*.txt", "[oops"])

        assert exit_code == 1
        assert capsys.readouterr().err == "Error: file pattern '[oops' is invalid.\n"
        assert (tmp_path / "a.txt").read_bytes() == b"dirty  \n"

    def test_dispatches_to_engine_with_absolute_root(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "sub").mkdir()

        with patch("txtidy.cli.main.TidyEngine") as engine_cls:
            engine_cls.return_value.run.return_value = RunResult()
            exit_code = main(["-d", "sub", "-v", "--exclude", "build", "*.txt"])

        assert exit_code == 0
        patterns, options = engine_cls.call_args.args
        assert patterns == ("*.txt",)
        assert options.verbose is True
        assert options.excluded_dirs[-1] == "build"
        engine_cls.return_value.run.assert_called_once_with(os.path.join(os.getcwd(), "sub"))

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with patch("txtidy.cli.main.TidyEngine") as engine_cls:
            engine_cls.return_value.run.return_value = RunResult()
            assert main(["*.txt"]) == 0

        engine_cls.return_value.run.assert_called_once_with(os.getcwd())

    def test_walk_error_exit_code(self, tmp_path, capsys):
        with patch("txtidy.cli.main.TidyEngine") as engine_cls:
            engine_cls.return_value.run.side_effect = WalkError("Failed to walk filesystem: gone")
            exit_code = main(["-d", str(tmp_path), "*.txt"])

        assert exit_code == 1
        assert capsys.readouterr().err == "Error: Failed to walk filesystem: gone\n"

    def test_unexpected_error_is_reported_once(self, tmp_path, capsys):
        with patch("txtidy.cli.main.TidyEngine") as engine_cls:
            engine_cls.return_value.run.side_effect = RuntimeError("kaboom")
            exit_code = main(["-d", str(tmp_path), "*.txt"])

        assert exit_code != 0
        assert capsys.readouterr().err == "Error: kaboom\n"


class TestResolveRootDir:
    def test_relative_path_is_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "x").mkdir()
        assert resolve_root_dir("x") == os.path.join(os.getcwd(), "x")

    def test_empty_means_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_root_dir(None) == os.getcwd()
        assert resolve_root_dir("") == os.getcwd()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigError) as exc:
            resolve_root_dir(str(tmp_path / "nope"))
        assert exc.value.code == "root_not_found"


class TestVersionLine:
    def test_commit_is_shortened(self, monkeypatch):
        monkeypatch.setenv("TXTIDY_BUILD_COMMIT", "0123456789abcdef0123")
        monkeypatch.setenv("TXTIDY_BUILD_DATE", "2026-10-17T12:00:00Z")

        line = version_line()

        assert "(0123456789)" in line
        assert line.endswith("on 2026-10-17T12:00:00Z")
        assert "built with Python " in line
        assert "\n" not in line
