"""Tests for the runtoken CLI."""

from unittest.mock import patch

import pytest

from runtoken import __version__
from runtoken.cli import main


class TestPath:
    def test_prints_path(self, runtime_dir, capsys):
        main(["path", "--name", "myapp.token"])
        assert capsys.readouterr().out.strip() == str(runtime_dir / "myapp.token")

    def test_missing_runtime_dir_exits(self, no_runtime_dir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["path"])
        assert exc.value.code == 1
        assert "XDG_RUNTIME_DIR" in capsys.readouterr().err


class TestToken:
    def test_prints_token(self, runtime_dir, capsys):
        (runtime_dir / "myapp.token").write_text("abc=", encoding="utf-8")
        main(["token", "--name", "myapp.token"])
        assert capsys.readouterr().out == "abc=\n"

    def test_missing_file_exits(self, runtime_dir, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["token", "--name", "myapp.token"])
        assert exc.value.code == 1
        assert "No token file" in capsys.readouterr().err


class TestConfig:
    def test_shows_token_file(self, runtime_dir, capsys):
        main(["config"])
        out = capsys.readouterr().out
        assert str(runtime_dir) in out
        assert "8765" in out

    def test_unset_runtime_dir(self, no_runtime_dir, capsys):
        main(["config"])
        assert "(unset XDG_RUNTIME_DIR)" in capsys.readouterr().out


class TestServe:
    def test_runs_uvicorn(self, runtime_dir):
        with patch("uvicorn.run") as mock_run:
            main(["serve"])
        mock_run.assert_called_once_with("runtoken.server:app", host="127.0.0.1", port=8765)

    def test_refuses_without_runtime_dir(self, no_runtime_dir):
        with patch("uvicorn.run") as mock_run, pytest.raises(SystemExit):
            main(["serve"])
        mock_run.assert_not_called()


def test_version(capsys):
    main(["version"])
    assert capsys.readouterr().out.strip() == f"runtoken {__version__}"


def test_no_command_prints_help(capsys):
    main([])
    assert "usage: runtoken" in capsys.readouterr().out
