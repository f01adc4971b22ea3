"""Shared test fixtures for the runtoken test suite."""

import os
from unittest.mock import patch

import pytest


@pytest.fixture
def runtime_dir(tmp_path):
    """Point $XDG_RUNTIME_DIR at a temporary directory and clear overrides."""
    run_dir = tmp_path / "run123"
    run_dir.mkdir()
    with patch.dict(os.environ, {"XDG_RUNTIME_DIR": str(run_dir)}):
        for key in ("RUNTOKEN_FILE", "RUNTOKEN_HOST", "RUNTOKEN_PORT"):
            os.environ.pop(key, None)
        yield run_dir


@pytest.fixture
def no_runtime_dir():
    """Remove $XDG_RUNTIME_DIR for the duration of the test."""
    with patch.dict(os.environ, {}):
        os.environ.pop("XDG_RUNTIME_DIR", None)
        yield
