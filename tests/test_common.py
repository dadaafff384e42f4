"""
Tests for the CLI terminal helpers
"""

import pytest

from express_starter.cli.utils import handle_error, next_steps, progress_step, warning
from express_starter.core import DestinationNotEmpty


def test_starter_error_shows_code_and_tip(capsys, tmp_path):
    handle_error(DestinationNotEmpty(tmp_path))

    out = capsys.readouterr().out
    assert "[ERROR E201] " in out
    assert "already exists and is not empty" in out
    assert "[TIP] Choose a different directory" in out


def test_os_error_is_prefixed_with_context(capsys):
    handle_error(PermissionError(13, "Permission denied", "/srv/app"),
                 context="Failed to create project structure")

    out = capsys.readouterr().out
    assert "[ERROR] Failed to create project structure: " in out
    assert "Permission denied" in out
    assert "[TIP]" not in out


def test_progress_step_marks_failure_and_reraises(capsys):
    with pytest.raises(OSError):
        with progress_step("Copying"):
            raise OSError("disk full")

    out = capsys.readouterr().out
    assert "[FAIL] Copying" in out
    assert "[ OK ]" not in out


def test_warning_and_next_steps(capsys):
    warning("git not found", "Run it yourself: git init app")
    next_steps(["cd app", "npm run dev"])

    out = capsys.readouterr().out
    assert "[WARN] git not found" in out
    assert "Run it yourself: git init app" in out
    assert "1. cd app" in out
    assert "2. npm run dev" in out
