"""Tests for running netalgo as a module (`python -m netalgo`)."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["netalgo", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("netalgo", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_subcommand_help_exits_zero() -> None:
    with patch("sys.argv", ["netalgo", "apsp", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("netalgo", run_name="__main__")
    assert exc_info.value.code == 0
