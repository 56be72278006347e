"""Shared pytest fixtures for nsidctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo root logger changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    nsid_logger = logging.getLogger("nsidctl")
    nsid_level = nsid_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    nsid_logger.setLevel(nsid_level)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty temp directory with no config env vars set.

    Keeps a stray nsidctl.toml or NSIDCTL_* variable on the host from
    leaking into CLI and settings tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NSIDCTL_CONFIG", raising=False)
    monkeypatch.delenv("NSIDCTL_CHECK__DEFAULT_KIND", raising=False)
    monkeypatch.delenv("NSIDCTL_CHECK__STOP_ON_ERROR", raising=False)
    return tmp_path
