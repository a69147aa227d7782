"""Shared pytest fixtures and test helpers for nestsort tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from nestsort.config.settings import NestsortSettings
from nestsort.services.sorting import SortService
from nestsort.services.telemetry import reset_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp directory with no NESTSORT_* env.

    Keeps a developer's own nestsort.toml or environment out of the suite.
    """
    for name in list(os.environ):
        if name.startswith("NESTSORT_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """CLI --verbose enables telemetry in the current context; undo it."""
    yield
    reset_telemetry()


@pytest.fixture
def settings(tmp_path: Path) -> NestsortSettings:
    """Default settings with no config file."""
    return NestsortSettings.from_cli(start=tmp_path)


@pytest.fixture
def service(settings: NestsortSettings) -> SortService:
    return SortService(settings)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Commands reconfigure the root logger; restore it after each test."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_level = logging.getLogger("nestsort").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("nestsort").setLevel(package_level)
