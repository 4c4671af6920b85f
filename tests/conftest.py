"""Shared pytest fixtures and test helpers for seqfig tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from seqfig.config.settings import SeqfigSettings
from seqfig.services.diagram import DiagramService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config overrides."""
    monkeypatch.delenv("SEQFIG_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    seqfig_logger = logging.getLogger("seqfig")
    seqfig_level = seqfig_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    seqfig_logger.setLevel(seqfig_level)


@pytest.fixture
def settings(tmp_path: Path) -> SeqfigSettings:
    return SeqfigSettings.from_cli(root=tmp_path)


@pytest.fixture
def service(settings: SeqfigSettings) -> DiagramService:
    return DiagramService(settings)


@pytest.fixture
def write_diagram(tmp_path: Path) -> Callable[..., Path]:
    """Write diagram text to ``tmp_path/<name>`` and return the path."""

    def _write(text: str, name: str = "diagram.seq") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
