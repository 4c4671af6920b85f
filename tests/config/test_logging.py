"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from seqfig.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("seqfig").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("seqfig").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("seqfig.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "seqfig.test"
        assert "timestamp" in parsed

    def test_stdlib_module_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("seqfig.domain.parser").debug("parsed diagram")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "parsed diagram"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "seqfig.domain.parser"

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("seqfig.domain.parser").debug("quiet please")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
