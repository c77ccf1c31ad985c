"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from gqlnno.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("gqlnno")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("gqlnno").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("gqlnno").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("gqlnno.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "gqlnno.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("gqlnno.plugins.manager").debug("Registered plugin: sample")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Registered plugin: sample"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "gqlnno.plugins.manager"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("graphql").debug("engine noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
