"""
Tests for logging configuration
"""

import logging
import sys

import pytest

from authenticator_mcp.configs import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("authenticator")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_never_logs_to_stdout(self, monkeypatch):
        monkeypatch.delenv("AUTHENTICATOR_LOG_FILE", raising=False)

        logger = setup_logging(debug=False)

        assert logger.handlers
        for handler in logger.handlers:
            assert getattr(handler, "stream", None) is not sys.stdout

    def test_debug_from_env(self, monkeypatch):
        monkeypatch.setenv("AUTHENTICATOR_DEBUG", "true")
        monkeypatch.delenv("AUTHENTICATOR_LOG_FILE", raising=False)

        logger = setup_logging()

        assert logger.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "bridge.log"

        logger = setup_logging(debug=False, log_file=str(log_file))
        get_logger("test").info("hello from test")
        for handler in logger.handlers:
            handler.flush()

        assert "hello from test" in log_file.read_text()
        stderr_handler = logger.handlers[0]
        assert stderr_handler.level == logging.WARNING

    def test_component_logger_name(self):
        assert get_logger("backend").name == "authenticator.backend"
