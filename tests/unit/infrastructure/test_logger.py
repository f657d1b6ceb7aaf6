"""Tests for logging setup."""

import logging
import os
import subprocess
import sys

import pytest
import structlog

import auth_strategies
from auth_strategies.config.schemas.registry_schema import LoggingConfig
from auth_strategies.infrastructure.logging.logger import (
    configure_default_logging,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    structlog.reset_defaults()
    configure_default_logging()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class QuietStrategy(auth_strategies.BaseStrategy):
    def authenticate(self):
        pass


class TestLogger:
    """Test structlog configuration."""

    def test_setup_logging_sets_level(self, restore_logging):
        """Test that the configured level reaches the root logger."""
        setup_logging(LoggingConfig(level="warning"))

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1

    def test_setup_logging_defaults(self, restore_logging):
        """Test that setup works without explicit configuration."""
        logger = setup_logging()

        assert logger is not None
        assert logging.getLogger().level == logging.INFO

    def test_get_logger(self):
        """Test that get_logger returns a usable logger."""
        logger = get_logger("auth_strategies.test")

        logger.info("message", key="value")

    def test_default_config_routes_through_stdlib(self):
        """Test that package loggers go through stdlib logging by default."""
        assert isinstance(structlog.get_config()["logger_factory"], structlog.stdlib.LoggerFactory)

    def test_registry_operations_are_quiet_without_setup(self, capsys):
        """Test that add, lookup and clear print nothing when logging is not configured."""
        auth_strategies.lookup("nope")
        auth_strategies.add("quiet", QuietStrategy)
        auth_strategies.add("quiet", QuietStrategy)
        auth_strategies.clear()

        assert capsys.readouterr().out == ""

    def test_fresh_interpreter_is_quiet(self):
        """Test that a host importing the package sees nothing on stdout."""
        src_dir = os.path.dirname(os.path.dirname(auth_strategies.__file__))
        script = (
            "import auth_strategies\n"
            "class S(auth_strategies.BaseStrategy):\n"
            "    def authenticate(self):\n"
            "        pass\n"
            "auth_strategies.lookup('nope')\n"
            "auth_strategies.add('s', S)\n"
            "auth_strategies.clear()\n"
        )
        env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [src_dir, os.environ.get("PYTHONPATH")]))}

        completed = subprocess.run(
            [sys.executable, "-c", script], capture_output=True, text=True, env=env, check=True
        )

        assert completed.stdout == ""
