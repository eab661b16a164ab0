"""Tests for repeatcal.logging_config module."""

import logging
import os
from unittest.mock import patch

import pytest

from repeatcal.logging_config import configure_logging, get_logging_status

pytestmark = pytest.mark.unit


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_production_mode(self):
        configure_logging()

        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("repeatcal").level == logging.INFO
        assert logging.getLogger("repeatcal.recurrence").level == logging.INFO
        assert logging.getLogger("dateutil").level == logging.WARNING

    def test_debug_mode(self):
        configure_logging(debug_mode=True)

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("repeatcal").level == logging.DEBUG
        # Third-party loggers stay suppressed
        assert logging.getLogger("yaml").level == logging.WARNING

    def test_force_debug_override(self):
        configure_logging(debug_mode=True, force_debug=False)
        assert logging.getLogger("repeatcal").level == logging.INFO

    @patch.dict(os.environ, {"REPEATCAL_DEBUG": "1"})
    def test_env_debug_override(self):
        configure_logging(debug_mode=False)
        assert logging.getLogger().level == logging.DEBUG

    @patch.dict(os.environ, {"REPEATCAL_LOG_LEVEL": "WARNING"})
    def test_env_log_level_override(self):
        configure_logging()
        assert logging.getLogger().level == logging.WARNING


def test_get_logging_status():
    configure_logging()
    status = get_logging_status()

    assert status["root"] == "INFO"
    assert status["repeatcal"] == "INFO"
    assert status["dateutil"] == "WARNING"
