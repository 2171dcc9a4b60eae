"""Tests for logger setup."""

import logging
import sys

from utils.logger import setup_logger


def test_setup_logger_default():
    """Test logger setup with default settings."""
    logger = setup_logger()
    assert logger.name == "pr_commit_table"
    assert logger.level == logging.INFO


def test_setup_logger_custom_level():
    """Test logger setup with custom log level."""
    logger = setup_logger(log_level="DEBUG")
    assert logger.level == logging.DEBUG


def test_setup_logger_custom_name():
    """Test logger setup with custom name."""
    logger = setup_logger(name="test_logger")
    assert logger.name == "test_logger"


def test_logger_level_case_insensitive():
    """Test that log level string is case insensitive."""
    logger = setup_logger(log_level="debug")
    assert logger.level == logging.DEBUG
    
    logger = setup_logger(log_level="INFO")
    assert logger.level == logging.INFO


def test_unknown_level_falls_back_to_info():
    logger = setup_logger(log_level="chatty")
    assert logger.level == logging.INFO


def test_logs_go_to_stderr():
    """Stdout is reserved for the tables."""
    setup_logger()
    streams = [getattr(h, "stream", None) for h in logging.getLogger().handlers]
    assert sys.stderr in streams
    assert sys.stdout not in streams


def test_repeated_setup_keeps_single_handler():
    """Calling setup again reconfigures instead of stacking handlers."""
    setup_logger()
    setup_logger(log_level="DEBUG")
    
    stream_handlers = [
        h for h in logging.getLogger().handlers
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
    ]
    assert len(stream_handlers) == 1
    assert logging.getLogger().level == logging.DEBUG
