"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           tests/unit/test_logger.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the centralized logging system.
------------------------------------------------------------------------------
"""

import logging
import pytest
from core.logger import setup_logging, get_logger, set_component_level

def _flush():
    for handler in logging.getLogger("wikiflux").handlers:
        handler.flush()

def test_logger_namespace():
    """Verify that get_logger returns a child of the wikiflux root."""
    logger = get_logger("content")
    assert logger.name == "wikiflux.content"
    assert get_logger("wikiflux.prefs").name == "wikiflux.prefs"
    assert isinstance(logger, logging.Logger)

def test_logging_to_file(tmp_path):
    """Verify that logs are correctly written to a file."""
    log_file = tmp_path / "logs" / "app.log"
    setup_logging(level="DEBUG", log_file=str(log_file))

    get_logger("test").debug("Logging to file test message")
    _flush()

    assert log_file.exists()
    assert "Logging to file test message" in log_file.read_text()

def test_component_level_overrides(tmp_path):
    """Verify that specific components can have different log levels."""
    log_file = tmp_path / "component.log"
    setup_logging(level="INFO", log_file=str(log_file))

    set_component_level("related", "DEBUG")

    get_logger("related").debug("RELATED DEBUG MESSAGE")
    get_logger("pages").debug("PAGES DEBUG MESSAGE")
    _flush()

    content = log_file.read_text()
    assert "RELATED DEBUG MESSAGE" in content
    assert "PAGES DEBUG MESSAGE" not in content

    get_logger("related").setLevel(logging.NOTSET)

def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    setup_logging(level="INFO", log_file=str(tmp_path / "a.log"))
    setup_logging(level="INFO", log_file=str(tmp_path / "b.log"))
    assert len(logging.getLogger("wikiflux").handlers) == 2

def test_quiet_default_mode(tmp_path):
    """Verify that the system is quiet at Default level."""
    log_file = tmp_path / "quiet.log"
    setup_logging(level="WARNING", log_file=str(log_file))

    get_logger("core").info("THIS SHOULD NOT APPEAR")
    _flush()

    assert "THIS SHOULD NOT APPEAR" not in log_file.read_text()
