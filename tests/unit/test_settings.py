"""
Unit tests for settings, logging and the exception hierarchy
"""

import logging

import pytest
from pydantic import ValidationError

from textcell.core.config.settings import Settings, get_settings
from textcell.core.exceptions.custom_exceptions import (
    ConfigurationError,
    InvalidInputError,
    RecipeError,
    TextCellError,
)
from textcell.core.logging.logger import (
    MAX_FIELD_LENGTH,
    clip_long_fields,
    get_logger,
    setup_logging,
)


class TestSettings:
    """Test configuration defaults, validation and environment overrides"""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.APP_NAME == "textcell"
        assert settings.DEFAULT_ENCODING == "UTF-8"
        assert settings.SIMILARITY_THRESHOLD == 80.0
        assert settings.LOG_FORMAT == "text"

    def test_fixture_settings(self, test_settings):
        assert test_settings.ENVIRONMENT == "testing"
        assert test_settings.LOG_LEVEL == "DEBUG"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TEXTCELL_DEFAULT_ENCODING", "latin-1")
        monkeypatch.setenv("TEXTCELL_SIMILARITY_THRESHOLD", "65")
        settings = get_settings()
        assert settings.DEFAULT_ENCODING == "latin-1"
        assert settings.SIMILARITY_THRESHOLD == 65.0

    def test_log_level_is_normalised(self):
        assert Settings(LOG_LEVEL="info").LOG_LEVEL == "INFO"
        assert Settings(LOG_FORMAT="JSON").LOG_FORMAT == "json"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("DEFAULT_ENCODING", "UTF-99"),
            ("SIMILARITY_THRESHOLD", 120),
            ("LOG_LEVEL", "LOUD"),
            ("LOG_FORMAT", "xml"),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(**{field: value})


class TestExceptions:
    """Test the exception hierarchy"""

    def test_error_code_defaults_to_class_name(self):
        error = RecipeError("boom")
        assert error.message == "boom"
        assert error.error_code == "RecipeError"
        assert error.details == {}

    def test_explicit_context(self):
        error = InvalidInputError("bad", error_code="INPUT_X", details={"type": "list"})
        assert str(error) == "bad"
        assert error.error_code == "INPUT_X"
        assert error.details == {"type": "list"}

    @pytest.mark.parametrize("cls", [InvalidInputError, ConfigurationError, RecipeError])
    def test_hierarchy(self, cls):
        assert issubclass(cls, TextCellError)


def test_get_logger_accepts_structured_fields():
    logger = get_logger("textcell.tests")
    logger.debug("Structured event", operation="snake", delimiter="_")


def test_clip_long_fields():
    event = {"event": "x" * 500, "content": "y" * 500, "short": "z", "count": 3}
    clipped = clip_long_fields(None, "debug", event)
    assert clipped["event"] == "x" * 500
    assert clipped["content"].startswith("y" * MAX_FIELD_LENGTH)
    assert clipped["content"].endswith("(500 chars)")
    assert clipped["short"] == "z"
    assert clipped["count"] == 3


def test_setup_logging_keeps_existing_root_handlers():
    """Test an application's own root handlers survive textcell's setup"""
    root = logging.getLogger()
    marker = logging.NullHandler()
    root.addHandler(marker)
    try:
        setup_logging()
        assert marker in root.handlers
    finally:
        root.removeHandler(marker)
