"""
Tests for configure_logging().
"""

from unittest.mock import patch

from src.shared.config import Settings
from src.shared.logging_config import configure_logging


def test_configure_logging_uses_settings():
    """Test level and format come from settings."""
    settings = Settings(log_level="WARNING", log_format="%(message)s")

    with patch("src.shared.logging_config.logging.basicConfig") as mock_basic_config:
        configure_logging(settings)

    mock_basic_config.assert_called_once_with(
        level="WARNING", format="%(message)s", force=True
    )


def test_configure_logging_level_override():
    """Test explicit level overrides settings.log_level."""
    settings = Settings(log_level="INFO")

    with patch("src.shared.logging_config.logging.basicConfig") as mock_basic_config:
        configure_logging(settings, level="debug")

    assert mock_basic_config.call_args.kwargs["level"] == "DEBUG"
