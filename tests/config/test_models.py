"""Tests for configuration models and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from javalens.config import PACKAGE_LOGGER, configure_logging
from javalens.config.models import (
    AnalysisConfig,
    JavalensConfig,
    LoggingConfig,
    LogLevel,
)
from javalens.models import AnalysisLevel


@pytest.mark.config
class TestAnalysisConfig:
    """Tests for AnalysisConfig model."""

    def test_defaults(self):
        """Test default level and file name."""
        config = AnalysisConfig()
        assert config.level is AnalysisLevel.SYMBOL_TABLE
        assert config.analysis_file == "analysis.json"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Call Graph", AnalysisLevel.CALL_GRAPH),
            ("system dependency graph", AnalysisLevel.SYSTEM_DEPENDENCY_GRAPH),
            (2, AnalysisLevel.CALL_GRAPH),
            ("3", AnalysisLevel.SYSTEM_DEPENDENCY_GRAPH),
            (AnalysisLevel.CALL_GRAPH, AnalysisLevel.CALL_GRAPH),
        ],
    )
    def test_level_forms(self, value, expected):
        """Test that names, numbers and levels are accepted."""
        assert AnalysisConfig(level=value).level is expected

    def test_empty_file_name_rejected(self):
        """Test that an empty analyzer file name is rejected."""
        with pytest.raises(ValidationError):
            AnalysisConfig(analysis_file="  ")


@pytest.mark.config
class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self):
        """Test default logging settings."""
        config = LoggingConfig()
        assert config.level == LogLevel.WARNING
        assert config.file is None
        assert "%(message)s" in config.format

    def test_lowercase_level(self):
        """Test that level names are case insensitive."""
        assert LoggingConfig(level="debug").level == LogLevel.DEBUG

    def test_invalid_level(self):
        """Test that unknown level names are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")


@pytest.mark.config
class TestJavalensConfig:
    """Tests for the root configuration."""

    def test_defaults(self):
        """Test that every section has defaults."""
        config = JavalensConfig()
        assert config.analysis == AnalysisConfig()
        assert config.logging == LoggingConfig()
        assert config.debug is False

    def test_nested_dicts(self):
        """Test construction from nested dictionaries."""
        config = JavalensConfig(analysis={"level": "call graph"}, logging={"level": "ERROR"})
        assert config.analysis.level is AnalysisLevel.CALL_GRAPH
        assert config.logging.level == LogLevel.ERROR


@pytest.mark.config
class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_level(self):
        logger = logging.getLogger(PACKAGE_LOGGER)
        level = logger.level
        yield
        logger.setLevel(level)

    def test_configured_level(self):
        """Test that the package logger gets the configured level."""
        configure_logging(LoggingConfig(level="ERROR"))
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR

    def test_verbose_lowers_level(self):
        """Test that verbose output shows INFO records."""
        configure_logging(LoggingConfig(level="WARNING"), verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO

    def test_verbose_keeps_debug(self):
        """Test that verbose never raises a DEBUG level."""
        configure_logging(LoggingConfig(level="DEBUG"), verbose=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
