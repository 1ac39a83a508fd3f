"""Tests for the javalens command line interface."""

import json

import pytest
from click.testing import CliRunner

from javalens.cli import main
from javalens.version import __version__


@pytest.fixture
def runner(monkeypatch, tmp_path) -> CliRunner:
    """CLI runner working from an empty directory."""
    import javalens.config.environment as env_module

    monkeypatch.setattr(env_module, "_dotenv_loaded", True)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


@pytest.mark.cli
class TestCommands:
    """Tests for the query commands."""

    def test_version(self, runner):
        """Test the version option."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_classes(self, runner, analysis_file):
        """Test listing classes."""
        result = runner.invoke(main, ["classes", str(analysis_file)])
        assert result.exit_code == 0
        assert "Classes (2)" in result.output
        assert "com.acme.Quote" in result.output

    def test_classes_from_directory(self, runner, analysis_dir):
        """Test that an output directory is accepted."""
        result = runner.invoke(main, ["classes", str(analysis_dir)])
        assert result.exit_code == 0
        assert "com.acme.TradeService" in result.output

    def test_methods(self, runner, analysis_file):
        """Test listing the methods of a class."""
        result = runner.invoke(main, ["methods", str(analysis_file), "com.acme.TradeService"])
        assert result.exit_code == 0
        assert "TradeService()" in result.output
        assert "quote(java.lang.String)" in result.output

    def test_methods_unknown_class(self, runner, analysis_file):
        """Test that an unknown class exits with an error."""
        result = runner.invoke(main, ["methods", str(analysis_file), "does.not.Exist"])
        assert result.exit_code == 1
        assert "Class not found" in result.output

    def test_method(self, runner, analysis_file):
        """Test showing one method with its parameters."""
        result = runner.invoke(
            main,
            ["method", str(analysis_file), "com.acme.TradeService", "buy(java.lang.String, int)"],
        )
        assert result.exit_code == 0
        assert "Parameters" in result.output
        assert "quantity" in result.output

    def test_method_unknown_signature(self, runner, analysis_file):
        """Test that an unknown signature exits with an error."""
        result = runner.invoke(
            main, ["method", str(analysis_file), "com.acme.TradeService", "sell()"]
        )
        assert result.exit_code == 1
        assert "Method not found" in result.output

    def test_callees(self, runner, analysis_file):
        """Test listing callees including undeclared library methods."""
        result = runner.invoke(
            main,
            ["callees", str(analysis_file), "com.acme.TradeService", "buy(java.lang.String, int)"],
        )
        assert result.exit_code == 0
        assert "java.util.HashMap" in result.output
        assert "yes" in result.output
        assert "no" in result.output

    def test_summary(self, runner, analysis_dir):
        """Test build statistics."""
        result = runner.invoke(main, ["summary", str(analysis_dir)])
        assert result.exit_code == 0
        assert "Synthesized callables" in result.output
        assert "Call graph edges" in result.output


@pytest.mark.cli
class TestErrors:
    """Tests for error reporting."""

    def test_invalid_document(self, runner, tmp_path):
        """Test that a schema violation exits with status 1."""
        path = tmp_path / "analysis.json"
        path.write_text(json.dumps({"symbol_table": {"A.java": {}}}))

        result = runner.invoke(main, ["classes", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_json_summary(self, runner, tmp_path):
        """Test that malformed JSON exits with status 1."""
        path = tmp_path / "analysis.json"
        path.write_text("{")

        result = runner.invoke(main, ["summary", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_missing_analysis_file(self, runner, tmp_path):
        """Test that click rejects a missing path."""
        result = runner.invoke(main, ["classes", str(tmp_path / "missing.json")])
        assert result.exit_code == 2

    def test_invalid_config(self, runner, tmp_path, analysis_file):
        """Test that an invalid config file exits with status 1."""
        config = tmp_path / "javalens.yaml"
        config.write_text("logging:\n  level: LOUD\n")

        result = runner.invoke(main, ["--config", str(config), "classes", str(analysis_file)])
        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output
