"""Tests for the autoinject CLI."""
import pytest
from typer.testing import CliRunner

from autoinject import contract_name
from autoinject.cli.main import app
from autoinject.demo import OtherImpl, SODoer, SomeInterface, SomeOtherInterface

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("AUTOINJECT_CONFIG_PATH", "AUTOINJECT_ALLOW_IMPORT", "AUTOINJECT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


class TestDemoCommand:
    def test_default_configuration(self):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0, result.output
        assert "field1 is null!" in result.output
        assert "field2 is null!" in result.output
        assert "field1: SomeImpl" in result.output
        assert "field2: SODoer" in result.output
        assert result.output.rstrip().endswith("A\nC")

    def test_config_option(self, write_properties):
        path = write_properties({
            contract_name(SomeInterface): contract_name(OtherImpl),
            contract_name(SomeOtherInterface): contract_name(SODoer),
        })
        result = runner.invoke(app, ["demo", "--config", str(path)])
        assert result.exit_code == 0, result.output
        assert "field1: OtherImpl" in result.output
        assert result.output.rstrip().endswith("B\nC")

    def test_config_from_environment(self, write_properties, monkeypatch):
        path = write_properties({
            contract_name(SomeInterface): contract_name(OtherImpl),
            contract_name(SomeOtherInterface): contract_name(SODoer),
        })
        monkeypatch.setenv("AUTOINJECT_CONFIG_PATH", str(path))
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0, result.output
        assert "field1: OtherImpl" in result.output

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["demo", "--config", str(tmp_path / "absent")])
        assert result.exit_code == 1
        assert "Configuration not found" in result.output

    def test_unresolved_binding(self, write_properties):
        path = write_properties({contract_name(SomeInterface): contract_name(OtherImpl)})
        result = runner.invoke(app, ["demo", "--config", str(path)])
        assert result.exit_code == 1
        assert contract_name(SomeOtherInterface) in result.output


class TestShowConfigCommand:
    def test_lists_bindings(self):
        result = runner.invoke(app, ["show-config"])
        assert result.exit_code == 0, result.output
        assert "autoinject.demo.contracts.SomeInterface=autoinject.demo.impls.SomeImpl" in result.output
        assert "autoinject.demo.contracts.SomeOtherInterface=autoinject.demo.impls.SODoer" in result.output


class TestLogLevel:
    def test_invalid_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("AUTOINJECT_LOG_LEVEL", "verbose")
        result = runner.invoke(app, ["show-config"])
        assert result.exit_code == 1
        assert "Unknown log level: verbose" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_lowercase_level_is_accepted(self, monkeypatch):
        monkeypatch.setenv("AUTOINJECT_LOG_LEVEL", "info")
        result = runner.invoke(app, ["show-config"])
        assert result.exit_code == 0, result.output
