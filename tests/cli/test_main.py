"""Tests for CLI main module."""

import json as _json
import os as _os
import pathlib as _pathlib
import unittest.mock as _mock

import click.testing as _click_testing
import pydantic as _pydantic

import propchain
import propchain.cli as cli


class TestCLIBasics:
    """Help, version and settings display."""

    def setup_method(self) -> None:
        self.runner = _click_testing.CliRunner()

    def test_help_lists_commands(self, config_dir: _pathlib.Path) -> None:
        result = self.runner.invoke(cli.cli, ["--help"])
        assert result.exit_code == 0
        for cmd in ["fan", "chain", "config"]:
            assert cmd in result.output, f"Command '{cmd}' missing from help"

    def test_version(self, config_dir: _pathlib.Path) -> None:
        result = self.runner.invoke(cli.cli, ["--version"])
        assert result.exit_code == 0
        assert propchain.__version__ in result.output

    def test_config_displays_fields(self, config_dir: _pathlib.Path) -> None:
        result = self.runner.invoke(cli.cli, ["config"])
        assert result.exit_code == 0
        assert "Delimiter:   '.'" in result.output
        assert "Log Level:   WARNING" in result.output
        assert str(config_dir / "config.yaml") in result.output

    def test_bad_config_file_is_reported(self, config_dir: _pathlib.Path) -> None:
        (config_dir / "config.yaml").write_text("- not\n- a mapping\n")

        result = self.runner.invoke(cli.cli, ["config"])

        assert result.exit_code == 1
        assert "Error in config file" in result.output

    def test_invalid_delimiter_from_env_is_reported(self, config_dir: _pathlib.Path) -> None:
        with _mock.patch.dict(_os.environ, {"PROPCHAIN_DELIMITER": "::"}):
            result = self.runner.invoke(cli.cli, ["fan", "a.b"])

        assert result.exit_code == 1
        assert "Error: Invalid settings" in result.output
        assert "single character" in result.output
        assert not isinstance(result.exception, _pydantic.ValidationError)

    def test_invalid_value_in_config_file_is_reported(self, config_dir: _pathlib.Path) -> None:
        (config_dir / "config.yaml").write_text("delimiter: 5\n")

        result = self.runner.invoke(cli.cli, ["config"])

        assert result.exit_code == 1
        assert "Error: Invalid settings" in result.output
        assert "delimiter" in result.output

    def test_subcommand_help_with_broken_config(self, config_dir: _pathlib.Path) -> None:
        """Help does not need settings, so a broken config cannot block it."""
        (config_dir / "config.yaml").write_text("- not\n- a mapping\n")

        result = self.runner.invoke(cli.cli, ["fan", "--help"])

        assert result.exit_code == 0
        assert "--prefix" in result.output


class TestFanCommand:
    """propchain fan."""

    def setup_method(self) -> None:
        self.runner = _click_testing.CliRunner()

    def test_plain_output(self, config_dir: _pathlib.Path) -> None:
        result = self.runner.invoke(cli.cli, ["fan", "a.b.c", "--prefix", "x", "--suffix", "y"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["x.y", "x.a.y", "x.a.b.y", "x.a.b.c.y"]

    def test_json_output(self, config_dir: _pathlib.Path) -> None:
        result = self.runner.invoke(cli.cli, ["fan", "a", "--json"])

        assert result.exit_code == 0
        assert _json.loads(result.output) == ["", "a"]

    def test_delimiter_from_config(self, config_dir: _pathlib.Path) -> None:
        (config_dir / "config.yaml").write_text("delimiter: /\n")

        result = self.runner.invoke(cli.cli, ["fan", "a/b", "--json"])

        assert _json.loads(result.output) == ["", "a", "a/b"]


class TestChainCommand:
    """propchain chain."""

    def setup_method(self) -> None:
        self.runner = _click_testing.CliRunner()

    def test_json_output(self, config_dir: _pathlib.Path) -> None:
        result = self.runner.invoke(
            cli.cli, ["chain", "db.host", "--prefix", "svc", "--root", "localhost", "--json"]
        )

        assert result.exit_code == 0
        assert _json.loads(result.output) == {
            "order": ["svc.db.host", "svc.db", "svc"],
            "root": "localhost",
        }

    def test_plain_output(self, config_dir: _pathlib.Path) -> None:
        result = self.runner.invoke(cli.cli, ["chain", "a.b"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1. 'a.b'", "2. 'a'", "3. ''", "root: None"]

    def test_verbose_flag_enables_debug_logging(self, config_dir: _pathlib.Path) -> None:
        with _mock.patch("logging.basicConfig") as basic_config:
            result = self.runner.invoke(cli.cli, ["--verbose", "fan", "a"])

        assert result.exit_code == 0
        assert basic_config.call_args.kwargs["level"] == "DEBUG"

    def test_log_level_from_settings(self, config_dir: _pathlib.Path) -> None:
        (config_dir / "config.yaml").write_text("log_level: error\n")

        with _mock.patch("logging.basicConfig") as basic_config:
            self.runner.invoke(cli.cli, ["fan", "a"])

        assert basic_config.call_args.kwargs["level"] == "ERROR"
