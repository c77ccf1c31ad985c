"""Tests for the root gqlnno CLI."""

from click.testing import CliRunner

from gqlnno import __version__
from gqlnno.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "gqlnno" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_commands_registered(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert "shapes" in result.output
    assert "validate" in result.output


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0
