"""Tests for the root seqfig CLI."""

from pathlib import Path

from click.testing import CliRunner

from seqfig import __version__
from seqfig.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "seqfig" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_quiet_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "--version"])
    assert result.exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_log_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--log-json", "--version"])
    assert result.exit_code == 0


def test_missing_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, ["-c", str(tmp_path / "absent.toml"), "render"], input="")
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_explicit_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "paper.toml"
    config.write_text('[render]\nlabel_prefix = "seq:"\n')
    source = tmp_path / "flow.seq"
    source.write_text("A -> B: x\n")
    result = cli_runner.invoke(cli, ["-c", str(config), "render", str(source)])
    assert result.exit_code == 0
    assert "\\label{seq:flow}" in result.stdout


# --- Commands registered ---


def test_commands_registered() -> None:
    assert set(cli.commands) == {"render", "inspect"}
