"""Tests for the render command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from seqfig.cli import cli

DEMO = "title: Demo\nA -> B: ping\nB -> A: pong\nnote A,B: done\n"


class TestRenderCommand:
    def test_render_file(self, cli_runner: CliRunner, write_diagram: Callable[..., Path]) -> None:
        path = write_diagram(DEMO, name="demo.seq")
        result = cli_runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 0
        assert result.stdout.startswith("\\begin{figure}\n\\small\n")
        assert "\\caption{Demo}\n\\label{fig:demo}\n\\end{figure}\n" in result.stdout
        assert result.stderr == ""

    def test_render_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render"], input=DEMO)
        assert result.exit_code == 0
        assert "\\caption{Demo}\n\\end{figure}\n" in result.stdout
        assert "\\label" not in result.stdout

    def test_stdin_label(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render", "--label", "demo"], input=DEMO)
        assert result.exit_code == 0
        assert "\\label{fig:demo}" in result.stdout

    def test_label_rejected_for_many_files(
        self, cli_runner: CliRunner, write_diagram: Callable[..., Path]
    ) -> None:
        one = write_diagram(DEMO, name="one.seq")
        two = write_diagram(DEMO, name="two.seq")
        result = cli_runner.invoke(cli, ["render", "--label", "x", str(one), str(two)])
        assert result.exit_code == 2
        assert "--label applies to a single input only" in result.stderr

    def test_options_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render", "--options", "@R=1pc"], input="A -> B: x")
        assert result.exit_code == 0
        assert "\\[ \\xymatrix @R=1pc {" in result.stdout

    def test_multiple_files(
        self, cli_runner: CliRunner, write_diagram: Callable[..., Path]
    ) -> None:
        one = write_diagram("A -> B: x", name="one.seq")
        two = write_diagram("C -> D: y", name="two.seq")
        result = cli_runner.invoke(cli, ["render", str(one), str(two)])
        assert result.exit_code == 0
        assert result.stdout.count("\\begin{figure}") == 2
        assert result.stdout.index("fig:one") < result.stdout.index("fig:two")

    def test_warnings_go_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render"], input="colour: red\nA -> B: x")
        assert result.exit_code == 0
        assert "% skipped colour: red" in result.stdout
        assert "WARNING: Skipped directive: colour: red" in result.stderr
        assert "WARNING" not in result.stdout

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        missing = tmp_path / "missing.seq"
        result = cli_runner.invoke(cli, ["render", str(missing)])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert f"cannot open file: {missing}" in result.stderr

    def test_backward_note_fails(self, cli_runner: CliRunner) -> None:
        text = "B -> C: x\nA -> B: y\nnote A,B: backwards"
        result = cli_runner.invoke(cli, ["render"], input=text)
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "unsupported note ordering on line 3" in result.stderr

    def test_empty_diagram_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["render"], input="title: nothing\n")
        assert result.exit_code == 1
        assert "diagram has no participants" in result.stderr

    def test_json_output(self, cli_runner: CliRunner, write_diagram: Callable[..., Path]) -> None:
        path = write_diagram(DEMO, name="demo.seq")
        result = cli_runner.invoke(cli, ["--json", "render", str(path)])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["ok"] is True
        assert payload["op"] == "render"
        assert payload["data"]["output"].startswith("\\begin{figure}")
        assert payload["data"]["documents"][0]["label"] == "demo"

    def test_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "render"], input="note: alone")
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "EMPTY_DIAGRAM"

    def test_write_to_file(
        self, cli_runner: CliRunner, write_diagram: Callable[..., Path], tmp_path: Path
    ) -> None:
        path = write_diagram(DEMO, name="demo.seq")
        target = tmp_path / "out" / "demo.tex"
        result = cli_runner.invoke(cli, ["render", str(path), "-o", str(target)])
        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8").endswith("\\end{figure}\n")
        assert "write_figures" in result.stdout
        assert str(target) in result.stdout

    def test_failed_render_writes_nothing(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "out.tex"
        result = cli_runner.invoke(cli, ["render", "-o", str(target)], input="note: alone")
        assert result.exit_code == 1
        assert not target.exists()

    def test_config_file_applies(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "seqfig.toml").write_text('[render]\nsize = "tiny"\n')
        result = cli_runner.invoke(cli, ["render"], input="A -> B: x")
        assert result.exit_code == 0
        assert "\\tiny\n" in result.stdout

    def test_quiet_still_prints_latex(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "render"], input="A -> B: x")
        assert result.exit_code == 0
        assert result.stdout.startswith("\\begin{figure}")
