"""Root CLI group for seqfig with global flags and command registration."""

from __future__ import annotations

import click

from seqfig import __version__
from seqfig.commands import register_commands
from seqfig.commands._base import SeqGroup
from seqfig.commands._context import AppContext
from seqfig.config.settings import SeqfigSettings


@click.group(
    cls=SeqGroup,
    invoke_without_command=True,
    examples="""\
  seqfig render diagram.seq
  seqfig inspect diagram.seq
  seqfig -c paper/seqfig.toml render paper/*.seq""",
)
@click.version_option(version=__version__, prog_name="seqfig")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """seqfig — sequence diagrams to LaTeX xymatrix figures."""
    settings = SeqfigSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
