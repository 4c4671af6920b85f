"""Command: show how a diagram source was parsed."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from seqfig.commands._base import SeqCommand

if TYPE_CHECKING:
    from seqfig.commands._context import AppContext


@click.command(
    "inspect",
    cls=SeqCommand,
    examples="""\
  seqfig inspect login.seq
  seqfig -v inspect login.seq
  seqfig --json inspect login.seq""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def inspect_cmd(app: AppContext, path: Path) -> None:
    """List the participants and items parsed from PATH."""
    app.emit(app.service.inspect_path(path))
