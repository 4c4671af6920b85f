"""Command: render diagram sources as LaTeX xymatrix figures."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from seqfig.commands._base import SeqCommand

if TYPE_CHECKING:
    from seqfig.commands._context import AppContext


@click.command(
    cls=SeqCommand,
    examples="""\
  seqfig render login.seq
  seqfig render login.seq logout.seq > figures.tex
  cat login.seq | seqfig render --label login
  seqfig render login.seq --options "@R=1pc" -o login.tex
  seqfig --json render login.seq""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option("--label", default=None, help="Figure label (defaults to the file stem).")
@click.option(
    "--options",
    default=None,
    help="xymatrix options for sources without an 'xypic:' line.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the LaTeX to a file instead of stdout.",
)
@click.pass_obj
def render(
    app: AppContext,
    paths: tuple[Path, ...],
    label: str | None,
    options: str | None,
    output_path: Path | None,
) -> None:
    """Render each PATH (or stdin) as an independent figure."""
    from seqfig.infrastructure.sources import read_stream
    from seqfig.services.result import ServiceResult

    if paths:
        if label is not None and len(paths) > 1:
            raise click.UsageError("--label applies to a single input only.")
        result = app.service.render_paths(list(paths), label=label, options=options)
    else:
        source = read_stream(click.get_text_stream("stdin"))
        result = app.service.render([source], label=label, options=options)

    if output_path is None or not result.ok:
        app.emit(result)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.data["output"], encoding="utf-8")
    app.emit(
        ServiceResult(
            ok=True,
            op="write_figures",
            data={"path": str(output_path), "documents": result.data["documents"]},
            warnings=result.warnings,
        )
    )
