"""Output mode selection for ServiceResult.

The CLI renders ServiceResult for humans (Rich tables, or the raw LaTeX
for ``render``), for scripts (``--quiet``), or for machines (``--json``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seqfig.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the root CLI group."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, which wins over the human renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from seqfig.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
