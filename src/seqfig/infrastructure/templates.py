"""Shared Jinja2 template loading with a user override directory."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

# LaTeX is full of braces and percent signs, so the default delimiters
# would collide with the markup the templates produce.
LATEX_DELIMITERS: dict[str, str] = {
    "block_start_string": "<%",
    "block_end_string": "%>",
    "variable_start_string": "<<",
    "variable_end_string": ">>",
    "comment_start_string": "<#",
    "comment_end_string": "#>",
}


def build_template_environment(group: str, *, override_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Both a namespaced directory (for example ``<override_dir>/figure/``) and
    the override root itself are searched, so a single custom template can
    be dropped next to ``seqfig.toml`` without extra nesting.
    """

    loaders: list[BaseLoader] = []
    if override_dir is not None:
        loaders.append(FileSystemLoader([str(override_dir / group), str(override_dir)]))

    loaders.append(PackageLoader("seqfig", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        trim_blocks=True,
        **LATEX_DELIMITERS,
    )
