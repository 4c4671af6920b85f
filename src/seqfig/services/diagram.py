"""DiagramService — parse, render, and inspect diagram sources.

Parsing and layout live in :mod:`seqfig.domain`; this service wires them to
sources and the figure template and converts fatal diagram conditions into
failed :class:`ServiceResult` values.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from seqfig.domain.errors import DiagramError
from seqfig.domain.layout import layout
from seqfig.domain.parser import parse
from seqfig.domain.text import escape
from seqfig.infrastructure.sources import DiagramSource, read_source
from seqfig.infrastructure.templates import build_template_environment
from seqfig.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from jinja2 import Environment

    from seqfig.config.settings import SeqfigSettings
    from seqfig.domain.document import Diagram

logger = logging.getLogger(__name__)

FIGURE_TEMPLATE = "xymatrix.tex.j2"


def _diagram_error(op: str, exc: DiagramError, source: DiagramSource) -> ServiceResult:
    detail: dict[str, Any] = {"source": source.name, **exc.detail}
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=f"{source.name}: {exc.message}", detail=detail),
    )


def _skipped_warnings(diagram: Diagram) -> list[str]:
    return [f"Skipped directive: {c.removeprefix('skipped ')}" for c in diagram.skipped]


def _unreadable(op: str, path: Path, exc: OSError | UnicodeDecodeError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="SOURCE_UNREADABLE",
            message=f"cannot open file: {path}",
            detail={"path": str(path), "reason": getattr(exc, "strerror", None) or str(exc)},
        ),
    )


class DiagramService:
    """Diagram operations for one CLI invocation."""

    def __init__(self, settings: SeqfigSettings) -> None:
        self._settings = settings
        self._env: Environment | None = None

    @property
    def environment(self) -> Environment:
        """The figure template environment (created lazily on first render)."""
        if self._env is None:
            self._env = build_template_environment(
                "figure", override_dir=self._settings.template_dir
            )
        return self._env

    # ── Building blocks ───────────────────────────────────────────────

    def parse(self, source: DiagramSource, *, label: str | None = None) -> Diagram:
        """Parse *source*; an explicit *label* wins over the source's default."""
        return parse(source.text, label=label if label is not None else source.label)

    def render_figure(
        self, diagram: Diagram, *, options: str | None = None
    ) -> tuple[str, list[str]]:
        """Render *diagram* as a LaTeX figure block.

        The diagram's own ``xypic:`` options win over *options*, which win
        over the configured default. Returns ``(latex, warnings)``.

        Raises:
            DiagramError: the diagram cannot be laid out.
        """
        render_cfg = self._settings.render
        grid = layout(diagram, line_height=render_cfg.line_height)

        if diagram.options is not None:
            chosen = diagram.options
        elif options is not None:
            chosen = options
        else:
            chosen = render_cfg.options

        template = self.environment.get_template(FIGURE_TEMPLATE)
        latex = template.render(
            comments=diagram.skipped,
            size=render_cfg.size,
            options=chosen,
            grid=grid.text(),
            caption=escape(diagram.title),
            label=escape(diagram.label) if diagram.label is not None else None,
            label_prefix=render_cfg.label_prefix,
        )
        warnings = _skipped_warnings(diagram)
        warnings.extend(grid.warnings)
        return latex, warnings

    # ── Operations ────────────────────────────────────────────────────

    def render(
        self,
        sources: list[DiagramSource],
        *,
        label: str | None = None,
        options: str | None = None,
    ) -> ServiceResult:
        """Render every source as an independent figure.

        The first fatal diagram error aborts the whole run; no partial
        output is returned.
        """
        figures: list[str] = []
        documents: list[dict[str, Any]] = []
        warnings: list[str] = []

        for source in sources:
            diagram = self.parse(source, label=label)
            try:
                latex, diagram_warnings = self.render_figure(diagram, options=options)
            except DiagramError as exc:
                logger.debug("render failed for %s: %s", source.name, exc)
                return _diagram_error("render", exc, source)

            figures.append(latex)
            prefix = f"{source.name}: " if len(sources) > 1 else ""
            warnings.extend(f"{prefix}{w}" for w in diagram_warnings)
            documents.append(
                {
                    "source": source.name,
                    "title": diagram.title,
                    "label": diagram.label,
                    "participants": len(diagram.participants),
                    "items": len(diagram.items),
                }
            )

        return ServiceResult(
            ok=True,
            op="render",
            data={"output": "".join(figures), "documents": documents},
            warnings=warnings,
        )

    def render_paths(
        self,
        paths: list[Path],
        *,
        label: str | None = None,
        options: str | None = None,
    ) -> ServiceResult:
        """Read every path, then render them.

        An unreadable path fails the run before anything is rendered.
        """
        sources: list[DiagramSource] = []
        for path in paths:
            try:
                sources.append(read_source(path))
            except (OSError, UnicodeDecodeError) as exc:
                return _unreadable("render", path, exc)
        return self.render(sources, label=label, options=options)

    def inspect(self, source: DiagramSource) -> ServiceResult:
        """Parse *source* and report its structure without laying it out."""
        diagram = self.parse(source)
        open_groups = diagram.open_groups()
        warnings = _skipped_warnings(diagram)
        warnings.extend(f"Unclosed group: {g.text.strip()}" for g in open_groups)
        return ServiceResult(
            ok=True,
            op="inspect",
            data={"source": source.name, **diagram.to_dict()},
            warnings=warnings,
        )

    def inspect_path(self, path: Path) -> ServiceResult:
        try:
            source = read_source(path)
        except (OSError, UnicodeDecodeError) as exc:
            return _unreadable("inspect", path, exc)
        return self.inspect(source)
