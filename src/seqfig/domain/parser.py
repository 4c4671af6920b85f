"""Line parser — builds a :class:`Diagram` in one forward pass.

Directive syntax::

    title: Caption text
    xypic: @R=1pc
    A -> B: arrow text
    A <- B: arrow text (drawn from B to A)
    note: spans every column
    note A: single column
    note A, B: columns A through B
    group: label
    ...
    end
    # comment

A blank or bare line continues the text of the previous item.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from seqfig.domain.document import Diagram

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
END_KEYWORD = "end"
NOTE_PREFIX = "note "


class DiagramParser:
    """Stateful single-pass parser.

    ``line`` counts the directive and continuation lines handled so far,
    starting at 1; comments and blank lines do not advance it. Notes record
    the counter value so layout errors can point back at them.
    """

    def __init__(self, diagram: Diagram | None = None) -> None:
        self.diagram = diagram if diagram is not None else Diagram()
        self.line = 1

    def feed(self, raw: str) -> None:
        """Process one input line."""
        text = raw.strip()
        if text.startswith(COMMENT_PREFIX):
            return
        if not text:
            self.diagram.add_text(text)
            return

        label, sep, body = text.partition(":")
        if sep:
            self._directive(label.strip(), body.strip())
        elif text == END_KEYWORD:
            self.diagram.end_group()
        else:
            self.diagram.add_text(text)

        self.line += 1

    def feed_lines(self, lines: Iterable[str]) -> Diagram:
        for raw in lines:
            self.feed(raw)
        return self.diagram

    def _directive(self, label: str, body: str) -> None:
        diagram = self.diagram
        if label == "xypic":
            diagram.options = body
        elif label == "title":
            diagram.title = body
        elif label == "note":
            diagram.note(None, None, body, self.line)
        elif label.startswith(NOTE_PREFIX):
            span = label[len(NOTE_PREFIX) :]
            source, comma, target = span.partition(",")
            if comma:
                diagram.note(source, target, body, self.line)
            else:
                diagram.note(span, span, body, self.line)
        elif "->" in label:
            source, _, target = label.partition("->")
            diagram.arrow(source, target, body)
        elif "<-" in label:
            target, _, source = label.partition("<-")
            diagram.arrow(source, target, body)
        elif label == "group":
            diagram.group(body)
        else:
            diagram.skip(label, body)


def parse(source: str | Iterable[str], *, label: str | None = None) -> Diagram:
    """Parse diagram *source* (a string or an iterable of lines).

    *label* seeds the figure label; the source itself has no label directive.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    parser = DiagramParser(Diagram(label=label))
    diagram = parser.feed_lines(lines)
    logger.debug(
        "parsed diagram: %d participants, %d items",
        len(diagram.participants),
        len(diagram.items),
    )
    return diagram
