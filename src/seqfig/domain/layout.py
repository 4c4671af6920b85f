"""Grid layout — turns a parsed diagram into xymatrix rows.

Every participant owns a column. Each item consumes one grid row, so before
an item is drawn every column's *extent* (rows since the column's vertical
line was last drawn) grows by one. Notes and groups draw the lifeline up to
their row and reset the extent of the columns they touch; the trailer row
closes whatever is left.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from seqfig.domain.document import Diagram
from seqfig.domain.errors import BackwardNoteError, EmptyDiagramError, UnknownParticipantError
from seqfig.domain.items import Arrow, Group, Item, Note
from seqfig.domain.participants import Participants
from seqfig.domain.text import escape, line_count

logger = logging.getLogger(__name__)

DEFAULT_LINE_HEIGHT = 1.5
ROW_END = "\\\\"


@dataclass
class Grid:
    """Rendered xymatrix body plus non-fatal layout findings."""

    rows: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def text(self) -> str:
        return "\n".join(self.rows)


def _cells(count: int) -> str:
    return "&" * count


def _up(count: int) -> str:
    return "u" * count


def _em(value: float) -> str:
    """Format a length the way a human would write it (``3`` not ``3.0``)."""
    return str(int(value)) if float(value).is_integer() else repr(value)


def _lifeline(extent: int) -> str:
    return f"\\ar@{{-}}[{_up(extent)}]"


# ── Items ─────────────────────────────────────────────────────────────


def arrow_row(participants: Participants, item: Arrow) -> str:
    n = len(participants)
    start = participants.index_of(item.source)
    end = participants.index_of(item.target)
    if start > end:
        distance, direction, position = start - end, "l", "_"
    else:
        distance, direction, position = end - start, "r", "^"
    return (
        f"    {_cells(start)} \\ar[{direction * distance}]{position}"
        f"{{\\txt{{{escape(item.text)}}}}} {_cells(n - start - 1)} {ROW_END}"
    )


def note_span(participants: Participants, item: Note) -> tuple[int, int]:
    """Resolve a note's start and end columns."""
    try:
        start = participants.index_of(item.source) if item.source is not None else 0
        end = (
            participants.index_of(item.target)
            if item.target is not None
            else len(participants) - 1
        )
    except UnknownParticipantError as exc:
        raise UnknownParticipantError(exc.name, line=item.line) from None
    return start, end


def note_row(
    participants: Participants,
    item: Note,
    extents: list[int],
    *,
    line_height: float = DEFAULT_LINE_HEIGHT,
) -> str:
    """Render a note and reset the extents of the columns it spans."""
    n = len(participants)
    start, end = note_span(participants, item)
    if start > end:
        raise BackwardNoteError(item.line, start, end)

    text = escape(item.text)
    if start == end:
        row = (
            f"    {_cells(start)} *+[F.:<3pt>]{{\\txt{{{text}}}}} "
            f"{_lifeline(extents[start])} {_cells(n - end)} {ROW_END}"
        )
    else:
        spacer = f"*+<{_em(line_height * line_count(item.text))}em>{{}}"
        middle = start + (end - start) // 2
        parts = [
            f"    {_cells(start)} {spacer} \\save [].[{'r' * (end - start)}]"
            " *[F.:<3pt>]\\frm{} \\restore"
        ]
        for column in range(start, middle):
            if column > start:
                parts.append(f"  {spacer}")
            parts.append(f" {_lifeline(extents[column])} &")
        parts.append(f" *+\\txt{{{text}}}")
        for column in range(middle, end + 1):
            if column > middle:
                parts.append(f"  {spacer}")
            parts.append(f" {_lifeline(extents[column])}")
            if column < end:
                parts.append(" &")
            else:
                parts.append(f" {_cells(n - end - 1)} {ROW_END}")
        row = "".join(parts)

    for column in range(start, end + 1):
        extents[column] = 0
    return row


def group_rows(participants: Participants, item: Group, extents: list[int]) -> list[str]:
    """Render a group frame; an empty group becomes a LaTeX comment."""
    if item.lines == 0:
        comment = item.text.replace("\n", "\n% ")
        return [f"% empty group: {comment}"]

    span = "r" * (len(participants) - 1)
    rows = [
        f"    \\save [].[{span}] {{\\txt{{{escape(item.text)}}}}} \\restore "
        f"{_lifeline(extents[0])}",
        f"      \\save [].[{'d' * item.lines}{span}] *+[F-,]\\frm{{}} \\restore "
        f"{_cells(len(participants) - 1)} {ROW_END}",
    ]
    extents[0] = 0
    return rows


def item_rows(
    participants: Participants,
    item: Item,
    extents: list[int],
    *,
    line_height: float = DEFAULT_LINE_HEIGHT,
) -> list[str]:
    """Advance every extent by one row, then render *item*."""
    for column in range(len(extents)):
        extents[column] += 1
    if isinstance(item, Arrow):
        return [arrow_row(participants, item)]
    if isinstance(item, Note):
        return [note_row(participants, item, extents, line_height=line_height)]
    if isinstance(item, Group):
        return group_rows(participants, item, extents)
    raise TypeError(f"not a diagram item: {item!r}")


def trailer_row(extents: list[int]) -> str:
    """Close every lifeline at the bottom of the grid."""
    cells = [f" {_lifeline(extent + 1)}" for extent in extents]
    return " &".join(cells) + f" {ROW_END}"


# ── Diagram ───────────────────────────────────────────────────────────


def layout(diagram: Diagram, *, line_height: float = DEFAULT_LINE_HEIGHT) -> Grid:
    """Lay out *diagram* as xymatrix rows.

    Raises:
        EmptyDiagramError: the diagram has no participants.
        BackwardNoteError: a note's end column precedes its start column.
        UnknownParticipantError: a note names an unregistered participant.
    """
    participants = diagram.participants
    if not len(participants):
        raise EmptyDiagramError()

    grid = Grid(rows=[participants.header_row()])
    extents = [0] * len(participants)
    for item in diagram.items:
        if isinstance(item, Group) and item.lines == 0:
            state = "closed" if item.closed else "unclosed"
            grid.warnings.append(f"Empty group ({state}): {item.text.strip()}")
        grid.rows.extend(item_rows(participants, item, extents, line_height=line_height))
    grid.rows.append(trailer_row(extents))

    logger.debug("laid out %d rows over %d columns", len(grid.rows), len(participants))
    return grid
