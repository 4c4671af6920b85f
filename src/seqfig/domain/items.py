"""Diagram items — the three kinds of row a diagram is made of.

``Item`` is a closed union of :class:`Arrow`, :class:`Note`, and
:class:`Group`. Items are mutable only in their text (continuation lines)
and, for groups, in the span recorded when the group is closed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ItemKind(StrEnum):
    """Discriminator used in inspection payloads."""

    ARROW = "arrow"
    NOTE = "note"
    GROUP = "group"


@dataclass
class Arrow:
    """A message from one participant column to another."""

    source: str
    target: str
    text: str = ""

    kind = ItemKind.ARROW


@dataclass
class Note:
    """A framed annotation over one or more columns.

    ``None`` endpoints stand for the leftmost (source) and rightmost
    (target) column.
    """

    source: str | None
    target: str | None
    text: str = ""
    line: int = 0  # parser line counter at declaration

    kind = ItemKind.NOTE


@dataclass
class Group:
    """A labelled frame around the next ``lines`` items."""

    text: str = ""
    lines: int = 0
    closed: bool = False

    kind = ItemKind.GROUP

    def close(self, enclosed: int) -> None:
        self.lines = enclosed
        self.closed = True


type Item = Arrow | Note | Group


def append_text(item: Item, text: str) -> None:
    """Append *text* to *item*'s body as a new line."""
    if isinstance(item, (Arrow, Note, Group)):
        item.text = f"{item.text}\n{text}"
    else:
        raise TypeError(f"not a diagram item: {item!r}")


def item_to_dict(item: Item) -> dict[str, Any]:
    """Serialise an item for inspection output."""
    if isinstance(item, Arrow):
        return {
            "kind": str(item.kind),
            "source": item.source,
            "target": item.target,
            "text": item.text,
        }
    if isinstance(item, Note):
        return {
            "kind": str(item.kind),
            "source": item.source,
            "target": item.target,
            "text": item.text,
            "line": item.line,
        }
    if isinstance(item, Group):
        return {
            "kind": str(item.kind),
            "text": item.text,
            "lines": item.lines,
            "closed": item.closed,
        }
    raise TypeError(f"not a diagram item: {item!r}")
