"""Diagram — the aggregate a parse produces and a render consumes.

Owns the participant registry, the ordered item list, and the figure
metadata (title, xymatrix options, label). Mutators mirror the parser's
directives so the parser stays a thin line dispatcher.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from seqfig.domain.items import Arrow, Group, Item, Note, append_text, item_to_dict
from seqfig.domain.participants import Participants

logger = logging.getLogger(__name__)


@dataclass
class Diagram:
    """A parsed sequence diagram."""

    title: str = ""
    options: str | None = None
    label: str | None = None
    participants: Participants = field(default_factory=Participants)
    items: list[Item] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    # --- Directives ---

    def arrow(self, source: str, target: str, text: str) -> Arrow:
        """Register both endpoints, then append an arrow between them."""
        source = source.strip()
        target = target.strip()
        self.participants.add(source)
        self.participants.add(target)
        item = Arrow(source=source, target=target, text=text)
        self.items.append(item)
        return item

    def note(self, source: str | None, target: str | None, text: str, line: int) -> Note:
        item = Note(
            source=source.strip() if source is not None else None,
            target=target.strip() if target is not None else None,
            text=text,
            line=line,
        )
        self.items.append(item)
        return item

    def group(self, text: str) -> Group:
        item = Group(text=text)
        self.items.append(item)
        return item

    def end_group(self) -> Group | None:
        """Close the innermost open group.

        Scans backward from the last item; the group's span is the number of
        items appended after it. Returns None when no group is open.
        """
        count = len(self.items)
        for index in range(count - 1, -1, -1):
            item = self.items[index]
            if isinstance(item, Group) and not item.closed:
                item.close(count - index - 1)
                return item
        logger.debug("end without an open group")
        return None

    def add_text(self, text: str) -> None:
        """Append a continuation line to the last item, if any."""
        if self.items:
            append_text(self.items[-1], text)

    def skip(self, label: str, body: str) -> None:
        """Record an unrecognised ``label: body`` directive."""
        self.skipped.append(f"skipped {label}: {body}")
        logger.debug("skipped directive %s: %s", label, body)

    # --- Queries ---

    def open_groups(self) -> list[Group]:
        return [item for item in self.items if isinstance(item, Group) and not item.closed]

    def to_dict(self) -> dict[str, Any]:
        """Summarise the diagram for inspection output."""
        return {
            "title": self.title,
            "options": self.options,
            "label": self.label,
            "participants": [
                {"index": index, "name": name} for index, name in enumerate(self.participants)
            ],
            "items": [item_to_dict(item) for item in self.items],
            "skipped": list(self.skipped),
        }
