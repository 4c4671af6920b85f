"""Participant registry — ordered, deduplicated column names.

A participant's column is the position at which its name was first seen.
Names are compared after trimming; nothing is ever removed.
"""

from __future__ import annotations

from collections.abc import Iterator

from seqfig.domain.errors import UnknownParticipantError


class Participants:
    """Insertion-ordered set of participant names."""

    def __init__(self) -> None:
        self._names: list[str] = []

    def add(self, name: str) -> None:
        """Register *name* (trimmed) unless it is already present."""
        name = name.strip()
        if name not in self._names:
            self._names.append(name)

    def index_of(self, name: str) -> int:
        """Return the column of a registered *name*.

        Raises:
            UnknownParticipantError: if *name* was never added.
        """
        try:
            return self._names.index(name.strip())
        except ValueError:
            raise UnknownParticipantError(name.strip()) from None

    def count(self) -> int:
        return len(self._names)

    def names(self) -> list[str]:
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._names

    def header_row(self) -> str:
        """Render the framed participant labels as the first grid row."""
        cells = [f"  *+[F]{{\\txt{{{name}}}}}" for name in self._names]
        if not cells:
            return ""
        lines = [f"{cell} &" for cell in cells[:-1]]
        lines.append(f"{cells[-1]} \\\\")
        return "\n".join(lines)
