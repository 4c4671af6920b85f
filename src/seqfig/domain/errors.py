"""Diagram errors — fatal conditions raised while laying out a diagram.

Each error carries a stable ``code`` and a ``detail`` dict so the service
layer can turn it into a :class:`~seqfig.services.result.ServiceError`
without inspecting the message text.
"""

from __future__ import annotations

from typing import Any


class DiagramError(ValueError):
    """Base class for fatal diagram conditions."""

    code = "DIAGRAM_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class BackwardNoteError(DiagramError):
    """A note whose end participant precedes its start participant."""

    code = "BACKWARD_NOTE"

    def __init__(self, line: int, start: int, end: int) -> None:
        super().__init__(
            f"unsupported note ordering on line {line}",
            line=line,
            start=start,
            end=end,
        )
        self.line = line


class UnknownParticipantError(DiagramError):
    """Lookup of a participant name that was never registered."""

    code = "UNKNOWN_PARTICIPANT"

    def __init__(self, name: str, line: int | None = None) -> None:
        message = f"unknown participant: {name!r}"
        if line is not None:
            message += f" (line {line})"
            super().__init__(message, name=name, line=line)
        else:
            super().__init__(message, name=name)
        self.name = name


class EmptyDiagramError(DiagramError):
    """A diagram with no participants has no columns to lay out."""

    code = "EMPTY_DIAGRAM"

    def __init__(self) -> None:
        super().__init__("diagram has no participants")
