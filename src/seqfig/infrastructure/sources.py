"""Diagram source reading — files and standard input.

Each source becomes one independent diagram. File sources carry a default
figure label derived from the file name; stdin has none.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

STDIN_NAME = "<stdin>"


@dataclass(frozen=True)
class DiagramSource:
    """Raw diagram text plus where it came from."""

    name: str
    text: str
    label: str | None = None
    path: Path | None = None


def default_label(path: Path) -> str:
    """Figure label for *path*: the stem, falling back to the file name."""
    return path.stem or path.name


def read_source(path: Path) -> DiagramSource:
    """Read a diagram file.

    Raises:
        OSError: the file cannot be opened or read.
    """
    text = path.read_text(encoding="utf-8")
    return DiagramSource(name=str(path), text=text, label=default_label(path), path=path)


def read_stream(stream: TextIO | None = None) -> DiagramSource:
    """Read one diagram from *stream* (default: stdin)."""
    stream = stream if stream is not None else sys.stdin
    return DiagramSource(name=STDIN_NAME, text=stream.read())
