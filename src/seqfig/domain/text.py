"""LaTeX text escaping for captions, labels, and item bodies.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

# Applied in order: the backslash must be replaced before anything that
# introduces new backslashes.
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("\\", "\\backslash"),
    ("_", "\\_"),
    ("\n", " \\\\\n"),
)


def escape(text: str) -> str:
    """Trim *text* and escape it for use inside ``\\txt{}`` or ``\\caption{}``.

    Backslashes become ``\\backslash``, underscores ``\\_``, and each embedded
    newline becomes a ``\\\\`` line break followed by a newline.
    """
    result = text.strip()
    for old, new in _REPLACEMENTS:
        result = result.replace(old, new)
    return result


def line_count(text: str) -> int:
    """Number of rendered lines in *text* once trimmed."""
    return text.strip().count("\n") + 1
