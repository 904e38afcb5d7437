"""Safe navigation over decoded JSON responses."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

TEXT_PATH = ("candidates", 0, "content", "parts", 0, "text")


def dig(obj: Any, *path: str | int) -> Any | None:
    """Follow ``path`` through nested mappings and lists.

    String steps index mappings, integer steps index sequences. Returns
    ``None`` as soon as a step is missing or lands on the wrong type.
    """
    current = obj
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, Sequence) or isinstance(current, (str, bytes)):
                return None
            if not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, Mapping) or step not in current:
                return None
            current = current[step]
        if current is None:
            return None
    return current


def extract_generated_text(result: Any) -> str | None:
    """Return the first candidate's text, or None when there is none."""
    text = dig(result, *TEXT_PATH)
    if isinstance(text, str) and text:
        return text
    return None
