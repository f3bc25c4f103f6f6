"""
Helpers for the route input form.

The form has two modes. In list mode the user fills a start field, any
number of stop fields and an end field. In bulk mode everything is typed
into one text area, one place per line: the first line is the start and
the last line the end.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

LIST_MODE = "list"
BULK_MODE = "bulk"


def _non_blank(lines: Sequence[str]) -> List[str]:
    return [line.strip() for line in lines if line.strip()]


def collect_inputs(start: str, stops: Sequence[str], end: str) -> List[str]:
    """Return the ordered descriptions to resolve: start, stops, then end if given."""
    inputs = [start.strip()] + _non_blank(stops)
    if end.strip():
        inputs.append(end.strip())
    return inputs


def parse_bulk_text(text: str) -> Tuple[str, List[str], str]:
    """Split bulk text into ``(start, stops, end)``."""
    lines = _non_blank(text.splitlines())
    if not lines:
        return "", [], ""
    if len(lines) == 1:
        return lines[0], [], ""
    return lines[0], lines[1:-1], lines[-1]


def to_bulk_text(start: str, stops: Sequence[str], end: str) -> str:
    """Join list mode fields into bulk text, dropping empty fields."""
    return "\n".join(_non_blank([start, *stops, end]))


def can_submit(mode: str, start: str, bulk_text: str) -> bool:
    if mode == BULK_MODE:
        return bool(bulk_text.strip())
    return bool(start.strip())
