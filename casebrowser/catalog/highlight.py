"""Query-term highlighting for record text.

Highlighting produces a list of segments rather than markup so the
rendering layer decides how emphasis is displayed. ``render_html`` is the
only place markup is produced, and it escapes every segment first.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"


@dataclass(frozen=True)
class Segment:
    text: str
    emphasized: bool = False


def highlight_segments(text: str | None, term: str | None) -> list[Segment]:
    """Split text into plain and emphasized segments.

    Every case-insensitive occurrence of ``term`` is emphasized. The term is
    matched literally: regex metacharacters carry no meaning. An empty or
    whitespace-only term yields the whole text as one plain segment.
    """
    source = str(text or "")
    if source == "":
        return []
    needle = str(term or "")
    if not needle.strip():
        return [Segment(source)]

    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    segments: list[Segment] = []
    cursor = 0
    for match in pattern.finditer(source):
        start, end = match.span()
        if start > cursor:
            segments.append(Segment(source[cursor:start]))
        segments.append(Segment(match.group(0), emphasized=True))
        cursor = end
    if cursor < len(source):
        segments.append(Segment(source[cursor:]))
    return segments


def highlight(text: str | None, term: str | None) -> str:
    """Return text with every match of term wrapped in <mark> tags.

    Record text is not escaped here; use ``render_html`` for display.
    """
    if not str(term or "").strip():
        return str(text or "")
    return "".join(
        f"{MARK_OPEN}{seg.text}{MARK_CLOSE}" if seg.emphasized else seg.text
        for seg in highlight_segments(text, term)
    )


def render_html(text: str | None, term: str | None) -> str:
    """Escape text for HTML and wrap matched terms in <mark> tags."""
    parts: list[str] = []
    for seg in highlight_segments(text, term):
        escaped = html.escape(seg.text)
        parts.append(f"{MARK_OPEN}{escaped}{MARK_CLOSE}" if seg.emphasized else escaped)
    return "".join(parts)
