"""`Link` header parsing for paginated list endpoints.

Example header:
    <https://host/api/v1/timelines/home?max_id=9>; rel="next",
    <https://host/api/v1/timelines/home?min_id=12>; rel="prev"
"""

from __future__ import annotations

from dataclasses import dataclass

NEXT = "next"
PREV = "prev"


@dataclass(frozen=True)
class LinkRelations:
    """Pagination URLs found in a `Link` header."""

    next: str | None = None
    prev: str | None = None

    @classmethod
    def from_header(cls, value: str | None) -> LinkRelations:
        return parse_link_header(value)


def _split_segments(value: str) -> list[str]:
    """Split on commas that are not inside `<...>`."""
    segments: list[str] = []
    current: list[str] = []
    in_url = False
    for ch in value:
        if ch == "<":
            in_url = True
        elif ch == ">":
            in_url = False
        if ch == "," and not in_url:
            segments.append("".join(current))
            current = []
        else:
            current.append(ch)
    segments.append("".join(current))
    return segments


def _parse_segment(segment: str) -> tuple[str, list[str]] | None:
    """Return (url, relations) for one segment, or None if malformed."""
    segment = segment.strip()
    start = segment.find("<")
    end = segment.find(">", start + 1)
    if start != 0 or end == -1:
        return None
    url = segment[start + 1 : end].strip()
    if not url:
        return None

    for param in segment[end + 1 :].split(";"):
        name, sep, raw = param.partition("=")
        if not sep or name.strip().lower() != "rel":
            continue
        rels = raw.strip().strip('"').strip("'").lower().split()
        return url, rels
    return None


def parse_link_header(value: str | None) -> LinkRelations:
    """Parse a `Link` header into next/prev URLs.

    Unknown relations are ignored and malformed segments are skipped; an
    absent header gives empty relations. The first URL seen for a relation
    wins.
    """
    if not value:
        return LinkRelations()

    found: dict[str, str] = {}
    for segment in _split_segments(value):
        parsed = _parse_segment(segment)
        if parsed is None:
            continue
        url, rels = parsed
        for rel in rels:
            if rel in (NEXT, PREV):
                found.setdefault(rel, url)
    return LinkRelations(next=found.get(NEXT), prev=found.get(PREV))
