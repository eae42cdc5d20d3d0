"""Brand mention detection for search snippets and AI-engine answers.

Rank extraction is best effort: brand names that are also numbers or common
words can produce spurious ranks. When no explicit rank is found the position
is bucketed by how early the brand first appears.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MentionResult:
    mentioned: bool
    position: Optional[int] = None


NOT_MENTIONED = MentionResult(mentioned=False, position=None)

# (absolute character offset upper bound, position)
SNIPPET_OFFSET_BUCKETS = ((100, 1), (250, 2), (500, 3))
# (relative offset upper bound, position)
RESPONSE_OFFSET_BUCKETS = ((0.15, 1), (0.35, 2), (0.6, 3))
LAST_BUCKET = 4


def _bucket(offset: float, buckets) -> int:
    for bound, position in buckets:
        if offset < bound:
            return position
    return LAST_BUCKET


def _positive_int(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    n = int(value)
    return n if n >= 1 else None


def _snippet_rank_pattern(brand: str) -> "re.Pattern[str]":
    b = re.escape(brand)
    return re.compile(
        rf"#?(\d+)\W*{b}|{b}\W*(?:is|at|ranked|comes in at)?\W*#?(\d+)",
        re.IGNORECASE,
    )


def _list_rank_pattern(brand: str) -> "re.Pattern[str]":
    b = re.escape(brand)
    # list item naming the brand before the next item starts: "1." / "2)" / "3 " at
    # line start, or an inline "4." / "5)" after whitespace
    return re.compile(
        rf"(?:^[ \t]*(?:[*#>-][ \t]*)*(\d{{1,3}})(?:[.)][ \t]*|[ \t]+)|(?<=\s)\**(\d{{1,3}})[.)][ \t]+)"
        rf"(?:(?!\s\**\d{{1,3}}[.)]\s)[^\n])*?{b}",
        re.IGNORECASE | re.MULTILINE,
    )


def locate_in_snippet(brand: str, title: str, snippet: str) -> MentionResult:
    """Locate ``brand`` in a search result's title + snippet."""
    brand_lower = (brand or "").lower()
    if not brand_lower:
        return NOT_MENTIONED
    text = f"{title or ''} {snippet or ''}".lower()
    idx = text.find(brand_lower)
    if idx < 0:
        return NOT_MENTIONED

    m = _snippet_rank_pattern(brand_lower).search(snippet or "")
    if m:
        explicit = _positive_int(m.group(1) or m.group(2))
        if explicit is not None:
            return MentionResult(mentioned=True, position=explicit)
    return MentionResult(mentioned=True, position=_bucket(idx, SNIPPET_OFFSET_BUCKETS))


def locate_in_response(brand: str, response_text: str) -> MentionResult:
    """Locate ``brand`` in free-form generative-AI output."""
    brand_lower = (brand or "").lower()
    text = response_text or ""
    if not brand_lower or not text:
        return NOT_MENTIONED
    idx = text.lower().find(brand_lower)
    if idx < 0:
        return NOT_MENTIONED

    m = _list_rank_pattern(brand_lower).search(text)
    if m:
        explicit = _positive_int(m.group(1) or m.group(2))
        if explicit is not None:
            return MentionResult(mentioned=True, position=explicit)
    return MentionResult(mentioned=True, position=_bucket(idx / len(text), RESPONSE_OFFSET_BUCKETS))
