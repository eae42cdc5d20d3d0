"""Rule-based content-type classification for discovered articles.

Rules are evaluated top to bottom and the first match wins, so a text that
carries both a sponsorship disclosure and review language is "Sponsored".
Several triggers overlap on purpose ("we tested" appears in both Product
Roundup and Review); precedence decides.
"""

from __future__ import annotations

import re
from typing import Callable, List, Tuple


CONTENT_TYPES = (
    "Sponsored",
    "Advertorial",
    "Listicle",
    "Product Roundup",
    "Comparison",
    "Buying Guide",
    "Review",
    "News",
    "Editorial",
)

SPONSORED_TYPES = {"Sponsored", "Advertorial"}

DEFAULT_CONTENT_TYPE = "Editorial"


def _any_of(*needles: str) -> Callable[[str], bool]:
    return lambda text: any(n in text for n in needles)


_NUMBER_THEN_SUPERLATIVE = re.compile(r"\d+\s+(best|top|great|amazing|must.have)")
_SUPERLATIVE_THEN_NUMBER = re.compile(r"(best|top)\s+\d+")
_BEST_OF_YEAR = re.compile(r"best .* of \d{4}")


def _is_listicle(text: str) -> bool:
    return bool(
        _NUMBER_THEN_SUPERLATIVE.search(text)
        or _SUPERLATIVE_THEN_NUMBER.search(text)
        or "ranked" in text
        or "our picks" in text
        or (_BEST_OF_YEAR.search(text) and "list" in text)
    )


def _is_roundup(text: str) -> bool:
    return (
        _any_of("roundup", "we tested", "we tried", "product round", "top picks")(text)
        or ("editor" in text and "pick" in text)
    )


def _is_buying_guide(text: str) -> bool:
    return (
        _any_of("buying guide", "how to choose", "what to look for")(text)
        or ("buyer" in text and "guide" in text)
    )


# (label, predicate) in precedence order
CLASSIFICATION_RULES: List[Tuple[str, Callable[[str], bool]]] = [
    ("Sponsored", _any_of("sponsor", "paid post", "paid content", "partner content")),
    ("Advertorial", _any_of("advertorial", "advertisement", "promoted")),
    ("Listicle", _is_listicle),
    ("Product Roundup", _is_roundup),
    ("Comparison", _any_of("vs", "versus", "compared", "comparison", "head-to-head", "head to head")),
    ("Buying Guide", _is_buying_guide),
    ("Review", _any_of("review", "we tested", "hands on", "hands-on", "after using", "months of")),
    ("News", _any_of("announces", "launches", "new product", "breaking", "report:")),
]


def classify_content(title: str, snippet: str = "", url: str = "") -> str:
    text = f"{title or ''} {snippet or ''} {url or ''}".lower()
    for label, matches in CLASSIFICATION_RULES:
        if matches(text):
            return label
    return DEFAULT_CONTENT_TYPE
