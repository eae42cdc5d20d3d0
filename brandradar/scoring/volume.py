"""Heuristic monthly search/prompt volume for a query.

Used only when no authoritative volume is available for a prompt. The first
matching rule picks the band, and the estimate is drawn uniformly inside it.
"""

from __future__ import annotations

import random
import re
from typing import Callable, List, Optional, Tuple

from brandradar.scoring.traffic import uniform_int


_BEST_OF_YEAR = re.compile(r"best .* of \d{4}")
_TOP_N = re.compile(r"top \d+ ")
_QUESTION = re.compile(r"(what|how|why|which|where|when) ")

# (predicate(q, b), [lo, hi)) in precedence order
VOLUME_RULES: List[Tuple[Callable[[str, str], bool], Tuple[int, int]]] = [
    (lambda q, b: bool(_BEST_OF_YEAR.match(q)), (80_000, 480_000)),
    (lambda q, b: q.startswith("best ") and b not in q, (50_000, 350_000)),
    (lambda q, b: bool(_TOP_N.match(q)), (40_000, 240_000)),
    (lambda q, b: " vs " in q or " versus " in q, (30_000, 180_000)),
    (lambda q, b: bool(_QUESTION.match(q)), (15_000, 115_000)),
    (lambda q, b: "alternative" in q or "similar to" in q, (10_000, 90_000)),
    (lambda q, b: "review" in q or "worth it" in q or "worth buying" in q, (5_000, 55_000)),
    (lambda q, b: bool(b) and b in q, (8_000, 68_000)),
]

DEFAULT_VOLUME_RANGE = (10_000, 110_000)


def volume_range(query: str, brand: str) -> Tuple[int, int]:
    q = (query or "").lower()
    b = (brand or "").lower()
    for matches, bounds in VOLUME_RULES:
        if matches(q, b):
            return bounds
    return DEFAULT_VOLUME_RANGE


def estimate_volume(query: str, brand: str, rng: Optional[random.Random] = None) -> int:
    rng = rng or random.Random()
    return uniform_int(*volume_range(query, brand), rng)
