"""Search queries used to discover editorial coverage of a brand.

Callers only issue a short prefix of this list, so the densest query types
come first.
"""

from __future__ import annotations

from typing import List


EDITORIAL_SITES = (
    "forbes.com",
    "businessinsider.com",
    "wirecutter.com",
    "goodhousekeeping.com",
    "reviewed.com",
)


def build_search_queries(brand: str) -> List[str]:
    site_filter = " OR ".join(f"site:{s}" for s in EDITORIAL_SITES)
    return [
        f"best {brand} review",
        f"{brand} editorial review {site_filter}",
        f'"{brand}" recommended buying guide',
        f"{brand} top products ranked",
    ]
