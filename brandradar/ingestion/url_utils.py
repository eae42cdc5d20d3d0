"""URL/domain normalization helpers for result dedup and display."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Optional
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse


DEFAULT_STRIP_QUERY_PARAMS = {
    # tracking
    "utm_source",
    "utm_medium",
    "utm_campaign",
    "utm_term",
    "utm_content",
    "utm_id",
    "gclid",
    "fbclid",
    "mc_cid",
    "mc_eid",
    "ref_src",
}


def normalize_domain(host: Optional[str]) -> str:
    """Lower-case a hostname and drop one leading ``www.`` label."""
    d = (host or "").strip().lower()
    if d.startswith("www."):
        d = d[4:]
    return d


def domain_from_url(url: str) -> str:
    try:
        return normalize_domain(urlparse(url or "").netloc)
    except Exception:
        return ""


def canonicalize_url(url: str, *, strip_params: Optional[Iterable[str]] = None) -> str:
    """Canonicalize a URL for dedup.

    - Lowercase scheme + hostname
    - Remove fragments
    - Strip tracking query parameters
    - Keep remaining query params in a stable order
    """
    if not url:
        return ""
    strip = set(strip_params) if strip_params is not None else set(DEFAULT_STRIP_QUERY_PARAMS)
    p = urlparse(url.strip())
    scheme = (p.scheme or "https").lower()
    netloc = (p.netloc or "").lower()
    path = p.path or "/"

    kept = [(k, v) for k, v in parse_qsl(p.query, keep_blank_values=True) if k.lower() not in strip]
    kept.sort(key=lambda kv: (kv[0].lower(), kv[1]))
    query = urlencode(kept, doseq=True)

    return urlunparse((scheme, netloc, path, "", query, ""))


def _parse_dt(dt: Any) -> Optional[datetime]:
    if not dt:
        return None
    if isinstance(dt, datetime):
        return dt
    s = str(dt).strip()
    if not s:
        return None
    s = s.replace("Z", "+00:00")
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError:
        # SerpAPI style display dates, e.g. "Mar 4, 2024"
        for fmt in ("%b %d, %Y", "%B %d, %Y", "%Y-%m-%d"):
            try:
                parsed = datetime.strptime(s, fmt)
                break
            except ValueError:
                continue
        else:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_publish_date(raw: Any) -> str:
    """Render a provider date as ``Mar 4, 2024``; unknown dates become ``Recent``."""
    parsed = _parse_dt(raw)
    if parsed is None:
        return "Recent"
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"
