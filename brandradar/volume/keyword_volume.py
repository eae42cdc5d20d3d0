"""Authoritative monthly search volume (DataForSEO Google Ads keywords).

The lookup is optional. Partial coverage is normal: terms without data are
simply missing from the mapping and get a heuristic estimate downstream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import requests

from brandradar.errors import UpstreamError
from brandradar.ingestion.article_types import UnitResult


logger = logging.getLogger(__name__)

DATAFORSEO_SUCCESS = 20000


class BaseVolumeLookup:
    name: str = "base"

    def volumes(self, terms: Iterable[str]) -> Dict[str, int]:
        raise NotImplementedError


@dataclass(frozen=True)
class DataForSEOVolumeLookup(BaseVolumeLookup):
    login: str
    password: str
    endpoint: str = "https://api.dataforseo.com/v3/keywords_data/google_ads/search_volume/live"
    location_code: int = 2840  # United States
    language_code: str = "en"
    timeout: int = 60

    name: str = "dataforseo"

    def volumes(self, terms: Iterable[str]) -> Dict[str, int]:
        keywords = [t for t in terms if t]
        if not keywords:
            return {}
        payload = [
            {
                "keywords": keywords,
                "location_code": self.location_code,
                "language_code": self.language_code,
            }
        ]
        try:
            resp = requests.post(
                self.endpoint,
                auth=(self.login, self.password),
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise UpstreamError(self.name, str(e)) from e
        if resp.status_code >= 400:
            raise UpstreamError(self.name, f"{resp.status_code} - {resp.text[:300]}", status_code=resp.status_code)
        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError(self.name, "non-JSON response", status_code=resp.status_code) from e
        if not isinstance(data, dict):
            raise UpstreamError(self.name, f"unexpected {type(data).__name__} payload", status_code=resp.status_code)
        if data.get("status_code") != DATAFORSEO_SUCCESS:
            raise UpstreamError(self.name, str(data.get("status_message") or "unexpected status"))

        out: Dict[str, int] = {}
        for task in data.get("tasks") or []:
            for row in (task or {}).get("result") or []:
                if not isinstance(row, dict):
                    continue
                keyword = row.get("keyword")
                volume = row.get("search_volume")
                if keyword and isinstance(volume, (int, float)) and volume >= 0:
                    out[str(keyword).lower()] = int(volume)
        return out


def lookup_volumes(lookup: Optional[BaseVolumeLookup], terms: Iterable[str]) -> UnitResult[Dict[str, int]]:
    """Batched lookup that never raises; a failure yields an empty mapping.

    Keys of the returned mapping are lower-cased terms.
    """
    if lookup is None:
        return UnitResult(value={}, status="skipped")
    try:
        found = lookup.volumes(list(terms))
    except Exception as e:
        logger.warning(f"volume lookup via {lookup.name} failed: {e}")
        return UnitResult.failed({}, str(e))
    return UnitResult(value={k.lower(): int(v) for k, v in (found or {}).items()})
