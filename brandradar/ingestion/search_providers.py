"""Search providers (organic results + related questions/searches).

Providers normalize their payloads into SearchResponse so the pipeline never
sees provider-specific JSON. Transport and HTTP failures surface as
UpstreamError; result order is the provider's relevance order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import requests

from brandradar.errors import UpstreamError
from brandradar.ingestion.article_types import SearchResponse, SearchResult
from brandradar.ingestion.url_utils import domain_from_url


USER_AGENT = "BrandRadar/1.0"


def _get_json(provider: str, endpoint: str, params: Dict[str, Any], timeout: int) -> Dict[str, Any]:
    try:
        resp = requests.get(endpoint, params=params, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise UpstreamError(provider, str(e)) from e
    if resp.status_code >= 400:
        raise UpstreamError(provider, f"{resp.status_code} - {resp.text[:300]}", status_code=resp.status_code)
    try:
        data = resp.json()
    except ValueError as e:
        raise UpstreamError(provider, "non-JSON response", status_code=resp.status_code) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise UpstreamError(provider, f"unexpected {type(data).__name__} payload", status_code=resp.status_code)
    return data


SERPAPI_NO_RESULTS = "hasn't returned any results"


def _is_serpapi_failure(data: Dict[str, Any]) -> bool:
    """SerpAPI reports auth/quota problems in-band with a 200.

    A completed search with zero hits also carries an ``error`` message; that
    is an empty result, not a failure.
    """
    status = (data.get("search_metadata") or {}).get("status")
    if status == "Error":
        return True
    error = str(data.get("error") or "")
    if not error or data.get("organic_results"):
        return False
    return status != "Success" and SERPAPI_NO_RESULTS not in error.lower()


class BaseSearchProvider:
    name: str = "base"

    def search(self, query: str) -> SearchResponse:
        raise NotImplementedError


@dataclass(frozen=True)
class SerpAPISearch(BaseSearchProvider):
    api_key: str
    endpoint: str = "https://serpapi.com/search.json"
    timeout: int = 30
    num: int = 10

    name: str = "serpapi"

    def search(self, query: str) -> SearchResponse:
        params = {
            "engine": "google",
            "q": query,
            "num": self.num,
            "hl": "en",
            "gl": "us",
            "api_key": self.api_key,
        }
        data = _get_json(self.name, self.endpoint, params, self.timeout)
        if _is_serpapi_failure(data):
            raise UpstreamError(self.name, str(data.get("error") or "search failed"))

        results: List[SearchResult] = []
        for item in data.get("organic_results") or []:
            if not isinstance(item, dict):
                continue
            url = item.get("link") or ""
            title = item.get("title") or ""
            if not url or not title:
                continue
            results.append(
                SearchResult(
                    title=str(title).strip(),
                    url=str(url).strip(),
                    display_domain=domain_from_url(url) or str(item.get("displayed_link") or ""),
                    snippet=str(item.get("snippet") or ""),
                    publish_date=item.get("date") or None,
                )
            )

        questions = [
            str(q["question"]).strip()
            for q in data.get("related_questions") or []
            if isinstance(q, dict) and q.get("question")
        ]
        searches = [
            str(s["query"]).strip()
            for s in data.get("related_searches") or []
            if isinstance(s, dict) and s.get("query")
        ]
        return SearchResponse(
            results=tuple(results),
            related_questions=tuple(questions),
            related_searches=tuple(searches),
        )


def _metatag_published_time(item: Dict[str, Any]) -> Any:
    pagemap = item.get("pagemap")
    if not isinstance(pagemap, dict):
        return None
    metatags = pagemap.get("metatags") or []
    if not metatags or not isinstance(metatags[0], dict):
        return None
    return metatags[0].get("article:published_time")


@dataclass(frozen=True)
class GoogleCSESearch(BaseSearchProvider):
    """Google Programmable Search (Custom Search JSON API).

    The API has no related questions/searches, so those lists stay empty.
    """

    api_key: str
    search_engine_id: str
    endpoint: str = "https://www.googleapis.com/customsearch/v1"
    timeout: int = 30

    name: str = "google"

    def search(self, query: str) -> SearchResponse:
        params = {"key": self.api_key, "cx": self.search_engine_id, "q": query, "num": 10}
        data = _get_json(self.name, self.endpoint, params, self.timeout)
        results: List[SearchResult] = []
        for item in data.get("items") or []:
            if not isinstance(item, dict):
                continue
            url = item.get("link") or ""
            title = item.get("title") or ""
            if not url or not title:
                continue
            results.append(
                SearchResult(
                    title=str(title).strip(),
                    url=str(url).strip(),
                    display_domain=str(item.get("displayLink") or domain_from_url(url)),
                    snippet=str(item.get("snippet") or ""),
                    publish_date=_metatag_published_time(item),
                )
            )
        return SearchResponse(results=tuple(results))
