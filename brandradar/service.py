"""Request-level entry points used by the HTTP layer.

Each call builds its own random source and record set; nothing is shared
between requests except the static traffic table.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Dict, List, Optional

from brandradar.config import Settings
from brandradar.engines.ai_engines import BaseEngine, OpenAIEngine, OpenRouterEngine
from brandradar.errors import ConfigurationError
from brandradar.ingestion.search_providers import BaseSearchProvider, GoogleCSESearch, SerpAPISearch
from brandradar.pipeline.articles import aggregate_articles
from brandradar.pipeline.prompts import probe_prompts
from brandradar.volume.keyword_volume import BaseVolumeLookup, DataForSEOVolumeLookup


def build_search_provider(settings: Settings) -> Optional[BaseSearchProvider]:
    if settings.has_serpapi:
        return SerpAPISearch(api_key=settings.serpapi_api_key, timeout=settings.http_timeout)
    if settings.has_google:
        return GoogleCSESearch(
            api_key=settings.google_api_key,
            search_engine_id=settings.google_search_engine_id,
            timeout=settings.http_timeout,
        )
    return None


def build_engines(settings: Settings) -> List[BaseEngine]:
    engines: List[BaseEngine] = []
    if settings.openai_api_key:
        engines.append(OpenAIEngine(settings.openai_api_key, settings.openai_model, timeout=settings.http_timeout))
    if settings.openrouter_api_key:
        engines.append(OpenRouterEngine(settings.openrouter_api_key, settings.openrouter_model, timeout=settings.http_timeout))
    return engines


def build_volume_lookup(settings: Settings) -> Optional[BaseVolumeLookup]:
    if not settings.has_volume:
        return None
    return DataForSEOVolumeLookup(login=settings.dataforseo_login, password=settings.dataforseo_password)


class BrandRadarService:
    def __init__(
        self,
        settings: Settings,
        *,
        search: Optional[BaseSearchProvider] = None,
        engines: Optional[List[BaseEngine]] = None,
        volume_lookup: Optional[BaseVolumeLookup] = None,
        rng_factory: Callable[[], random.Random] = random.Random,
    ):
        self.settings = settings
        self.search = search if search is not None else build_search_provider(settings)
        self.engines = engines if engines is not None else build_engines(settings)
        self.volume_lookup = volume_lookup if volume_lookup is not None else build_volume_lookup(settings)
        self.rng_factory = rng_factory

    def _require_search(self) -> BaseSearchProvider:
        if self.search is None:
            raise ConfigurationError("Search API keys not configured")
        return self.search

    def get_articles(self, brand: str) -> Dict[str, Any]:
        search = self._require_search()
        articles = aggregate_articles(
            brand,
            search,
            query_limit=self.settings.article_query_limit,
            rng=self.rng_factory(),
        )
        return {"articles": [a.to_dict() for a in articles], "brand": brand, "total": len(articles)}

    def get_prompts(self, brand: str) -> Dict[str, Any]:
        search = self._require_search()
        if not self.engines:
            raise ConfigurationError("No AI engine API keys configured")
        run = probe_prompts(
            brand,
            search,
            self.engines,
            volume_lookup=self.volume_lookup,
            limit=self.settings.prompt_limit,
            rng=self.rng_factory(),
        )
        return {"prompts": [p.to_dict() for p in run.prompts], "brand": brand, "total": len(run.prompts)}

    def status(self) -> Dict[str, bool]:
        return self.settings.capabilities()
