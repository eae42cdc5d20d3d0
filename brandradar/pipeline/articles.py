"""Editorial article discovery for a brand.

Runs a short prefix of the planned queries in sequence, keeps the first
occurrence of each URL, and ranks the result by estimated traffic. Any search
failure aborts the run: each query contributes different URLs, so a dropped
query would silently skew the ranking.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from brandradar.ingestion.article_types import ArticleRecord, SearchResult
from brandradar.ingestion.search_providers import BaseSearchProvider
from brandradar.ingestion.url_utils import canonicalize_url, format_publish_date, normalize_domain
from brandradar.pipeline.query_planner import build_search_queries
from brandradar.scoring.content_classifier import classify_content
from brandradar.scoring.mentions import locate_in_snippet
from brandradar.scoring.traffic import estimate_traffic


logger = logging.getLogger(__name__)

DEFAULT_QUERY_LIMIT = 2


def build_article(brand: str, item: SearchResult, *, rng: random.Random, record_id: int = 0) -> ArticleRecord:
    publisher = normalize_domain(item.display_domain)
    mention = locate_in_snippet(brand, item.title, item.snippet)
    return ArticleRecord(
        id=record_id,
        title=item.title,
        publisher=publisher,
        url=canonicalize_url(item.url),
        content_type=classify_content(item.title, item.snippet, item.url),
        monthly_traffic=estimate_traffic(publisher, rng),
        brand_mentioned=mention.mentioned,
        mention_position=mention.position,
        snippet=item.snippet,
        publish_date=format_publish_date(item.publish_date),
    )


def rank_articles(articles: Sequence[ArticleRecord]) -> List[ArticleRecord]:
    """Traffic descending (stable), then dense 1-based ids in that order."""
    ordered = sorted(articles, key=lambda a: a.monthly_traffic, reverse=True)
    return [replace(a, id=i) for i, a in enumerate(ordered, start=1)]


def aggregate_articles(
    brand: str,
    search: BaseSearchProvider,
    *,
    query_limit: int = DEFAULT_QUERY_LIMIT,
    rng: Optional[random.Random] = None,
) -> List[ArticleRecord]:
    rng = rng or random.Random()
    queries = build_search_queries(brand)[: max(1, query_limit)]

    # canonical url -> record, in order of first appearance
    seen: Dict[str, ArticleRecord] = {}
    for query in queries:
        response = search.search(query)
        added = 0
        for item in response.results:
            key = canonicalize_url(item.url)
            if not key or key in seen:
                continue
            seen[key] = build_article(brand, item, rng=rng)
            added += 1
        logger.info(f"[articles] '{query}': {len(response.results)} results, {added} new")

    return rank_articles(list(seen.values()))
