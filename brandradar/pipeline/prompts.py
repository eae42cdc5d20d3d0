"""AI answer-engine visibility for a brand.

Flow:
1. Harvest candidate prompts from two exploratory searches run concurrently
   (related questions + the first few related searches), topped up with
   brand-templated fallbacks.
2. One batched volume lookup for all candidates (optional, never fatal).
3. Probe every configured engine with every prompt, strictly one call at a
   time to stay under engine rate limits. A failed probe counts as "no
   mention" for that engine and the batch continues.
4. Rank by monthly volume.
"""

from __future__ import annotations

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from brandradar.analytics.trends import synthesize_trend
from brandradar.engines.ai_engines import BaseEngine
from brandradar.ingestion.article_types import PromptRecord, SearchResponse, UnitResult
from brandradar.ingestion.search_providers import BaseSearchProvider
from brandradar.scoring.mentions import NOT_MENTIONED, MentionResult, locate_in_response
from brandradar.scoring.volume import estimate_volume
from brandradar.volume.keyword_volume import BaseVolumeLookup, lookup_volumes


logger = logging.getLogger(__name__)

DEFAULT_PROMPT_LIMIT = 10
RELATED_SEARCHES_PER_CALL = 5

FALLBACK_PROMPTS = (
    "Best {brand} alternatives",
    "Is {brand} worth buying?",
    "{brand} reviews",
    "{brand} vs competitors",
    "What is {brand} known for?",
    "Best products like {brand}",
    "Is {brand} good quality?",
    "{brand} pros and cons",
    "Where to buy {brand}",
    "Top brands similar to {brand}",
)


def exploratory_queries(brand: str) -> Tuple[str, str]:
    return brand, f"best {brand} alternatives"


def _harvest_one(search: BaseSearchProvider, query: str) -> UnitResult[SearchResponse]:
    try:
        return UnitResult(value=search.search(query))
    except Exception as e:
        logger.warning(f"[prompts] harvest search '{query}' failed: {e}")
        return UnitResult.failed(SearchResponse(), str(e))


def harvest_related(brand: str, search: BaseSearchProvider) -> List[UnitResult[SearchResponse]]:
    """Run both exploratory searches concurrently and wait for both to settle."""
    queries = exploratory_queries(brand)
    with ThreadPoolExecutor(max_workers=len(queries)) as pool:
        futures = [pool.submit(_harvest_one, search, q) for q in queries]
        return [f.result() for f in futures]


def _add_unique(candidates: List[str], seen: set, text: str) -> None:
    text = (text or "").strip()
    key = text.lower()
    if text and key not in seen:
        seen.add(key)
        candidates.append(text)


def candidate_prompts(
    brand: str,
    harvested: Sequence[UnitResult[SearchResponse]],
    *,
    limit: int = DEFAULT_PROMPT_LIMIT,
) -> List[str]:
    candidates: List[str] = []
    seen: set = set()
    for outcome in harvested:
        response = outcome.value
        for question in response.related_questions:
            _add_unique(candidates, seen, question)
        for related in response.related_searches[:RELATED_SEARCHES_PER_CALL]:
            _add_unique(candidates, seen, related)

    for template in FALLBACK_PROMPTS:
        if len(candidates) >= limit:
            break
        _add_unique(candidates, seen, template.format(brand=brand))
    return candidates[:limit]


@dataclass(frozen=True)
class ProbeOutcome:
    engine: str
    result: UnitResult[MentionResult]


def probe_prompt(brand: str, prompt: str, engines: Sequence[BaseEngine]) -> List[ProbeOutcome]:
    outcomes = []
    for engine in engines:
        try:
            answer = engine.complete(prompt)
        except Exception as e:
            logger.warning(f"[prompts] {engine.name} probe failed for '{prompt}': {e}")
            outcomes.append(ProbeOutcome(engine.name, UnitResult.failed(NOT_MENTIONED, str(e))))
            continue
        outcomes.append(ProbeOutcome(engine.name, UnitResult(value=locate_in_response(brand, answer))))
    return outcomes


def combine_probes(outcomes: Sequence[ProbeOutcome]) -> Tuple[bool, Optional[int], Tuple[str, ...]]:
    """Any engine mentioning counts; position is the first known one in engine order."""
    mentioning = [o for o in outcomes if o.result.value.mentioned]
    position = next((o.result.value.position for o in mentioning if o.result.value.position is not None), None)
    return bool(mentioning), position, tuple(o.engine for o in mentioning)


def rank_prompts(prompts: Sequence[PromptRecord]) -> List[PromptRecord]:
    ordered = sorted(prompts, key=lambda p: p.monthly_volume, reverse=True)
    return [replace(p, id=i) for i, p in enumerate(ordered, start=1)]


@dataclass(frozen=True)
class PromptProbeRun:
    prompts: List[PromptRecord]
    harvest: List[UnitResult[SearchResponse]]
    volumes: UnitResult[Dict[str, int]]
    probes: Dict[str, List[ProbeOutcome]]

    @property
    def failed_probes(self) -> int:
        return sum(1 for outcomes in self.probes.values() for o in outcomes if not o.result.ok)


def probe_prompts(
    brand: str,
    search: BaseSearchProvider,
    engines: Sequence[BaseEngine],
    *,
    volume_lookup: Optional[BaseVolumeLookup] = None,
    limit: int = DEFAULT_PROMPT_LIMIT,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> PromptProbeRun:
    rng = rng or random.Random()
    harvest = harvest_related(brand, search)
    prompts = candidate_prompts(brand, harvest, limit=limit)
    volumes = lookup_volumes(volume_lookup, prompts)

    records: List[PromptRecord] = []
    probes: Dict[str, List[ProbeOutcome]] = {}
    for prompt in prompts:
        outcomes = probe_prompt(brand, prompt, engines)
        probes[prompt] = outcomes
        mentioned, position, mentioning = combine_probes(outcomes)

        volume = volumes.value.get(prompt.lower())
        if volume is None:
            volume = estimate_volume(prompt, brand, rng)
        records.append(
            PromptRecord(
                id=len(records) + 1,
                prompt=prompt,
                monthly_volume=volume,
                brand_mentioned=mentioned,
                mention_position=position,
                engines=mentioning,
                trend=synthesize_trend(volume, rng, today=today),
            )
        )

    run = PromptProbeRun(prompts=rank_prompts(records), harvest=harvest, volumes=volumes, probes=probes)
    logger.info(
        f"[prompts] {brand}: {len(prompts)} prompts, "
        f"{sum(1 for h in harvest if not h.ok)} harvest failures, {run.failed_probes} probe failures"
    )
    return run
