"""Shared data types for search results and brand-visibility records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from brandradar.scoring.content_classifier import SPONSORED_TYPES


T = TypeVar("T")


@dataclass(frozen=True)
class SearchResult:
    """One organic result as returned by a search provider."""

    title: str
    url: str
    display_domain: str
    snippet: str = ""
    publish_date: Optional[str] = None


@dataclass(frozen=True)
class SearchResponse:
    results: Tuple[SearchResult, ...] = ()
    related_questions: Tuple[str, ...] = ()
    related_searches: Tuple[str, ...] = ()


@dataclass(frozen=True)
class UnitResult(Generic[T]):
    """Outcome of a non-essential unit of work.

    A failed unit still carries a usable default ``value`` so the pipeline can
    continue, while ``status``/``error`` keep the failure visible.
    """

    value: T
    status: str = "ok"
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def failed(cls, default: T, error: str) -> "UnitResult[T]":
        return cls(value=default, status="error", error=error)


@dataclass(frozen=True)
class ArticleRecord:
    id: int
    title: str
    publisher: str
    url: str
    content_type: str
    monthly_traffic: int
    brand_mentioned: bool
    mention_position: Optional[int]
    snippet: str
    publish_date: str = "Recent"

    @property
    def domain(self) -> str:
        return self.publisher

    @property
    def sponsored(self) -> bool:
        return self.content_type in SPONSORED_TYPES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "publisher": self.publisher,
            "domain": self.domain,
            "url": self.url,
            "type": self.content_type,
            "monthlyTraffic": self.monthly_traffic,
            "brandMentioned": self.brand_mentioned,
            "mentionPosition": self.mention_position,
            "snippet": self.snippet,
            "publishDate": self.publish_date,
            "sponsored": self.sponsored,
        }


@dataclass(frozen=True)
class TrendPoint:
    period: str
    volume: int


@dataclass(frozen=True)
class PromptRecord:
    id: int
    prompt: str
    monthly_volume: int
    brand_mentioned: bool
    mention_position: Optional[int]
    engines: Tuple[str, ...] = ()
    trend: Tuple[TrendPoint, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        trend: List[Dict[str, Any]] = [{"period": p.period, "volume": p.volume} for p in self.trend]
        return {
            "id": self.id,
            "prompt": self.prompt,
            "monthlyVolume": self.monthly_volume,
            "brandMentioned": self.brand_mentioned,
            "mentionPosition": self.mention_position,
            "engines": list(self.engines),
            "trend": trend,
        }
