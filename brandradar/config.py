"""Environment-backed settings.

Values come from the process environment, with a local .env file loaded
first when present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from dotenv import load_dotenv


def _int(env: Mapping[str, str], key: str, default: int, lo: int, hi: int) -> int:
    try:
        value = int(env.get(key, default))
    except (TypeError, ValueError):
        value = default
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Settings:
    serpapi_api_key: str = ""
    google_api_key: str = ""
    google_search_engine_id: str = ""
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openrouter_api_key: str = ""
    openrouter_model: str = "perplexity/sonar"
    dataforseo_login: str = ""
    dataforseo_password: str = ""
    article_query_limit: int = 2
    prompt_limit: int = 10
    http_timeout: int = 30
    api_port: int = 3001
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"])

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            load_dotenv()
            env = os.environ
        origins = [o.strip() for o in env.get("CORS_ORIGINS", "").split(",") if o.strip()]
        return cls(
            serpapi_api_key=env.get("SERPAPI_API_KEY", ""),
            google_api_key=env.get("GOOGLE_SEARCH_API_KEY", ""),
            google_search_engine_id=env.get("GOOGLE_SEARCH_ENGINE_ID", ""),
            openai_api_key=env.get("OPENAI_API_KEY", ""),
            openai_model=env.get("OPENAI_MODEL", "gpt-4o-mini"),
            openrouter_api_key=env.get("OPENROUTER_API_KEY", ""),
            openrouter_model=env.get("OPENROUTER_MODEL", "perplexity/sonar"),
            dataforseo_login=env.get("DATAFORSEO_LOGIN", ""),
            dataforseo_password=env.get("DATAFORSEO_PASSWORD", ""),
            article_query_limit=_int(env, "ARTICLE_QUERY_LIMIT", 2, 1, 4),
            prompt_limit=_int(env, "PROMPT_LIMIT", 10, 1, 25),
            http_timeout=_int(env, "HTTP_TIMEOUT_SECONDS", 30, 1, 300),
            api_port=_int(env, "API_PORT", 3001, 1, 65535),
            **({"cors_origins": origins} if origins else {}),
        )

    @property
    def has_serpapi(self) -> bool:
        return bool(self.serpapi_api_key)

    @property
    def has_google(self) -> bool:
        return bool(self.google_api_key and self.google_search_engine_id)

    @property
    def has_volume(self) -> bool:
        return bool(self.dataforseo_login and self.dataforseo_password)

    def capabilities(self) -> Dict[str, bool]:
        return {
            "search": self.has_serpapi or self.has_google,
            "google": self.has_google,
            "serpapi": self.has_serpapi,
            "openai": bool(self.openai_api_key),
            "openrouter": bool(self.openrouter_api_key),
            "volume": self.has_volume,
        }
