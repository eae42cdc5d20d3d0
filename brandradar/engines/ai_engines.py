"""Generative-AI engines probed with candidate prompts.

An engine answers a prompt the way a consumer-facing assistant would; the
answer text is then scanned for brand mentions. Transport, quota, and HTTP
failures surface as UpstreamError.
"""

from __future__ import annotations

from typing import Optional

import openai
import requests

from brandradar.errors import UpstreamError


SYSTEM_PROMPT = (
    "You are a helpful shopping assistant. Answer the user's question directly. "
    "When recommending brands or products, list them in order of preference."
)


class BaseEngine:
    name: str = "base"

    def complete(self, prompt: str) -> str:
        raise NotImplementedError


class OpenAIEngine(BaseEngine):
    name = "ChatGPT"

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", *, timeout: int = 30, client: Optional[openai.OpenAI] = None):
        self.model = model
        self.client = client or openai.OpenAI(api_key=api_key, timeout=timeout)

    def complete(self, prompt: str) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=600,
                temperature=0.7,
            )
        except openai.OpenAIError as e:
            raise UpstreamError("openai", str(e)) from e
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


class OpenRouterEngine(BaseEngine):
    """Any OpenRouter-hosted model (Perplexity Sonar by default)."""

    endpoint = "https://openrouter.ai/api/v1/chat/completions"

    def __init__(self, api_key: str, model: str = "perplexity/sonar", *, name: str = "Perplexity", timeout: int = 30):
        self.api_key = api_key
        self.model = model
        self.name = name
        self.timeout = timeout

    def complete(self, prompt: str) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "X-Title": "BrandRadar",
        }
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": 600,
            "temperature": 0.7,
        }
        try:
            resp = requests.post(self.endpoint, headers=headers, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise UpstreamError("openrouter", str(e)) from e
        if resp.status_code != 200:
            raise UpstreamError("openrouter", f"{resp.status_code} - {resp.text[:300]}", status_code=resp.status_code)
        try:
            result = resp.json()
        except ValueError as e:
            raise UpstreamError("openrouter", "non-JSON response", status_code=resp.status_code) from e
        return result.get("choices", [{}])[0].get("message", {}).get("content", "") or ""
