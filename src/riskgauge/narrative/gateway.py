from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass, field
from enum import StrEnum

import httpx

from riskgauge.config import AppConfig

logger = logging.getLogger(__name__)


class CompletionStatus(StrEnum):
    OK = "OK"
    RATE_LIMITED = "RATE_LIMITED"
    FAILED = "FAILED"


@dataclass
class CompletionResult:
    status: CompletionStatus
    content: str = ""
    model: str = ""
    error: str = ""
    token_usage: dict = field(default_factory=dict)
    latency_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.status is CompletionStatus.OK


@dataclass
class ModelConfig:
    base_url: str
    api_key: str
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.7
    timeout_seconds: int = 30
    max_tokens: int = 1024


class ModelGateway:
    """Single-attempt client for an OpenAI-compatible chat completions endpoint.

    Never raises for HTTP or transport problems: every outcome is reported as
    a CompletionResult so the caller decides between retry and fallback.
    """

    def __init__(self, config: ModelConfig) -> None:
        self._config = config
        self._client: httpx.AsyncClient | None = None

    @property
    def model(self) -> str:
        return self._config.model

    def _ensure_client(self) -> httpx.AsyncClient:
        # No await between check and assignment: concurrent callers share one client.
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(120.0))
        return self._client

    async def start(self) -> None:
        """Initialize the HTTP client."""
        self._ensure_client()

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def complete(self, user_prompt: str, system_prompt: str | None = None) -> CompletionResult:
        """Request a JSON-object completion for the prompt."""
        config = self._config
        client = self._ensure_client()

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        url = f"{config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        }
        body = {
            "model": config.model,
            "messages": messages,
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
            "response_format": {"type": "json_object"},
        }

        start_time = time.monotonic()
        try:
            response = await client.post(
                url,
                json=body,
                headers=headers,
                timeout=config.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code == 429:
                return CompletionResult(
                    status=CompletionStatus.RATE_LIMITED,
                    model=config.model,
                    error=f"429 Too Many Requests: {e}",
                )
            return CompletionResult(
                status=CompletionStatus.FAILED,
                model=config.model,
                error=f"HTTP {status_code}: {e}",
            )
        except httpx.RequestError as e:
            return CompletionResult(
                status=CompletionStatus.FAILED,
                model=config.model,
                error=f"request error: {e}",
            )
        except ValueError as e:
            # response.json() on a non-JSON body
            return CompletionResult(
                status=CompletionStatus.FAILED,
                model=config.model,
                error=f"invalid response body: {e}",
            )

        latency_ms = int((time.monotonic() - start_time) * 1000)

        try:
            choice = data["choices"][0]
            content = choice["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            return CompletionResult(
                status=CompletionStatus.FAILED,
                model=config.model,
                error="response has no choices[0].message.content",
                latency_ms=latency_ms,
            )

        if not isinstance(content, str):
            return CompletionResult(
                status=CompletionStatus.FAILED,
                model=config.model,
                error=f"message content is {type(content).__name__}, expected str",
                latency_ms=latency_ms,
            )

        # Strip markdown code fences if the model wrapped its JSON output
        content = re.sub(r"```(?:json)?\s*\n?", "", content).strip()

        usage = data.get("usage") or {}
        if not isinstance(usage, dict):
            usage = {}
        logger.debug("Model %s: completed in %dms", config.model, latency_ms)
        return CompletionResult(
            status=CompletionStatus.OK,
            content=content,
            model=data.get("model", config.model),
            token_usage={
                "prompt_tokens": usage.get("prompt_tokens", 0),
                "completion_tokens": usage.get("completion_tokens", 0),
                "total_tokens": usage.get("total_tokens", 0),
            },
            latency_ms=latency_ms,
        )

    @classmethod
    def from_config(cls, config: AppConfig) -> ModelGateway | None:
        """Create a gateway from AppConfig, or None when no API key is set."""
        if not config.model_configured:
            return None
        return cls(
            ModelConfig(
                base_url=config.openai_base_url,
                api_key=config.openai_api_key,
                model=config.openai_model,
                temperature=config.model_temperature,
                timeout_seconds=config.model_timeout_seconds,
            )
        )
