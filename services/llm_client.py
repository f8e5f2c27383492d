from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from config.llm_routes import route_for
from config.research import ResearchConfig
from ports.llm import ProviderError
from utils.llm_logger import log_call, sha256_text


logger = logging.getLogger(__name__)


class _TracedClient:
    """Shared logging envelope for research clients."""

    provider_name = "unknown"

    def __init__(self, config: ResearchConfig) -> None:
        self.config = config

    @property
    def model(self) -> Optional[str]:
        return None

    def _log(
        self,
        operation: str,
        directive: str,
        status: str,
        *,
        duration_ms: int,
        error: Optional[str] = None,
        usage: Optional[Dict[str, Any]] = None,
    ) -> None:
        extra = {
            "step": operation,
            "status": status,
            "duration_ms": duration_ms,
            "provider": self.provider_name,
            "error": error or "-",
            "run_id": self.config.run_id or "-",
        }
        if status == "ok":
            logger.debug("research call finished", extra=extra)
        else:
            logger.error("research call failed", extra=extra)
        log_call(
            log_path=self.config.trace_path,
            caller=f"llm_client.{self.provider_name}",
            provider=self.provider_name,
            model=self.model,
            operation=operation,
            prompt_hash=sha256_text(directive),
            duration_ms=duration_ms,
            status=status,
            error=error,
            usage=usage,
            run_id=self.config.run_id,
        )

    async def _send(self, directive: str, operation: str) -> tuple[str, Optional[Dict[str, Any]]]:
        raise NotImplementedError

    async def complete(self, directive: str, *, operation: str = "research") -> str:
        t0 = time.monotonic()
        try:
            text, usage = await self._send(directive, operation)
        except Exception as e:
            dt = int((time.monotonic() - t0) * 1000)
            self._log(operation, directive, "error", duration_ms=dt, error=str(e))
            raise ProviderError(
                f"{self.provider_name} {operation} failed: {e}",
                provider=self.provider_name,
                operation=operation,
            ) from e
        dt = int((time.monotonic() - t0) * 1000)
        self._log(operation, directive, "ok", duration_ms=dt, usage=usage)
        return text or ""


class OpenAIResearchClient(_TracedClient):
    """OpenAI Responses API with the web_search tool made mandatory."""

    provider_name = "openai"

    def __init__(self, config: ResearchConfig, client: Any = None) -> None:
        super().__init__(config)
        if client is None:
            from openai import AsyncOpenAI
            client = AsyncOpenAI(api_key=config.api_key, timeout=config.request_timeout_seconds)
        self.client = client

    @property
    def model(self) -> Optional[str]:
        return self.config.resolved_model

    async def _send(self, directive: str, operation: str) -> tuple[str, Optional[Dict[str, Any]]]:
        route = route_for(operation)
        resp = await self.client.responses.create(
            model=self.model,
            input=directive,
            tools=[{"type": route["tool"]}],
            tool_choice="required",
        )
        usage_obj = None
        usage = getattr(resp, "usage", None)
        if usage:
            usage_obj = {
                "input_tokens": getattr(usage, "input_tokens", None),
                "output_tokens": getattr(usage, "output_tokens", None),
                "total_tokens": getattr(usage, "total_tokens", None),
            }
        return getattr(resp, "output_text", None) or "", usage_obj


class LinkupResearchClient(_TracedClient):
    """Linkup web search returning a sourced free-text answer."""

    provider_name = "linkup"

    def __init__(self, config: ResearchConfig, client: Any = None) -> None:
        super().__init__(config)
        if client is None:
            from linkup import LinkupClient
            client = LinkupClient(api_key=config.api_key)
        self.client = client

    async def _send(self, directive: str, operation: str) -> tuple[str, Optional[Dict[str, Any]]]:
        resp = await self.client.async_search(
            query=directive,
            depth="standard",
            output_type="sourcedAnswer",
        )
        if isinstance(resp, dict):
            return resp.get("answer") or "", None
        return getattr(resp, "answer", None) or "", None


def build_research_client(config: ResearchConfig) -> _TracedClient:
    """Gateway: pick the research client for ``config.provider``."""
    config.require_credential()
    if config.provider == "openai":
        return OpenAIResearchClient(config)
    if config.provider == "linkup":
        return LinkupResearchClient(config)
    raise NotImplementedError(f"Provider not implemented: {config.provider}")
