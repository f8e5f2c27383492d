from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from config.settings import Settings


DEFAULT_MODEL = "gpt-4o-mini"

# Experimental family that does not support the web_search tool flow yet
_UNSUPPORTED_MODEL_RE = re.compile(r"^gpt-5(\b|[-_.])", re.IGNORECASE)

SUPPORTED_PROVIDERS = ("openai", "linkup")


class MissingCredentialError(RuntimeError):
    """Raised when the selected research provider has no API key configured."""


def resolve_model(configured: Optional[str]) -> str:
    """Return the configured model, or the safe default if unset/unsupported."""
    name = (configured or "").strip()
    if not name or _UNSUPPORTED_MODEL_RE.match(name):
        return DEFAULT_MODEL
    return name


@dataclass(frozen=True)
class ResearchConfig:
    """Explicit configuration handed to the research orchestrator.

    The orchestrator never reads the process environment; the CLI (or any
    other host) builds one of these, usually via ``from_settings``.
    """

    api_key: Optional[str]
    provider: str = "openai"
    model: Optional[str] = None
    request_timeout_seconds: int = 120
    trace_path: Optional[str] = None
    run_id: Optional[str] = None
    isolate_failures: bool = False

    @property
    def resolved_model(self) -> str:
        return resolve_model(self.model)

    def require_credential(self) -> None:
        if not self.api_key:
            env_name = "LINKUP_API_KEY" if self.provider == "linkup" else "OPENAI_API_KEY"
            raise MissingCredentialError(f"Missing {env_name}. Add it to key.env or .env")

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        provider: Optional[str] = None,
        run_id: Optional[str] = None,
        isolate_failures: Optional[bool] = None,
    ) -> "ResearchConfig":
        chosen = (provider or settings.ai_provider or "openai").lower()
        if chosen not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported AI_PROVIDER: {chosen}")
        api_key = settings.linkup_api_key if chosen == "linkup" else settings.openai_api_key
        return cls(
            api_key=api_key,
            provider=chosen,
            model=settings.openai_model,
            request_timeout_seconds=settings.request_timeout_seconds,
            trace_path=settings.llm_log_path if settings.llm_trace else None,
            run_id=run_id,
            isolate_failures=settings.isolate_failures if isolate_failures is None else isolate_failures,
        )
