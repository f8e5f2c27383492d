from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


KEY_ENV_FILE = "key.env"


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()
    # Fall back to key.env for the credential when .env did not provide it
    if not os.getenv("OPENAI_API_KEY") and Path(KEY_ENV_FILE).exists():
        load_dotenv(KEY_ENV_FILE)


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None
    openai_model: str | None
    linkup_api_key: str | None

    # AI gating
    ai_provider: str  # openai | linkup

    log_level: str
    run_env: str

    request_timeout_seconds: int

    # Logging/tracing
    llm_trace: bool = False
    llm_log_path: str = "logs/llm_calls.jsonl"

    # Failure policy for the batch orchestrator
    isolate_failures: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openai_model=os.getenv("OPENAI_MODEL"),
        linkup_api_key=os.getenv("LINKUP_API_KEY"),
        ai_provider=os.getenv("AI_PROVIDER", "openai").strip().lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "120")),
        llm_trace=_as_bool(os.getenv("LLM_TRACE")),
        llm_log_path=os.getenv("LLM_LOG_PATH", "logs/llm_calls.jsonl"),
        isolate_failures=_as_bool(os.getenv("ISOLATE_FAILURES")),
    )
