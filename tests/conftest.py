from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.research_batch'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


class ScriptedProvider:
    """Fake research backend: replies come from a callable, every call is recorded."""

    def __init__(
        self,
        responder: Callable[[str, str], object],
        delay: Optional[Callable[[str, str], float]] = None,
    ) -> None:
        self.responder = responder
        self.delay = delay
        self.calls: List[Tuple[str, str]] = []
        self.events: List[Tuple[str, str, str]] = []

    async def complete(self, directive: str, *, operation: str = "research") -> str:
        self.calls.append((operation, directive))
        self.events.append(("start", operation, directive))
        if self.delay:
            await asyncio.sleep(self.delay(directive, operation))
        self.events.append(("end", operation, directive))
        reply = self.responder(directive, operation)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    def calls_for(self, operation: str) -> List[str]:
        return [d for op, d in self.calls if op == operation]


@pytest.fixture
def make_provider():
    return ScriptedProvider


@pytest.fixture
def clear_settings_cache():
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
