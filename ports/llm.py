from __future__ import annotations

from typing import Protocol


class ProviderError(RuntimeError):
    """Transport-level failure of the research backend (unreachable, bad response, quota)."""

    def __init__(self, message: str, *, provider: str | None = None, operation: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.operation = operation


class ResearchProviderPort(Protocol):
    """Given a directive, return the backend's free-form answer text.

    The text may contain code fences or other extraneous formatting; callers
    parse it defensively. Raises ProviderError on transport failure.
    """

    async def complete(self, directive: str, *, operation: str = "research") -> str:
        ...
