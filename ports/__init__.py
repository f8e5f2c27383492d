from .llm import ProviderError, ResearchProviderPort

__all__ = [
    "ProviderError",
    "ResearchProviderPort",
]
