from __future__ import annotations

import asyncio
import logging

from models.organization import OrganizationFacts, OrganizationHints
from pipelines.runner import RunContext
from ports.llm import ProviderError, ResearchProviderPort
from services.organization_enricher import enrich_organization


logger = logging.getLogger(__name__)


class EnrichOrganizations:
    """One concurrent research call per organization; returns only when all are done."""

    def __init__(self, provider: ResearchProviderPort, isolate_failures: bool = False) -> None:
        self.provider = provider
        self.isolate_failures = isolate_failures

    async def _enrich(self, name: str, hints: OrganizationHints) -> OrganizationFacts:
        try:
            return await enrich_organization(self.provider, name, hints)
        except ProviderError as e:
            if not self.isolate_failures:
                raise
            logger.warning(
                "Organization research failed for %s; using defaults",
                name,
                extra={"step": "organization_enrichment", "status": "isolated", "error": str(e)},
            )
            return OrganizationFacts.unknown()

    async def run(self, ctx: RunContext) -> RunContext:
        names = list(ctx.organizations)
        results = await asyncio.gather(*(self._enrich(n, ctx.organizations[n]) for n in names))
        ctx.organization_facts = dict(zip(names, results))
        ctx.meta["organization_calls"] = len(names)
        return ctx
