from __future__ import annotations

import asyncio
import logging
from typing import Optional

from models.contact_row import ContactRow
from models.organization import OrganizationFacts
from models.person import PersonFacts
from pipelines.runner import RunContext
from ports.llm import ProviderError, ResearchProviderPort
from services.person_enricher import enrich_person


logger = logging.getLogger(__name__)


class EnrichPeople:
    """One concurrent research call per row, using the shared organization facts."""

    def __init__(self, provider: ResearchProviderPort, isolate_failures: bool = False) -> None:
        self.provider = provider
        self.isolate_failures = isolate_failures

    async def _enrich(self, row: ContactRow, organization: Optional[OrganizationFacts]) -> PersonFacts:
        try:
            return await enrich_person(self.provider, row, organization)
        except ProviderError as e:
            if not self.isolate_failures:
                raise
            logger.warning(
                "Person research failed for %s; using defaults",
                row.full_name,
                extra={"step": "person_enrichment", "status": "isolated", "error": str(e)},
            )
            return PersonFacts()

    async def run(self, ctx: RunContext) -> RunContext:
        lookup = ctx.organization_facts
        # gather keeps results index-aligned with rows whatever the completion order
        ctx.person_facts = list(await asyncio.gather(*(
            self._enrich(row, lookup.get(row.organization_key) if row.organization_key else None)
            for row in ctx.rows
        )))
        ctx.meta["person_calls"] = len(ctx.rows)
        return ctx
