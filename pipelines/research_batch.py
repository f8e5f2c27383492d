from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from config.research import ResearchConfig
from models.contact_row import ContactRow
from models.enriched_record import EnrichedRecord
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import CollectOrganizations, EnrichOrganizations, EnrichPeople, MergeRecords
from ports.llm import ProviderError, ResearchProviderPort
from services.contact_research import research_contact


logger = logging.getLogger(__name__)

RowInput = Union[ContactRow, Mapping[str, Any]]


class BatchFailedError(RuntimeError):
    """The batch aborted; no partial results are returned."""


def _as_row(row: RowInput) -> ContactRow:
    if isinstance(row, ContactRow):
        return row
    return ContactRow.model_validate(row)


class ResearchOrchestrator:
    """Enrich contact rows: one research call per organization, then one per person.

    Organization facts are fetched concurrently and fully collected before any
    person call starts; person calls then run concurrently and the merged
    records come back in input order.
    """

    def __init__(self, config: ResearchConfig, provider: Optional[ResearchProviderPort] = None) -> None:
        self.config = config
        self._provider = provider
        self.last_run_meta: dict = {}

    @property
    def provider(self) -> ResearchProviderPort:
        if self._provider is None:
            from services.llm_client import build_research_client
            self._provider = build_research_client(self.config)
        return self._provider

    def build_pipeline(self) -> Pipeline:
        isolate = self.config.isolate_failures
        return Pipeline([
            CollectOrganizations(),
            EnrichOrganizations(self.provider, isolate_failures=isolate),
            EnrichPeople(self.provider, isolate_failures=isolate),
            MergeRecords(),
        ])

    async def run_batch(self, rows: Sequence[RowInput]) -> List[EnrichedRecord]:
        self.config.require_credential()
        self.last_run_meta = {}
        ctx = RunContext(rows=[_as_row(r) for r in rows], run_id=self.config.run_id)
        if not ctx.rows:
            return []
        try:
            ctx = await self.build_pipeline().run(ctx)
        except ProviderError as e:
            raise BatchFailedError(f"Batch failed: {e}") from e
        self.last_run_meta = dict(ctx.meta)
        logger.info(
            "batch complete: rows=%s organizations=%s",
            ctx.meta.get("rows_total"),
            ctx.meta.get("organizations_total"),
            extra={"step": "research_batch", "status": "ok", "run_id": self.config.run_id or "-"},
        )
        return ctx.records

    async def research_one(self, row: RowInput) -> EnrichedRecord:
        self.config.require_credential()
        return await research_contact(self.provider, _as_row(row))
