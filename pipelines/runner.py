from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from models.contact_row import ContactRow
from models.enriched_record import EnrichedRecord
from models.organization import OrganizationFacts, OrganizationHints
from models.person import PersonFacts


logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    rows: List[ContactRow] = field(default_factory=list)
    # Organization key -> hints from its first row, in first-seen order
    organizations: Dict[str, OrganizationHints] = field(default_factory=dict)
    # Filled once, after every organization call has finished; read-only afterwards
    organization_facts: Dict[str, OrganizationFacts] = field(default_factory=dict)
    # Aligned with rows by index
    person_facts: List[Optional[PersonFacts]] = field(default_factory=list)
    records: List[EnrichedRecord] = field(default_factory=list)
    run_id: Optional[str] = None
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    async def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    async def run(self, ctx: RunContext) -> RunContext:
        for step in self.steps:
            name = type(step).__name__
            t0 = time.monotonic()
            try:
                ctx = await step.run(ctx)
            except Exception as e:
                logger.error(
                    "step failed",
                    extra={
                        "step": name,
                        "status": "error",
                        "duration_ms": int((time.monotonic() - t0) * 1000),
                        "error": str(e),
                        "run_id": ctx.run_id or "-",
                    },
                )
                raise
            logger.info(
                "step finished",
                extra={
                    "step": name,
                    "status": "ok",
                    "duration_ms": int((time.monotonic() - t0) * 1000),
                    "run_id": ctx.run_id or "-",
                },
            )
        return ctx
