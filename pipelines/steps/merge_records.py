from __future__ import annotations

from pipelines.runner import RunContext
from services.mapping import build_enriched_record


class MergeRecords:
    async def run(self, ctx: RunContext) -> RunContext:
        records = []
        for idx, row in enumerate(ctx.rows):
            organization = ctx.organization_facts.get(row.organization_key) if row.organization_key else None
            person = ctx.person_facts[idx] if idx < len(ctx.person_facts) else None
            records.append(build_enriched_record(row, organization, person))
        ctx.records = records
        return ctx
