from __future__ import annotations

from typing import Dict

from models.organization import OrganizationHints
from pipelines.runner import RunContext


class CollectOrganizations:
    """Distinct organization keys in first-seen order, with hints from the first matching row."""

    async def run(self, ctx: RunContext) -> RunContext:
        organizations: Dict[str, OrganizationHints] = {}
        for row in ctx.rows:
            key = row.organization_key
            if key is None or key in organizations:
                continue
            organizations[key] = OrganizationHints(
                state=row.state,
                network_profile_url=row.organization_network_profile_url,
            )
        ctx.organizations = organizations
        ctx.meta["rows_total"] = len(ctx.rows)
        ctx.meta["organizations_total"] = len(organizations)
        ctx.meta["rows_without_organization"] = sum(1 for r in ctx.rows if r.organization_key is None)
        return ctx
