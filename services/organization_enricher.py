from __future__ import annotations

import logging
from typing import Optional

from config.llm_routes import route_for
from models.organization import OrganizationFacts, OrganizationHints, OrganizationResponse
from ports.llm import ResearchProviderPort
from services.mapping import to_organization_facts
from services.prompts import build_organization_directive
from services.response_parser import parse_response


logger = logging.getLogger(__name__)

OPERATION = route_for("organization_enrichment")["operation"]


async def enrich_organization(
    provider: ResearchProviderPort,
    name: str,
    hints: Optional[OrganizationHints] = None,
) -> OrganizationFacts:
    """Research one organization with a single provider call.

    Unusable replies degrade to "Unknown" facts; ProviderError propagates.
    """
    directive = build_organization_directive(name, hints)
    raw = await provider.complete(directive, operation=OPERATION)
    parsed = parse_response(raw, OrganizationResponse)
    if parsed is None:
        logger.info("No usable organization facts for %s", name, extra={"step": OPERATION, "status": "rejected"})
    return to_organization_facts(parsed)
