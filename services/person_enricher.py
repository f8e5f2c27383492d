from __future__ import annotations

import logging
from typing import Optional

from config.llm_routes import route_for
from models.contact_row import ContactRow
from models.organization import OrganizationFacts
from models.person import PersonFacts, PersonResponse
from ports.llm import ResearchProviderPort
from services.mapping import to_person_facts
from services.prompts import build_person_directive
from services.response_parser import parse_response


logger = logging.getLogger(__name__)

OPERATION = route_for("person_enrichment")["operation"]


async def enrich_person(
    provider: ResearchProviderPort,
    row: ContactRow,
    organization: Optional[OrganizationFacts] = None,
) -> PersonFacts:
    directive = build_person_directive(row, organization)
    raw = await provider.complete(directive, operation=OPERATION)
    parsed = parse_response(raw, PersonResponse)
    if parsed is None:
        logger.info("No usable person facts for %s", row.full_name, extra={"step": OPERATION, "status": "rejected"})
    return to_person_facts(parsed)
