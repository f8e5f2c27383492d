from __future__ import annotations

from config.llm_routes import route_for
from models.contact_research_result import ContactResearchResponse
from models.contact_row import ContactRow
from models.enriched_record import EnrichedRecord
from ports.llm import ResearchProviderPort
from services.mapping import build_contact_record
from services.prompts import build_contact_directive
from services.response_parser import parse_response


OPERATION = route_for("contact_research")["operation"]


async def research_contact(provider: ResearchProviderPort, row: ContactRow) -> EnrichedRecord:
    """One combined lookup for a single contact (no organization dedup)."""
    raw = await provider.complete(build_contact_directive(row), operation=OPERATION)
    return build_contact_record(row, parse_response(raw, ContactResearchResponse))
