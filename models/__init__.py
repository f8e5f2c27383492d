from .contact_row import ContactRow
from .research_response import NewsItem, ResearchResponse
from .organization import OrganizationFacts, OrganizationHints, OrganizationResponse, UNKNOWN
from .person import PersonFacts, PersonResponse
from .contact_research_result import ContactResearchResponse
from .enriched_record import EnrichedRecord

__all__ = [
    "ContactRow",
    "NewsItem",
    "ResearchResponse",
    "OrganizationFacts",
    "OrganizationHints",
    "OrganizationResponse",
    "PersonFacts",
    "PersonResponse",
    "ContactResearchResponse",
    "EnrichedRecord",
    "UNKNOWN",
]
