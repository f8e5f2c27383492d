from __future__ import annotations

from typing import List, Optional

from models.contact_research_result import ContactResearchResponse
from models.contact_row import ContactRow
from models.enriched_record import EnrichedRecord
from models.organization import MAX_NEWS_ITEMS, OrganizationFacts, OrganizationResponse, UNKNOWN
from models.person import PersonFacts, PersonResponse
from models.research_response import NewsItem
from services.domain_utils import clean_url, normalize_linkedin_profile_url
from services.sanitizer import sanitize_text


def text_or_unknown(value: Optional[str]) -> str:
    return sanitize_text(value) or UNKNOWN


def url_or_unknown(value: Optional[str]) -> str:
    return clean_url(value) or UNKNOWN


def linkedin_or_unknown(value: Optional[str]) -> str:
    return normalize_linkedin_profile_url(value) or UNKNOWN


def clean_news(items: Optional[List[NewsItem]]) -> List[NewsItem]:
    """Sanitize news items, capped at MAX_NEWS_ITEMS; items with nothing usable are dropped."""
    cleaned: List[NewsItem] = []
    for item in items or []:
        title = sanitize_text(item.title)
        summary = sanitize_text(item.summary)
        url = clean_url(item.url)
        if not (title or summary or url):
            continue
        cleaned.append(NewsItem(
            title=title or UNKNOWN,
            url=url or UNKNOWN,
            summary=summary or UNKNOWN,
        ))
        if len(cleaned) >= MAX_NEWS_ITEMS:
            break
    return cleaned


def to_organization_facts(parsed: Optional[OrganizationResponse]) -> OrganizationFacts:
    if parsed is None:
        return OrganizationFacts.unknown()
    return OrganizationFacts(
        website=url_or_unknown(parsed.district_website),
        intermediate_authority=text_or_unknown(parsed.intermediate_school_district),
        total_enrollment=text_or_unknown(parsed.total_enrollment),
        classification=text_or_unknown(parsed.rural_classification),
        news=clean_news(parsed.news),
    )


def to_person_facts(parsed: Optional[PersonResponse]) -> PersonFacts:
    if parsed is None:
        return PersonFacts()
    return PersonFacts(
        tenure=text_or_unknown(parsed.superintendent_tenure),
        linkedin_url=linkedin_or_unknown(parsed.person_linkedin),
        profile_url=url_or_unknown(parsed.person_profile_url),
        background=text_or_unknown(parsed.noteworthy_background),
    )


def _phone(row: ContactRow) -> Optional[str]:
    return row.work_phone or row.mobile_phone or row.home_phone


def build_enriched_record(
    row: ContactRow,
    organization: Optional[OrganizationFacts],
    person: Optional[PersonFacts],
) -> EnrichedRecord:
    """Merge CRM values with organization and person facts.

    Row-supplied values win; enrichment only fills the gaps.
    """
    org = organization or OrganizationFacts.unknown()
    person = person or PersonFacts()
    return EnrichedRecord(
        school_district_name=row.organization_key or UNKNOWN,
        superintendent_full_name=row.full_name or UNKNOWN,
        superintendent_title=row.title or UNKNOWN,
        superintendent_tenure=person.tenure,
        intermediate_school_district=org.intermediate_authority,
        phone_number=_phone(row) or UNKNOWN,
        email_address=row.email or UNKNOWN,
        total_enrollment=row.organization_size or org.total_enrollment,
        rural_classification=org.classification,
        noteworthy_background=person.background,
        district_website=org.website,
        person_linkedin=person.linkedin_url,
        person_profile_url=person.profile_url,
        news=list(org.news),
    )


def build_contact_record(row: ContactRow, parsed: Optional[ContactResearchResponse]) -> EnrichedRecord:
    """Merge a single-contact lookup; enrollment comes from the row only."""
    parsed = parsed or ContactResearchResponse()
    return EnrichedRecord(
        school_district_name=row.organization_key or UNKNOWN,
        superintendent_full_name=row.full_name or UNKNOWN,
        superintendent_title=row.title or UNKNOWN,
        superintendent_tenure=text_or_unknown(parsed.superintendent_tenure),
        intermediate_school_district=text_or_unknown(parsed.intermediate_school_district),
        phone_number=_phone(row) or UNKNOWN,
        email_address=row.email or UNKNOWN,
        total_enrollment=row.organization_size or UNKNOWN,
        rural_classification=text_or_unknown(parsed.rural_classification),
        noteworthy_background=text_or_unknown(parsed.noteworthy_background),
        district_website=url_or_unknown(parsed.district_website),
        person_linkedin=linkedin_or_unknown(parsed.person_linkedin),
        person_profile_url=UNKNOWN,
        news=clean_news(parsed.news),
    )
