from __future__ import annotations

import json

import pytest

from models.contact_row import ContactRow
from models.organization import OrganizationFacts, OrganizationHints, UNKNOWN
from ports.llm import ProviderError
from services.contact_research import research_contact
from services.organization_enricher import enrich_organization
from services.person_enricher import enrich_person


def _news(n: int) -> list:
    return [
        {"title": f"Story {i} ([wsj.com](https://wsj.com))", "url": f"https://news.example.com/{i}?utm_medium=x", "summary": f"Summary {i}"}
        for i in range(n)
    ]


@pytest.mark.asyncio
async def test_organization_facts_are_parsed_and_sanitized(make_provider):
    reply = "```json\n" + json.dumps({
        "districtWebsite": "https://www.riverside.org/?utm_source=chatgpt.com",
        "intermediateSchoolDistrict": "Kent ISD ([kentisd.org](https://kentisd.org))",
        "totalEnrollment": "4,200",
        "ruralClassification": "Suburban",
        "news": _news(4),
    }) + "\n```"
    provider = make_provider(lambda d, op: reply)

    facts = await enrich_organization(provider, "Riverside", OrganizationHints(state="MI"))

    assert len(provider.calls) == 1
    operation, directive = provider.calls[0]
    assert operation == "organization_enrichment"
    assert "School/District: Riverside" in directive
    assert "State: MI" in directive
    assert facts.website == "https://www.riverside.org/"
    assert facts.intermediate_authority == "Kent ISD"
    assert facts.total_enrollment == "4,200"
    assert facts.classification == "Suburban"
    assert len(facts.news) == 3
    assert facts.news[0].title == "Story 0"
    assert facts.news[0].url == "https://news.example.com/0"


@pytest.mark.asyncio
async def test_rejected_organization_reply_defaults_to_unknown(make_provider):
    provider = make_provider(lambda d, op: "I could not find anything about this district.")

    facts = await enrich_organization(provider, "Riverside")

    assert facts == OrganizationFacts.unknown()
    assert facts.website == UNKNOWN
    assert facts.news == []


@pytest.mark.asyncio
async def test_organization_provider_error_propagates(make_provider):
    provider = make_provider(lambda d, op: ProviderError("quota exceeded"))

    with pytest.raises(ProviderError):
        await enrich_organization(provider, "Riverside")


@pytest.mark.asyncio
async def test_person_facts_default_independently(make_provider):
    reply = json.dumps({
        "personLinkedIn": "Unknown",
        "personProfileUrl": "https://www.riverside.org/staff/ann-lee",
        "noteworthyBackground": "Ann Lee led the [district strategic plan](https://riverside.org/plan) since 2019.",
    })
    provider = make_provider(lambda d, op: reply)
    row = ContactRow(firstName="Ann", lastName="Lee", title="Superintendent", organizationName="Riverside")

    facts = await enrich_person(provider, row)

    assert provider.calls[0][0] == "person_enrichment"
    assert facts.tenure == UNKNOWN
    assert facts.linkedin_url == UNKNOWN
    assert facts.profile_url == "https://www.riverside.org/staff/ann-lee"
    assert facts.background == "Ann Lee led the district strategic plan since 2019."


@pytest.mark.asyncio
async def test_person_directive_uses_known_organization_website(make_provider):
    provider = make_provider(lambda d, op: "{}")
    row = ContactRow(firstName="Ann", lastName="Lee", organizationName="Riverside")
    org = OrganizationFacts(website="https://www.riverside.org/")

    facts = await enrich_person(provider, row, org)

    directive = provider.calls[0][1]
    assert "Person: Ann Lee" in directive
    assert "District Website: https://www.riverside.org/" in directive
    assert facts.tenure == UNKNOWN


@pytest.mark.asyncio
async def test_person_rejects_company_linkedin_page(make_provider):
    reply = json.dumps({"personLinkedIn": "https://www.linkedin.com/company/riverside-schools"})
    provider = make_provider(lambda d, op: reply)
    row = ContactRow(firstName="Ann", lastName="Lee")

    facts = await enrich_person(provider, row)

    assert facts.linkedin_url == UNKNOWN


@pytest.mark.asyncio
async def test_single_contact_research_takes_enrollment_from_row(make_provider):
    reply = json.dumps({
        "superintendentTenure": "Since 2021",
        "districtWebsite": "riverside.org",
        "personLinkedIn": "https://www.linkedin.com/in/ann-lee",
        "news": [],
    })
    provider = make_provider(lambda d, op: reply)
    row = ContactRow(
        firstName="Ann",
        lastName="Lee",
        organizationName="Riverside",
        organizationSize="3,100",
        mobilePhone="555-0100",
    )

    record = await research_contact(provider, row)

    assert provider.calls[0][0] == "contact_research"
    assert "Student Population: 3,100" in provider.calls[0][1]
    assert record.total_enrollment == "3,100"
    assert record.superintendent_tenure == "Since 2021"
    assert record.district_website == "https://riverside.org"
    assert record.person_linkedin == "https://linkedin.com/in/ann-lee"
    assert record.person_profile_url == UNKNOWN
    assert record.phone_number == "555-0100"
    assert record.intermediate_school_district == UNKNOWN
