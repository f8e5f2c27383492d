from __future__ import annotations

import json
from typing import List, Optional

from models.contact_row import ContactRow
from models.organization import OrganizationFacts, OrganizationHints, UNKNOWN


NO_MARKDOWN_RULE = "Do NOT include citations, footnotes, or markdown links anywhere in the output."
JSON_ONLY_RULE = "Output strictly one JSON object, with no markdown fencing or additional text."

NEWS_ITEM_TEMPLATE = {
    "title": "<headline>",
    "url": "<plain absolute article URL (no markdown, no tracking params)>",
    "summary": "<1-2 sentence summary>",
}

NEWS_GUIDELINES = [
    "Guidelines for news:",
    "- Up to 3 notable items from credible sources related to the school/district in the last 12 months.",
    "- Include the article URL as a plain URL string (e.g., https://example.com/path).",
    "- Do NOT format as markdown links. Avoid [text](url) or any brackets.",
    "- Remove tracking query parameters (utm_*, ref, fbclid) from URLs when possible.",
    "- If uncertain or not available, return an empty array [].",
]


def _bullets(parts: List[str]) -> List[str]:
    return [f"- {p}" for p in parts if p]


def _json_template(template: dict) -> str:
    return json.dumps(template, indent=2, ensure_ascii=False)


def build_organization_directive(name: str, hints: Optional[OrganizationHints] = None) -> str:
    hints = hints or OrganizationHints()
    context = _bullets([
        f"School/District: {name}",
        f"State: {hints.state}" if hints.state else "",
        f"School LinkedIn: {hints.network_profile_url}" if hints.network_profile_url else "",
    ])
    template = {
        "districtWebsite": "<plain absolute URL of official district site if identifiable>",
        "intermediateSchoolDistrict": "<intermediate/regional service district the district belongs to>",
        "totalEnrollment": "<total student enrollment>",
        "ruralClassification": "<urban, suburban, town or rural classification>",
        "news": [NEWS_ITEM_TEMPLATE],
    }
    return "\n".join([
        "Use web search to research the school district below. Web search is required.",
        "",
        "Context:",
        *context,
        "",
        "Task:",
        "1) Locate the official district website.",
        "2) Determine the intermediate school district (regional authority) the district is affiliated with.",
        "3) Estimate the total student enrollment.",
        "4) Classify the district as urban, suburban, town or rural.",
        "5) Find up to 3 notable news items about the district from the last 12 months.",
        "",
        "Return ONLY a JSON object with these keys (omit any you cannot determine):",
        _json_template(template),
        "",
        *NEWS_GUIDELINES,
        "",
        NO_MARKDOWN_RULE,
        JSON_ONLY_RULE,
    ])


def build_person_directive(row: ContactRow, organization: Optional[OrganizationFacts] = None) -> str:
    name = row.full_name
    school = row.organization_key or UNKNOWN
    website = organization.website if organization and organization.website != UNKNOWN else None
    context = _bullets([
        f"Person: {name}",
        f"Title: {row.title}" if row.title else "",
        f"Email: {row.email}" if row.email else "",
        f"City: {row.city}" if row.city else "",
        f"State: {row.state}" if row.state else "",
        f"School/District: {school}",
        f"District Website: {website}" if website else "",
        f"School LinkedIn: {row.organization_network_profile_url}" if row.organization_network_profile_url else "",
    ])
    template = {
        "superintendentTenure": "<how long the person has held their current role>",
        "personLinkedIn": "<the individual's personal LinkedIn profile URL if highly confident; otherwise 'Unknown'>",
        "personProfileUrl": (
            "<if LinkedIn is Unknown, the individual's profile/biography page URL on the "
            "official district website; otherwise 'Unknown'>"
        ),
        "noteworthyBackground": f"<multi-sentence summary about {name} as {row.title or 'the leader'} at {school}>",
    }
    return "\n".join([
        "Use web search to verify the individual's LinkedIn and summarize their background. Web search is required.",
        "",
        "Context:",
        *context,
        "",
        "Return ONLY a JSON object with these keys (omit any you cannot determine):",
        _json_template(template),
        "",
        "Guidelines for personLinkedIn:",
        "- Do NOT use the school's or district's LinkedIn page.",
        "- Name must match (allow common nicknames) and employer should match the provided school/district.",
        "- If not confident, return 'Unknown'.",
        "",
        "Fallback rule for profile URL:",
        "- If personLinkedIn is 'Unknown' but you can identify the district website, search for a "
        "staff/leadership page for this person on that site and return its URL as personProfileUrl.",
        "- Use a plain absolute URL string.",
        "",
        f"For noteworthyBackground, focus on current role, tenure, prior roles, education, initiatives and "
        f"notable achievements of {name}. Avoid speculation.",
        "",
        NO_MARKDOWN_RULE,
        JSON_ONLY_RULE,
    ])


def build_contact_directive(row: ContactRow) -> str:
    """Single combined directive used for one-off lookups of a contact."""
    name = row.full_name
    school = row.organization_key or "the district"
    context = _bullets([
        f"Person: {name}",
        f"Title: {row.title}" if row.title else "",
        f"Email: {row.email}" if row.email else "",
        f"Mobile Phone: {row.mobile_phone}" if row.mobile_phone else "",
        f"Work Phone: {row.work_phone}" if row.work_phone else "",
        f"Home Phone: {row.home_phone}" if row.home_phone else "",
        f"City: {row.city}" if row.city else "",
        f"State: {row.state}" if row.state else "",
        f"School/District: {row.organization_key}" if row.organization_key else "",
        f"Student Population: {row.organization_size}" if row.organization_size else "",
        f"School LinkedIn: {row.organization_network_profile_url}" if row.organization_network_profile_url else "",
    ])
    template = {
        "superintendentTenure": "<string>",
        "intermediateSchoolDistrict": "<string>",
        "ruralClassification": "<string>",
        "districtWebsite": "<string>",
        "personLinkedIn": "<the individual's personal LinkedIn profile URL if highly confident; otherwise 'Unknown'>",
        "noteworthyBackground": "<string>",
        "news": [NEWS_ITEM_TEMPLATE],
    }
    return "\n".join([
        "Use the following CRM context to inform your answer. Web search is required.",
        "Never invent phone numbers, emails, or URLs. If unknown after careful consideration, return the string 'Unknown'.",
        "",
        "CRM Context:",
        *context,
        "",
        "Task:",
        "1) Use the School/District name and School LinkedIn (if present) to determine the official district website.",
        "2) Identify the individual's personal LinkedIn profile (NOT the company page). Only return if highly confident.",
        "3) Find notable recent news about the school/district (prefer last 12 months) from credible sources.",
        f"4) For 'noteworthyBackground', write an in-depth multi-sentence summary about {name} as "
        f"{row.title or 'the leader'} at {school}. Avoid speculation.",
        "",
        "Return ONLY a JSON object with these keys (omit any you cannot improve):",
        _json_template(template),
        "",
        *NEWS_GUIDELINES,
        "",
        NO_MARKDOWN_RULE,
        JSON_ONLY_RULE,
    ])
