from __future__ import annotations


# Central routing for research use-cases. Edit here to change per-operation defaults.
#
# Keys are use_case identifiers consumed by services/llm_client.py
ROUTES: dict[str, dict] = {
    # One call per unique organization in a batch
    "organization_enrichment": {
        # Logical operation name for logging (not a vendor API name)
        "operation": "organization_enrichment",
        "tool": "web_search",
    },
    # One call per contact row in a batch
    "person_enrichment": {
        "operation": "person_enrichment",
        "tool": "web_search",
    },
    # Single-contact lookup combining organization and person questions
    "contact_research": {
        "operation": "contact_research",
        "tool": "web_search",
    },
}

DEFAULT_ROUTE: dict = {"operation": "research", "tool": "web_search"}


def route_for(use_case: str) -> dict:
    return ROUTES.get(use_case, DEFAULT_ROUTE)
