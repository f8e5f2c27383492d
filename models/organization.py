from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from models.research_response import NewsItem, ResearchResponse


UNKNOWN = "Unknown"
MAX_NEWS_ITEMS = 3


class OrganizationResponse(ResearchResponse):
    """LLM structured output: organization-level facts."""

    district_website: Optional[StrictStr] = Field(default=None, alias="districtWebsite")
    intermediate_school_district: Optional[StrictStr] = Field(default=None, alias="intermediateSchoolDistrict")
    total_enrollment: Optional[StrictStr] = Field(default=None, alias="totalEnrollment")
    rural_classification: Optional[StrictStr] = Field(default=None, alias="ruralClassification")
    news: Optional[List[NewsItem]] = None


class OrganizationHints(BaseModel):
    """Supplementary context taken from the representative row of an organization."""

    state: Optional[str] = None
    network_profile_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class OrganizationFacts(BaseModel):
    """App record shape: resolved organization facts shared by every row of that organization."""

    website: str = UNKNOWN
    intermediate_authority: str = UNKNOWN
    total_enrollment: str = UNKNOWN
    classification: str = UNKNOWN
    news: List[NewsItem] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def unknown(cls) -> "OrganizationFacts":
        return cls()
