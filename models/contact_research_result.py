from __future__ import annotations

from typing import List, Optional

from pydantic import Field, StrictStr

from models.research_response import NewsItem, ResearchResponse


class ContactResearchResponse(ResearchResponse):
    """LLM structured output: combined single-contact lookup."""

    superintendent_tenure: Optional[StrictStr] = Field(default=None, alias="superintendentTenure")
    intermediate_school_district: Optional[StrictStr] = Field(default=None, alias="intermediateSchoolDistrict")
    rural_classification: Optional[StrictStr] = Field(default=None, alias="ruralClassification")
    district_website: Optional[StrictStr] = Field(default=None, alias="districtWebsite")
    person_linkedin: Optional[StrictStr] = Field(default=None, alias="personLinkedIn")
    noteworthy_background: Optional[StrictStr] = Field(default=None, alias="noteworthyBackground")
    news: Optional[List[NewsItem]] = None
