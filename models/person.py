from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from models.organization import UNKNOWN
from models.research_response import ResearchResponse


class PersonResponse(ResearchResponse):
    """LLM structured output: person-level facts."""

    superintendent_tenure: Optional[StrictStr] = Field(default=None, alias="superintendentTenure")
    person_linkedin: Optional[StrictStr] = Field(default=None, alias="personLinkedIn")
    person_profile_url: Optional[StrictStr] = Field(default=None, alias="personProfileUrl")
    noteworthy_background: Optional[StrictStr] = Field(default=None, alias="noteworthyBackground")


class PersonFacts(BaseModel):
    tenure: str = UNKNOWN
    linkedin_url: str = UNKNOWN
    profile_url: str = UNKNOWN
    background: str = UNKNOWN

    model_config = ConfigDict(frozen=True)
