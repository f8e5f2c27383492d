from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from models.organization import UNKNOWN
from models.research_response import NewsItem


class EnrichedRecord(BaseModel):
    """Final per-row output handed to the presentation layer.

    Serialize with ``model_dump(by_alias=True)`` to get the wire keys.
    """

    school_district_name: str = Field(default=UNKNOWN, alias="schoolDistrictName")
    superintendent_full_name: str = Field(default=UNKNOWN, alias="superintendentFullName")
    superintendent_title: str = Field(default=UNKNOWN, alias="superintendentTitle")
    superintendent_tenure: str = Field(default=UNKNOWN, alias="superintendentTenure")
    intermediate_school_district: str = Field(default=UNKNOWN, alias="intermediateSchoolDistrict")
    phone_number: str = Field(default=UNKNOWN, alias="phoneNumber")
    email_address: str = Field(default=UNKNOWN, alias="emailAddress")
    total_enrollment: str = Field(default=UNKNOWN, alias="totalEnrollment")
    rural_classification: str = Field(default=UNKNOWN, alias="ruralClassification")
    noteworthy_background: str = Field(default=UNKNOWN, alias="noteworthyBackground")
    district_website: str = Field(default=UNKNOWN, alias="districtWebsite")
    person_linkedin: str = Field(default=UNKNOWN, alias="personLinkedIn")
    person_profile_url: str = Field(default=UNKNOWN, alias="personProfileUrl")
    news: List[NewsItem] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)
