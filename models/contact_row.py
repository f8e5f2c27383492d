from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ContactRow(BaseModel):
    """Inbound CRM record: one person tied (optionally) to an organization."""

    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)
    email: Optional[str] = None
    mobile_phone: Optional[str] = Field(default=None, alias="mobilePhone")
    work_phone: Optional[str] = Field(default=None, alias="workPhone")
    home_phone: Optional[str] = Field(default=None, alias="homePhone")
    city: Optional[str] = None
    state: Optional[str] = None
    title: Optional[str] = None
    organization_name: Optional[str] = Field(default=None, alias="organizationName")
    organization_size: Optional[str] = Field(default=None, alias="organizationSize")
    organization_network_profile_url: Optional[str] = Field(
        default=None, alias="organizationNetworkProfileUrl"
    )

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _strip_blanks(cls, data: Any) -> Any:
        # Trim every string and treat blank optionals as missing
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            cleaned[key] = value
        return cleaned

    @field_validator("organization_network_profile_url")
    @classmethod
    def _require_absolute_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"not a well-formed URL: {value!r}")
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def organization_key(self) -> Optional[str]:
        """Trimmed organization name, or None when the row has no organization."""
        name = (self.organization_name or "").strip()
        return name or None
