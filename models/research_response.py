from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, model_validator


class ResearchResponse(BaseModel):
    """Base for LLM structured output shapes.

    Every field is optional, but a known field that is present must have the
    declared shape; an explicit null counts as the wrong shape. Only the
    camelCase wire keys are read; anything else is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            known = {f.alias or name for name, f in cls.model_fields.items()}
            nulls = sorted(k for k, v in data.items() if v is None and k in known)
            if nulls:
                raise ValueError(f"null values for {', '.join(nulls)}")
        return data


class NewsItem(BaseModel):
    title: StrictStr
    url: StrictStr
    summary: StrictStr

    model_config = ConfigDict(extra="ignore")
