from __future__ import annotations

import json
import logging
import re
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_OPENING_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*", re.MULTILINE)
_CLOSING_FENCE_RE = re.compile(r"```$", re.MULTILINE)


def _preview(text: str, limit: int = 200) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."


def strip_code_fence(raw: str) -> str:
    """Remove a surrounding ```json ... ``` fence if the text starts with one."""
    text = raw
    if text.startswith("```"):
        text = _OPENING_FENCE_RE.sub("", text, count=1)
        text = _CLOSING_FENCE_RE.sub("", text, count=1).strip()
    return text


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_response(raw: Optional[str], schema: Type[ModelT]) -> Optional[ModelT]:
    """Parse model output into ``schema``; return None on any violation.

    The whole object is rejected when JSON decoding fails or when any known
    field has the wrong shape. Never raises for bad input.
    """
    if not raw:
        return None
    text = strip_code_fence(raw)
    try:
        candidate = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.warning("Rejected non-JSON research reply (%s): %s", e, _preview(text))
        return None
    try:
        return schema.model_validate(candidate)
    except ValidationError as e:
        logger.warning(
            "Rejected research reply for %s (%d schema errors): %s",
            schema.__name__,
            e.error_count(),
            _preview(text),
        )
        return None
