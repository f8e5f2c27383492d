from __future__ import annotations

import re
from typing import Optional


# Parenthetical block holding a markdown link, e.g. " ([nytimes.com](https://...))"
_PAREN_LINK_RE = re.compile(r"\(\s*\[[^\]]+\]\([^)]+\)\s*\)")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_DOMAIN_LABEL_RE = re.compile(r"^[a-z0-9.-]+\.[a-z]{2,}$", re.IGNORECASE)
_MULTI_SPACE_RE = re.compile(r"\s{2,}")


def _replace_link(match: re.Match) -> str:
    label = match.group(1)
    # A bare domain as label is a source citation: drop it entirely
    if _DOMAIN_LABEL_RE.match(label):
        return ""
    return label


def _strip_links_once(text: str) -> str:
    text = _PAREN_LINK_RE.sub("", text)
    return _LINK_RE.sub(_replace_link, text)


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """Remove markdown links and citation blobs from model-written prose.

    Examples:
      - "See [example.com](http://example.com) for details" -> "See for details"
      - "Read [the report](http://x.com/a)" -> "Read the report"

    Removal is repeated until nothing changes so the result is idempotent.
    """
    if value is None:
        return None
    out = value
    while True:
        stripped = _strip_links_once(out)
        if stripped == out:
            break
        out = stripped
    return _MULTI_SPACE_RE.sub(" ", out).strip()
