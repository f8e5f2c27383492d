from __future__ import annotations

import re
from typing import Optional
import unicodedata
from urllib.parse import parse_qsl, unquote, urlencode, urlparse, urlunparse

import tldextract


# Offline extractor: use the bundled public suffix snapshot, never fetch it
_EXTRACT = tldextract.TLDExtract(suffix_list_urls=())

_MARKDOWN_LINK_RE = re.compile(r"^\[[^\]]*\]\(([^)\s]+)\)$")
_TRACKING_PARAMS = {"ref", "fbclid", "gclid", "mc_cid", "mc_eid"}


def extract_apex_domain(url_or_domain: Optional[str]) -> Optional[str]:
    if not url_or_domain:
        return None
    text = str(url_or_domain).strip().lower()
    if not text.startswith('http://') and not text.startswith('https://'):
        text = f"http://{text}"
    ext = _EXTRACT(text)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return None


def _is_tracking_param(name: str) -> bool:
    low = name.lower()
    return low.startswith("utm_") or low in _TRACKING_PARAMS


def clean_url(value: Optional[str]) -> Optional[str]:
    """Normalize a model-supplied URL field.

    Unwraps "[label](url)" to its target, adds a missing scheme, drops
    tracking query parameters, and returns None for anything without a
    registrable domain (including the literal "Unknown").
    """
    if not value:
        return None
    text = str(value).strip().strip("<>").strip()
    m = _MARKDOWN_LINK_RE.match(text)
    if m:
        text = m.group(1)
    if not text or any(ch.isspace() for ch in text):
        return None
    if not text.lower().startswith(('http://', 'https://')):
        text = f"https://{text}"
    parsed = urlparse(text)
    if not parsed.netloc or not extract_apex_domain(parsed.netloc):
        return None
    params = parse_qsl(parsed.query, keep_blank_values=True)
    kept = [(k, v) for k, v in params if not _is_tracking_param(k)]
    if len(kept) == len(params):
        return text
    return urlunparse(parsed._replace(query=urlencode(kept)))


def normalize_linkedin_profile_url(url: Optional[str]) -> Optional[str]:
    """Canonicalize a personal LinkedIn profile URL; company pages return None."""
    cleaned = clean_url(url)
    if not cleaned:
        return None
    u = urlparse(cleaned)
    host = (u.netloc or '').lower().replace('www.', '')
    path = (u.path or '').rstrip('/')
    if extract_apex_domain(host) != 'linkedin.com' or not path.startswith('/in/'):
        return None
    # Keep only /in/{slug} and drop trailing locale/segments (e.g., /de, /en)
    parts = [p for p in path.split('/') if p]
    if len(parts) < 2:
        return None
    slug = unquote(parts[1])
    slug = unicodedata.normalize('NFKC', slug).strip().lower()
    # Remove invisible characters occasionally present
    slug = slug.replace('\u200b', '').replace('\u200c', '').replace('\u200d', '')
    if not slug:
        return None
    return f"https://linkedin.com/in/{slug}"
