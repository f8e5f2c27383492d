from __future__ import annotations

import pytest

from services.sanitizer import sanitize_text


def test_domain_labelled_link_is_removed():
    assert sanitize_text("See [example.com](http://example.com) for details") == "See for details"


def test_descriptive_link_keeps_label():
    assert sanitize_text("Read [the report](http://x.com/a)") == "Read the report"


def test_parenthesized_citation_is_dropped():
    text = "Rural district ([Michigan schools](https://a.org/x)) in Ohio"
    assert sanitize_text(text) == "Rural district in Ohio"


def test_link_revealed_by_first_removal_is_also_handled():
    assert sanitize_text("[[x](y)](z)") == "x"


def test_absent_and_empty_inputs():
    assert sanitize_text(None) is None
    assert sanitize_text("") == ""


def test_whitespace_is_collapsed_and_trimmed():
    assert sanitize_text("  Served  since \n\n 2019  ") == "Served since 2019"


@pytest.mark.parametrize(
    "text",
    [
        "See [example.com](http://example.com) for details",
        "([a.com](http://a.com)) lead ([b](c))",
        "[[x](y)](z) and [[k12.mi.us](u)](v)",
        "plain   text\twith\n\nbreaks",
        "([([a](b))](c))",
        "no links at all",
        "",
    ],
)
def test_sanitize_is_idempotent(text):
    once = sanitize_text(text)
    assert sanitize_text(once) == once
