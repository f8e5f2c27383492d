from __future__ import annotations

import json

from models.organization import OrganizationResponse
from models.person import PersonResponse
from services.response_parser import parse_response, strip_code_fence


def test_rejects_malformed_json():
    assert parse_response("not json", OrganizationResponse) is None


def test_rejects_empty_reply():
    assert parse_response("", OrganizationResponse) is None
    assert parse_response(None, OrganizationResponse) is None


def test_strips_json_fence():
    raw = "```json\n{\"districtWebsite\":\"http://a.com\"}\n```"
    parsed = parse_response(raw, OrganizationResponse)
    assert parsed is not None
    assert parsed.district_website == "http://a.com"


def test_strips_bare_fence():
    assert strip_code_fence("```\n{\"a\": 1}\n```") == "{\"a\": 1}"


def test_prose_around_json_is_rejected():
    assert parse_response('Here you go: {"districtWebsite": "http://a.com"}', OrganizationResponse) is None


def test_wrong_field_type_rejects_whole_object():
    raw = json.dumps({"districtWebsite": "http://a.com", "totalEnrollment": 4200})
    assert parse_response(raw, OrganizationResponse) is None


def test_incomplete_news_item_rejects_whole_object():
    raw = json.dumps({"districtWebsite": "http://a.com", "news": [{"title": "Bond passes", "url": "http://n.com"}]})
    assert parse_response(raw, OrganizationResponse) is None


def test_explicit_null_rejects_whole_object():
    raw = json.dumps({"superintendentTenure": "3 years", "personLinkedIn": None})
    assert parse_response(raw, PersonResponse) is None


def test_unknown_keys_are_ignored():
    raw = json.dumps({"superintendentTenure": "3 years", "confidence": None, "extra": 1})
    parsed = parse_response(raw, PersonResponse)
    assert parsed is not None
    assert parsed.superintendent_tenure == "3 years"
    assert parsed.person_linkedin is None


def test_non_object_json_is_rejected():
    assert parse_response("[1, 2]", PersonResponse) is None
    assert parse_response("null", PersonResponse) is None


def test_accepts_news_list():
    raw = json.dumps({"news": [{"title": "t", "url": "http://n.com/a", "summary": "s"}]})
    parsed = parse_response(raw, OrganizationResponse)
    assert parsed is not None
    assert parsed.news[0].title == "t"


def test_non_standard_json_constants_are_rejected():
    assert parse_response('{"districtWebsite":"http://a.com","x":NaN}', OrganizationResponse) is None
    assert parse_response('{"districtWebsite":"http://a.com","x":-Infinity}', OrganizationResponse) is None


def test_snake_case_keys_are_not_read():
    raw = json.dumps({"district_website": "http://a.com", "totalEnrollment": "4,200"})
    parsed = parse_response(raw, OrganizationResponse)
    assert parsed is not None
    assert parsed.district_website is None
    assert parsed.total_enrollment == "4,200"
