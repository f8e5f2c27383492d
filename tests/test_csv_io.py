from __future__ import annotations

import csv
import json

import pytest

from models.enriched_record import EnrichedRecord
from models.research_response import NewsItem
from services.csv_io import read_contacts, write_records_csv, write_records_json


HEADER = "First Name,Last Name,Email,Mobile Phone,Work Phone,Home Phone,City,State,Title,Company,Company Size,Company LinkedIn,Owner\n"


def _write(tmp_path, body: str):
    path = tmp_path / "contacts.csv"
    # CRM exports often carry a BOM
    path.write_text("\ufeff" + HEADER + body, encoding="utf-8")
    return path


def test_read_contacts_maps_crm_headers(tmp_path):
    path = _write(
        tmp_path,
        " Ann , Lee ,ann@riverside.org,,555-0100,,Grand Rapids,MI,Superintendent,Riverside,4200,https://www.linkedin.com/school/riverside,Sales Rep\n",
    )

    rows = read_contacts(path)

    assert len(rows) == 1
    row = rows[0]
    assert row.first_name == "Ann"
    assert row.last_name == "Lee"
    assert row.mobile_phone is None
    assert row.work_phone == "555-0100"
    assert row.organization_name == "Riverside"
    assert row.organization_size == "4200"
    assert row.organization_network_profile_url == "https://www.linkedin.com/school/riverside"


def test_read_contacts_skips_rows_without_names_or_with_bad_urls(tmp_path):
    path = _write(
        tmp_path,
        "Ann,,,,,,,,,Riverside,,,\n"
        ",Kim,,,,,,,,Riverside,,,\n"
        "Cy,Ng,,,,,,,,Lakeview,,not a url,\n"
        "Di,Oz,,,,,,,,,,,\n",
    )

    rows = read_contacts(path)

    assert [r.full_name for r in rows] == ["Di Oz"]
    assert rows[0].organization_key is None


def test_read_contacts_accepts_camel_case_headers(tmp_path):
    path = tmp_path / "rows.csv"
    path.write_text("firstName,lastName,organizationName\nAnn,Lee,Riverside\n", encoding="utf-8")

    rows = read_contacts(path)

    assert rows[0].organization_key == "Riverside"


def test_read_contacts_without_valid_rows_raises(tmp_path):
    path = _write(tmp_path, ",,,,,,,,,Riverside,,,\n")

    with pytest.raises(ValueError, match="No valid rows"):
        read_contacts(path)


def test_write_records(tmp_path):
    records = [
        EnrichedRecord(
            superintendentFullName="Ann Lee",
            news=[NewsItem(title="Bond passes", url="https://n.example.com/1", summary="Voters approved.")],
        )
    ]

    json_path = write_records_json(records, tmp_path / "out" / "records.json")
    csv_path = write_records_csv(records, tmp_path / "out" / "records.csv")

    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert data[0]["superintendentFullName"] == "Ann Lee"
    assert data[0]["districtWebsite"] == "Unknown"
    with csv_path.open(encoding="utf-8", newline="") as f:
        row = next(csv.DictReader(f))
    assert row["superintendentFullName"] == "Ann Lee"
    assert json.loads(row["news"])[0]["title"] == "Bond passes"
