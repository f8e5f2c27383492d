from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError

from models.contact_row import ContactRow
from models.enriched_record import EnrichedRecord


logger = logging.getLogger(__name__)

# CRM export header -> ContactRow alias
COLUMN_MAP: Dict[str, str] = {
    "First Name": "firstName",
    "Last Name": "lastName",
    "Email": "email",
    "Mobile Phone": "mobilePhone",
    "Work Phone": "workPhone",
    "Home Phone": "homePhone",
    "City": "city",
    "State": "state",
    "Title": "title",
    "Company": "organizationName",
    "Company Size": "organizationSize",
    "Company LinkedIn": "organizationNetworkProfileUrl",
}

RECORD_COLUMNS: List[str] = [
    "schoolDistrictName",
    "superintendentFullName",
    "superintendentTitle",
    "superintendentTenure",
    "intermediateSchoolDistrict",
    "phoneNumber",
    "emailAddress",
    "totalEnrollment",
    "ruralClassification",
    "noteworthyBackground",
    "districtWebsite",
    "personLinkedIn",
    "personProfileUrl",
    "news",
]


def _map_row(raw: Dict[str, Optional[str]]) -> Dict[str, str]:
    known = set(COLUMN_MAP.values())
    mapped: Dict[str, str] = {}
    for header, value in raw.items():
        if header is None:
            continue
        key = COLUMN_MAP.get(header.strip(), header.strip())
        if key not in known:
            continue
        text = (value or "").strip()
        if text:
            mapped[key] = text
    return mapped


def parse_contacts(raw_rows: Iterable[Dict[str, Optional[str]]]) -> List[ContactRow]:
    """Map CRM rows to ContactRow, skipping rows without both names or with invalid values."""
    rows: List[ContactRow] = []
    skipped = 0
    for line_no, raw in enumerate(raw_rows, start=2):
        mapped = _map_row(raw)
        if not mapped.get("firstName") or not mapped.get("lastName"):
            skipped += 1
            continue
        try:
            rows.append(ContactRow.model_validate(mapped))
        except ValidationError as e:
            skipped += 1
            logger.warning("Skipping CSV line %d: %s", line_no, e.errors()[0].get("msg"))
    if skipped:
        logger.info("Skipped %d CSV rows without usable names", skipped)
    if not rows:
        raise ValueError("No valid rows found (need First Name and Last Name).")
    return rows


def read_contacts(path: str | Path) -> List[ContactRow]:
    # utf-8-sig strips the BOM that CRM exports often carry
    with Path(path).open("r", encoding="utf-8-sig", newline="") as f:
        return parse_contacts(csv.DictReader(f))


def records_to_dicts(records: Sequence[EnrichedRecord]) -> List[dict]:
    return [r.model_dump(by_alias=True) for r in records]


def write_records_json(records: Sequence[EnrichedRecord], path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(records_to_dicts(records), indent=2, ensure_ascii=False), encoding="utf-8")
    return out


def write_records_csv(records: Sequence[EnrichedRecord], path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RECORD_COLUMNS)
        writer.writeheader()
        for rec in records_to_dicts(records):
            rec["news"] = json.dumps(rec["news"], ensure_ascii=False)
            writer.writerow(rec)
    return out
