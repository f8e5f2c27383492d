from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional, Sequence

from models.enriched_record import EnrichedRecord
from models.organization import UNKNOWN


def _llm_usage_for_run(log_path: Optional[str], run_id: Optional[str]) -> Dict[str, Dict[str, int]]:
    """Aggregate research call usage from the JSONL trace for the given run_id.

    Returns dict like { 'openai': {'calls': N, 'errors': E, 'tokens': T}, 'linkup': {...} }
    """
    result: Dict[str, Dict[str, int]] = {}
    if not log_path or not run_id:
        return result
    path = Path(log_path)
    if not path.exists():
        return result
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            try:
                rec = json.loads(line)
            except ValueError:
                continue
            if not isinstance(rec, dict) or rec.get("run_id") != run_id:
                continue
            provider = rec.get("provider") or "unknown"
            bucket = result.setdefault(provider, {"calls": 0, "errors": 0, "tokens": 0})
            bucket["calls"] += 1
            if rec.get("status") != "ok":
                bucket["errors"] += 1
            total_tokens = (rec.get("usage") or {}).get("total_tokens")
            if isinstance(total_tokens, int):
                bucket["tokens"] += total_tokens
    return result


def unknown_field_counts(records: Sequence[EnrichedRecord]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for rec in records:
        for key, value in rec.model_dump(by_alias=True).items():
            if value == UNKNOWN:
                counts[key] = counts.get(key, 0) + 1
    return counts


def print_summary(
    records: Sequence[EnrichedRecord],
    meta: dict,
    *,
    log_path: Optional[str] = None,
    run_id: Optional[str] = None,
    output_path: Optional[Path] = None,
) -> None:
    """Print summary of a research batch."""
    print("\n" + "="*60)
    print("CONTACT RESEARCH - SUMMARY")
    print("="*60)
    print(f"Run ID: {run_id or 'N/A'}")
    print(f"Rows: {meta.get('rows_total', len(records))}")
    print(f"Organizations researched: {meta.get('organizations_total', 0)}")
    print(f"Rows without organization: {meta.get('rows_without_organization', 0)}")
    print(f"Person calls: {meta.get('person_calls', 0)}")
    unknown = unknown_field_counts(records)
    if unknown:
        print()
        print("Unknown fields:")
        for key, count in sorted(unknown.items()):
            print(f"  {key}: {count}/{len(records)}")
    usage = _llm_usage_for_run(log_path, run_id)
    if usage:
        print("LLM Usage:")
        for provider, stats in usage.items():
            print(f"  {provider}: calls={stats['calls']}, errors={stats['errors']}, tokens={stats['tokens']}")
    if output_path:
        print(f"Output File: {output_path}")
    print("="*60)
