import argparse
import asyncio
import json
import uuid as _uuid
from pathlib import Path

from config.research import ResearchConfig
from config.settings import get_settings
from pipelines.research_batch import ResearchOrchestrator
from services.csv_io import read_contacts, records_to_dicts, write_records_csv, write_records_json
from services.reporting import print_summary
from utils.logging_setup import init_logging


def _build_orchestrator(args) -> ResearchOrchestrator:
    settings = get_settings()
    config = ResearchConfig.from_settings(
        settings,
        provider=getattr(args, "provider", None),
        run_id=_uuid.uuid4().hex,
        isolate_failures=True if getattr(args, "isolate_failures", False) else None,
    )
    return ResearchOrchestrator(config)


def cmd_research(args):
    rows = read_contacts(args.input)
    orchestrator = _build_orchestrator(args)
    records = asyncio.run(orchestrator.run_batch(rows))
    if not args.output:
        print(json.dumps(records_to_dicts(records), indent=2, ensure_ascii=False))
        return
    fmt = args.format or ("csv" if str(args.output).lower().endswith(".csv") else "json")
    writer = write_records_csv if fmt == "csv" else write_records_json
    out = writer(records, args.output)
    print_summary(
        records,
        orchestrator.last_run_meta,
        log_path=orchestrator.config.trace_path,
        run_id=orchestrator.config.run_id,
        output_path=out,
    )


def cmd_ask(args):
    row = {
        "firstName": args.first_name,
        "lastName": args.last_name,
        "title": args.title,
        "email": args.email,
        "workPhone": args.phone,
        "city": args.city,
        "state": args.state,
        "organizationName": args.organization,
        "organizationSize": args.organization_size,
        "organizationNetworkProfileUrl": args.organization_linkedin,
    }
    orchestrator = _build_orchestrator(args)
    record = asyncio.run(orchestrator.research_one({k: v for k, v in row.items() if v}))
    print(json.dumps(record.model_dump(by_alias=True), indent=2, ensure_ascii=False))


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Contact research CLI")
    parser.add_argument("--provider", choices=["openai", "linkup"], default=None, help="Research provider (default from AI_PROVIDER)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_res = sub.add_parser("research", help="Enrich every contact in a CRM CSV export")
    p_res.add_argument("--input", "-i", required=True, help="Path to CSV file (CRM export headers)")
    p_res.add_argument("--output", "-o", default=None, help="Write results here instead of printing JSON")
    p_res.add_argument("--format", choices=["json", "csv"], default=None, help="Output format (default from extension)")
    p_res.add_argument("--isolate-failures", action="store_true", help="Degrade a failed research call to defaults instead of aborting the batch")
    p_res.set_defaults(func=cmd_research)

    p_ask = sub.add_parser("ask", help="Research a single contact")
    p_ask.add_argument("--first-name", required=True)
    p_ask.add_argument("--last-name", required=True)
    p_ask.add_argument("--title")
    p_ask.add_argument("--email")
    p_ask.add_argument("--phone")
    p_ask.add_argument("--city")
    p_ask.add_argument("--state")
    p_ask.add_argument("--organization", help="School/district name")
    p_ask.add_argument("--organization-size", help="Student enrollment from the CRM")
    p_ask.add_argument("--organization-linkedin", help="School LinkedIn URL")
    p_ask.set_defaults(func=cmd_ask)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
