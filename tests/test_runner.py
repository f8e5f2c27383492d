from __future__ import annotations

import logging

import pytest

from models.contact_row import ContactRow
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import CollectOrganizations
from utils.logging_setup import SafeExtraFormatter


class _Record:
    def __init__(self, tag: str) -> None:
        self.tag = tag

    async def run(self, ctx: RunContext) -> RunContext:
        ctx.meta.setdefault("order", []).append(self.tag)
        return ctx


class _Explode:
    async def run(self, ctx: RunContext) -> RunContext:
        raise RuntimeError("boom")


@pytest.mark.asyncio
async def test_pipeline_runs_steps_in_order():
    ctx = await Pipeline([_Record("a"), _Record("b")]).run(RunContext())
    assert ctx.meta["order"] == ["a", "b"]


@pytest.mark.asyncio
async def test_pipeline_stops_at_failing_step(caplog):
    with caplog.at_level(logging.ERROR, logger="pipelines.runner"):
        with pytest.raises(RuntimeError):
            await Pipeline([_Explode(), _Record("never")]).run(RunContext(run_id="r1"))
    rec = caplog.records[-1]
    assert rec.step == "_Explode"
    assert rec.status == "error"


@pytest.mark.asyncio
async def test_collect_organizations_keeps_first_seen_order():
    rows = [
        ContactRow(firstName="A", lastName="A", organizationName="Beta", state="MI"),
        ContactRow(firstName="B", lastName="B", organizationName="Alpha"),
        ContactRow(firstName="C", lastName="C", organizationName="Beta", state="OH"),
        ContactRow(firstName="D", lastName="D"),
    ]
    ctx = await CollectOrganizations().run(RunContext(rows=rows))
    assert list(ctx.organizations) == ["Beta", "Alpha"]
    assert ctx.organizations["Beta"].state == "MI"
    assert ctx.meta["rows_without_organization"] == 1


def test_formatter_fills_missing_extras():
    formatter = SafeExtraFormatter(fmt="%(message)s step=%(step)s run_id=%(run_id)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    assert formatter.format(record) == "hello step=- run_id=-"
