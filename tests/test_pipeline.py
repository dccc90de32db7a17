# tests/test_pipeline.py

from __future__ import annotations

import json
from datetime import date

import pytest

from roster_reconciler.config import RRConfig
from roster_reconciler.core.context import ReconcileContext
from roster_reconciler.core.exceptions import ReconcileExecutionError
from roster_reconciler.core.pipeline import Pipeline
from roster_reconciler.logging import get_logger


def _context(a_path, b_path, **kwargs) -> ReconcileContext:
    return ReconcileContext(
        config=kwargs.pop("config", RRConfig({})),
        logger=get_logger("tests.pipeline"),
        registry_a_path=str(a_path),
        registry_b_path=str(b_path),
        as_of=date(2024, 6, 30),
        **kwargs,
    )


def test_pipeline_runs_and_exports(registry_files, tmp_path) -> None:
    a_path, b_path = registry_files
    out = tmp_path / "report.json"
    ctx = _context(a_path, b_path, output_path=str(out), pretty=True)

    report = Pipeline(ctx).run()

    assert report.summary.total_findings == 3
    assert ctx.stats == {"registry_a": 3, "registry_b": 3, "findings": 3, "organizations": 1}
    assert ctx.errors == []
    assert json.loads(out.read_text(encoding="utf-8"))["summary"]["total_findings"] == 3


def test_pipeline_without_output_path(registry_files) -> None:
    a_path, b_path = registry_files
    report = Pipeline(_context(a_path, b_path)).run()
    assert [o.organization_name for o in report.organizations] == ["행복복지관"]


def test_pipeline_applies_config_settings(registry_files) -> None:
    a_path, b_path = registry_files
    cfg = RRConfig({"reconciliation": {"classification": {"resign_tolerance_days": 30}}})
    report = Pipeline(_context(a_path, b_path, config=cfg)).run()
    assert report.summary.counts_by_type["resign_date_mismatch"] == 0


def test_pipeline_wraps_failures(registry_files, tmp_path) -> None:
    a_path, _ = registry_files
    ctx = _context(a_path, tmp_path / "missing.json")

    with pytest.raises(ReconcileExecutionError, match="File not found"):
        Pipeline(ctx).run()
    assert len(ctx.errors) == 1


def test_pipeline_wraps_bad_config(registry_files) -> None:
    a_path, b_path = registry_files
    cfg = RRConfig({"reconciliation": {"matching": {"similar_prefix_length": "two"}}})
    with pytest.raises(ReconcileExecutionError):
        Pipeline(_context(a_path, b_path, config=cfg)).run()
