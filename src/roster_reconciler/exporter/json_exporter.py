"""
json_exporter.py
Structured JSON exporter for reconciliation reports.

This exporter:
- Converts dataclasses and enums to plain JSON values (NOT strings of reprs)
- Keeps field order stable so repeated runs diff cleanly
- Never mutates the report
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

from roster_reconciler.logging import get_logger
from roster_reconciler.reporting.findings import ReconciliationReport

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enums → their value
    - Primitives pass through
    - dataclasses → dict in field order (recursively)
    - dict → dict (recursively)
    - list / tuple / set → list (recursively)
    - Anything else → str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [_to_json_compatible(v) for v in obj]

    if isinstance(obj, set):
        return sorted(_to_json_compatible(v) for v in obj)

    return str(obj)


def report_to_dict(report: ReconciliationReport) -> Dict[str, Any]:
    """
    Convert a report into a JSON-safe dict.

    Top-level layout: as_of, summary, organizations[*].findings[*].
    """
    summary = report.summary
    return {
        "as_of": report.as_of,
        "summary": {
            "total_findings": summary.total_findings,
            "organization_count": summary.organization_count,
            "counts_by_type": dict(summary.counts_by_type),
            "counts_by_organization": dict(summary.counts_by_organization),
        },
        "organizations": [
            {
                "organization_name": org.organization_name,
                "finding_count": len(org.findings),
                "findings": [_to_json_compatible(f) for f in org.findings],
            }
            for org in report.organizations
        ],
    }


def dumps_report(report: ReconciliationReport, *, pretty: bool = False) -> str:
    data = report_to_dict(report)
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def export_report_to_json(
    report: ReconciliationReport,
    output_path: Union[str, Path],
    *,
    pretty: bool = True,
) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_report(report, pretty=pretty), encoding="utf-8")
    log.info("Reconciliation report written to: %s", path)
    return path
