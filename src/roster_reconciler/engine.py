"""
Reconciliation engine: the single library-level entry point.

    reconcile(registry_a, registry_b) -> [OrganizationReport, ...]

Pure and synchronous. Both registries are sorted (name, then identifier)
before matching so identical input always yields identical output. Nothing
here raises on malformed data; bad rows degrade to "skipped" and bad dates to
"cannot determine".
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence

from roster_reconciler.classification.field_agreement import (
    FieldComparison,
    classify_pair,
    employment_is_active,
    is_lifecycle_end,
    training_is_active,
)
from roster_reconciler.classification.taxonomy import InconsistencyType
from roster_reconciler.core.settings import ReconcileSettings
from roster_reconciler.logging import get_logger
from roster_reconciler.matching.identity import MatchResult, match_registries
from roster_reconciler.matching.keys import KeyedRegistry
from roster_reconciler.records.build_records import (
    employment_record_from_dict,
    training_record_from_dict,
)
from roster_reconciler.records.entities import EmploymentRecord, TrainingRecord
from roster_reconciler.reporting.aggregate import (
    OrganizationResolver,
    group_findings,
    known_organizations,
    summarize,
)
from roster_reconciler.reporting.findings import (
    EmploymentSnapshot,
    Finding,
    OrganizationReport,
    ReconciliationReport,
    TrainingSnapshot,
)
from roster_reconciler.suggestions.similarity import SimilarSuggestion, build_suggestion_table

log = get_logger("engine")


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------

def _coerce_registry(rows: Optional[Iterable[Any]], record_type: type, builder: Callable) -> List[Any]:
    """Accept typed records or loose mappings; anything else is skipped."""
    out: List[Any] = []
    skipped = 0
    for row in rows or ():
        if isinstance(row, record_type):
            out.append(row)
        elif isinstance(row, Mapping):
            out.append(builder(row))
        else:
            skipped += 1
    if skipped:
        log.warning("Skipped %d %s rows of unsupported type", skipped, record_type.__name__)
    return out


# ---------------------------------------------------------------------------
# Finding builders
# ---------------------------------------------------------------------------

def _pair_finding(match: MatchResult, comparison: FieldComparison) -> Finding:
    a: EmploymentRecord = match.counterpart
    b: TrainingRecord = match.record
    return Finding(
        person_name=(b.name or a.name or "").strip(),
        person_id=b.record_id or a.record_id,
        birth_date=b.birth_date or a.birth_date,
        inconsistency_types=comparison.types,
        institution=b.institution or a.institution,
        employment=EmploymentSnapshot.of(a, comparison.employment_active),
        training=TrainingSnapshot.of(b, comparison.training_active),
        match_tier=int(match.tier) if match.tier is not None else None,
        hire_date_diff_days=comparison.hire_date_diff_days,
        resign_date_diff_days=comparison.resign_date_diff_days,
    )


def _only_in_b(
    record: TrainingRecord,
    settings: ReconcileSettings,
    suggestion: Optional[SimilarSuggestion] = None,
) -> Finding:
    return Finding(
        person_name=(record.name or "").strip(),
        person_id=record.record_id,
        birth_date=record.birth_date,
        inconsistency_types=(InconsistencyType.EXISTS_ONLY_IN_B,),
        institution=record.institution,
        training=TrainingSnapshot.of(record, training_is_active(record, settings.classification)),
        similar_suggestion=suggestion,
    )


def _only_in_a(
    record: EmploymentRecord,
    as_of: date,
    suggestion: Optional[SimilarSuggestion] = None,
) -> Finding:
    return Finding(
        person_name=(record.name or "").strip(),
        person_id=record.record_id,
        birth_date=record.birth_date,
        inconsistency_types=(InconsistencyType.EXISTS_ONLY_IN_A,),
        institution=record.institution,
        employment=EmploymentSnapshot.of(record, employment_is_active(record, as_of)),
        similar_suggestion=suggestion,
    )


# ---------------------------------------------------------------------------
# Core passes
# ---------------------------------------------------------------------------

def _reconcile_both(
    keyed_a: KeyedRegistry,
    keyed_b: KeyedRegistry,
    settings: ReconcileSettings,
    as_of: date,
) -> List[Finding]:
    rules = settings.classification
    findings: List[Finding] = []
    matched_a = set()
    unmatched_b: List[int] = []

    for match in match_registries(keyed_a, keyed_b, settings.matching):
        if match.matched:
            matched_a.add(match.counterpart_position)
            comparison = classify_pair(match.counterpart, match.record, as_of=as_of, rules=rules)
            if comparison.types:
                findings.append(_pair_finding(match, comparison))
            continue

        # Lifecycle-end members are a normal end of membership, not a data error.
        if is_lifecycle_end(match.record.status, rules):
            continue
        unmatched_b.append(match.position)

    unmatched_a = [
        pos
        for pos, record in enumerate(keyed_a.records)
        if pos not in matched_a and employment_is_active(record, as_of)
    ]

    b_hints = build_suggestion_table(
        unmatched_b, keyed_b, keyed_a, rules=settings.suggestions, thresholds=settings.matching
    )
    a_hints = build_suggestion_table(
        unmatched_a, keyed_a, keyed_b, rules=settings.suggestions, thresholds=settings.matching
    )

    findings.extend(_only_in_b(keyed_b.records[pos], settings, b_hints.get(pos)) for pos in unmatched_b)
    findings.extend(_only_in_a(keyed_a.records[pos], as_of, a_hints.get(pos)) for pos in unmatched_a)
    return findings


def build_report(
    registry_a: Optional[Sequence[Any]],
    registry_b: Optional[Sequence[Any]],
    *,
    settings: Optional[ReconcileSettings] = None,
    as_of: Optional[date] = None,
    organizations: Optional[Sequence[str]] = None,
) -> ReconciliationReport:
    """Run a reconciliation and return grouped findings plus summary counts."""
    settings = settings or ReconcileSettings()
    as_of = as_of or date.today()

    keyed_a = KeyedRegistry(_coerce_registry(registry_a, EmploymentRecord, employment_record_from_dict))
    keyed_b = KeyedRegistry(_coerce_registry(registry_b, TrainingRecord, training_record_from_dict))
    log.info(
        "Reconciliation starting: registry_a=%d registry_b=%d as_of=%s",
        len(keyed_a), len(keyed_b), as_of.isoformat(),
    )

    if not keyed_a.records:
        findings = [_only_in_b(r, settings) for r in keyed_b.records]
    elif not keyed_b.records:
        findings = [_only_in_a(r, as_of) for r in keyed_a.records]
    else:
        findings = _reconcile_both(keyed_a, keyed_b, settings, as_of)

    if organizations is None:
        organizations = known_organizations(keyed_a.records, keyed_b.records)
    resolver = OrganizationResolver(organizations, settings.reporting.unassigned_label)

    reports = group_findings(findings, resolver)
    summary = summarize(reports)
    log.info(
        "Reconciliation complete: findings=%d organizations=%d by_type=%s",
        summary.total_findings, summary.organization_count,
        {k: v for k, v in summary.counts_by_type.items() if v},
    )
    return ReconciliationReport(organizations=reports, summary=summary, as_of=as_of.isoformat())


def reconcile(
    registry_a: Optional[Sequence[Any]],
    registry_b: Optional[Sequence[Any]],
    *,
    settings: Optional[ReconcileSettings] = None,
    as_of: Optional[date] = None,
    organizations: Optional[Sequence[str]] = None,
) -> List[OrganizationReport]:
    """Organizations with at least one finding, sorted by name."""
    report = build_report(
        registry_a,
        registry_b,
        settings=settings,
        as_of=as_of,
        organizations=organizations,
    )
    return list(report.organizations)
