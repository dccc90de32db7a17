"""
Grouping findings by organization and producing summary counts.

Organization names drift between registries just like person names, so each
finding's institution is resolved against the known organizations in three
passes: exact name, normalized name, then substring of the normalized name.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from roster_reconciler.classification.taxonomy import TAXONOMY_ORDER
from roster_reconciler.logging import get_logger
from roster_reconciler.normalization.institution import normalize_institution_name
from roster_reconciler.normalization.name_normalization import safe_str
from roster_reconciler.reporting.findings import (
    Finding,
    OrganizationReport,
    ReconciliationSummary,
)

log = get_logger("reporting")

DEFAULT_UNASSIGNED_LABEL = "미분류"


class OrganizationResolver:
    """Maps free-text institution names onto a canonical organization list."""

    def __init__(self, known: Iterable[Optional[str]], unassigned_label: str = DEFAULT_UNASSIGNED_LABEL):
        self.unassigned_label = unassigned_label
        self.canonical: List[str] = []
        self._exact: Dict[str, str] = {}
        self._normalized: Dict[str, str] = {}

        for name in known:
            text = safe_str(name).strip()
            if not text or text in self._exact:
                continue
            self.canonical.append(text)
            self._exact[text] = text
            self._normalized.setdefault(normalize_institution_name(text), text)

    def resolve(self, name: Optional[str]) -> str:
        text = safe_str(name).strip()
        if not text:
            return self.unassigned_label

        hit = self._exact.get(text)
        if hit is not None:
            return hit

        norm = normalize_institution_name(text)
        hit = self._normalized.get(norm)
        if hit is not None:
            return hit

        if norm:
            for canonical in self.canonical:
                other = normalize_institution_name(canonical)
                if other and (norm in other or other in norm):
                    return canonical

        return text


def known_organizations(*registries: Sequence) -> List[str]:
    """Institution names per registry, sorted within each registry, first registry first."""
    names: List[str] = []
    seen = set()
    for registry in registries:
        for name in sorted({safe_str(getattr(r, "institution", None)).strip() for r in registry}):
            if name and name not in seen:
                seen.add(name)
                names.append(name)
    return names


def group_findings(findings: Iterable[Finding], resolver: OrganizationResolver) -> Tuple[OrganizationReport, ...]:
    groups: Dict[str, List[Finding]] = {}
    for finding in findings:
        org = resolver.resolve(finding.institution)
        groups.setdefault(org, []).append(finding)

    reports = tuple(
        OrganizationReport(
            organization_name=org,
            findings=tuple(sorted(items, key=Finding.sort_key)),
        )
        for org, items in sorted(groups.items())
    )
    log.info("Grouped findings into %d organizations", len(reports))
    return reports


def summarize(reports: Sequence[OrganizationReport]) -> ReconciliationSummary:
    counts_by_type: Dict[str, int] = {t.value: 0 for t in TAXONOMY_ORDER}
    counts_by_org: Dict[str, int] = {}
    total = 0

    for report in reports:
        counts_by_org[report.organization_name] = len(report.findings)
        total += len(report.findings)
        for finding in report.findings:
            for t in finding.inconsistency_types:
                counts_by_type[t.value] += 1

    return ReconciliationSummary(
        total_findings=total,
        organization_count=len(reports),
        counts_by_type=counts_by_type,
        counts_by_organization=counts_by_org,
    )
