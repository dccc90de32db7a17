from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from roster_reconciler.classification.taxonomy import InconsistencyType
from roster_reconciler.records.entities import EmploymentRecord, TrainingRecord
from roster_reconciler.suggestions.similarity import SimilarSuggestion


# -----------------------------
# Side-by-side snapshots
# -----------------------------

@dataclass(frozen=True)
class EmploymentSnapshot:
    """Registry A values as shown to the reviewer."""
    name: Optional[str]
    birth_date: Optional[str]
    institution: Optional[str]
    job_type: Optional[str]
    hire_date: Optional[str]
    resign_date: Optional[str]
    is_active: Optional[bool]
    derived_active: bool
    phone: Optional[str]
    record_id: Optional[str]

    @classmethod
    def of(cls, record: EmploymentRecord, derived_active: bool) -> "EmploymentSnapshot":
        return cls(
            name=record.name,
            birth_date=record.birth_date,
            institution=record.institution,
            job_type=record.job_type,
            hire_date=record.hire_date,
            resign_date=record.resign_date,
            is_active=record.is_active,
            derived_active=derived_active,
            phone=record.phone,
            record_id=record.record_id,
        )


@dataclass(frozen=True)
class TrainingSnapshot:
    """Registry B values as shown to the reviewer."""
    name: Optional[str]
    birth_date: Optional[str]
    institution: Optional[str]
    job_type: Optional[str]
    hire_date: Optional[str]
    resign_date: Optional[str]
    status: Optional[str]
    derived_active: bool
    phone: Optional[str]
    record_id: Optional[str]

    @classmethod
    def of(cls, record: TrainingRecord, derived_active: bool) -> "TrainingSnapshot":
        return cls(
            name=record.name,
            birth_date=record.birth_date,
            institution=record.institution,
            job_type=record.job_type,
            hire_date=record.hire_date,
            resign_date=record.resign_date,
            status=record.status,
            derived_active=derived_active,
            phone=record.phone,
            record_id=record.record_id,
        )


# -----------------------------
# Findings and reports
# -----------------------------

@dataclass(frozen=True)
class Finding:
    person_name: str
    person_id: Optional[str]
    birth_date: Optional[str]
    inconsistency_types: Tuple[InconsistencyType, ...]
    institution: Optional[str] = None
    employment: Optional[EmploymentSnapshot] = None
    training: Optional[TrainingSnapshot] = None
    match_tier: Optional[int] = None
    hire_date_diff_days: Optional[int] = None
    resign_date_diff_days: Optional[int] = None
    similar_suggestion: Optional[SimilarSuggestion] = None

    @property
    def inconsistency_count(self) -> int:
        return len(self.inconsistency_types)

    def sort_key(self) -> Tuple[str, str, str, Tuple[str, ...]]:
        return (
            self.person_name,
            self.person_id or "",
            self.birth_date or "",
            tuple(t.value for t in self.inconsistency_types),
        )


@dataclass(frozen=True)
class OrganizationReport:
    organization_name: str
    findings: Tuple[Finding, ...]


@dataclass(frozen=True)
class ReconciliationSummary:
    total_findings: int
    organization_count: int
    counts_by_type: Dict[str, int] = field(default_factory=dict)
    counts_by_organization: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ReconciliationReport:
    organizations: Tuple[OrganizationReport, ...]
    summary: ReconciliationSummary
    as_of: Optional[str] = None
