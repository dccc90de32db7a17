"""
roster_reconciler: cross-checks an employment registry (A) against a training
registry (B) and reports per-person inconsistencies grouped by organization.

    from roster_reconciler import reconcile
    reports = reconcile(employment_rows, training_rows)
"""

from roster_reconciler.classification.taxonomy import InconsistencyType
from roster_reconciler.core.settings import ReconcileSettings
from roster_reconciler.engine import build_report, reconcile
from roster_reconciler.records.entities import (
    EmploymentRecord,
    PersonRecordA,
    PersonRecordB,
    TrainingRecord,
)
from roster_reconciler.reporting.findings import (
    Finding,
    OrganizationReport,
    ReconciliationReport,
)

__version__ = "0.1.0"

__all__ = [
    "EmploymentRecord",
    "Finding",
    "InconsistencyType",
    "OrganizationReport",
    "PersonRecordA",
    "PersonRecordB",
    "ReconcileSettings",
    "ReconciliationReport",
    "TrainingRecord",
    "build_report",
    "reconcile",
]
