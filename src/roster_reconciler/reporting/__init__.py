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
    ReconciliationSummary,
    TrainingSnapshot,
)

__all__ = [
    "EmploymentSnapshot",
    "Finding",
    "OrganizationReport",
    "OrganizationResolver",
    "ReconciliationReport",
    "ReconciliationSummary",
    "TrainingSnapshot",
    "group_findings",
    "known_organizations",
    "summarize",
]
