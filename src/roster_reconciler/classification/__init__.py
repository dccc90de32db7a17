from roster_reconciler.classification.field_agreement import (
    FieldComparison,
    classify_pair,
    employment_is_active,
    is_lifecycle_end,
    normalize_job_type,
    training_is_active,
)
from roster_reconciler.classification.taxonomy import TAXONOMY_ORDER, InconsistencyType

__all__ = [
    "FieldComparison",
    "InconsistencyType",
    "TAXONOMY_ORDER",
    "classify_pair",
    "employment_is_active",
    "is_lifecycle_end",
    "normalize_job_type",
    "training_is_active",
]
