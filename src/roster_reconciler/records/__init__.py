from __future__ import annotations

from .build_records import (
    build_employment_records,
    build_training_records,
    employment_record_from_dict,
    training_record_from_dict,
)
from .entities import (
    EmploymentRecord,
    PersonRecordA,
    PersonRecordB,
    TrainingRecord,
)

__all__ = [
    "EmploymentRecord",
    "PersonRecordA",
    "PersonRecordB",
    "TrainingRecord",
    "build_employment_records",
    "build_training_records",
    "employment_record_from_dict",
    "training_record_from_dict",
]
