from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# -----------------------------
# Source records
# -----------------------------

@dataclass(frozen=True, slots=True)
class EmploymentRecord:
    """
    Registry A row (HR / employment registry).

    Every field except ``name`` may be missing in the source export.
    ``is_active`` is ``None`` when the registry did not state it.
    """
    name: Optional[str] = None
    birth_date: Optional[str] = None
    institution: Optional[str] = None
    job_type: Optional[str] = None
    hire_date: Optional[str] = None
    resign_date: Optional[str] = None
    is_active: Optional[bool] = None
    phone: Optional[str] = None
    record_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TrainingRecord:
    """
    Registry B row (training-portal membership list).

    ``record_id`` is the portal member ID; ``status`` is the portal's own
    vocabulary (normal / suspended / dormant / withdrawn, or 정상 / 중지 / ...).
    """
    name: Optional[str] = None
    birth_date: Optional[str] = None
    institution: Optional[str] = None
    job_type: Optional[str] = None
    hire_date: Optional[str] = None
    resign_date: Optional[str] = None
    status: Optional[str] = None
    phone: Optional[str] = None
    record_id: Optional[str] = None


# Glossary aliases
PersonRecordA = EmploymentRecord
PersonRecordB = TrainingRecord
