from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple


class InconsistencyType(str, Enum):
    """Finding tags, in report order."""

    STATUS_CONTRADICTION = "status_contradiction"
    RESIGN_DATE_MISMATCH = "resign_date_mismatch"
    HIRE_DATE_MISMATCH = "hire_date_mismatch"
    INSTITUTION_MISMATCH = "institution_mismatch"
    JOB_TYPE_MISMATCH = "job_type_mismatch"
    STATUS_SELF_CONTRADICTION = "status_self_contradiction"
    EXISTS_ONLY_IN_B = "exists_only_in_b"
    EXISTS_ONLY_IN_A = "exists_only_in_a"


TAXONOMY_ORDER: Tuple[InconsistencyType, ...] = tuple(InconsistencyType)


def ordered(types: Iterable[InconsistencyType]) -> Tuple[InconsistencyType, ...]:
    """Deduplicate and sort tags into taxonomy order."""
    present = set(types)
    return tuple(t for t in TAXONOMY_ORDER if t in present)
