from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from roster_reconciler.core.exceptions import RecordValidationError
from roster_reconciler.records.entities import EmploymentRecord, TrainingRecord

PLACEHOLDER_VALUES = {"", "-", "--", "n/a", "na", "none", "null"}

# Column aliases seen in the two registries' exports (camelCase, snake_case, Korean).
NAME_KEYS = ("name", "성명", "이름")
BIRTH_DATE_KEYS = ("birthDate", "birth_date", "생년월일")
INSTITUTION_KEYS = ("institution", "institutionName", "소속", "기관명", "수행기관명")
JOB_TYPE_KEYS = ("jobType", "job_type", "직군", "직무구분")
HIRE_DATE_KEYS = ("hireDate", "hire_date", "입사일")
RESIGN_DATE_KEYS = ("resignDate", "resign_date", "퇴사일", "exitDate", "leaveDate")
PHONE_KEYS = ("phone", "phoneNumber", "연락처", "휴대전화")
ID_KEYS = ("id", "recordId", "record_id", "memberId", "아이디", "ID")
STATUS_KEYS = ("status", "상태", "회원상태")
ACTIVE_KEYS = ("isActive", "is_active", "재직여부")

TRUE_VALUES = {"true", "y", "yes", "1", "재직", "재직중", "active"}
FALSE_VALUES = {"false", "n", "no", "0", "퇴직", "퇴사", "inactive"}


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = " ".join(str(value).split())
    if text.lower() in PLACEHOLDER_VALUES:
        return None
    return text


def _first_value(row: Mapping[str, Any], keys: Tuple[str, ...]) -> Optional[str]:
    for key in keys:
        if key in row:
            cleaned = _clean(row[key])
            if cleaned is not None:
                return cleaned
    return None


def _coerce_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    return None


def _require_mapping(row: Any, registry: str, index: int) -> Mapping[str, Any]:
    if not isinstance(row, Mapping):
        raise RecordValidationError(
            f"{registry} row {index}: expected a mapping, got {type(row).__name__}"
        )
    return row


def employment_record_from_dict(row: Mapping[str, Any]) -> EmploymentRecord:
    is_active = None
    for key in ACTIVE_KEYS:
        if key in row:
            is_active = _coerce_bool(row[key])
            if is_active is not None:
                break

    return EmploymentRecord(
        name=_first_value(row, NAME_KEYS),
        birth_date=_first_value(row, BIRTH_DATE_KEYS),
        institution=_first_value(row, INSTITUTION_KEYS),
        job_type=_first_value(row, JOB_TYPE_KEYS),
        hire_date=_first_value(row, HIRE_DATE_KEYS),
        resign_date=_first_value(row, RESIGN_DATE_KEYS),
        is_active=is_active,
        phone=_first_value(row, PHONE_KEYS),
        record_id=_first_value(row, ID_KEYS),
    )


def training_record_from_dict(row: Mapping[str, Any]) -> TrainingRecord:
    return TrainingRecord(
        name=_first_value(row, NAME_KEYS),
        birth_date=_first_value(row, BIRTH_DATE_KEYS),
        institution=_first_value(row, INSTITUTION_KEYS),
        job_type=_first_value(row, JOB_TYPE_KEYS),
        hire_date=_first_value(row, HIRE_DATE_KEYS),
        resign_date=_first_value(row, RESIGN_DATE_KEYS),
        status=_first_value(row, STATUS_KEYS),
        phone=_first_value(row, PHONE_KEYS),
        record_id=_first_value(row, ID_KEYS),
    )


def build_employment_records(rows: Iterable[Any]) -> List[EmploymentRecord]:
    return [
        employment_record_from_dict(_require_mapping(row, "registry A", i))
        for i, row in enumerate(rows)
    ]


def build_training_records(rows: Iterable[Any]) -> List[TrainingRecord]:
    return [
        training_record_from_dict(_require_mapping(row, "registry B", i))
        for i, row in enumerate(rows)
    ]
