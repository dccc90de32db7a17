# tests/test_records.py

from __future__ import annotations

import dataclasses

import pytest

from roster_reconciler.core.exceptions import RecordValidationError
from roster_reconciler.records import (
    EmploymentRecord,
    PersonRecordA,
    PersonRecordB,
    TrainingRecord,
    build_employment_records,
    build_training_records,
    employment_record_from_dict,
    training_record_from_dict,
)


def test_employment_record_from_korean_columns() -> None:
    record = employment_record_from_dict(
        {
            "성명": " 김철수 ",
            "생년월일": "900101",
            "소속": "행복복지관",
            "직군": "전담사회복지사",
            "입사일": "2020-01-01",
            "퇴사일": "-",
            "재직여부": "재직",
            "연락처": "010-1234-5678",
        }
    )
    assert record == EmploymentRecord(
        name="김철수",
        birth_date="900101",
        institution="행복복지관",
        job_type="전담사회복지사",
        hire_date="2020-01-01",
        resign_date=None,
        is_active=True,
        phone="010-1234-5678",
    )


def test_training_record_from_camel_case_columns() -> None:
    record = training_record_from_dict(
        {
            "name": "Kim",
            "birthDate": "1990-01-01",
            "institutionName": "Org",
            "jobType": "life support worker",
            "resignDate": "2024-01-01",
            "status": "withdrawn",
            "memberId": "m-001",
        }
    )
    assert record.institution == "Org"
    assert record.job_type == "life support worker"
    assert record.status == "withdrawn"
    assert record.record_id == "m-001"
    assert record.hire_date is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        (True, True),
        ("Y", True),
        ("true", True),
        (1, True),
        ("N", False),
        ("퇴직", False),
        (0, False),
        ("maybe", None),
        (None, None),
    ],
)
def test_is_active_coercion(raw, expected) -> None:
    assert employment_record_from_dict({"name": "x", "isActive": raw}).is_active is expected


def test_records_are_frozen() -> None:
    record = TrainingRecord(name="Kim")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.name = "Lee"  # type: ignore[misc]


def test_glossary_aliases() -> None:
    assert PersonRecordA is EmploymentRecord
    assert PersonRecordB is TrainingRecord


def test_build_records_rejects_non_mapping_rows() -> None:
    with pytest.raises(RecordValidationError, match="registry A row 1"):
        build_employment_records([{"name": "Kim"}, ["Lee"]])
    with pytest.raises(RecordValidationError, match="registry B row 0"):
        build_training_records(["Lee"])


def test_build_records_keeps_order() -> None:
    records = build_training_records([{"name": "B"}, {"name": "A"}])
    assert [r.name for r in records] == ["B", "A"]
