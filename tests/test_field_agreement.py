# tests/test_field_agreement.py

from __future__ import annotations

from datetime import date

import pytest

from roster_reconciler.classification import (
    InconsistencyType as T,
    classify_pair,
    employment_is_active,
    is_lifecycle_end,
    normalize_job_type,
    training_is_active,
)
from roster_reconciler.core.settings import ClassificationRules
from roster_reconciler.records import EmploymentRecord, TrainingRecord

AS_OF = date(2024, 6, 30)
RULES = ClassificationRules()


def _a(**kwargs) -> EmploymentRecord:
    base = dict(name="김철수", birth_date="900101", institution="행복복지관", is_active=True)
    base.update(kwargs)
    return EmploymentRecord(**base)


def _b(**kwargs) -> TrainingRecord:
    base = dict(name="김철수", birth_date="19900101", institution="행복복지관", status="정상")
    base.update(kwargs)
    return TrainingRecord(**base)


def _types(a, b):
    return classify_pair(a, b, as_of=AS_OF, rules=RULES).types


# ---------------------------------------------------------------------------
# Liveness
# ---------------------------------------------------------------------------

def test_employment_liveness() -> None:
    assert employment_is_active(_a(), AS_OF)
    assert employment_is_active(_a(is_active=None), AS_OF)
    assert not employment_is_active(_a(is_active=False), AS_OF)
    assert not employment_is_active(_a(is_active=None, resign_date="2024-06-30"), AS_OF)
    assert employment_is_active(_a(resign_date="2024-07-01"), AS_OF)
    assert employment_is_active(_a(resign_date="unknown"), AS_OF)


@pytest.mark.parametrize("status", ["suspended", "Dormant", "withdrawn", "중지", "휴면대상", "탈퇴"])
def test_lifecycle_end_vocabulary(status) -> None:
    assert is_lifecycle_end(status, RULES)
    assert not training_is_active(_b(status=status), RULES)


@pytest.mark.parametrize("status", [None, "", "정상", "normal"])
def test_non_lifecycle_statuses_are_active(status) -> None:
    assert not is_lifecycle_end(status, RULES)
    assert training_is_active(_b(status=status), RULES)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def test_agreeing_pair_has_no_tags() -> None:
    comparison = classify_pair(_a(), _b(), as_of=AS_OF)
    assert comparison.types == ()
    assert comparison.agrees


def test_status_contradiction_active_a_suspended_b() -> None:
    assert _types(_a(), _b(status="중지")) == (T.STATUS_CONTRADICTION,)


def test_status_contradiction_resigned_a_normal_b() -> None:
    a = _a(is_active=None, resign_date="2024-01-01")
    assert _types(a, _b()) == (T.STATUS_CONTRADICTION, T.RESIGN_DATE_MISMATCH)


def test_lifecycle_end_b_and_inactive_a_agree_on_status() -> None:
    a = _a(is_active=False, resign_date="2024-01-01")
    b = _b(status="탈퇴", resign_date="2024-01-03")
    assert _types(a, b) == ()

    b_without_date = _b(status="withdrawn")
    assert T.STATUS_CONTRADICTION not in _types(a, b_without_date)


@pytest.mark.parametrize(
    "resign_b, expected",
    [
        ("2024-01-11", ()),
        ("2024-01-12", (T.RESIGN_DATE_MISMATCH,)),
    ],
)
def test_resign_date_tolerance_boundary(resign_b, expected) -> None:
    a = _a(is_active=False, resign_date="2024-01-01")
    b = _b(status="탈퇴", resign_date=resign_b)
    assert _types(a, b) == expected


def test_resign_date_present_on_one_side_only() -> None:
    a = _a(is_active=False, resign_date="2024-01-01")
    b = _b(status="탈퇴")
    comparison = classify_pair(a, b, as_of=AS_OF)
    assert comparison.types == (T.RESIGN_DATE_MISMATCH,)
    assert comparison.resign_date_diff_days is None


def test_unparseable_resign_date_cannot_trigger() -> None:
    a = _a(is_active=False, resign_date="퇴사함")
    b = _b(status="탈퇴", resign_date="2024-01-01")
    assert T.RESIGN_DATE_MISMATCH not in _types(a, b)


@pytest.mark.parametrize("placeholder", ["-", "n/a", "없음"])
def test_placeholder_resign_date_counts_as_absent(placeholder) -> None:
    a = EmploymentRecord(name="Park", resign_date=placeholder, is_active=False)
    b = TrainingRecord(name="Park", resign_date="2024-01-01", status="withdrawn")
    comparison = classify_pair(a, b, as_of=AS_OF)
    assert comparison.types == (T.RESIGN_DATE_MISMATCH,)
    assert comparison.resign_date_diff_days is None


@pytest.mark.parametrize(
    "hire_b, expected, diff",
    [
        ("2020-03-31", (), 90),
        ("2020-04-01", (T.HIRE_DATE_MISMATCH,), 91),
    ],
)
def test_hire_date_tolerance_boundary(hire_b, expected, diff) -> None:
    comparison = classify_pair(_a(hire_date="2020-01-01"), _b(hire_date=hire_b), as_of=AS_OF)
    assert comparison.types == expected
    assert comparison.hire_date_diff_days == diff


def test_hire_date_missing_on_one_side_is_ignored() -> None:
    assert _types(_a(hire_date="2020-01-01"), _b()) == ()


def test_institution_mismatch() -> None:
    assert _types(_a(institution="Alpha Center"), _b(institution="Beta Center")) == (T.INSTITUTION_MISMATCH,)
    assert _types(_a(institution="(재)행복복지관"), _b(institution="행복복지관")) == ()
    assert _types(_a(institution=None), _b(institution="Beta Center")) == ()


def test_institution_spelling_drift_is_not_a_mismatch() -> None:
    assert _types(_a(institution="창원 행복 노인복지관"), _b(institution="창원시 행복 노인복지관")) == ()
    assert _types(_a(institution="창원행복복지관"), _b(institution="김해행복복지관")) == (T.INSTITUTION_MISMATCH,)


def test_umbrella_institution_never_mismatches() -> None:
    a = _a(institution="경남광역지원기관")
    assert T.INSTITUTION_MISMATCH not in _types(a, _b(institution="행복복지관"))


def test_job_type_categories() -> None:
    assert normalize_job_type("선임전담사회복지사", RULES.job_type_prefixes) == "전담사회복지사"
    assert normalize_job_type("Senior Social Worker", RULES.job_type_prefixes) == "socialworker"
    assert normalize_job_type("선임", RULES.job_type_prefixes) == "선임"
    assert normalize_job_type(None, RULES.job_type_prefixes) == ""


def test_job_type_mismatch() -> None:
    assert _types(_a(job_type="선임전담사회복지사"), _b(job_type="전담사회복지사")) == ()
    assert _types(_a(job_type="전담사회복지사"), _b(job_type="생활지원사")) == (T.JOB_TYPE_MISMATCH,)
    assert _types(_a(job_type=""), _b(job_type="생활지원사")) == ()


def test_support_role_at_umbrella_institution() -> None:
    a = _a(institution="경남광역지원기관", job_type="생활지원사")
    b = _b(institution="경남광역지원기관", job_type="생활지원사")
    assert _types(a, b) == (T.JOB_TYPE_MISMATCH,)


def test_future_resign_date_is_self_contradiction() -> None:
    a = _a(resign_date="2025-01-01")
    assert _types(a, _b()) == (T.RESIGN_DATE_MISMATCH, T.STATUS_SELF_CONTRADICTION)


def test_past_resign_with_explicit_active_claim() -> None:
    a = _a(is_active=True, resign_date="2024-01-01")
    b = _b(status="탈퇴", resign_date="2024-01-01")
    comparison = classify_pair(a, b, as_of=AS_OF)
    assert comparison.types == (T.STATUS_SELF_CONTRADICTION,)
    assert comparison.resign_date_diff_days == 0
    assert not comparison.employment_active
    assert not comparison.training_active


def test_training_side_self_contradiction() -> None:
    a = _a(is_active=False, resign_date="2024-01-01")
    b = _b(status="정상", resign_date="2024-01-01")
    assert _types(a, b) == (T.STATUS_CONTRADICTION, T.STATUS_SELF_CONTRADICTION)


def test_tags_follow_taxonomy_order() -> None:
    a = _a(institution="Alpha Center", job_type="전담사회복지사", hire_date="2019-01-01")
    b = _b(institution="Beta Center", job_type="생활지원사", hire_date="2021-01-01", status="중지")
    assert _types(a, b) == (
        T.STATUS_CONTRADICTION,
        T.HIRE_DATE_MISMATCH,
        T.INSTITUTION_MISMATCH,
        T.JOB_TYPE_MISMATCH,
    )
