"""
Field-agreement classification for a matched (registry A, registry B) pair.

Rules fail open: a date that cannot be parsed makes its rule "cannot
determine" and the rule does not fire on that basis alone.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple

from roster_reconciler.classification.taxonomy import InconsistencyType, ordered
from roster_reconciler.core.settings import ClassificationRules
from roster_reconciler.dates.normalizer import PLACEHOLDERS, parse_date
from roster_reconciler.normalization.institution import institutions_agree, is_umbrella_institution
from roster_reconciler.normalization.name_normalization import safe_str
from roster_reconciler.records.entities import EmploymentRecord, TrainingRecord

_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class FieldComparison:
    types: Tuple[InconsistencyType, ...]
    employment_active: bool
    training_active: bool
    hire_date_diff_days: Optional[int] = None
    resign_date_diff_days: Optional[int] = None

    @property
    def agrees(self) -> bool:
        return not self.types


@dataclass(frozen=True)
class _DateField:
    """A raw date plus its parse; ``present`` is about the raw text."""
    raw: str
    value: Optional[date]

    @property
    def present(self) -> bool:
        return bool(self.raw)

    @property
    def indeterminate(self) -> bool:
        return self.present and self.value is None


def _date_field(raw: Optional[str]) -> _DateField:
    text = safe_str(raw).strip()
    if text.lower() in PLACEHOLDERS:
        text = ""
    return _DateField(raw=text, value=parse_date(text) if text else None)


# ---------------------------------------------------------------------------
# Vocabulary helpers
# ---------------------------------------------------------------------------

def _fold(value: Optional[str]) -> str:
    return _WS_RE.sub("", safe_str(value)).casefold()


def _fold_all(values: Iterable[str]) -> set:
    return {_fold(v) for v in values}


def is_lifecycle_end(status: Optional[str], rules: ClassificationRules) -> bool:
    folded = _fold(status)
    return bool(folded) and folded in _fold_all(rules.lifecycle_end_statuses)


def claims_active(status: Optional[str], rules: ClassificationRules) -> bool:
    folded = _fold(status)
    return bool(folded) and folded in _fold_all(rules.active_statuses)


def normalize_job_type(value: Optional[str], prefixes: Iterable[str] = ()) -> str:
    """Collapse 'senior X' / 'regional X' / '선임X' into the base category 'X'."""
    folded = _fold(value)
    folded_prefixes = sorted(_fold_all(prefixes) - {""}, key=len, reverse=True)

    stripped = True
    while stripped and folded:
        stripped = False
        for prefix in folded_prefixes:
            if folded.startswith(prefix) and len(folded) > len(prefix):
                folded = folded[len(prefix):]
                stripped = True
                break
    return folded


# ---------------------------------------------------------------------------
# Liveness
# ---------------------------------------------------------------------------

def employment_is_active(record: EmploymentRecord, as_of: date) -> bool:
    """is_active not False and no resignation on or before ``as_of``."""
    if record.is_active is False:
        return False
    resign = _date_field(record.resign_date)
    if resign.value is not None and resign.value <= as_of:
        return False
    return True


def training_is_active(record: TrainingRecord, rules: ClassificationRules) -> bool:
    return not is_lifecycle_end(record.status, rules)


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def status_contradiction(a_active: bool, b_active: bool, b_lifecycle_end: bool) -> bool:
    # Lifecycle-end vocabulary on B and inactive A describe the same fact.
    if b_lifecycle_end and not a_active:
        return False
    return a_active != b_active


def resign_date_mismatch(
    a: EmploymentRecord,
    b: TrainingRecord,
    rules: ClassificationRules,
) -> Tuple[bool, Optional[int]]:
    ra = _date_field(a.resign_date)
    rb = _date_field(b.resign_date)

    if ra.indeterminate or rb.indeterminate:
        return False, None
    if not ra.present and not rb.present:
        return False, None
    if ra.present != rb.present:
        return True, None

    diff = abs((ra.value - rb.value).days)
    return diff > rules.resign_tolerance_days, diff


def hire_date_mismatch(
    a: EmploymentRecord,
    b: TrainingRecord,
    rules: ClassificationRules,
) -> Tuple[bool, Optional[int]]:
    ha = _date_field(a.hire_date)
    hb = _date_field(b.hire_date)
    if ha.value is None or hb.value is None:
        return False, None
    diff = abs((ha.value - hb.value).days)
    return diff > rules.hire_tolerance_days, diff


def institution_mismatch(a: EmploymentRecord, b: TrainingRecord, rules: ClassificationRules) -> bool:
    ia = safe_str(a.institution).strip()
    ib = safe_str(b.institution).strip()
    if not ia or not ib:
        return False
    markers = rules.umbrella_markers
    if is_umbrella_institution(ia, markers) or is_umbrella_institution(ib, markers):
        return False
    return not institutions_agree(ia, ib)


def _support_role_at_umbrella(job_type: Optional[str], institution: Optional[str], rules: ClassificationRules) -> bool:
    job = normalize_job_type(job_type, rules.job_type_prefixes)
    if not job:
        return False
    support = {normalize_job_type(r, rules.job_type_prefixes) for r in rules.support_roles}
    return job in support and is_umbrella_institution(institution, rules.umbrella_markers)


def job_type_mismatch(a: EmploymentRecord, b: TrainingRecord, rules: ClassificationRules) -> bool:
    if _support_role_at_umbrella(a.job_type, a.institution, rules):
        return True
    if _support_role_at_umbrella(b.job_type, b.institution, rules):
        return True

    ja = normalize_job_type(a.job_type, rules.job_type_prefixes)
    jb = normalize_job_type(b.job_type, rules.job_type_prefixes)
    if not ja or not jb:
        return False
    return ja != jb


def employment_self_contradiction(record: EmploymentRecord, as_of: date) -> bool:
    resign = _date_field(record.resign_date)
    if resign.value is None:
        return False
    if resign.value > as_of:
        return True
    return record.is_active is True


def training_self_contradiction(record: TrainingRecord, as_of: date, rules: ClassificationRules) -> bool:
    resign = _date_field(record.resign_date)
    if resign.value is None:
        return False
    if resign.value > as_of:
        return True
    return claims_active(record.status, rules)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def classify_pair(
    a: EmploymentRecord,
    b: TrainingRecord,
    *,
    as_of: date,
    rules: Optional[ClassificationRules] = None,
) -> FieldComparison:
    """Compute every disagreement tag for one matched pair."""
    rules = rules or ClassificationRules()
    found: List[InconsistencyType] = []

    a_active = employment_is_active(a, as_of)
    b_active = training_is_active(b, rules)
    if status_contradiction(a_active, b_active, is_lifecycle_end(b.status, rules)):
        found.append(InconsistencyType.STATUS_CONTRADICTION)

    resign_hit, resign_diff = resign_date_mismatch(a, b, rules)
    if resign_hit:
        found.append(InconsistencyType.RESIGN_DATE_MISMATCH)

    hire_hit, hire_diff = hire_date_mismatch(a, b, rules)
    if hire_hit:
        found.append(InconsistencyType.HIRE_DATE_MISMATCH)

    if institution_mismatch(a, b, rules):
        found.append(InconsistencyType.INSTITUTION_MISMATCH)

    if job_type_mismatch(a, b, rules):
        found.append(InconsistencyType.JOB_TYPE_MISMATCH)

    if employment_self_contradiction(a, as_of) or training_self_contradiction(b, as_of, rules):
        found.append(InconsistencyType.STATUS_SELF_CONTRADICTION)

    return FieldComparison(
        types=ordered(found),
        employment_active=a_active,
        training_active=b_active,
        hire_date_diff_days=hire_diff,
        resign_date_diff_days=resign_diff,
    )
