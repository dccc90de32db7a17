# src/roster_reconciler/dates/normalizer.py

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, List, Optional


# ---------------------------------------------------------------------------
# Century helpers
# ---------------------------------------------------------------------------

# Two-digit years at or above the pivot belong to the 1900s.
CENTURY_PIVOT = 30

PLACEHOLDERS = {"", "-", "--", "n/a", "na", "none", "null", "없음"}

_NON_DIGIT_RE = re.compile(r"\D+")
_DIGIT_GROUP_RE = re.compile(r"\d+")


def expand_two_digit_year(yy: int) -> int:
    return 1900 + yy if yy >= CENTURY_PIVOT else 2000 + yy


# ---------------------------------------------------------------------------
# Birth-date keys
# ---------------------------------------------------------------------------

def normalize_birth_date(raw: Optional[str]) -> str:
    """
    Reduce a birth date to comparable digits.

        - '1990-01-01' -> '19900101'
        - '900101'     -> '19900101'   (yy >= 30 -> 19yy)
        - '050312'     -> '20050312'   (yy <  30 -> 20yy)
        - '19900101'   -> '19900101'

    Any other digit count is returned as-is: the caller must treat it as
    "no normalization possible", not as an error.
    """
    if raw is None:
        return ""
    digits = _NON_DIGIT_RE.sub("", str(raw))
    if len(digits) == 6:
        return f"{expand_two_digit_year(int(digits[:2])):04d}{digits[2:]}"
    return digits


def is_comparable_birth_date(key: str) -> bool:
    return len(key) == 8 and key.isdigit()


# ---------------------------------------------------------------------------
# Calendar dates
# ---------------------------------------------------------------------------

def _build(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _from_compact(digits: str) -> Optional[date]:
    if len(digits) == 8:
        return _build(int(digits[:4]), int(digits[4:6]), int(digits[6:]))
    if len(digits) == 6:
        return _build(expand_two_digit_year(int(digits[:2])), int(digits[2:4]), int(digits[4:]))
    return None


def _from_groups(groups: List[str]) -> Optional[date]:
    year_token, month_token, day_token = groups[0], groups[1], groups[2]
    if len(year_token) == 4:
        year = int(year_token)
    elif len(year_token) == 2:
        year = expand_two_digit_year(int(year_token))
    else:
        return None
    if len(month_token) > 2 or len(day_token) > 2:
        return None
    return _build(year, int(month_token), int(day_token))


def parse_date(raw: Any) -> Optional[date]:
    """
    Best-effort parse of a free-text registry date.

    Supported shapes:
        - '2024-01-01', '2024.01.01', '2024/1/1', '2024. 1. 1.'
        - '2024-01-01T09:00:00' (time part ignored)
        - '20240101', '240101'

    Returns None for placeholders and anything unparseable; never raises.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw

    text = str(raw).strip()
    if text.lower() in PLACEHOLDERS:
        return None

    groups = _DIGIT_GROUP_RE.findall(text)
    if not groups:
        return None

    if len(groups) == 1:
        return _from_compact(groups[0])

    if len(groups) >= 3:
        return _from_groups(groups)

    return None


def days_between(a: Any, b: Any) -> Optional[int]:
    """Absolute day difference, or None when either side cannot be parsed."""
    da = parse_date(a)
    db = parse_date(b)
    if da is None or db is None:
        return None
    return abs((da - db).days)


def birth_date_diff_days(a: Optional[str], b: Optional[str]) -> Optional[int]:
    """Day difference between two birth dates after 6/8-digit normalization."""
    ka = normalize_birth_date(a)
    kb = normalize_birth_date(b)
    if not (is_comparable_birth_date(ka) and is_comparable_birth_date(kb)):
        return None
    return days_between(ka, kb)
