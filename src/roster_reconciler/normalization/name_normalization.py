"""
name_normalization.py
Person-name canonicalization used by every matching tier.

Both registries are typed in by hand, so the same person shows up as
"김철수", "김 철수", "김철수(선임)" or "KIM Chul Su". The normalized form
drops whitespace and parentheses and case-folds, nothing more: honorifics
inside parentheses keep their letters, which keeps the function idempotent.
"""

from __future__ import annotations

import re
from typing import Any, Optional

# ASCII + full-width parentheses and all unicode whitespace
_STRIP_RE = re.compile(r"[\s()（）]+")


def safe_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def normalize_name(value: Optional[str]) -> str:
    """Trim, drop whitespace and parenthesis characters, case-fold. Total."""
    text = safe_str(value).strip()
    if not text:
        return ""
    return _STRIP_RE.sub("", text).casefold()


def position_overlap(a: str, b: str) -> int:
    """Count positions where both strings carry the same character."""
    return sum(1 for x, y in zip(a, b) if x == y)


def overlap_ratio(a: str, b: str) -> float:
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return position_overlap(a, b) / longest


def names_overlap(a: str, b: str) -> bool:
    """Either normalized name contains the other (both non-empty)."""
    if not a or not b:
        return False
    return a in b or b in a
