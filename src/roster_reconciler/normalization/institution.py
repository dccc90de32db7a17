"""
Institution-name canonicalization.

Organization names drift between the registries the same way person names do:
corporate-form markers, regional prefixes and facility spellings come and go.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from roster_reconciler.normalization.name_normalization import safe_str

# Applied in order; each pair is (pattern, replacement).
_UMBRELLA_PREFIXES = (
    (re.compile(r"^\(광역\)"), ""),
    (re.compile(r"^광역"), ""),
    (re.compile(r"\*?광역지원기관"), ""),
)

_CORPORATE_FORMS = (
    (re.compile(r"\(재\)"), ""),
    (re.compile(r"\(사\)"), ""),
    (re.compile(r"\(주\)"), ""),
    (re.compile(r"재단법인"), ""),
    (re.compile(r"사단법인"), ""),
    (re.compile(r"주식회사"), ""),
)

_FACILITY_SPELLINGS = (
    (re.compile(r"종합사회복지관"), "사회복지관"),
    (re.compile(r"노인종합복지관"), "노인복지관"),
    (re.compile(r"장애인종합복지관"), "장애인복지관"),
    (re.compile(r"통합지원센터"), "지원센터"),
)

_REGION_SPELLINGS = (
    (re.compile(r"경상남도"), "경남"),
    (re.compile(r"경남도"), "경남"),
)

_PUNCTUATION_RE = re.compile(r"[()（）.,]")
_WS_RE = re.compile(r"\s+")
_WORD_SPLIT_RE = re.compile(r"[\s\-_]+")

# Administrative suffixes and particles that carry no identity on their own.
_KEYWORD_STOP_WORDS = frozenset(
    ["시", "군", "구", "읍", "면", "동", "리", "및", "와", "과", "의", "를", "을", "에", "도"]
)
_MIN_SHARED_KEYWORDS = 2

# Checked in order; the first hit wins.
_LOCATIONS = (
    "창원", "진주", "통영", "사천", "김해", "밀양", "거제", "양산", "의령", "함안",
    "창녕", "고성", "남해", "하동", "산청", "함양", "거창", "합천", "경남", "경상남도",
)
_FACILITY_TYPES = (
    "사회복지관", "복지관", "노인복지", "장애인복지", "지원센터", "요양원", "요양병원",
    "재활원", "보호작업장", "주간보호", "단기보호", "공동생활가정", "그룹홈", "쉼터", "상담소",
)


def _apply(text: str, rules) -> str:
    for pattern, repl in rules:
        text = pattern.sub(repl, text)
    return text


def _canonical(value: Optional[str]) -> str:
    """Rule-normalized, casefolded text with single spaces between words."""
    text = safe_str(value).strip()
    if not text:
        return ""

    text = _apply(text, _UMBRELLA_PREFIXES)
    text = _apply(text, _CORPORATE_FORMS)
    text = _apply(text, _FACILITY_SPELLINGS)
    text = _apply(text, _REGION_SPELLINGS)

    text = _PUNCTUATION_RE.sub("", text)
    return _WS_RE.sub(" ", text).strip().casefold()


def normalize_institution_name(value: Optional[str]) -> str:
    return _canonical(value).replace(" ", "")


def institution_keywords(value: Optional[str]) -> List[str]:
    """Words of the canonical name, minus single characters and stop words."""
    words = _WORD_SPLIT_RE.split(_canonical(value))
    return [w for w in words if len(w) > 1 and w not in _KEYWORD_STOP_WORDS]


def _first_found(text: str, candidates: Sequence[str]) -> Optional[str]:
    for candidate in candidates:
        if candidate in text:
            return candidate
    return None


def _shared_keyword_count(a: Sequence[str], b: Sequence[str]) -> int:
    return sum(1 for ka in a if any(ka == kb or kb in ka or ka in kb for kb in b))


def institutions_agree(a: Optional[str], b: Optional[str]) -> bool:
    """
    Two spellings name the same institution when, after normalization:

      1. they are equal, or one contains the other;
      2. both have at least two keywords and two of them match
         (equal, or one keyword contains the other);
      3. both name the same location and the same facility type.
    """
    na = normalize_institution_name(a)
    nb = normalize_institution_name(b)
    if not na or not nb:
        return na == nb
    if na == nb or na in nb or nb in na:
        return True

    ka = institution_keywords(a)
    kb = institution_keywords(b)
    if len(ka) >= _MIN_SHARED_KEYWORDS and len(kb) >= _MIN_SHARED_KEYWORDS:
        if _shared_keyword_count(ka, kb) >= _MIN_SHARED_KEYWORDS:
            return True

    location_a, location_b = _first_found(na, _LOCATIONS), _first_found(nb, _LOCATIONS)
    facility_a, facility_b = _first_found(na, _FACILITY_TYPES), _first_found(nb, _FACILITY_TYPES)
    if location_a and facility_a and location_b and facility_b:
        return location_a == location_b and facility_a == facility_b
    return False


def is_umbrella_institution(value: Optional[str], markers: Iterable[str]) -> bool:
    text = safe_str(value).casefold()
    if not text:
        return False
    return any(m.casefold() in text for m in markers if m)
