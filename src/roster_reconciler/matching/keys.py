"""
Normalized keys and the per-run candidate index.

Keys are computed once per record per run; every matching tier and the
suggestion engine read them from here instead of re-normalizing inside loops.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from roster_reconciler.dates.normalizer import is_comparable_birth_date, normalize_birth_date, parse_date
from roster_reconciler.normalization.name_normalization import normalize_name, safe_str

R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class NormalizedKey:
    name: str
    birth_date: str
    raw_birth_date: str
    birth: Optional[date] = None

    @property
    def has_birth_date(self) -> bool:
        return bool(self.raw_birth_date)

    @property
    def comparable_birth_date(self) -> bool:
        return is_comparable_birth_date(self.birth_date)

    def birth_gap_days(self, other: NormalizedKey) -> Optional[int]:
        """Absolute day gap between two comparable birth dates, else None."""
        if self.birth is None or other.birth is None:
            return None
        return abs((self.birth - other.birth).days)


def key_for(record: Any) -> NormalizedKey:
    raw_birth = safe_str(getattr(record, "birth_date", None)).strip()
    birth_key = normalize_birth_date(raw_birth)
    return NormalizedKey(
        name=normalize_name(getattr(record, "name", None)),
        birth_date=birth_key,
        raw_birth_date=raw_birth,
        birth=parse_date(birth_key) if is_comparable_birth_date(birth_key) else None,
    )


def sort_key(record: Any) -> Tuple[str, str, str]:
    """Name first, then identifier, then birth date."""
    return (
        safe_str(getattr(record, "name", None)).strip(),
        safe_str(getattr(record, "record_id", None)),
        safe_str(getattr(record, "birth_date", None)),
    )


def sort_records(records: Sequence[R]) -> List[R]:
    """Drop nameless records and sort the rest deterministically."""
    named = [r for r in records if normalize_name(getattr(r, "name", None))]
    return sorted(named, key=sort_key)


class KeyedRegistry(Generic[R]):
    """
    A sorted registry with its keys and a name index.

    Positions in ``records`` are the stable identity used by side tables;
    records themselves are never annotated.
    """

    def __init__(self, records: Sequence[R]):
        self.records: List[R] = sort_records(records)
        self.keys: List[NormalizedKey] = [key_for(r) for r in self.records]
        self.by_name: Dict[str, List[int]] = {}
        for pos, key in enumerate(self.keys):
            self.by_name.setdefault(key.name, []).append(pos)

    def __len__(self) -> int:
        return len(self.records)

    def positions_for_name(self, name_key: str) -> List[int]:
        return self.by_name.get(name_key, [])
