"""
Identity matching: resolve a registry-B record to zero-or-one registry-A record.

Cascade (first tier with at least one candidate wins; within a tier the first
candidate in sorted registry order is taken):

  1. EXACT          normalized names equal and birth dates agree
                    (both absent, raw equal, or normalized equal)
  2. RELAXED_NAME   normalized names equal, birth date ignored
  3. SIMILAR_NAME   both names >= similar_min_length (2) chars; same
                    similar_prefix_length (2) prefix or >= 2 position overlaps
  4. ULTRA_LENIENT  same first char, length diff <= 1, overlap ratio >= 0.5

Tiers 1-2 are index lookups. Tiers 3-4 scan registry A and only run for records
the first two tiers left unresolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from roster_reconciler.core.settings import MatchingThresholds
from roster_reconciler.logging import get_logger
from roster_reconciler.matching.keys import KeyedRegistry, NormalizedKey
from roster_reconciler.normalization.name_normalization import overlap_ratio, position_overlap
from roster_reconciler.records.entities import EmploymentRecord, TrainingRecord

log = get_logger("matching")

B = TypeVar("B")
A = TypeVar("A")


class MatchTier(IntEnum):
    EXACT = 1
    RELAXED_NAME = 2
    SIMILAR_NAME = 3
    ULTRA_LENIENT = 4


@dataclass(frozen=True)
class MatchResult(Generic[B, A]):
    record: B
    position: int
    counterpart: Optional[A] = None
    counterpart_position: Optional[int] = None
    tier: Optional[MatchTier] = None

    @property
    def matched(self) -> bool:
        return self.counterpart is not None


# ---------------------------------------------------------------------------
# Tier predicates
# ---------------------------------------------------------------------------

def birth_dates_agree(a: NormalizedKey, b: NormalizedKey) -> bool:
    """Tier-1 birth-date rule."""
    if not a.has_birth_date and not b.has_birth_date:
        return True
    if a.raw_birth_date == b.raw_birth_date:
        return True
    return bool(a.birth_date) and a.birth_date == b.birth_date


def birth_dates_conflict(a: NormalizedKey, b: NormalizedKey) -> bool:
    """Both sides carry a comparable 8-digit birth date and they differ."""
    return a.comparable_birth_date and b.comparable_birth_date and a.birth_date != b.birth_date


def is_similar_name(a: str, b: str, thresholds: MatchingThresholds) -> bool:
    if len(a) < thresholds.similar_min_length or len(b) < thresholds.similar_min_length:
        return False
    prefix = thresholds.similar_prefix_length
    if len(a) >= prefix and len(b) >= prefix and a[:prefix] == b[:prefix]:
        return True
    return position_overlap(a, b) >= thresholds.similar_min_overlap


def is_ultra_lenient_name(a: str, b: str, thresholds: MatchingThresholds) -> bool:
    if not a or not b or a[0] != b[0]:
        return False
    if abs(len(a) - len(b)) > thresholds.lenient_max_length_diff:
        return False
    return overlap_ratio(a, b) >= thresholds.lenient_min_overlap_ratio


# ---------------------------------------------------------------------------
# Matcher
# ---------------------------------------------------------------------------

class IdentityMatcher:
    """Resolves registry-B keys against a keyed registry A."""

    def __init__(self, registry_a: KeyedRegistry, thresholds: Optional[MatchingThresholds] = None):
        self.registry_a = registry_a
        self.thresholds = thresholds or MatchingThresholds()

    def _exact(self, key: NormalizedKey) -> Optional[int]:
        for pos in self.registry_a.positions_for_name(key.name):
            if birth_dates_agree(self.registry_a.keys[pos], key):
                return pos
        return None

    def _relaxed(self, key: NormalizedKey) -> Optional[int]:
        positions = self.registry_a.positions_for_name(key.name)
        return positions[0] if positions else None

    def _scan(self, key: NormalizedKey, predicate) -> Optional[int]:
        guard = self.thresholds.fuzzy_birthdate_guard
        for pos, candidate in enumerate(self.registry_a.keys):
            if not predicate(candidate.name, key.name, self.thresholds):
                continue
            if guard and birth_dates_conflict(candidate, key):
                continue
            return pos
        return None

    def resolve(self, key: NormalizedKey) -> Tuple[Optional[int], Optional[MatchTier]]:
        if not key.name:
            return None, None

        pos = self._exact(key)
        if pos is not None:
            return pos, MatchTier.EXACT

        pos = self._relaxed(key)
        if pos is not None:
            return pos, MatchTier.RELAXED_NAME

        pos = self._scan(key, is_similar_name)
        if pos is not None:
            return pos, MatchTier.SIMILAR_NAME

        pos = self._scan(key, is_ultra_lenient_name)
        if pos is not None:
            return pos, MatchTier.ULTRA_LENIENT

        return None, None


def match_registries(
    registry_a: KeyedRegistry,
    registry_b: KeyedRegistry,
    thresholds: Optional[MatchingThresholds] = None,
) -> List[MatchResult]:
    """One MatchResult per registry-B record, in sorted registry-B order."""
    matcher = IdentityMatcher(registry_a, thresholds)
    tier_counts: Dict[str, int] = {t.name: 0 for t in MatchTier}
    tier_counts["UNMATCHED"] = 0

    results: List[MatchResult] = []
    for pos_b, (record, key) in enumerate(zip(registry_b.records, registry_b.keys)):
        pos_a, tier = matcher.resolve(key)
        if pos_a is None:
            tier_counts["UNMATCHED"] += 1
            results.append(MatchResult(record=record, position=pos_b))
            continue

        tier_counts[tier.name] += 1
        log.debug("Matched %r -> %r at tier %s", key.name, registry_a.keys[pos_a].name, tier.name)
        results.append(
            MatchResult(
                record=record,
                position=pos_b,
                counterpart=registry_a.records[pos_a],
                counterpart_position=pos_a,
                tier=tier,
            )
        )

    log.info(
        "Identity matching complete: registry_a=%d registry_b=%d exact=%d relaxed=%d similar=%d lenient=%d unmatched=%d",
        len(registry_a),
        len(registry_b),
        tier_counts["EXACT"],
        tier_counts["RELAXED_NAME"],
        tier_counts["SIMILAR_NAME"],
        tier_counts["ULTRA_LENIENT"],
        tier_counts["UNMATCHED"],
    )
    return results


def find_counterpart(
    record: TrainingRecord,
    registry_a: Sequence[EmploymentRecord],
    thresholds: Optional[MatchingThresholds] = None,
) -> Optional[EmploymentRecord]:
    """Single-record convenience: best registry-A record for ``record`` or None."""
    keyed = KeyedRegistry(registry_a)
    single = KeyedRegistry([record])
    if not single.records:
        return None
    pos, _ = IdentityMatcher(keyed, thresholds).resolve(single.keys[0])
    return keyed.records[pos] if pos is not None else None
