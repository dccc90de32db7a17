"""
Near-match suggestions for records the identity matcher left unresolved.

A suggestion is a hint for the reviewer, never a match. Candidates:

  - same normalized name, birth dates within the window
  - same normalized birth date, names overlapping (one contains the other)
  - similar name (tier-3/4 fuzzy rule or substring), birth dates within the window

Ranking: name_similarity - birthdate_day_delta, highest first; ties keep the
sorted registry order.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from roster_reconciler.core.settings import MatchingThresholds, SuggestionRules
from roster_reconciler.logging import get_logger
from roster_reconciler.matching.identity import is_similar_name, is_ultra_lenient_name
from roster_reconciler.matching.keys import KeyedRegistry, NormalizedKey
from roster_reconciler.normalization.name_normalization import names_overlap

log = get_logger("suggestions")


@dataclass(frozen=True)
class SimilarSuggestion:
    name: Optional[str]
    birth_date: Optional[str]
    institution: Optional[str]
    record_id: Optional[str]
    reason: str
    score: float
    name_similarity: float
    birth_date_diff_days: Optional[int] = None


def name_similarity(a: str, b: str) -> float:
    """SequenceMatcher ratio of normalized names."""
    if not a and not b:
        return 0.0
    return difflib.SequenceMatcher(None, a, b).ratio()


def _reason(same_name: bool, same_birth: bool, diff: Optional[int]) -> str:
    if same_name and diff:
        return f"same name, birthdate differs by {diff} days"
    if same_birth:
        return "same birthdate, similar name"
    if diff:
        return f"similar name, birthdate differs by {diff} days"
    return "similar name, same birthdate"


def _evaluate(
    key: NormalizedKey,
    candidate: NormalizedKey,
    rules: SuggestionRules,
    thresholds: MatchingThresholds,
) -> Optional[Tuple[float, float, Optional[int], str]]:
    diff = key.birth_gap_days(candidate)
    same_name = bool(key.name) and key.name == candidate.name
    same_birth = key.comparable_birth_date and key.birth_date == candidate.birth_date
    within_window = diff is not None and diff <= rules.max_birthdate_diff_days

    related_name = (
        names_overlap(key.name, candidate.name)
        or is_similar_name(key.name, candidate.name, thresholds)
        or is_ultra_lenient_name(key.name, candidate.name, thresholds)
    )
    eligible = (
        (same_name and within_window)
        or (same_birth and names_overlap(key.name, candidate.name))
        or (within_window and related_name)
    )
    if not eligible:
        return None

    similarity = name_similarity(key.name, candidate.name)
    score = similarity - (diff or 0)
    return score, similarity, diff, _reason(same_name, same_birth, diff)


def suggest_counterpart(
    key: NormalizedKey,
    other: KeyedRegistry,
    *,
    rules: Optional[SuggestionRules] = None,
    thresholds: Optional[MatchingThresholds] = None,
) -> Optional[SimilarSuggestion]:
    """Best near-match for ``key`` in the other registry, or None."""
    rules = rules or SuggestionRules()
    thresholds = thresholds or MatchingThresholds()

    best: Optional[Tuple[float, int, Tuple[float, float, Optional[int], str]]] = None
    for pos, candidate in enumerate(other.keys):
        outcome = _evaluate(key, candidate, rules, thresholds)
        if outcome is None:
            continue
        # Strict '>' keeps the earliest sorted candidate on ties.
        if best is None or outcome[0] > best[0]:
            best = (outcome[0], pos, outcome)

    if best is None:
        return None

    _, pos, (score, similarity, diff, reason) = best
    record: Any = other.records[pos]
    return SimilarSuggestion(
        name=getattr(record, "name", None),
        birth_date=getattr(record, "birth_date", None),
        institution=getattr(record, "institution", None),
        record_id=getattr(record, "record_id", None),
        reason=reason,
        score=round(score, 6),
        name_similarity=round(similarity, 6),
        birth_date_diff_days=diff,
    )


def build_suggestion_table(
    positions: Iterable[int],
    source: KeyedRegistry,
    other: KeyedRegistry,
    *,
    rules: Optional[SuggestionRules] = None,
    thresholds: Optional[MatchingThresholds] = None,
) -> Dict[int, SimilarSuggestion]:
    """
    Side table: source position -> suggestion.

    Input records are never annotated; consumers look suggestions up by the
    record's position in its sorted registry.
    """
    pending = list(positions)
    table: Dict[int, SimilarSuggestion] = {}
    for pos in pending:
        suggestion = suggest_counterpart(source.keys[pos], other, rules=rules, thresholds=thresholds)
        if suggestion is not None:
            table[pos] = suggestion
            log.debug("Suggestion for %r: %r (%s)", source.keys[pos].name, suggestion.name, suggestion.reason)

    log.info("Similarity suggestions: unmatched=%d suggested=%d", len(pending), len(table))
    return table
