from roster_reconciler.matching.identity import (
    IdentityMatcher,
    MatchResult,
    MatchTier,
    find_counterpart,
    match_registries,
)
from roster_reconciler.matching.keys import KeyedRegistry, NormalizedKey, key_for, sort_records

__all__ = [
    "IdentityMatcher",
    "KeyedRegistry",
    "MatchResult",
    "MatchTier",
    "NormalizedKey",
    "find_counterpart",
    "key_for",
    "match_registries",
    "sort_records",
]
