# tests/test_identity_matching.py

from __future__ import annotations

from roster_reconciler.core.settings import MatchingThresholds
from roster_reconciler.matching import (
    IdentityMatcher,
    KeyedRegistry,
    MatchTier,
    find_counterpart,
    key_for,
    match_registries,
)
from roster_reconciler.records import EmploymentRecord, TrainingRecord


def _resolve(a_records, b_record, thresholds=None):
    keyed = KeyedRegistry(a_records)
    pos, tier = IdentityMatcher(keyed, thresholds).resolve(key_for(b_record))
    return (keyed.records[pos] if pos is not None else None), tier


def test_keyed_registry_sorts_and_drops_nameless_records() -> None:
    registry = KeyedRegistry(
        [
            EmploymentRecord(name="이영희", record_id="2"),
            EmploymentRecord(name=None),
            EmploymentRecord(name="김철수", record_id="9"),
            EmploymentRecord(name="  "),
            EmploymentRecord(name="김철수", record_id="1"),
        ]
    )
    assert [(r.name, r.record_id) for r in registry.records] == [
        ("김철수", "1"),
        ("김철수", "9"),
        ("이영희", "2"),
    ]
    assert registry.positions_for_name("김철수") == [0, 1]
    assert registry.positions_for_name("없는사람") == []


def test_exact_match_on_normalized_birth_dates() -> None:
    a = [EmploymentRecord(name="Lee", birth_date="900101")]
    record, tier = _resolve(a, TrainingRecord(name="lee ", birth_date="19900101"))
    assert record is a[0]
    assert tier is MatchTier.EXACT


def test_exact_match_when_both_birth_dates_absent() -> None:
    a = [EmploymentRecord(name="김철수")]
    _, tier = _resolve(a, TrainingRecord(name="김 철수"))
    assert tier is MatchTier.EXACT


def test_exact_tier_wins_over_earlier_relaxed_candidate() -> None:
    a = [
        EmploymentRecord(name="Kim", birth_date="1980-01-01", record_id="a1"),
        EmploymentRecord(name="Kim", birth_date="1990-01-01", record_id="a2"),
    ]
    record, tier = _resolve(a, TrainingRecord(name="Kim", birth_date="900101"))
    assert record.record_id == "a2"
    assert tier is MatchTier.EXACT


def test_relaxed_name_when_birth_dates_conflict() -> None:
    a = [EmploymentRecord(name="Kim", birth_date="1990-01-01")]
    record, tier = _resolve(a, TrainingRecord(name="Kim", birth_date="1985-05-05"))
    assert record is a[0]
    assert tier is MatchTier.RELAXED_NAME


def test_first_candidate_in_sorted_order_wins() -> None:
    a = [
        EmploymentRecord(name="Kim", record_id="a2"),
        EmploymentRecord(name="Kim", record_id="a1"),
    ]
    record, tier = _resolve(a, TrainingRecord(name="Kim"))
    assert record.record_id == "a1"
    assert tier is MatchTier.EXACT


def test_similar_name_tier() -> None:
    a = [EmploymentRecord(name="김철호"), EmploymentRecord(name="김철민")]
    record, tier = _resolve(a, TrainingRecord(name="김철수"))
    assert record.name == "김철민"
    assert tier is MatchTier.SIMILAR_NAME


def test_similar_name_prefix_and_minimum_length_are_separate() -> None:
    a = [EmploymentRecord(name="김철")]
    b = TrainingRecord(name="김철수")

    # Too short for a 3-char prefix, but still long enough to match on overlap.
    record, tier = _resolve(a, b, MatchingThresholds(similar_prefix_length=3))
    assert record is a[0]
    assert tier is MatchTier.SIMILAR_NAME

    record, tier = _resolve(a, b, MatchingThresholds(similar_min_length=3))
    assert record is a[0]
    assert tier is MatchTier.ULTRA_LENIENT


def test_ultra_lenient_tier() -> None:
    a = [EmploymentRecord(name="김민")]
    record, tier = _resolve(a, TrainingRecord(name="김수"))
    assert record is a[0]
    assert tier is MatchTier.ULTRA_LENIENT


def test_unrelated_names_do_not_match() -> None:
    a = [EmploymentRecord(name="Park")]
    record, tier = _resolve(a, TrainingRecord(name="Lee"))
    assert record is None
    assert tier is None


def test_fuzzy_tiers_reject_conflicting_birth_dates() -> None:
    a = [EmploymentRecord(name="Chio", birth_date="1990-01-01")]
    b = TrainingRecord(name="Choi", birth_date="1990-01-08")

    record, tier = _resolve(a, b)
    assert record is None and tier is None

    record, tier = _resolve(a, b, MatchingThresholds(fuzzy_birthdate_guard=False))
    assert record is a[0]
    assert tier is MatchTier.SIMILAR_NAME


def test_fuzzy_tiers_allow_missing_birth_date() -> None:
    a = [EmploymentRecord(name="Chio", birth_date="1990-01-01")]
    _, tier = _resolve(a, TrainingRecord(name="Choi"))
    assert tier is MatchTier.SIMILAR_NAME


def test_match_registries_returns_one_result_per_b_record() -> None:
    keyed_a = KeyedRegistry([EmploymentRecord(name="Lee", birth_date="900101")])
    keyed_b = KeyedRegistry(
        [
            TrainingRecord(name="Park"),
            TrainingRecord(name="Lee", birth_date="19900101"),
        ]
    )
    results = match_registries(keyed_a, keyed_b)

    assert [r.record.name for r in results] == ["Lee", "Park"]
    assert results[0].matched and results[0].tier is MatchTier.EXACT
    assert results[0].counterpart_position == 0
    assert not results[1].matched and results[1].tier is None


def test_find_counterpart() -> None:
    a = [EmploymentRecord(name="Lee"), EmploymentRecord(name="Park")]
    assert find_counterpart(TrainingRecord(name="Park"), a).name == "Park"
    assert find_counterpart(TrainingRecord(name=""), a) is None
