"""
Typed reconciliation settings.

Every threshold the engine uses lives here. ``ReconcileSettings()`` carries the
built-in defaults; ``ReconcileSettings.from_config`` overlays the
``reconciliation`` section of ``config/roster_reconciler.yml``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from roster_reconciler.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class MatchingThresholds:
    """Tier 3/4 fuzzy-name parameters. Empirically tuned, hence configurable."""

    similar_min_length: int = 2
    similar_prefix_length: int = 2
    similar_min_overlap: int = 2
    lenient_max_length_diff: int = 1
    lenient_min_overlap_ratio: float = 0.5
    # Reject fuzzy candidates whose 8-digit birth dates are both known and differ.
    fuzzy_birthdate_guard: bool = True


@dataclass(frozen=True)
class ClassificationRules:
    resign_tolerance_days: int = 10
    hire_tolerance_days: int = 90
    lifecycle_end_statuses: Tuple[str, ...] = (
        "suspended",
        "dormant",
        "withdrawn",
        "중지",
        "휴면대상",
        "휴면",
        "탈퇴",
    )
    active_statuses: Tuple[str, ...] = ("normal", "active", "정상", "재직")
    umbrella_markers: Tuple[str, ...] = (
        "광역지원기관",
        "광역지원",
        "(광역)",
        "regional support center",
    )
    job_type_prefixes: Tuple[str, ...] = ("senior", "regional", "선임", "광역")
    support_roles: Tuple[str, ...] = ("생활지원사", "life support worker")


@dataclass(frozen=True)
class SuggestionRules:
    max_birthdate_diff_days: int = 30


@dataclass(frozen=True)
class ReportingRules:
    unassigned_label: str = "미분류"


@dataclass(frozen=True)
class ReconcileSettings:
    matching: MatchingThresholds = field(default_factory=MatchingThresholds)
    classification: ClassificationRules = field(default_factory=ClassificationRules)
    suggestions: SuggestionRules = field(default_factory=SuggestionRules)
    reporting: ReportingRules = field(default_factory=ReportingRules)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ReconcileSettings":
        data = data or {}
        if not isinstance(data, Mapping):
            raise ConfigurationError("reconciliation section must be a mapping")

        return cls(
            matching=_overlay(MatchingThresholds(), data.get("matching"), "matching"),
            classification=_overlay(ClassificationRules(), data.get("classification"), "classification"),
            suggestions=_overlay(SuggestionRules(), data.get("suggestions"), "suggestions"),
            reporting=_overlay(ReportingRules(), data.get("reporting"), "reporting"),
        )

    @classmethod
    def from_config(cls, cfg: Any) -> "ReconcileSettings":
        return cls.from_mapping(getattr(cfg, "reconciliation", None))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _coerce(name: str, default: Any, value: Any, section: str) -> Any:
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
    elif isinstance(default, int):
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif isinstance(default, float):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif isinstance(default, str):
        if isinstance(value, str):
            return value
    elif isinstance(default, tuple):
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return tuple(value)

    raise ConfigurationError(
        f"reconciliation.{section}.{name}: expected {type(default).__name__}, got {value!r}"
    )


def _overlay(base: Any, overrides: Any, section: str) -> Any:
    if overrides is None:
        return base
    if not isinstance(overrides, Mapping):
        raise ConfigurationError(f"reconciliation.{section} must be a mapping")

    changes: Dict[str, Any] = {}
    for f in fields(base):
        if f.name in overrides:
            default = getattr(base, f.name)
            changes[f.name] = _coerce(f.name, default, overrides[f.name], section)

    return replace(base, **changes)
