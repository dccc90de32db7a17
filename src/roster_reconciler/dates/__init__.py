from roster_reconciler.dates.normalizer import (
    birth_date_diff_days,
    days_between,
    expand_two_digit_year,
    is_comparable_birth_date,
    normalize_birth_date,
    parse_date,
)

__all__ = [
    "birth_date_diff_days",
    "days_between",
    "expand_two_digit_year",
    "is_comparable_birth_date",
    "normalize_birth_date",
    "parse_date",
]
