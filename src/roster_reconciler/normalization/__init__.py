"""
roster_reconciler.normalization package

- name_normalization: person names, positional overlap helpers
- institution: organization names, umbrella-institution detection

Birth/hire/resign dates live in ``roster_reconciler.dates``.
"""

from roster_reconciler.normalization.institution import (
    institution_keywords,
    institutions_agree,
    is_umbrella_institution,
    normalize_institution_name,
)
from roster_reconciler.normalization.name_normalization import (
    names_overlap,
    normalize_name,
    overlap_ratio,
    position_overlap,
)

__all__ = [
    "institution_keywords",
    "institutions_agree",
    "is_umbrella_institution",
    "names_overlap",
    "normalize_institution_name",
    "normalize_name",
    "overlap_ratio",
    "position_overlap",
]
