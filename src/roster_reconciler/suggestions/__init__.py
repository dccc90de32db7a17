from roster_reconciler.suggestions.similarity import (
    SimilarSuggestion,
    build_suggestion_table,
    name_similarity,
    suggest_counterpart,
)

__all__ = [
    "SimilarSuggestion",
    "build_suggestion_table",
    "name_similarity",
    "suggest_counterpart",
]
