"""
Recherche : normalisation des requetes, scoring, assainissement.

Exports :
- QueryNormalizer, normalize_query : saisie libre -> NormalizedQuery
- SearchScorer, score_search_result, sort_search_results : pertinence
- sanitize_search_input, build_search_patterns : motifs LIKE surs
- SearchService : recherche classee avec repli sur les recents
"""

from epiorg.services.search.query_normalizer import QueryNormalizer, normalize_query
from epiorg.services.search.sanitizer import build_search_patterns, sanitize_search_input
from epiorg.services.search.scorer import (
    SearchScorer,
    score_search_result,
    sort_search_results,
)
from epiorg.services.search.service import ScoredContent, SearchOutcome, SearchService
from epiorg.services.search.suggestions import (
    generate_search_variations,
    get_fallback_message,
    get_suggested_search_terms,
    highlight_search_terms,
    is_season_episode_query,
    should_fallback_to_recent,
)

__all__ = [
    "QueryNormalizer",
    "normalize_query",
    "build_search_patterns",
    "sanitize_search_input",
    "SearchScorer",
    "score_search_result",
    "sort_search_results",
    "ScoredContent",
    "SearchOutcome",
    "SearchService",
    "generate_search_variations",
    "get_fallback_message",
    "get_suggested_search_terms",
    "highlight_search_terms",
    "is_season_episode_query",
    "should_fallback_to_recent",
]
