"""
Utilitaires et constantes pour EpiOrg.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from epiorg.utils.constants import (
    COMMON_SEARCH_TERMS,
    MAX_SUGGESTIONS,
    NUMBER_WORDS,
    SERIES_CONTAINER_TAG,
    SERIES_TAGS,
)

__all__ = [
    "NUMBER_WORDS",
    "SERIES_TAGS",
    "SERIES_CONTAINER_TAG",
    "COMMON_SEARCH_TERMS",
    "MAX_SUGGESTIONS",
]
