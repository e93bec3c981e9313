"""
Aides a la recherche cote interface.

- generate_search_variations : variantes d'ecriture d'une requete
- highlight_search_terms : surlignage <mark> des correspondances
- get_suggested_search_terms : suggestions pour une saisie partielle
- is_season_episode_query / should_fallback_to_recent / get_fallback_message
"""

import re
from typing import Optional, Sequence

from epiorg.services.search.query_normalizer import QueryNormalizer
from epiorg.services.search.sanitizer import sanitize_search_input
from epiorg.utils.constants import COMMON_SEARCH_TERMS, MAX_SUGGESTIONS

_TOKEN_PARTS = re.compile(r"^S(\d+)E(\d+)$")


def generate_search_variations(
    query: str, normalizer: Optional[QueryNormalizer] = None
) -> list[str]:
    """
    Genere les variantes d'une requete pour elargir la correspondance.

    Pour chaque marqueur S01E01 : la forme canonique, sans zeros ("S1E1")
    et espacee ("S01 E01"). S'y ajoutent le texte original, le texte
    normalise et les termes.

    Returns:
        Variantes non vides, sans doublon, dans un ordre stable.
    """
    normalized = (normalizer or QueryNormalizer()).normalize(query)
    variations: list[str] = [normalized.original_text, normalized.normalized_text]

    for token in normalized.season_episode_tokens:
        variations.append(token)
        parts = _TOKEN_PARTS.match(token)
        if parts:
            season, episode = parts.groups()
            variations.append(f"S{int(season)}E{int(episode)}")
            variations.append(f"S{season} E{episode}")

    variations.extend(normalized.search_terms)

    unique: list[str] = []
    for variation in variations:
        if variation and variation not in unique:
            unique.append(variation)
    return unique


def highlight_search_terms(
    text: str, query: str, normalizer: Optional[QueryNormalizer] = None
) -> str:
    """
    Encadre les correspondances de la requete par <mark>...</mark>.

    Marqueurs et termes sont cherches en une seule passe, insensible a la
    casse ; les caracteres speciaux des termes sont echappes.
    """
    if not text:
        return text
    normalized = (normalizer or QueryNormalizer()).normalize(query)
    needles = [*normalized.season_episode_tokens, *normalized.search_terms]
    if not needles:
        return text

    # Les plus longs d'abord pour que "breaking" gagne sur "bre"
    alternatives = "|".join(re.escape(needle) for needle in sorted(needles, key=len, reverse=True))
    pattern = re.compile(f"({alternatives})", re.IGNORECASE)
    return pattern.sub(r"<mark>\1</mark>", text)


def is_season_episode_query(query: str, normalizer: Optional[QueryNormalizer] = None) -> bool:
    """True si la requete contient au moins un marqueur saison/episode."""
    normalized = (normalizer or QueryNormalizer()).normalize(query)
    return bool(normalized.season_episode_tokens)


def get_suggested_search_terms(partial_query: str) -> list[str]:
    """
    Suggestions pour une saisie partielle.

    - genres courants commencant par la saisie (en tete)
    - saisie contenant "s" ou "season" : "Season N" / "S0N" pour N de 1 a 10
    - saisie contenant "e" ou "episode" : "Episode N" / "E0N" pour N de 1 a 20

    Returns:
        Au plus MAX_SUGGESTIONS suggestions.
    """
    lower = (partial_query or "").strip().lower()
    if not lower:
        return []

    suggestions: list[str] = [term for term in COMMON_SEARCH_TERMS if term.startswith(lower)]
    if "s" in lower:
        for number in range(1, 11):
            suggestions.extend((f"Season {number}", f"S{number:02d}"))
    if "e" in lower:
        for number in range(1, 21):
            suggestions.extend((f"Episode {number}", f"E{number:02d}"))

    return suggestions[:MAX_SUGGESTIONS]


def should_fallback_to_recent(
    query: str, results: Sequence[object], min_length: int = 2
) -> bool:
    """True si la requete est exploitable mais n'a produit aucun resultat."""
    return len(sanitize_search_input(query)) >= min_length and len(results) == 0


def get_fallback_message(query: str) -> str:
    """Message affiche quand aucun resultat ne correspond."""
    return (
        f'No exact matches found for "{query}". '
        "Here are some recent uploads you might like:"
    )
