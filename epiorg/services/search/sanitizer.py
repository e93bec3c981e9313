"""
Assainissement des saisies de recherche.

Defense en profondeur avant qu'une valeur ne soit interpolee dans une
requete LIKE par la couche de stockage :
- % et _ (jokers LIKE) et l'antislash lui-meme echappes par un antislash
- guillemets simples/doubles et points-virgules retires
- delimiteurs de commentaires SQL (--, /*, */) retires
"""

import re
from typing import Optional

from epiorg.services.search.query_normalizer import QueryNormalizer

_LIKE_WILDCARDS = re.compile(r"[\\%_]")
_REMOVED_CHARS = re.compile(r"[\"';]")
_COMMENT_DELIMITERS = re.compile(r"--|/\*|\*/")


def sanitize_search_input(text: Optional[str]) -> str:
    """
    Assainit une saisie de recherche.

    Ex: "search%term_x" -> "search\\%term\\_x"
        "'; DROP TABLE x; --" -> "DROP TABLE x"

    Returns:
        Chaine assainie, sans espaces de bord.
    """
    if not text:
        return ""
    sanitized = _LIKE_WILDCARDS.sub(lambda match: "\\" + match.group(0), text)
    sanitized = _REMOVED_CHARS.sub("", sanitized)
    # Repete jusqu'a stabilite : "-/**/-" ne doit pas reformer "--"
    previous = None
    while previous != sanitized:
        previous = sanitized
        sanitized = _COMMENT_DELIMITERS.sub("", sanitized)
    return sanitized.strip()


def build_search_patterns(
    text: Optional[str], normalizer: Optional[QueryNormalizer] = None
) -> list[str]:
    """
    Construit les motifs LIKE d'une recherche.

    La saisie est assainie, normalisee, puis chaque marqueur saison/episode
    et chaque terme est encadre par des % ("%S01E01%", "%breaking%").

    Returns:
        Motifs LIKE, marqueurs d'abord puis termes, sans doublon.
    """
    normalizer = normalizer or QueryNormalizer()
    normalized = normalizer.normalize(sanitize_search_input(text))

    patterns: list[str] = []
    for value in (*normalized.season_episode_tokens, *normalized.search_terms):
        pattern = f"%{value}%"
        if pattern not in patterns:
            patterns.append(pattern)
    return patterns
