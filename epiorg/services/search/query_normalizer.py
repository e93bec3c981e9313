"""
Normalisation des requetes de recherche.

Convertit une saisie libre en marqueurs saison/episode canoniques (S01E01)
et en termes de recherche. Reutilise les grammaires du parser de titres,
mais cherche TOUTES les occurrences, n'importe ou dans la chaine.

Formats reconnus :
- S01E01, s1e1, S01 E01, S1.E1, S1-E1, S1xE1
- 1x01, 2X5
- season 1 episode 1, season one episode twelve
- s1 ep 1, s1 ep. 1, season 2 ep. 10
- marqueurs isoles "season 3", "s3", "episode 5", "ep 5", "e5" (retires des
  termes, sans produire de token)

Ne leve jamais d'exception : chaine vide, espaces seuls, chaine tres longue,
unicode, tabulations et retours ligne donnent un resultat bien forme.
"""

import string
from typing import Optional

from epiorg.core.value_objects.search import NormalizedQuery
from epiorg.services.grammar import (
    EPISODE_ONLY_PATTERNS,
    QUERY_PATTERNS,
    SEASON_ONLY_PATTERNS,
    format_token,
    to_number,
)
from epiorg.utils.helpers import clean_title

DEFAULT_MIN_TERM_LENGTH = 2

# Ponctuation retiree aux bords des termes ("(2024)" -> "2024")
_TERM_EDGE_CHARS = string.punctuation + "«»“”‘’–—…"
# Caracteres qu'un antislash echappe (\%, \_, \\) : la paire reste en bord de terme
_ESCAPABLE = "\\%_"

Span = tuple[int, int]


def _overlaps(span: Span, taken: list[Span]) -> bool:
    start, end = span
    return any(start < other_end and other_start < end for other_start, other_end in taken)


def _strip_term_edges(word: str) -> str:
    """Retire la ponctuation de bord sans couper une sequence echappee ("100\\%")."""
    start, end = 0, len(word)
    while start < end and word[start] in _TERM_EDGE_CHARS:
        if word[start] == "\\" and start + 1 < end and word[start + 1] in _ESCAPABLE:
            break
        start += 1
    while end > start and word[end - 1] in _TERM_EDGE_CHARS:
        if end - 2 >= start and word[end - 2] == "\\" and word[end - 1] in _ESCAPABLE:
            break
        end -= 1
    return word[start:end]


class QueryNormalizer:
    """
    Normaliseur de requetes de recherche.

    Attributs :
        min_term_length: Les mots de longueur <= a ce seuil sont ignores.
    """

    def __init__(self, min_term_length: int = DEFAULT_MIN_TERM_LENGTH) -> None:
        self.min_term_length = min_term_length

    def normalize(self, text: Optional[str]) -> NormalizedQuery:
        """
        Normalise une requete.

        Exemples :
            "breaking bad s5e16" -> tokens ("S05E16",), termes ("breaking", "bad")
            "s1e1 S01E01 1x01"   -> tokens ("S01E01",)

        Args:
            text: Saisie utilisateur (None accepte, traite comme vide)

        Returns:
            NormalizedQuery, eventuellement vide.
        """
        original = (text or "").strip()
        collapsed = clean_title(original)
        lowered = collapsed.lower()

        # (debut, fin, remplacement, token) pour chaque marqueur retenu
        replacements: list[tuple[int, int, str, Optional[str]]] = []
        taken: list[Span] = []

        for _grammar, pattern in QUERY_PATTERNS:
            for match in pattern.finditer(lowered):
                if _overlaps(match.span(), taken):
                    continue
                season = to_number(match.group("season"))
                episode = to_number(match.group("episode"))
                if season is None or episode is None:
                    continue
                token = format_token(season, episode)
                taken.append(match.span())
                replacements.append((match.start(), match.end(), token, token))

        for prefix, patterns in (("S", SEASON_ONLY_PATTERNS), ("E", EPISODE_ONLY_PATTERNS)):
            for pattern in patterns:
                for match in pattern.finditer(lowered):
                    if _overlaps(match.span(), taken):
                        continue
                    number = to_number(match.group("number"))
                    if number is None:
                        continue
                    taken.append(match.span())
                    replacements.append(
                        (match.start(), match.end(), f"{prefix}{number:02d}", None)
                    )

        replacements.sort(key=lambda replacement: replacement[0])

        tokens: list[str] = []
        normalized_parts: list[str] = []
        remaining_parts: list[str] = []
        cursor = 0
        for start, end, canonical, token in replacements:
            normalized_parts.append(lowered[cursor:start])
            normalized_parts.append(canonical)
            remaining_parts.append(lowered[cursor:start])
            remaining_parts.append(" ")
            if token is not None and token not in tokens:
                tokens.append(token)
            cursor = end
        normalized_parts.append(lowered[cursor:])
        remaining_parts.append(lowered[cursor:])

        return NormalizedQuery(
            original_text=original,
            normalized_text="".join(normalized_parts),
            season_episode_tokens=tuple(tokens),
            search_terms=self._extract_terms("".join(remaining_parts)),
        )

    def _extract_terms(self, text: str) -> tuple[str, ...]:
        """Mots restants, ponctuation de bord retiree, filtres par longueur, dedoublonnes."""
        terms: list[str] = []
        for word in text.split():
            term = _strip_term_edges(word)
            if len(term) <= self.min_term_length or term in terms:
                continue
            terms.append(term)
        return tuple(terms)


_default_normalizer = QueryNormalizer()


def normalize_query(text: Optional[str], min_term_length: Optional[int] = None) -> NormalizedQuery:
    """Normalise une requete avec le seuil de longueur par defaut ou celui fourni."""
    if min_term_length is None:
        return _default_normalizer.normalize(text)
    return QueryNormalizer(min_term_length).normalize(text)
