"""
Grammaire des marqueurs saison/episode.

Fragments d'expressions regulieres partages entre le parser de titres
(ancre sur le titre complet, premiere grammaire gagnante) et le
normaliseur de requetes (toutes les occurrences, n'importe ou).

Ordre de priorite des grammaires (a preserver, elles se recouvrent) :
1. STANDARD    : S01E01, s1e1
2. ALTERNATE   : 1x01, 10X18
3. VERBOSE     : Season 1 Episode 1, Season one Episode twelve
4. ABBREVIATED : S1 ep 5, S1 ep. 5

Les combinaisons hybrides (S01x01, 1E01) ne correspondent a aucune grammaire.
"""

import re
from enum import Enum
from typing import Optional

from epiorg.utils.constants import NUMBER_WORDS


class Grammar(Enum):
    """Grammaires de marqueurs saison/episode, dans l'ordre de priorite."""

    STANDARD = "standard"
    ALTERNATE = "alternate"
    VERBOSE = "verbose"
    ABBREVIATED = "abbreviated"


_NUM = r"\d{1,3}"
# Les mots les plus longs d'abord : "seventeen" avant "seven"
_WORD = "|".join(sorted(NUMBER_WORDS, key=len, reverse=True))
_NUM_OR_WORD = rf"(?:{_NUM}|{_WORD})"

# Le marqueur ne commence pas au milieu d'un mot ou d'un nombre
_LEFT = r"(?<![a-z0-9])"
_END_OF_NUMBER = r"(?!\d)"
_END_OF_WORD = r"(?![a-z0-9])"
_SEP = r"[\s.\-]*"
_EPISODE_WORD = r"(?:episode|ep\.?)"

# Separateurs acceptes entre le nom de serie et le marqueur
_TITLE_SEP = r"[\s.\-–]*"
_SERIES_NAME = r"(?P<series>.*?[^\s.\-–])"

TITLE_MARKERS: tuple[tuple[Grammar, str], ...] = (
    (
        Grammar.STANDARD,
        rf"{_LEFT}s(?P<season>{_NUM})e(?P<episode>{_NUM}){_END_OF_NUMBER}",
    ),
    (
        Grammar.ALTERNATE,
        rf"{_LEFT}(?P<season>{_NUM})x(?P<episode>{_NUM}){_END_OF_WORD}",
    ),
    (
        Grammar.VERBOSE,
        rf"{_LEFT}season{_SEP}(?P<season>{_NUM_OR_WORD}){_SEP}"
        rf"episode{_SEP}(?P<episode>{_NUM_OR_WORD}){_END_OF_WORD}",
    ),
    (
        Grammar.ABBREVIATED,
        rf"{_LEFT}s(?P<season>{_NUM}){_SEP}ep\.?\s*(?P<episode>{_NUM}){_END_OF_NUMBER}",
    ),
)

TITLE_PATTERNS: tuple[tuple[Grammar, re.Pattern], ...] = tuple(
    (
        grammar,
        re.compile(rf"^{_SERIES_NAME}{_TITLE_SEP}{marker}(?P<rest>.*)$", re.IGNORECASE),
    )
    for grammar, marker in TITLE_MARKERS
)

# Variantes plus tolerantes pour la saisie utilisateur : "S01 E01", "S1xE1",
# "season 2 ep. 10", nombres en lettres pour l'episode abrege.
QUERY_MARKERS: tuple[tuple[Grammar, str], ...] = (
    (
        Grammar.STANDARD,
        rf"{_LEFT}s(?P<season>{_NUM})[\s.\-x]*e(?P<episode>{_NUM}){_END_OF_NUMBER}",
    ),
    TITLE_MARKERS[1],
    (
        Grammar.VERBOSE,
        rf"{_LEFT}season{_SEP}(?P<season>{_NUM_OR_WORD}){_SEP}"
        rf"{_EPISODE_WORD}{_SEP}(?P<episode>{_NUM_OR_WORD}){_END_OF_WORD}",
    ),
    (
        Grammar.ABBREVIATED,
        rf"{_LEFT}s(?P<season>{_NUM}){_SEP}{_EPISODE_WORD}{_SEP}"
        rf"(?P<episode>{_NUM_OR_WORD}){_END_OF_WORD}",
    ),
)

QUERY_PATTERNS: tuple[tuple[Grammar, re.Pattern], ...] = tuple(
    (grammar, re.compile(marker, re.IGNORECASE)) for grammar, marker in QUERY_MARKERS
)

# Marqueurs isoles (saison seule ou episode seul) : ils ne forment pas de
# token S01E01 mais sont retires des termes de recherche.
SEASON_ONLY_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(rf"{_LEFT}season{_SEP}(?P<number>{_NUM_OR_WORD}){_END_OF_WORD}", re.IGNORECASE),
    re.compile(rf"{_LEFT}s(?P<number>{_NUM}){_END_OF_WORD}", re.IGNORECASE),
)
EPISODE_ONLY_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        rf"{_LEFT}{_EPISODE_WORD}{_SEP}(?P<number>{_NUM_OR_WORD}){_END_OF_WORD}", re.IGNORECASE
    ),
    re.compile(rf"{_LEFT}e(?P<number>{_NUM}){_END_OF_WORD}", re.IGNORECASE),
)


def to_number(value: str) -> Optional[int]:
    """
    Convertit un numero capture (chiffres ou mot anglais) en entier.

    Returns:
        L'entier, ou None si la valeur n'est ni numerique ni un mot connu.
    """
    if value is None:
        return None
    value = value.strip().lower()
    if value.isdigit():
        return int(value)
    return NUMBER_WORDS.get(value)


def format_token(season: int, episode: int) -> str:
    """Forme canonique d'un marqueur : S{2 chiffres}E{2 chiffres} (S01E01, S10E100)."""
    return f"S{season:02d}E{episode:02d}"
