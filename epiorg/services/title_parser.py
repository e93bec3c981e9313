"""
Parser de titres d'episodes base sur des grammaires regex.

Ce module fournit RegexTitleParser qui implemente ITitleParser pour
extraire serie, saison, episode et titre d'episode depuis un titre libre.

Formats supportes (premiere grammaire gagnante) :
- "Serie S01E01 - Titre", "Serie.s1e1.Titre", "Serie S01E01Titre"
- "Serie 1x01 - Titre"
- "Serie Season 1 Episode 1 - Titre", "Serie Season one Episode twelve"
- "Serie S1 ep 5 - Titre", "Serie S1 ep. 5"
"""

from typing import Optional

from loguru import logger

from epiorg.core.ports.parser import ITitleParser
from epiorg.core.value_objects.parsed_info import ParsedEpisode
from epiorg.services.grammar import TITLE_PATTERNS, to_number
from epiorg.utils.helpers import clean_title

_TITLE_DASHES = ("-", "–", "—")


def _clean_episode_title(rest: str) -> str:
    """
    Extrait le titre d'episode depuis la fin du titre.

    Retire les separateurs de tete puis un seul tiret (ou demi-cadratin).
    Les tirets internes ("Rose - Part 1") sont conserves.
    """
    rest = rest.lstrip(" .")
    if rest[:1] in _TITLE_DASHES:
        rest = rest[1:]
    return rest.strip()


class RegexTitleParser(ITitleParser):
    """
    Parser de titres d'episodes par grammaires regex.

    Les grammaires sont essayees dans l'ordre de priorite de
    epiorg.services.grammar ; la premiere qui correspond gagne.
    """

    def parse(self, title: str) -> Optional[ParsedEpisode]:
        """
        Parse un titre et extrait les informations d'episode.

        Args:
            title: Titre libre, les espaces sont normalises avant le matching.

        Returns:
            ParsedEpisode, ou None si aucune grammaire ne correspond.
        """
        normalized = clean_title(title)
        if not normalized:
            return None

        for grammar, pattern in TITLE_PATTERNS:
            match = pattern.match(normalized)
            if match is None:
                continue

            season = to_number(match.group("season"))
            episode = to_number(match.group("episode"))
            series_name = match.group("series").strip()
            if season is None or episode is None or not series_name:
                continue

            logger.debug(f"Titre '{normalized}' reconnu par la grammaire {grammar.value}")
            return ParsedEpisode(
                series_name=series_name,
                season_number=season,
                episode_number=episode,
                episode_title=_clean_episode_title(match.group("rest")),
            )

        return None


_default_parser = RegexTitleParser()


def parse_episode_title(title: str) -> Optional[ParsedEpisode]:
    """Parse un titre avec le parser regex par defaut."""
    return _default_parser.parse(title)
