"""
Interface port pour le parsing de titres d'episodes.

Interface abstraite (port) definissant le contrat pour extraire serie,
saison, episode et titre d'episode depuis un titre libre.
"""

from abc import ABC, abstractmethod
from typing import Optional

from epiorg.core.value_objects.parsed_info import ParsedEpisode


class ITitleParser(ABC):
    """
    Interface pour le parsing de titres d'episodes.

    Un titre qui ne correspond a aucune grammaire n'est pas une erreur :
    il signale simplement un contenu qui n'est pas un episode.
    """

    @abstractmethod
    def parse(self, title: str) -> Optional[ParsedEpisode]:
        """
        Parse un titre et extrait les informations d'episode.

        Args:
            title: Titre libre (ex: "Breaking Bad S01E01 - Pilot")

        Retourne:
            ParsedEpisode, ou None si le titre n'est pas un episode.
        """
        ...
