"""
Objets valeur pour les informations de parsing de titres d'episodes.

Objet valeur immutable representant les informations extraites d'un titre
libre du type "Breaking Bad S01E01 - Pilot".
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedEpisode:
    """
    Informations extraites du parsing d'un titre d'episode.

    Chaque grammaire reconnue produit exactement cette forme ; un titre
    non reconnu ne produit pas d'objet (None).

    Attributs:
        series_name: Nom de la serie (avant le marqueur saison/episode)
        season_number: Numero de saison
        episode_number: Numero d'episode dans la saison
        episode_title: Titre de l'episode, chaine vide si absent
    """

    series_name: str
    season_number: int
    episode_number: int
    episode_title: str = ""
