"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ParsedEpisode : Informations extraites d'un titre d'episode
- NormalizedQuery : Requete de recherche normalisee
- SeasonValidation : Rapport de validation d'une saison
"""

from epiorg.core.value_objects.parsed_info import ParsedEpisode
from epiorg.core.value_objects.search import NormalizedQuery, SeasonValidation

__all__ = [
    "ParsedEpisode",
    "NormalizedQuery",
    "SeasonValidation",
]
