"""
Objets valeur pour la recherche et la validation des saisons.

- NormalizedQuery : requete de recherche decomposee en marqueurs S01E01 et termes
- SeasonValidation : rapport consultatif sur l'ordre des episodes d'une saison
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedQuery:
    """
    Requete de recherche normalisee.

    Attributs:
        original_text: Texte saisi, sans espaces de bord
        normalized_text: Texte en minuscules, espaces normalises, marqueurs
            saison/episode remplaces par leur forme canonique
        season_episode_tokens: Marqueurs "S01E01" dedoublonnes, ordre d'apparition
        search_terms: Mots restants en minuscules, dedoublonnes
    """

    original_text: str
    normalized_text: str
    season_episode_tokens: tuple[str, ...] = ()
    search_terms: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True si la requete ne contient ni marqueur ni terme."""
        return not self.season_episode_tokens and not self.search_terms


@dataclass(frozen=True)
class SeasonValidation:
    """
    Resultat de la validation de l'ordre d'une saison.

    Attributs:
        valid: True si aucun doublon ni trou
        duplicates: Numeros d'episode presents au moins deux fois (croissants)
        gaps: Numeros manquants entre le min et le max (croissants)
    """

    valid: bool
    duplicates: tuple[int, ...] = ()
    gaps: tuple[int, ...] = ()
