"""
Validation de l'ordre des episodes d'une saison.

Detecte les numeros d'episode en double et les numeros manquants. Le
resultat est consultatif : la saison n'est ni modifiee ni reordonnee et
reste utilisable meme invalide.
"""

from collections import Counter

from loguru import logger

from epiorg.core.entities.series import Season
from epiorg.core.value_objects.search import SeasonValidation


def validate_season_ordering(season: Season) -> SeasonValidation:
    """
    Valide les numeros d'episode d'une saison.

    - doublon : numero present au moins deux fois
    - trou : entier strictement entre le min et le max, absent de la saison

    Exemples :
        [1, 2, 2] -> duplicates=(2,)
        [1, 3, 5] -> gaps=(2, 4)
        [1, 2, 3] -> valid=True

    Args:
        season: Saison a valider (non modifiee)

    Returns:
        SeasonValidation avec doublons et trous tries par ordre croissant.
    """
    counts = Counter(episode.episode_number for episode in season.episodes)
    if not counts:
        return SeasonValidation(valid=True)

    duplicates = tuple(sorted(number for number, count in counts.items() if count > 1))
    gaps = tuple(
        number for number in range(min(counts) + 1, max(counts)) if number not in counts
    )
    valid = not duplicates and not gaps

    if not valid:
        logger.warning(
            f"Saison {season.number} : doublons={list(duplicates)} trous={list(gaps)}"
        )
    return SeasonValidation(valid=valid, duplicates=duplicates, gaps=gaps)
