"""
Navigation entre episodes d'une serie.

Le parcours suit la position dans les listes (ordre canonique), jamais
l'arithmetique sur les numeros d'episode. Les saisons vides sont sautees.
"""

from typing import Optional

from epiorg.core.entities.series import Episode, Season, SeriesInfo


def _locate(episode: Episode, seasons: list[Season]) -> Optional[tuple[int, int]]:
    """Index (saison, episode) d'un episode, recherche par claim_id."""
    for season_index, season in enumerate(seasons):
        for episode_index, candidate in enumerate(season.episodes):
            if candidate.claim_id == episode.claim_id:
                return season_index, episode_index
    return None


def _ordered_seasons(series: SeriesInfo) -> list[Season]:
    return sorted(series.seasons, key=lambda season: season.number)


def get_next_episode(current: Episode, series: SeriesInfo) -> Optional[Episode]:
    """
    Episode suivant dans la serie.

    Returns:
        L'episode suivant de la saison, sinon le premier episode de la
        prochaine saison non vide, sinon None (fin de serie ou episode
        absent de la serie).
    """
    seasons = _ordered_seasons(series)
    location = _locate(current, seasons)
    if location is None:
        return None

    season_index, episode_index = location
    episodes = seasons[season_index].episodes
    if episode_index < len(episodes) - 1:
        return episodes[episode_index + 1]

    for season in seasons[season_index + 1:]:
        if season.episodes:
            return season.episodes[0]
    return None


def get_previous_episode(current: Episode, series: SeriesInfo) -> Optional[Episode]:
    """
    Episode precedent dans la serie.

    Returns:
        L'episode precedent de la saison, sinon le dernier episode de la
        saison non vide precedente, sinon None (debut de serie ou episode
        absent de la serie).
    """
    seasons = _ordered_seasons(series)
    location = _locate(current, seasons)
    if location is None:
        return None

    season_index, episode_index = location
    if episode_index > 0:
        return seasons[season_index].episodes[episode_index - 1]

    for season in reversed(seasons[:season_index]):
        if season.episodes:
            return season.episodes[-1]
    return None
