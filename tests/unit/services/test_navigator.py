"""
Tests pour la navigation entre episodes.

Tests couvrant:
- Episode suivant / precedent dans une saison
- Passage d'une saison a l'autre, saisons vides sautees
- None en fin et debut de serie, et pour un episode hors serie
"""

import pytest

from epiorg.core.entities.series import Episode, Season, SeriesInfo
from epiorg.services.navigator import get_next_episode, get_previous_episode


def ep(claim_id: str, season: int, number: int) -> Episode:
    return Episode(claim_id=claim_id, title=claim_id, episode_number=number, season_number=season)


@pytest.fixture
def series() -> SeriesInfo:
    return SeriesInfo(
        series_key="show",
        title="Show",
        seasons=[
            Season(number=1, episodes=[ep("a", 1, 1), ep("b", 1, 2)]),
            Season(number=2, episodes=[]),
            Season(number=3, episodes=[ep("c", 3, 1), ep("d", 3, 2)]),
        ],
    )


class TestNextEpisode:
    def test_within_season(self, series):
        assert get_next_episode(ep("a", 1, 1), series).claim_id == "b"

    def test_crosses_to_next_non_empty_season(self, series):
        assert get_next_episode(ep("b", 1, 2), series).claim_id == "c"

    def test_end_of_series(self, series):
        assert get_next_episode(ep("d", 3, 2), series) is None

    def test_episode_not_in_series(self, series):
        assert get_next_episode(ep("zzz", 1, 1), series) is None

    def test_follows_position_not_number(self):
        # Ordre playlist : le numero 5 precede le numero 1
        series = SeriesInfo(
            series_key="s",
            title="S",
            seasons=[Season(number=1, episodes=[ep("x", 1, 5), ep("y", 1, 1)])],
        )
        assert get_next_episode(ep("x", 1, 5), series).claim_id == "y"


class TestPreviousEpisode:
    def test_within_season(self, series):
        assert get_previous_episode(ep("d", 3, 2), series).claim_id == "c"

    def test_crosses_to_previous_non_empty_season(self, series):
        assert get_previous_episode(ep("c", 3, 1), series).claim_id == "b"

    def test_start_of_series(self, series):
        assert get_previous_episode(ep("a", 1, 1), series) is None

    def test_episode_not_in_series(self, series):
        assert get_previous_episode(ep("zzz", 1, 1), series) is None

    def test_empty_series(self):
        empty = SeriesInfo(series_key="e", title="E", seasons=[])
        assert get_previous_episode(ep("a", 1, 1), empty) is None
