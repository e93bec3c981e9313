"""
Tests unitaires pour SeriesReconciler.

Tests couvrant:
- Precedence des playlists par saison (totale, jamais intercalee)
- Saisons inferees completees quand aucune playlist ne les couvre
- Concatenation de deux playlists pour la meme saison
- Recherche de la serie d'un claim
"""

import pytest

from epiorg.core.entities.content import Playlist, PlaylistItem
from epiorg.services.reconciler import (
    SeriesReconciler,
    get_series_for_claim,
    merge_series_data,
)


@pytest.fixture
def reconciler() -> SeriesReconciler:
    return SeriesReconciler()


@pytest.fixture
def mixed_content(make_content):
    """Friends : S01 parse (3 episodes), S02 parse (2 episodes)."""
    return [
        make_content("s1e1", "Friends S01E01"),
        make_content("s1e2", "Friends S01E02"),
        make_content("s1e3", "Friends S01E03"),
        make_content("s2e1", "Friends S02E01"),
        make_content("s2e2", "Friends S02E02"),
        make_content("extra", "Friends Special"),
        make_content("movie", "Some Movie"),
    ]


class TestMerge:
    def test_parsed_only(self, reconciler, mixed_content):
        result = reconciler.merge([], mixed_content)

        assert list(result) == ["friends"]
        friends = result["friends"]
        assert [s.number for s in friends.seasons] == [1, 2]
        assert all(s.inferred for s in friends.seasons)
        assert friends.total_episodes == 5

    def test_playlist_replaces_whole_season(self, reconciler, mixed_content):
        playlist = Playlist(
            id="pl-s1",
            title="Friends",
            season_number=1,
            items=(
                PlaylistItem("s1e2", position=0),
                PlaylistItem("extra", position=1),
            ),
        )

        friends = reconciler.merge([playlist], mixed_content)["friends"]

        season_one = friends.seasons[0]
        assert season_one.number == 1
        assert season_one.inferred is False
        assert season_one.playlist_id == "pl-s1"
        # s1e1 et s1e3 parses sont ecartes, jamais intercales
        assert [e.claim_id for e in season_one.episodes] == ["s1e2", "extra"]

        season_two = friends.seasons[1]
        assert season_two.inferred is True
        assert [e.claim_id for e in season_two.episodes] == ["s2e1", "s2e2"]
        assert friends.total_episodes == 4

    def test_total_episodes_matches_seasons(self, reconciler, mixed_content, friends_playlist):
        for info in reconciler.merge([friends_playlist], mixed_content).values():
            assert info.total_episodes == sum(len(s.episodes) for s in info.seasons)

    def test_playlist_order_preserved(self, reconciler, friends_content, friends_playlist):
        friends = reconciler.merge([friends_playlist], friends_content)["friends"]

        assert len(friends.seasons) == 1
        assert [e.claim_id for e in friends.seasons[0].episodes] == ["f1", "f2", "f3"]
        assert friends.seasons[0].inferred is False

    def test_playlist_title_used(self, reconciler, make_content):
        content = [make_content("a", "greys anatomy S01E01")]
        playlist = Playlist(id="p", title="Grey's Anatomy", items=(PlaylistItem("a", 0),))

        result = reconciler.merge([playlist], content)

        assert result["greys-anatomy"].title == "Grey's Anatomy"

    def test_explicit_series_key(self, reconciler, make_content):
        content = [make_content("a", "Pilot")]
        playlist = Playlist(
            id="p", title="Season One", series_key="lost", items=(PlaylistItem("a", 0),)
        )

        assert list(reconciler.merge([playlist], content)) == ["lost"]

    def test_two_playlists_same_season_concatenated(self, reconciler, make_content):
        content = [make_content(c, c) for c in ("a", "b", "c")]
        first = Playlist(id="p1", title="Show", items=(PlaylistItem("a", 0),))
        second = Playlist(
            id="p2", title="Show", items=(PlaylistItem("c", 0), PlaylistItem("b", 1))
        )

        season = reconciler.merge([first, second], content)["show"].seasons[0]

        assert [e.claim_id for e in season.episodes] == ["a", "c", "b"]
        assert season.playlist_id == "p1"
        assert season.inferred is False

    def test_series_without_season_omitted(self, reconciler, make_content):
        playlist = Playlist(id="p", title="Ghost Show", items=(PlaylistItem("missing", 0),))

        result = reconciler.merge([playlist], [make_content("m", "A movie")])

        assert result == {}

    def test_claimed_content_not_duplicated(self, reconciler, make_content):
        content = [make_content("a", "Show S02E01")]
        playlist = Playlist(id="p", title="Show", season_number=1, items=(PlaylistItem("a", 0),))

        show = reconciler.merge([playlist], content)["show"]

        assert [s.number for s in show.seasons] == [1]
        assert show.total_episodes == 1

    def test_empty_inputs(self, reconciler):
        assert reconciler.merge([], []) == {}

    def test_module_function(self, friends_content):
        assert "friends" in merge_series_data([], friends_content)


class TestSeriesForClaim:
    def test_via_playlist(self, reconciler, friends_content, friends_playlist):
        info = reconciler.series_for_claim("f2", [friends_playlist], friends_content)

        assert info is not None
        assert info.series_key == "friends"
        assert info.seasons[0].inferred is False

    def test_via_parsing(self, reconciler, mixed_content):
        info = reconciler.series_for_claim("s2e1", [], mixed_content)

        assert info is not None
        assert info.series_key == "friends"
        assert info.total_episodes == 5

    def test_unknown_claim(self, reconciler, mixed_content):
        assert reconciler.series_for_claim("nope", [], mixed_content) is None

    def test_unparseable_claim(self, reconciler, mixed_content):
        assert reconciler.series_for_claim("movie", [], mixed_content) is None

    def test_module_function(self, friends_content):
        info = get_series_for_claim("f1", [], friends_content)
        assert info is not None
        assert info.total_episodes == 3
