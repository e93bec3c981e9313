"""
Tests pour le regroupement des contenus en series.

Tests couvrant:
- is_series_episode (tags, titre parsable)
- group_series_content (series, hors serie, contenus tagues sans serie)
- get_series_representative et series_to_content_item
"""

from epiorg.core.entities.series import Episode, Season, SeriesInfo
from epiorg.services.grouping import (
    SeriesGrouping,
    get_series_representative,
    group_series_content,
    is_series_episode,
    series_to_content_item,
)
from epiorg.utils.constants import SERIES_CONTAINER_TAG


class TestIsSeriesEpisode:
    def test_series_tag(self, make_content):
        assert is_series_episode(make_content("a", "Pilot", tags=("Sitcom",))) is True

    def test_parseable_title(self, make_content):
        assert is_series_episode(make_content("a", "Lost S01E01")) is True

    def test_movie(self, make_content):
        assert is_series_episode(make_content("a", "Big Buck Bunny", tags=("animation",))) is False

    def test_custom_tags(self, make_content):
        content = make_content("a", "Clip", tags=("anime",))
        assert is_series_episode(content, series_tags=["anime"]) is True
        assert is_series_episode(content) is False


class TestGroupSeriesContent:
    def test_splits_series_and_movies(self, friends_content):
        grouping = group_series_content(friends_content)

        assert isinstance(grouping, SeriesGrouping)
        assert list(grouping.series) == ["friends"]
        assert grouping.series["friends"].total_episodes == 3
        assert [c.claim_id for c in grouping.non_series_content] == ["m1"]

    def test_with_playlist(self, friends_content, friends_playlist):
        grouping = group_series_content(friends_content, [friends_playlist])

        season = grouping.series["friends"].seasons[0]
        assert season.inferred is False
        assert [c.claim_id for c in grouping.non_series_content] == ["m1"]

    def test_tagged_orphan_returned_in_input_order(self, make_content):
        content = [
            make_content("t", "Unnamed clip", tags=("series",)),
            make_content("e", "Lost S01E01"),
            make_content("m", "Movie"),
        ]

        grouping = group_series_content(content)

        assert list(grouping.series) == ["lost"]
        assert [c.claim_id for c in grouping.non_series_content] == ["t", "m"]

    def test_no_series(self, make_content):
        content = [make_content("m", "Movie")]

        grouping = group_series_content(content)

        assert grouping.series == {}
        assert grouping.non_series_content == content


class TestSeriesRepresentative:
    def test_first_episode_content(self, friends_content):
        series = group_series_content(friends_content).series["friends"]

        representative = get_series_representative(series, friends_content)

        assert representative is not None
        assert representative.claim_id == "f1"

    def test_empty_series(self, friends_content):
        assert get_series_representative(SeriesInfo("x", "X"), friends_content) is None

    def test_content_missing(self):
        series = SeriesInfo(
            "x",
            "X",
            seasons=[Season(1, [Episode("gone", "gone", 1, 1)])],
        )
        assert get_series_representative(series, []) is None


class TestSeriesToContentItem:
    def test_container_item(self, friends_content):
        series = group_series_content(friends_content).series["friends"]
        representative = friends_content[0]

        item = series_to_content_item(series, representative)

        assert item.title == "Friends"
        assert item.description == "1 season • 3 episodes"
        assert SERIES_CONTAINER_TAG in item.tags
        assert item.claim_id == "f1"
        # Le contenu d'origine n'est pas modifie
        assert SERIES_CONTAINER_TAG not in representative.tags

    def test_plural_seasons(self, make_content):
        series = SeriesInfo(
            "s",
            "Show",
            seasons=[
                Season(1, [Episode("a", "a", 1, 1)]),
                Season(2, [Episode("b", "b", 1, 2)]),
            ],
        )
        item = series_to_content_item(series, make_content("a", "Show S01E01"))
        assert item.description == "2 seasons • 2 episodes"
