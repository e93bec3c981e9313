"""Tests pour validate_season_ordering (doublons, trous, saison inchangee)."""

import pytest

from epiorg.core.entities.series import Episode, Season
from epiorg.services.season_validator import validate_season_ordering


def make_season(numbers: list[int]) -> Season:
    return Season(
        number=1,
        episodes=[
            Episode(claim_id=f"c{i}", title=f"Episode {n}", episode_number=n, season_number=1)
            for i, n in enumerate(numbers)
        ],
    )


class TestValidateSeasonOrdering:
    @pytest.mark.parametrize(
        "numbers,valid,duplicates,gaps",
        [
            ([1, 2, 3], True, (), ()),
            ([1, 2, 2], False, (2,), ()),
            ([1, 3, 5], False, (), (2, 4)),
            ([3, 1, 1, 5, 3], False, (1, 3), (2, 4)),
            ([7], True, (), ()),
            ([], True, (), ()),
        ],
    )
    def test_examples(self, numbers, valid, duplicates, gaps):
        report = validate_season_ordering(make_season(numbers))

        assert report.valid is valid
        assert report.duplicates == duplicates
        assert report.gaps == gaps

    def test_season_not_modified(self):
        season = make_season([3, 1, 2, 2])
        before = [e.claim_id for e in season.episodes]

        validate_season_ordering(season)

        assert [e.claim_id for e in season.episodes] == before

    def test_gaps_start_after_minimum(self):
        # Une saison commencant a 4 n'a pas de trou 1..3
        assert validate_season_ordering(make_season([4, 5, 6])).valid is True
