"""
Tests unitaires pour RegexTitleParser.

Tests couvrant:
- Les quatre grammaires (standard, alternate, verbose, abbreviated)
- L'ordre de priorite quand plusieurs grammaires pourraient correspondre
- Les titres d'episode (absents, tirets internes, demi-cadratin)
- Les rejets (melanges malformes, titres sans marqueur)
"""

import pytest

from epiorg.core.ports.parser import ITitleParser
from epiorg.core.value_objects.parsed_info import ParsedEpisode
from epiorg.services.title_parser import RegexTitleParser, parse_episode_title


@pytest.fixture
def parser() -> RegexTitleParser:
    return RegexTitleParser()


class TestRegexTitleParserInterface:
    def test_implements_port(self, parser):
        assert isinstance(parser, ITitleParser)


class TestStandardGrammar:
    """Format SxxExx."""

    def test_standard_with_dash_title(self, parser):
        result = parser.parse("Breaking Bad S05E16 - Felina")
        assert result == ParsedEpisode(
            series_name="Breaking Bad",
            season_number=5,
            episode_number=16,
            episode_title="Felina",
        )

    def test_lowercase_single_digits(self, parser):
        result = parser.parse("friends s1e1")
        assert result is not None
        assert result.series_name == "friends"
        assert result.season_number == 1
        assert result.episode_number == 1
        assert result.episode_title == ""

    def test_dotted_separator(self, parser):
        result = parser.parse("The.Office.S02E03.The.Dundies")
        assert result is not None
        assert result.series_name == "The.Office"
        assert result.season_number == 2
        assert result.episode_number == 3
        assert result.episode_title == "The.Dundies"

    def test_hyphen_separator_before_token(self, parser):
        result = parser.parse("Lost-S01E05")
        assert result is not None
        assert result.series_name == "Lost"
        assert result.episode_number == 5

    def test_three_digit_episode(self, parser):
        result = parser.parse("One Piece S01E105")
        assert result is not None
        assert result.episode_number == 105

    def test_en_dash_before_title(self, parser):
        result = parser.parse("Doctor Who S01E06 – Dalek")
        assert result is not None
        assert result.episode_title == "Dalek"

    def test_hyphens_inside_title_are_kept(self, parser):
        result = parser.parse("Doctor Who S04E12 - The Stolen Earth - Part 1")
        assert result is not None
        assert result.episode_title == "The Stolen Earth - Part 1"

    def test_whitespace_is_normalized(self, parser):
        result = parser.parse("  Friends\tS01E02 \n - The Sonogram  ")
        assert result is not None
        assert result.series_name == "Friends"
        assert result.episode_title == "The Sonogram"


class TestAlternateGrammar:
    """Format NxNN."""

    def test_alternate(self, parser):
        result = parser.parse("Friends 1x01 - Pilot")
        assert result is not None
        assert result.series_name == "Friends"
        assert result.season_number == 1
        assert result.episode_number == 1
        assert result.episode_title == "Pilot"

    def test_uppercase_x(self, parser):
        result = parser.parse("Seinfeld 10X18")
        assert result is not None
        assert result.season_number == 10
        assert result.episode_number == 18


class TestVerboseGrammar:
    """Format "Season N Episode M"."""

    def test_verbose_digits(self, parser):
        result = parser.parse("Friends Season 2 Episode 7 - The One Where Ross Finds Out")
        assert result is not None
        assert result.season_number == 2
        assert result.episode_number == 7
        assert result.episode_title == "The One Where Ross Finds Out"

    def test_verbose_words(self, parser):
        result = parser.parse("Friends Season one Episode twelve")
        assert result is not None
        assert result.season_number == 1
        assert result.episode_number == 12

    def test_verbose_mixed_words_and_digits(self, parser):
        result = parser.parse("Friends season Three episode 4")
        assert result is not None
        assert result.season_number == 3
        assert result.episode_number == 4

    def test_longer_word_wins(self, parser):
        result = parser.parse("Show Season seventeen Episode one")
        assert result is not None
        assert result.season_number == 17


class TestAbbreviatedGrammar:
    """Format "S<N> ep <M>"."""

    def test_abbreviated(self, parser):
        result = parser.parse("Friends S1 ep 5 - The One with the East German Laundry Detergent")
        assert result is not None
        assert result.season_number == 1
        assert result.episode_number == 5

    def test_abbreviated_with_dot(self, parser):
        result = parser.parse("Friends S2 ep. 10")
        assert result is not None
        assert result.season_number == 2
        assert result.episode_number == 10


class TestGrammarPriority:
    def test_standard_before_alternate(self, parser):
        # Le titre contient les deux formes : la grammaire standard gagne
        result = parser.parse("Show 2x03 S01E04")
        assert result is not None
        assert result.season_number == 1
        assert result.episode_number == 4
        assert result.series_name == "Show 2x03"


class TestRejects:
    @pytest.mark.parametrize(
        "title",
        [
            "",
            "   ",
            "Big Buck Bunny",
            "Friends S01x01",
            "Friends 1E01",
            "Friends S01",
            "S01E01",
            "Movie 1080p",
        ],
    )
    def test_returns_none(self, parser, title):
        assert parser.parse(title) is None


class TestModuleFunction:
    def test_parse_episode_title(self):
        result = parse_episode_title("Lost S01E01")
        assert result is not None
        assert result.series_name == "Lost"

    def test_parse_episode_title_no_match(self):
        assert parse_episode_title("Documentary about cats") is None
