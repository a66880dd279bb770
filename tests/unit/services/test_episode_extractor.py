"""
Tests unitaires pour l'extraction et le reformatage des numerotations d'episodes.
"""

from datetime import date

import pytest

from showresolver.core.value_objects.episode import EpisodeDescriptor, EpisodeNotation
from showresolver.services.episode_extractor import (
    extract_airdate,
    extract_episode,
    find_numbering,
    notation_for_show,
    parse_numbering,
    reformat,
    replace_episode,
)


class TestExtractEpisode:
    """Tests pour extract_episode()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Show.Name.S02E14.720p.HDTV.x264-GRP", EpisodeDescriptor(2, 14)),
            ("show name s1e5", EpisodeDescriptor(1, 5)),
            ("Show.S01.E03.HDTV", EpisodeDescriptor(1, 3)),
            ("Show S01 E03", EpisodeDescriptor(1, 3)),
            ("Show.S02E14-15.HDTV", EpisodeDescriptor(2, 14, 15)),
            ("Show.S02E14-E15.HDTV", EpisodeDescriptor(2, 14, 15)),
            ("Show.S02E14E15.HDTV", EpisodeDescriptor(2, 14, 15)),
            ("Show.2x14.HDTV", EpisodeDescriptor(2, 14)),
            ("Show.2x14-15.HDTV", EpisodeDescriptor(2, 14, 15)),
            ("Show.S10E101.HDTV", EpisodeDescriptor(10, 101)),
        ],
    )
    def test_notations(self, text: str, expected: EpisodeDescriptor) -> None:
        assert extract_episode(text) == expected

    def test_resolution_is_not_a_second_episode(self) -> None:
        """S01E01-720p n'est pas un double episode."""
        assert extract_episode("Show.S01E01-720p.HDTV") == EpisodeDescriptor(1, 1)
        assert extract_episode("Show.S01E01-1080p") == EpisodeDescriptor(1, 1)

    def test_resolution_is_not_an_episode(self) -> None:
        """1920x1080 n'est pas une notation 0x00."""
        assert extract_episode("Show.1920x1080.mkv") is None

    def test_standard_notation_has_priority(self) -> None:
        assert extract_episode("Show 3x07 S01E02") == EpisodeDescriptor(1, 2)

    def test_no_notation(self) -> None:
        assert extract_episode("Show.Name.HDTV.XviD") is None


class TestExtractAirdate:
    """Tests pour extract_airdate()."""

    @pytest.mark.parametrize(
        "text", ["Daily.Show.2010.01.05.HDTV", "daily show 2010-01-05", "daily_show_2010_01_05"]
    )
    def test_separators(self, text: str) -> None:
        assert extract_airdate(text) == EpisodeDescriptor(air_date=date(2010, 1, 5))

    def test_impossible_date_is_skipped(self) -> None:
        assert extract_airdate("Show.2010.02.30.HDTV") is None

    def test_later_valid_date_is_found(self) -> None:
        assert extract_airdate("Show.2010.02.30.2010.03.01") == EpisodeDescriptor(
            air_date=date(2010, 3, 1)
        )


class TestFindNumbering:
    """Tests pour find_numbering() et parse_numbering()."""

    def test_splits_file_name(self) -> None:
        assert find_numbering("House.S01E01.HDTV.XviD-LOL.avi") == ("House.", "S01E01")

    def test_airdate_is_last_resort(self) -> None:
        name, numbering = find_numbering("The.Daily.Show.2010.01.05.HDTV.avi")
        assert name == "The.Daily.Show."
        assert parse_numbering(numbering) == EpisodeDescriptor(air_date=date(2010, 1, 5))

    def test_without_numbering(self) -> None:
        assert find_numbering("House.HDTV.XviD-LOL.avi") is None

    def test_leading_numbering(self) -> None:
        assert find_numbering("S01E01.avi") == ("", "S01E01")


class TestReformat:
    """Tests pour reformat()."""

    def test_standard(self) -> None:
        assert reformat(EpisodeDescriptor(2, 14)) == "S02E14"
        assert reformat(EpisodeDescriptor(2, 14, 15), EpisodeNotation.STANDARD) == "S02E14-E15"

    def test_alternative(self) -> None:
        assert reformat(EpisodeDescriptor(2, 14), EpisodeNotation.ALTERNATIVE) == "2x14"
        assert reformat(EpisodeDescriptor(2, 4), "0x00") == "2x04"
        assert reformat(EpisodeDescriptor(2, 14, 15), "alternative") == "2x14-15"

    def test_airdate(self) -> None:
        descriptor = EpisodeDescriptor(air_date=date(2010, 1, 1))
        assert reformat(descriptor, EpisodeNotation.AIRDATE) == "2010.01.01"

    def test_airdate_without_date_raises(self) -> None:
        with pytest.raises(ValueError):
            reformat(EpisodeDescriptor(1, 1), EpisodeNotation.AIRDATE)

    def test_unknown_notation_raises(self) -> None:
        with pytest.raises(ValueError):
            reformat(EpisodeDescriptor(1, 1), "roman")

    @pytest.mark.parametrize(
        "descriptor",
        [EpisodeDescriptor(1, 1), EpisodeDescriptor(12, 99), EpisodeDescriptor(3, 4, 5)],
    )
    def test_standard_output_is_parsed_back(self, descriptor: EpisodeDescriptor) -> None:
        assert extract_episode(reformat(descriptor)) == descriptor


class TestReplaceEpisode:
    """Tests pour replace_episode()."""

    def test_to_alternative(self) -> None:
        assert replace_episode("Show Name S02E14", EpisodeNotation.ALTERNATIVE) == "Show Name 2x14"

    def test_to_standard_with_normalization(self) -> None:
        assert replace_episode("The Office 3x05", "S00E00", normalize=True) == "Office S03E05"

    def test_without_episode(self) -> None:
        assert replace_episode("Show Name", EpisodeNotation.STANDARD) == "Show Name"


class TestNotationForShow:
    """Tests pour notation_for_show()."""

    def test_daily_show_uses_airdate(self) -> None:
        assert notation_for_show("The Daily Show") is EpisodeNotation.AIRDATE

    def test_catalog_notation(self) -> None:
        assert notation_for_show("Lost", "0x00") is EpisodeNotation.ALTERNATIVE

    def test_default(self) -> None:
        assert notation_for_show("Lost") is EpisodeNotation.STANDARD
        assert notation_for_show("Lost", "nonsense") is EpisodeNotation.STANDARD
