"""
Tests unitaires pour les objets valeur.
"""

from datetime import date

import pytest

from showresolver.core.value_objects import (
    EpisodeDescriptor,
    FailureReason,
    RemoteCatalogRecord,
    ResolutionResult,
    ResolutionStatus,
)


class TestEpisodeDescriptor:
    """Tests pour EpisodeDescriptor."""

    def test_guessed_title(self) -> None:
        assert EpisodeDescriptor(2, 14).guessed_title == "Season 2, Episode 14"

    def test_multi_episode(self) -> None:
        assert EpisodeDescriptor(2, 14, 15).is_multi_episode
        assert not EpisodeDescriptor(2, 14).is_multi_episode

    def test_airdate_only(self) -> None:
        descriptor = EpisodeDescriptor(air_date=date(2010, 1, 5))
        assert (descriptor.season, descriptor.episode) == (0, 0)

    def test_negative_numbers_rejected(self) -> None:
        with pytest.raises(ValueError):
            EpisodeDescriptor(-1, 1)


class TestRemoteCatalogRecord:
    """Tests pour RemoteCatalogRecord."""

    def test_row_conversion(self) -> None:
        record = RemoteCatalogRecord.from_row(["House", "house", "tvdb", 73255])
        assert record == RemoteCatalogRecord("House", "house", "tvdb", "73255")
        assert record.to_row() == ["House", "house", "tvdb", "73255"]

    def test_incomplete_row(self) -> None:
        with pytest.raises(ValueError):
            RemoteCatalogRecord.from_row(["House", "house"])


class TestResolutionResult:
    """Tests pour ResolutionResult."""

    def test_failed(self) -> None:
        result = ResolutionResult.failed("x.avi", FailureReason.SHOW_NAME_NOT_FOUND)
        assert result.status is ResolutionStatus.FAILED
        assert result.failure is FailureReason.SHOW_NAME_NOT_FOUND
        assert not result.success

    def test_extension(self) -> None:
        result = ResolutionResult("House.S01E01.HDTV.XviD-LOL.avi", ResolutionStatus.IDENTIFIED)
        assert result.extension == ".avi"
        assert result.success
        assert ResolutionResult("House S01E01", ResolutionStatus.IDENTIFIED).extension == ""
