"""
Tests unitaires pour la classification de la qualite video des releases.
"""

import pytest

from showresolver.core.value_objects.quality import Quality
from showresolver.services.quality_classifier import classify, extract_group


class TestClassify:
    """Tests pour classify()."""

    @pytest.mark.parametrize(
        "release, expected",
        [
            ("Show.S01E01.1080p.WEB-DL.DD5.1.H.264-GRP", Quality.WEBDL_1080P),
            ("Show.S01E01.1080p.BluRay.x264-GRP", Quality.BLURAY_1080P),
            ("Show.S01E01.1080i.HDTV.DD5.1.MPEG2-GRP", Quality.HDTV_1080I),
            ("Show.S01E01.720p.WEB.DL.AAC2.0-GRP", Quality.WEBDL_720P),
            ("Show.S01E01.720p.Blu-Ray.x264-GRP", Quality.BLURAY_720P),
            ("Show.S01E01.720p.HDTV.x264-GRP", Quality.HDTV_720P),
            ("Show.S01E01.HR.HDTV.XviD-GRP", Quality.HR_X264),
            ("Show.S01E01.HDTV.x264-LOL", Quality.HR_X264),
            ("Show.S01E01.HDTV.XviD-LOL.avi", Quality.HDTV_XVID),
            ("Show.S01E01.DVDRip.XviD-GRP", Quality.HDTV_XVID),
            ("Show.S01E01.TVRip.XviD", Quality.TVRIP),
            ("Show.S01E01.TV-Rip", Quality.TVRIP),
        ],
    )
    def test_rules(self, release: str, expected: Quality) -> None:
        assert classify(release) is expected

    def test_rule_order_decides_overlaps(self) -> None:
        """Une release satisfaisant plusieurs regles prend la premiere."""
        assert classify("Show.S01E01.1080p.WEB-DL.HDTV") is Quality.WEBDL_1080P
        assert classify("Show.S01E01.720p.HDTV.HR") is Quality.HDTV_720P

    def test_resolution_alone_is_not_enough_for_1080(self) -> None:
        assert classify("Show.S01E01.1080p.x264-GRP") is Quality.HR_X264

    def test_spaces_count_as_separators(self) -> None:
        assert classify("Show Name S01E01 720p HDTV x264") is Quality.HDTV_720P
        assert classify("Show Name S01E01 720p") is Quality.HDTV_720P

    @pytest.mark.parametrize(
        "release, expected",
        [
            ("Show.S01E01.ts", Quality.HDTV_1080I),
            ("Show.S01E01.mkv", Quality.HDTV_720P),
            ("Show.S01E01.AVI", Quality.HDTV_XVID),
            ("Show.S01E01.mov", Quality.TVRIP),
            ("Show.S01E01.mpg", Quality.TVRIP),
            ("Show.S01E01.mp4", Quality.UNKNOWN),
        ],
    )
    def test_extension_fallback(self, release: str, expected: Quality) -> None:
        assert classify(release) is expected

    def test_unknown(self) -> None:
        assert classify("") is Quality.UNKNOWN
        assert classify("Show Name") is Quality.UNKNOWN

    def test_parent_directories_are_considered(self) -> None:
        path = "TV Show.Name.S01.720p.HDTV h101.avi"
        assert classify(path) is Quality.HDTV_720P


class TestQualityRank:
    """Tests pour Quality.rank."""

    def test_best_first(self) -> None:
        assert Quality.WEBDL_1080P.rank == 0
        assert Quality.UNKNOWN.rank == len(Quality) - 1
        assert Quality.HDTV_720P.rank < Quality.HDTV_XVID.rank


class TestExtractGroup:
    """Tests pour extract_group()."""

    @pytest.mark.parametrize(
        "release, expected",
        [
            ("Show.S01E01.HDTV.XviD-LOL.avi", "LOL"),
            ("Show.S01E01.720p.HDTV.x264-DIMENSION", "DIMENSION"),
            ("Show.S01E01.720p.HDTV.x264-DIMENSION[rarbg].mkv", "DIMENSION"),
            ("Show.S01E01.HDTV.avi", ""),
            ("House.S01E01.720p.WEB-DL.mkv", ""),
            ("House.S01E01.1080p.Blu-Ray", ""),
            ("House.S01E01.TV-Rip.avi", ""),
            ("House.S01E01.720p.WEB-DL-NTb.mkv", "NTb"),
            ("", ""),
        ],
    )
    def test_group(self, release: str, expected: str) -> None:
        assert extract_group(release) == expected
