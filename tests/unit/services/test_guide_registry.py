"""
Tests unitaires pour le registre des guides distants.
"""

from unittest.mock import MagicMock

import pytest

from showresolver.core.ports.remote import IShowGuide
from showresolver.services.guide_registry import GuideRegistry, UnknownGuideError


def _guide(source: str) -> MagicMock:
    guide = MagicMock(spec=IShowGuide)
    guide.source = source
    return guide


class TestGuideRegistry:
    """Tests pour GuideRegistry."""

    def test_get_is_case_insensitive(self) -> None:
        tvdb = _guide("tvdb")
        registry = GuideRegistry([tvdb])

        assert registry.get("TVDB") is tvdb
        assert "TvDb" in registry

    def test_unknown_source(self) -> None:
        registry = GuideRegistry()

        with pytest.raises(UnknownGuideError) as exc_info:
            registry.get("tvrage")

        assert exc_info.value.source == "tvrage"
        assert "tvrage" not in registry

    def test_register_replaces_existing(self) -> None:
        first, second = _guide("tvdb"), _guide("tvdb")
        registry = GuideRegistry([first])
        registry.register(second)

        assert registry.get("tvdb") is second
        assert registry.sources == ["tvdb"]
