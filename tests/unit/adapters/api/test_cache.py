"""
Tests unitaires pour APICache.

Ces tests verifient:
- Les cles par famille (recherche par nom, details par source/id)
- Le stockage des objets valeur (LookupResult, ShowDetail)
- Nettoyage du cache
"""

import asyncio
from datetime import datetime
from pathlib import Path

import pytest

from showresolver.adapters.api.cache import APICache
from showresolver.core.value_objects.show import DetailEpisode, LookupResult, ShowDetail

HOUSE_DETAIL = ShowDetail(
    title="House",
    source="tvdb",
    source_id="73255",
    episodes=(DetailEpisode(season=1, number=1, title="Pilot", air_date=datetime(2004, 11, 16)),),
)


class TestAPICache:
    """Tests pour la classe APICache."""

    @pytest.fixture
    def cache(self, tmp_path: Path) -> APICache:
        """Cree un cache avec un repertoire temporaire."""
        cache = APICache(cache_dir=str(tmp_path / "test_cache"))
        yield cache
        cache.close()

    def test_ttl_values(self) -> None:
        """Recherche 24h, details 7 jours."""
        assert APICache.LOOKUP_TTL == 86400
        assert APICache.DETAILS_TTL == 604800

    def test_keys(self) -> None:
        assert APICache.lookup_key("  House ") == "lookup:house"
        assert APICache.details_key("TVDB", "73255") == "tvdb:show:73255"

    @pytest.mark.asyncio
    async def test_missing_entries(self, cache: APICache) -> None:
        assert await cache.get_details("tvdb", "0") is None
        assert await cache.get_lookup("nothing") is None

    @pytest.mark.asyncio
    async def test_details_round_trip(self, cache: APICache) -> None:
        """Un ShowDetail complet est restitue a l'identique."""
        await cache.set_details("tvdb", "73255", HOUSE_DETAIL)

        assert await cache.get_details("tvdb", "73255") == HOUSE_DETAIL
        assert await cache.get_details("tvrage", "73255") is None

    @pytest.mark.asyncio
    async def test_lookup_ignores_case(self, cache: APICache) -> None:
        result = LookupResult(success=True, title="House", source="tvdb", source_id="73255")

        await cache.set_lookup("HOUSE", result)

        assert await cache.get_lookup("house") == result

    @pytest.mark.asyncio
    async def test_negative_lookup_is_kept(self, cache: APICache) -> None:
        await cache.set_lookup("UNKNOWN SHOW", LookupResult(success=False))

        cached = await cache.get_lookup("unknown show")
        assert cached is not None
        assert not cached.success

    @pytest.mark.asyncio
    async def test_foreign_value_is_ignored(self, cache: APICache) -> None:
        await cache.set(APICache.details_key("tvdb", "73255"), "not a detail", ttl=3600)

        assert await cache.get_details("tvdb", "73255") is None

    @pytest.mark.asyncio
    async def test_clear_removes_all_entries(self, cache: APICache) -> None:
        """clear() supprime toutes les entrees du cache."""
        await cache.set_details("tvdb", "73255", HOUSE_DETAIL)
        await cache.set_lookup("HOUSE", LookupResult(success=False))

        await cache.clear()

        assert await cache.get_details("tvdb", "73255") is None
        assert await cache.get_lookup("HOUSE") is None

    @pytest.mark.asyncio
    async def test_concurrent_operations(self, cache: APICache) -> None:
        """Plusieurs ecritures/lectures peuvent etre lancees en parallele."""
        details = [
            ShowDetail(title=f"Show {i}", source="tvdb", source_id=str(i)) for i in range(10)
        ]

        await asyncio.gather(*[cache.set_details("tvdb", d.source_id, d) for d in details])
        results = await asyncio.gather(*[cache.get_details("tvdb", d.source_id) for d in details])

        assert results == details
