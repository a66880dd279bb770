"""
Tests for the known-shows catalog client (show list and lookup).
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import respx

from showresolver.adapters.api.cache import APICache
from showresolver.adapters.api.catalog_api_client import CatalogAPIClient, CatalogAPIError
from showresolver.core.value_objects.show import LookupResult, RemoteCatalogRecord
from tests.fixtures.catalog_responses import (
    CATALOG_FAILURE_RESPONSE,
    CATALOG_LOOKUP_RESPONSE,
    CATALOG_LOOKUP_UNKNOWN_RESPONSE,
    CATALOG_MALFORMED_RESPONSE,
    CATALOG_SHOW_LIST_RESPONSE,
)

BASE_URL = "https://catalog.example.org/api"


@pytest.fixture
def mock_cache() -> MagicMock:
    cache = MagicMock(spec=APICache)
    cache.get_lookup = AsyncMock(return_value=None)
    cache.set_lookup = AsyncMock()
    return cache


class TestFetchShowList:
    """fetch_show_list() parses [name, slug, source, id] rows."""

    @pytest.mark.asyncio
    async def test_returns_records(self, respx_mock: respx.Router) -> None:
        respx_mock.get(f"{BASE_URL}/shows").mock(
            return_value=httpx.Response(200, json=CATALOG_SHOW_LIST_RESPONSE)
        )

        client = CatalogAPIClient(BASE_URL + "/")
        try:
            records = await client.fetch_show_list()
        finally:
            await client.close()

        assert records[0] == RemoteCatalogRecord("House", "house", "tvdb", "73255")
        assert [record.slug for record in records] == [
            "house",
            "dailyshow",
            "battlestargalactica2003",
        ]

    @pytest.mark.asyncio
    async def test_reported_failure_raises(self, respx_mock: respx.Router) -> None:
        respx_mock.get(f"{BASE_URL}/shows").mock(
            return_value=httpx.Response(200, json=CATALOG_FAILURE_RESPONSE)
        )

        client = CatalogAPIClient(BASE_URL)
        try:
            with pytest.raises(CatalogAPIError, match="maintenance"):
                await client.fetch_show_list()
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_malformed_row_raises(self, respx_mock: respx.Router) -> None:
        respx_mock.get(f"{BASE_URL}/shows").mock(
            return_value=httpx.Response(200, json=CATALOG_MALFORMED_RESPONSE)
        )

        client = CatalogAPIClient(BASE_URL)
        try:
            with pytest.raises(CatalogAPIError):
                await client.fetch_show_list()
        finally:
            await client.close()


class TestLookup:
    """lookup() identifies a free-text name."""

    @pytest.mark.asyncio
    async def test_successful_lookup(self, respx_mock: respx.Router, mock_cache: MagicMock) -> None:
        route = respx_mock.get(f"{BASE_URL}/shows/lookup").mock(
            return_value=httpx.Response(200, json=CATALOG_LOOKUP_RESPONSE)
        )

        client = CatalogAPIClient(BASE_URL, cache=mock_cache)
        try:
            result = await client.lookup("HOUSE")
        finally:
            await client.close()

        assert result == LookupResult(success=True, title="House", source="tvdb", source_id="73255")
        assert route.calls[0].request.url.params["name"] == "HOUSE"
        mock_cache.set_lookup.assert_awaited_once_with("HOUSE", result)

    @pytest.mark.asyncio
    async def test_unknown_show(self, respx_mock: respx.Router) -> None:
        respx_mock.get(f"{BASE_URL}/shows/lookup").mock(
            return_value=httpx.Response(200, json=CATALOG_LOOKUP_UNKNOWN_RESPONSE)
        )

        client = CatalogAPIClient(BASE_URL)
        try:
            result = await client.lookup("UNKNOWN SHOW")
        finally:
            await client.close()

        assert result.success is False

    @pytest.mark.asyncio
    async def test_not_found_status_is_not_an_error(self, respx_mock: respx.Router) -> None:
        respx_mock.get(f"{BASE_URL}/shows/lookup").mock(return_value=httpx.Response(404))

        client = CatalogAPIClient(BASE_URL)
        try:
            assert await client.lookup("NOTHING") == LookupResult(success=False)
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_cached_lookup_skips_http(
        self, respx_mock: respx.Router, mock_cache: MagicMock
    ) -> None:
        cached = LookupResult(success=True, title="House", source="tvdb", source_id="73255")
        mock_cache.get_lookup = AsyncMock(return_value=cached)

        client = CatalogAPIClient(BASE_URL, cache=mock_cache)
        try:
            assert await client.lookup("House") is cached
        finally:
            await client.close()
