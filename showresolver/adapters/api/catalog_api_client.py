"""
Client du service de catalogue distant.

Le service expose deux operations JSON :
- GET /shows : liste plate de toutes les series connues
  {"success": true, "result": [[nom, slug, source, id], ...]}
- GET /shows/lookup?name=... : identification d'un nom approximatif
  {"success": true, "result": {"title": ..., "source": ..., "id": ...}}

Implemente IRemoteCatalog et IShowLookupAPI.
"""

from typing import Any, Optional

import httpx
from loguru import logger

from showresolver.adapters.api.cache import APICache
from showresolver.adapters.api.retry import request_with_retry
from showresolver.core.ports.remote import IRemoteCatalog, IShowLookupAPI
from showresolver.core.value_objects.show import LookupResult, RemoteCatalogRecord


class CatalogAPIError(Exception):
    """Reponse du service de catalogue inexploitable."""


class CatalogAPIClient(IRemoteCatalog, IShowLookupAPI):
    """
    Client HTTP du service de catalogue.

    Example:
        client = CatalogAPIClient("https://catalog.example.org/api", cache=cache)
        records = await client.fetch_show_list()
        result = await client.lookup("HOUSE")
        await client.close()
    """

    def __init__(self, base_url: str, cache: Optional[APICache] = None) -> None:
        """
        Args:
            base_url: URL de base du service
            cache: Cache optionnel des resultats de recherche (24h)
        """
        self._base_url = base_url.rstrip("/")
        self._cache = cache
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(60.0, connect=10.0),
            )
        return self._client

    @staticmethod
    def _unwrap(payload: Any) -> Any:
        """Retourne le champ result d'une reponse, ou leve CatalogAPIError."""
        if not isinstance(payload, dict):
            raise CatalogAPIError("Reponse inattendue du service de catalogue")
        if not payload.get("success", False):
            raise CatalogAPIError(payload.get("error") or "Le service a signale un echec")
        return payload.get("result")

    async def fetch_show_list(self) -> list[RemoteCatalogRecord]:
        """
        Recupere la liste des series connues.

        Raises:
            CatalogAPIError: Reponse malformee ou signalee en echec
            httpx.HTTPError: Erreur reseau ou HTTP
        """
        client = await self._get_client()
        response = await request_with_retry(client, "GET", "/shows")
        rows = self._unwrap(response.json())

        if not isinstance(rows, list):
            raise CatalogAPIError("Liste de series attendue")

        try:
            records = [RemoteCatalogRecord.from_row(row) for row in rows]
        except (TypeError, ValueError) as e:
            raise CatalogAPIError(f"Ligne de catalogue malformee: {e}") from e

        logger.debug("Catalogue distant telecharge", count=len(records))
        return records

    async def lookup(self, name: str) -> LookupResult:
        """
        Identifie une serie a partir d'un nom approximatif.

        Une serie inconnue (404 ou success=false) donne LookupResult(success=False).

        Raises:
            httpx.HTTPError: Erreur reseau ou HTTP autre que 404
        """
        if self._cache is not None:
            cached = await self._cache.get_lookup(name)
            if cached is not None:
                return cached

        client = await self._get_client()
        try:
            response = await request_with_retry(
                client, "GET", "/shows/lookup", params={"name": name}
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return LookupResult(success=False)
            raise

        payload = response.json()
        if not isinstance(payload, dict) or not payload.get("success", False):
            result = LookupResult(success=False)
        else:
            data = payload.get("result") or {}
            result = LookupResult(
                success=bool(data.get("title")) and bool(data.get("source")),
                title=data.get("title", ""),
                source=data.get("source", ""),
                source_id=str(data.get("id", "")),
            )

        if self._cache is not None:
            await self._cache.set_lookup(name, result)
        return result

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
