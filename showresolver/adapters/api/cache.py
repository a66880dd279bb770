"""
Cache persistant des reponses des guides distants et de l'API de recherche.

Deux familles d'entrees, chacune avec sa cle et son TTL :
- recherche par nom (LOOKUP_TTL, 24h) : "lookup:<nom en minuscules>" -> LookupResult
- details d'une serie (DETAILS_TTL, 7 jours) : "<source>:show:<id>" -> ShowDetail

Une recherche negative (LookupResult.success False) est conservee aussi :
un nom inconnu n'est pas redemande a chaque fichier pendant 24h.
"""

import asyncio
from functools import partial
from typing import Any, Optional

from diskcache import Cache

from showresolver.core.value_objects.show import LookupResult, ShowDetail


class APICache:
    """
    Cache diskcache partage par TVDBClient et CatalogAPIClient.

    Les operations diskcache (bloquantes) passent par run_in_executor.

    Example:
        cache = APICache(cache_dir=".cache/api")
        await cache.set_details("tvdb", "73255", detail)
        detail = await cache.get_details("tvdb", "73255")
    """

    LOOKUP_TTL = 24 * 60 * 60
    DETAILS_TTL = 7 * 24 * 60 * 60

    def __init__(self, cache_dir: str = ".cache/api") -> None:
        self._cache = Cache(str(cache_dir))

    @staticmethod
    def lookup_key(name: str) -> str:
        return f"lookup:{name.strip().lower()}"

    @staticmethod
    def details_key(source: str, source_id: str) -> str:
        return f"{source.lower()}:show:{source_id}"

    async def get(self, key: str) -> Optional[Any]:
        """Retourne la valeur stockee, ou None si absente ou expiree."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, partial(self._cache.set, key, value, expire=ttl))

    async def get_lookup(self, name: str) -> Optional[LookupResult]:
        """Resultat de recherche memorise pour ce nom (casse ignoree)."""
        value = await self.get(self.lookup_key(name))
        return value if isinstance(value, LookupResult) else None

    async def set_lookup(self, name: str, result: LookupResult) -> None:
        await self.set(self.lookup_key(name), result, self.LOOKUP_TTL)

    async def get_details(self, source: str, source_id: str) -> Optional[ShowDetail]:
        """Details memorises pour la serie (source, source_id)."""
        value = await self.get(self.details_key(source, source_id))
        return value if isinstance(value, ShowDetail) else None

    async def set_details(self, source: str, source_id: str, detail: ShowDetail) -> None:
        await self.set(self.details_key(source, source_id), detail, self.DETAILS_TTL)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        self._cache.close()
