"""
Client TVDB API v3, guide de programmes distant.

Implemente IShowGuide : recupere une serie et la liste complete de ses
episodes depuis TVDB. Gere l'authentification JWT, le caching et le rate
limiting automatiquement.

Note: Utilise l'API v3 (legacy) car plus compatible avec les cles existantes.
Reference API: https://api.thetvdb.com/swagger
"""

from datetime import datetime, timedelta
from typing import Optional

import httpx
from loguru import logger

from showresolver.adapters.api.cache import APICache
from showresolver.adapters.api.retry import request_with_retry
from showresolver.core.ports.remote import IShowGuide
from showresolver.core.value_objects.show import DetailEpisode, ShowDetail


def _parse_air_date(value: Optional[str]) -> Optional[datetime]:
    """Convertit firstAired (YYYY-MM-DD) en datetime, None si absent ou invalide."""
    if not value:
        return None
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d")
    except ValueError:
        return None


class TVDBClient(IShowGuide):
    """
    Client TVDB pour les details des series et de leurs episodes.

    Le token JWT est obtenu a la premiere requete et rafraichi avant
    expiration.

    Example:
        cache = APICache(cache_dir=".cache/api")
        client = TVDBClient(api_key="your-api-key", cache=cache)
        detail = await client.get_show("81189")
        await client.close()
    """

    BASE_URL = "https://api.thetvdb.com"

    def __init__(self, api_key: str, cache: APICache, language: str = "en") -> None:
        """
        Initialise le client TVDB.

        Args:
            api_key: Cle API TVDB
            cache: Cache des details recuperes
            language: Langue demandee pour les titres (Accept-Language)
        """
        self._api_key = api_key
        self._cache = cache
        self._language = language
        self._token: Optional[str] = None
        self._token_expiry: Optional[datetime] = None
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP unique (connection pooling)."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                timeout=httpx.Timeout(30.0, connect=10.0),
            )
        return self._client

    async def _ensure_token(self) -> str:
        """
        S'assure qu'un token JWT valide est disponible.

        Le token est rafraichi 1 jour avant son expiration (~1 semaine).
        """
        if self._token and self._token_expiry and datetime.now() < self._token_expiry:
            return self._token

        client = await self._get_client()
        response = await client.post("/login", json={"apikey": self._api_key})
        response.raise_for_status()

        # API v3: token directement a la racine de la reponse
        self._token = response.json()["token"]
        self._token_expiry = datetime.now() + timedelta(days=6)
        return self._token

    def _get_auth_headers(self) -> dict[str, str]:
        if not self._token:
            raise RuntimeError("Token not available. Call _ensure_token() first.")
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept-Language": self._language,
        }

    async def get_show(self, source_id: str) -> Optional[ShowDetail]:
        """
        Recupere une serie et tous ses episodes.

        Verifie le cache avant d'appeler l'API. Les details sont caches
        pendant 7 jours.

        Args:
            source_id: ID TVDB de la serie

        Returns:
            ShowDetail, ou None si la serie n'existe pas (404)
        """
        cached = await self._cache.get_details(self.source, source_id)
        if cached is not None:
            return cached

        await self._ensure_token()
        client = await self._get_client()

        try:
            response = await request_with_retry(
                client,
                "GET",
                f"/series/{source_id}",
                headers=self._get_auth_headers(),
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

        series = response.json().get("data") or {}
        episodes = await self._fetch_episodes(client, source_id)

        detail = ShowDetail(
            title=series.get("seriesName", ""),
            source=self.source,
            source_id=str(series.get("id", source_id)),
            episodes=tuple(episodes),
        )
        logger.debug(
            "Serie recuperee depuis TVDB",
            source_id=source_id,
            title=detail.title,
            episodes=len(detail.episodes),
        )

        await self._cache.set_details(self.source, source_id, detail)
        return detail

    async def _fetch_episodes(
        self,
        client: httpx.AsyncClient,
        source_id: str,
    ) -> list[DetailEpisode]:
        """
        Recupere tous les episodes d'une serie (endpoint pagine).

        Returns:
            Episodes dans l'ordre renvoye par l'API, liste vide si 404
        """
        episodes: list[DetailEpisode] = []
        page = 1

        while True:
            try:
                response = await request_with_retry(
                    client,
                    "GET",
                    f"/series/{source_id}/episodes",
                    params={"page": str(page)},
                    headers=self._get_auth_headers(),
                )
            except httpx.HTTPStatusError as e:
                if e.response.status_code == 404:
                    break
                raise

            data = response.json()
            for item in data.get("data") or []:
                episodes.append(
                    DetailEpisode(
                        season=int(item.get("airedSeason") or 0),
                        number=int(item.get("airedEpisodeNumber") or 0),
                        title=item.get("episodeName") or "",
                        air_date=_parse_air_date(item.get("firstAired")),
                    )
                )

            # Verifier s'il y a d'autres pages
            next_page = (data.get("links") or {}).get("next")
            if not next_page or next_page <= page:
                break
            page = next_page

        return episodes

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source."""
        return "tvdb"

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
