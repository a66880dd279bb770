"""
Contexte de resolution : caches partages par les appels au pipeline.

Le contexte regroupe l'etat mutable de la resolution :
- identities : nom candidat brut -> ShowIdentity
- details : nom canonique -> ShowDetail
- le catalogue distant en memoire, charge au plus une fois depuis le
  snapshot disque (ou telecharge puis ecrit s'il est absent)

Seul le ResolverService ecrit dans ces caches. Chaque ecriture est une
affectation simple d'une cle : deux resolutions concurrentes du meme nom
convergent vers la meme identite, la derniere ecriture gagne.
"""

import asyncio
from typing import Optional

from loguru import logger

from showresolver.core.ports.remote import IRemoteCatalog
from showresolver.core.value_objects.show import (
    RemoteCatalogRecord,
    ShowDetail,
    ShowIdentity,
)
from showresolver.infrastructure.snapshot_store import SnapshotError, SnapshotStore


class ResolutionContext:
    """
    Caches de la resolution, construits explicitement et injectes dans le pipeline.

    Example:
        context = ResolutionContext(
            snapshot_store=SnapshotStore(Path(".cache/known_shows.json")),
            remote_catalog=catalog_api_client,
        )
        records = await context.ensure_catalog()
    """

    def __init__(
        self,
        snapshot_store: Optional[SnapshotStore] = None,
        remote_catalog: Optional[IRemoteCatalog] = None,
    ) -> None:
        """
        Initialise un contexte vide.

        Args:
            snapshot_store: Stockage disque du catalogue distant (optionnel)
            remote_catalog: Source de la liste des series connues (optionnelle)
        """
        self._snapshot_store = snapshot_store
        self._remote_catalog = remote_catalog
        self.identities: dict[str, ShowIdentity] = {}
        self.details: dict[str, ShowDetail] = {}
        self._catalog: list[RemoteCatalogRecord] = []
        self._snapshot_read = False
        self._download_attempted = False
        self._lock = asyncio.Lock()

    @property
    def catalog(self) -> list[RemoteCatalogRecord]:
        """Catalogue distant actuellement en memoire (peut etre vide)."""
        return self._catalog

    async def ensure_catalog(self, download: bool = True) -> list[RemoteCatalogRecord]:
        """
        Retourne le catalogue distant, en le chargeant au premier besoin.

        Le snapshot disque est lu au plus une fois. S'il est absent ou
        illisible, la liste est telechargee (si download) puis ecrite sur
        disque. Le telechargement n'est tente qu'une fois par contexte : un
        echec laisse le catalogue vide jusqu'a refresh_catalog() ou clear().

        Args:
            download: Autorise le telechargement de la liste distante
        """
        if self._catalog:
            return self._catalog

        async with self._lock:
            if self._catalog:
                return self._catalog

            if not self._snapshot_read and self._snapshot_store is not None:
                self._snapshot_read = True
                try:
                    loop = asyncio.get_running_loop()
                    records = await loop.run_in_executor(None, self._snapshot_store.load)
                except SnapshotError as e:
                    logger.warning("Snapshot du catalogue ignore", error=str(e))
                    records = None
                if records:
                    self._catalog = records
                    return self._catalog

            if download and not self._download_attempted:
                self._download_attempted = True
                await self._fetch_catalog()
            return self._catalog

    async def refresh_catalog(self) -> bool:
        """
        Retelecharge le catalogue distant et remplace le snapshot disque.

        Returns:
            True si un nouveau catalogue a ete obtenu, False sinon
            (l'ancien catalogue est alors conserve).
        """
        async with self._lock:
            self._download_attempted = True
            return await self._fetch_catalog()

    async def _fetch_catalog(self) -> bool:
        """Telecharge la liste et remplace catalogue et snapshot (verrou tenu)."""
        if self._remote_catalog is None:
            return False

        try:
            records = await self._remote_catalog.fetch_show_list()
        except Exception as e:
            logger.warning("Telechargement du catalogue distant impossible", error=str(e))
            return False

        if not records:
            logger.warning("Catalogue distant vide, snapshot conserve")
            return False

        self._catalog = list(records)

        if self._snapshot_store is not None:
            try:
                loop = asyncio.get_running_loop()
                await loop.run_in_executor(None, self._snapshot_store.save, self._catalog)
            except OSError as e:
                logger.warning("Ecriture du snapshot impossible", error=str(e))

        logger.info("Catalogue distant mis a jour", count=len(self._catalog))
        return True

    def find_by_slug(self, slug: str) -> list[RemoteCatalogRecord]:
        """Retourne les entrees du catalogue en memoire portant ce slug, dans l'ordre."""
        return [record for record in self._catalog if record.slug == slug]

    def remember(self, name: str, detail: ShowDetail) -> ShowIdentity:
        """
        Enregistre une serie resolue a distance.

        Args:
            name: Nom candidat brut ayant mene a la serie
            detail: Details complets recuperes depuis le guide

        Returns:
            L'identite enregistree sous le nom candidat
        """
        identity = ShowIdentity(name=detail.title)
        self.identities[name] = identity
        self.details[detail.title] = detail
        return identity

    def recall(self, name: str) -> Optional[tuple[ShowIdentity, Optional[ShowDetail]]]:
        """Retourne l'identite (et les details) deja resolus pour ce nom candidat."""
        identity = self.identities.get(name)
        if identity is None:
            return None
        return identity, self.details.get(identity.name)

    def clear(self) -> None:
        """Vide les caches en memoire (le snapshot disque est conserve)."""
        self.identities.clear()
        self.details.clear()
        self._catalog = []
        self._snapshot_read = False
        self._download_attempted = False
