"""
Interfaces ports pour les sources distantes.

Interfaces abstraites (ports) definissant les contrats des collaborateurs
distants du pipeline de resolution :
- IRemoteCatalog : liste plate de toutes les series connues
- IShowGuide : details complets d'une serie dans un systeme source (TVDB...)
- IShowLookupAPI : identification d'une serie par texte libre
"""

from abc import ABC, abstractmethod
from typing import Optional

from showresolver.core.value_objects.show import (
    LookupResult,
    RemoteCatalogRecord,
    ShowDetail,
)


class IRemoteCatalog(ABC):
    """Catalogue distant des series connues."""

    @abstractmethod
    async def fetch_show_list(self) -> list[RemoteCatalogRecord]:
        """
        Recupere la liste plate des series connues.

        Retourne :
            Liste de RemoteCatalogRecord (nom, slug, source, id source)
        """
        ...


class IShowGuide(ABC):
    """
    Guide de programmes distant.

    Chaque guide est identifie par son nom de source, utilise comme cle
    dans le catalogue distant et dans les donnees du catalogue local.
    """

    @abstractmethod
    async def get_show(self, source_id: str) -> Optional[ShowDetail]:
        """
        Recupere les details complets d'une serie.

        Args :
            source_id : Identifiant de la serie dans ce guide

        Retourne :
            ShowDetail avec la liste des episodes, ou None si non trouvee
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source (ex: 'tvdb')."""
        ...


class IShowLookupAPI(ABC):
    """API d'identification de serie par texte libre."""

    @abstractmethod
    async def lookup(self, name: str) -> LookupResult:
        """
        Identifie une serie a partir d'un nom approximatif.

        Args :
            name : Nom nettoye extrait d'un nom de fichier

        Retourne :
            LookupResult avec success=False si la serie est inconnue
        """
        ...
