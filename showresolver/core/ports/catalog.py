"""
Interface port pour le catalogue local.

Le catalogue local est la base des series suivies par l'utilisateur.
Le coeur de resolution ne fait que le lire ; l'implementation concrete
(SQLite via SQLModel) se trouve dans infrastructure/persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from showresolver.core.entities.catalog import CatalogEpisode, CatalogShow


class ILocalCatalog(ABC):
    """
    Interface de lecture du catalogue local.

    Definit les operations necessaires au premier tier d'identification
    et au recoupement avec le catalogue distant.
    """

    @abstractmethod
    def list_shows(self) -> list[CatalogShow]:
        """Enumere toutes les series du catalogue, dans un ordre stable."""
        ...

    @abstractmethod
    def get_episodes(self, show_id: int) -> list[CatalogEpisode]:
        """Recupere la liste des episodes d'une serie."""
        ...

    @abstractmethod
    def find_by_external_id(self, source: str, source_id: str) -> Optional[CatalogShow]:
        """
        Recherche une serie importee depuis un guide distant.

        Args :
            source : Nom du guide (ex: "tvdb")
            source_id : Identifiant de la serie dans ce guide

        Retourne :
            La serie locale correspondante, ou None
        """
        ...
