"""
Objets valeur representant l'identite d'une serie et ses details distants.

- ShowIdentity : nom canonique (et alias de release) retourne par un tier
- RemoteCatalogRecord : ligne du catalogue distant plat (nom, slug, source, id)
- ShowDetail / DetailEpisode : details complets d'une serie depuis un guide distant
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ShowIdentity:
    """
    Identite resolue d'une serie.

    Attributs:
        name: Nom canonique de la serie
        release: Nom utilise par les releases quand il differe du nom canonique
    """

    name: str
    release: Optional[str] = None


@dataclass(frozen=True)
class RemoteCatalogRecord:
    """
    Entree du catalogue distant des series connues.

    Attributs:
        name: Nom canonique
        slug: Identifiant normalise derive du nom (ex: "dailyshow")
        source: Systeme source (ex: "tvdb")
        source_id: Identifiant de la serie dans le systeme source
    """

    name: str
    slug: str
    source: str
    source_id: str

    def to_row(self) -> list[str]:
        """Serialise l'entree sous forme de ligne pour le snapshot disque."""
        return [self.name, self.slug, self.source, self.source_id]

    @classmethod
    def from_row(cls, row: list) -> "RemoteCatalogRecord":
        """Construit une entree depuis une ligne [nom, slug, source, id]."""
        if len(row) < 4:
            raise ValueError(f"Ligne de catalogue incomplete: {row!r}")
        name, slug, source, source_id = row[:4]
        return cls(name=str(name), slug=str(slug), source=str(source), source_id=str(source_id))


@dataclass(frozen=True)
class DetailEpisode:
    """Episode tel que decrit par un guide distant."""

    season: int
    number: int
    title: str = ""
    air_date: Optional[datetime] = None


@dataclass(frozen=True)
class ShowDetail:
    """
    Details complets d'une serie recuperes depuis un guide distant.

    Attributs:
        title: Titre canonique
        source: Systeme source (ex: "tvdb")
        source_id: Identifiant dans le systeme source
        episodes: Liste ordonnee des episodes connus
    """

    title: str
    source: str = ""
    source_id: str = ""
    episodes: tuple[DetailEpisode, ...] = ()


@dataclass(frozen=True)
class LookupResult:
    """
    Reponse de l'API de recherche distante.

    Attributs:
        success: True si l'API a identifie la serie
        title: Titre canonique propose
        source: Guide a interroger pour les details
        source_id: Identifiant de la serie dans ce guide
    """

    success: bool
    title: str = ""
    source: str = ""
    source_id: str = ""
