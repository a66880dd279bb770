"""
Registre des guides de programmes distants.

Associe un nom de source ("tvdb"...) au client capable de fournir les
details d'une serie dans ce systeme. Les entrees du catalogue distant et
de l'API de recherche designent leur guide par ce nom.
"""

from typing import Iterable, Optional

from showresolver.core.ports.remote import IShowGuide


class UnknownGuideError(LookupError):
    """Exception levee quand aucun guide n'est enregistre pour une source."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Aucun guide enregistre pour la source '{source}'")


class GuideRegistry:
    """
    Registre source -> guide.

    Example:
        registry = GuideRegistry([tvdb_client])
        guide = registry.get("tvdb")
        detail = await guide.get_show("81189")
    """

    def __init__(self, guides: Optional[Iterable[IShowGuide]] = None) -> None:
        self._guides: dict[str, IShowGuide] = {}
        for guide in guides or ():
            self.register(guide)

    def register(self, guide: IShowGuide) -> None:
        """Enregistre un guide sous son nom de source (remplace l'existant)."""
        self._guides[guide.source.lower()] = guide

    def get(self, source: str) -> IShowGuide:
        """
        Retourne le guide d'une source.

        Raises:
            UnknownGuideError: Si la source n'a pas de guide enregistre.
        """
        try:
            return self._guides[source.lower()]
        except KeyError:
            raise UnknownGuideError(source) from None

    def __contains__(self, source: str) -> bool:
        return source.lower() in self._guides

    @property
    def sources(self) -> list[str]:
        """Noms des sources enregistrees."""
        return list(self._guides)
