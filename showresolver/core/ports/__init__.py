"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Port catalogue : Contrat de lecture du catalogue local
- ILocalCatalog : Series et episodes suivis localement

Ports distants : Contrats pour les services externes
- IRemoteCatalog : Liste plate des series connues
- IShowGuide : Details d'une serie dans un guide (TVDB...)
- IShowLookupAPI : Identification d'une serie par texte libre
"""

from showresolver.core.ports.catalog import ILocalCatalog
from showresolver.core.ports.remote import IRemoteCatalog, IShowGuide, IShowLookupAPI

__all__ = [
    "ILocalCatalog",
    "IRemoteCatalog",
    "IShowGuide",
    "IShowLookupAPI",
]
