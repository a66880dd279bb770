"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils peuvent etre librement partages et compares par valeur.

Exports :
- EpisodeDescriptor, EpisodeNotation : Numerotation d'un episode
- ShowIdentity : Nom canonique resolu d'une serie
- RemoteCatalogRecord : Entree du catalogue distant
- ShowDetail, DetailEpisode : Details d'une serie depuis un guide distant
- LookupResult : Reponse de l'API de recherche
- Quality : Verdict de qualite video
- ResolutionResult, ResolutionStatus, FailureReason : Resultat du pipeline
"""

from showresolver.core.value_objects.episode import EpisodeDescriptor, EpisodeNotation
from showresolver.core.value_objects.quality import Quality
from showresolver.core.value_objects.resolution import (
    FailureReason,
    ResolutionResult,
    ResolutionStatus,
)
from showresolver.core.value_objects.show import (
    DetailEpisode,
    LookupResult,
    RemoteCatalogRecord,
    ShowDetail,
    ShowIdentity,
)

__all__ = [
    "EpisodeDescriptor",
    "EpisodeNotation",
    "Quality",
    "FailureReason",
    "ResolutionResult",
    "ResolutionStatus",
    "DetailEpisode",
    "LookupResult",
    "RemoteCatalogRecord",
    "ShowDetail",
    "ShowIdentity",
]
