"""
Resultat de la resolution d'un nom de fichier.

Le pipeline de resolution retourne toujours un ResolutionResult, y compris
en cas d'echec : le champ failure indique alors la raison.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import PurePath
from typing import Optional

from showresolver.core.value_objects.episode import EpisodeDescriptor
from showresolver.core.value_objects.quality import Quality


class ResolutionStatus(Enum):
    """Etat terminal du pipeline de resolution.

    Valeurs:
        IDENTIFIED: Serie et episode confirmes par un tier
        NOT_IDENTIFIED: Nom plausible mais non confirme (resultat partiel)
        FAILED: Aucune information exploitable
    """

    IDENTIFIED = "identified"
    NOT_IDENTIFIED = "not_identified"
    FAILED = "failed"


class FailureReason(Enum):
    """Raison d'echec (total ou partiel) de la resolution."""

    EPISODE_NUMBERING_NOT_FOUND = "episode_numbering_not_found"
    SHOW_NAME_NOT_FOUND = "show_name_not_found"
    SHOW_NOT_IDENTIFIED = "show_not_identified"


@dataclass
class ResolutionResult:
    """
    Resultat de l'identification d'un fichier.

    Attributs:
        file_name: Nom du fichier analyse
        status: Etat terminal du pipeline
        show: Nom canonique (IDENTIFIED) ou nom devine (NOT_IDENTIFIED)
        episode: Descripteur d'episode, complete apres resolution par date
        title: Titre de l'episode, ou "Season N, Episode M" si inconnu
        quality: Verdict du classificateur de qualite
        group: Groupe de release, chaine vide si absent
        air_date: Date de diffusion si connue
        failure: Raison de l'echec, None si identifie
    """

    file_name: str
    status: ResolutionStatus
    show: str = ""
    episode: Optional[EpisodeDescriptor] = None
    title: str = ""
    quality: Quality = Quality.UNKNOWN
    group: str = ""
    air_date: Optional[datetime] = None
    failure: Optional[FailureReason] = None

    @classmethod
    def failed(cls, file_name: str, reason: FailureReason) -> "ResolutionResult":
        """Construit un resultat d'echec terminal."""
        return cls(file_name=file_name, status=ResolutionStatus.FAILED, failure=reason)

    @property
    def success(self) -> bool:
        """True si la serie a ete identifiee."""
        return self.status == ResolutionStatus.IDENTIFIED

    @property
    def extension(self) -> str:
        """Extension du fichier (avec le point), chaine vide si absente."""
        return PurePath(self.file_name).suffix
