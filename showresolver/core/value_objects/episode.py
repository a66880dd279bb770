"""
Objets valeur pour la numerotation des episodes.

Un EpisodeDescriptor represente l'episode designe par un nom de fichier,
soit par saison/numero (S02E14, 2x14), soit par date de diffusion (2010.01.01).
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class EpisodeNotation(Enum):
    """Convention textuelle d'ecriture d'un episode.

    Valeurs:
        STANDARD: S02E14 (saison et episode sur deux chiffres)
        ALTERNATIVE: 2x14 (saison non paddee)
        AIRDATE: 2010.01.01 (emissions quotidiennes)
    """

    STANDARD = "standard"
    ALTERNATIVE = "alternative"
    AIRDATE = "airdate"


@dataclass(frozen=True)
class EpisodeDescriptor:
    """
    Episode extrait d'un nom de fichier.

    Objet valeur immutable. Quand air_date est renseignee elle sert de cle
    de recherche et la resolution renvoie un nouveau descripteur dont
    season/episode sont completes depuis le catalogue.

    Attributs:
        season: Numero de saison (0 si inconnu, ex: notation par date)
        episode: Numero d'episode dans la saison
        second_episode: Dernier episode pour les doubles episodes (S01E01-02)
        air_date: Date de diffusion pour la notation par date
    """

    season: int = 0
    episode: int = 0
    second_episode: Optional[int] = None
    air_date: Optional[date] = None

    def __post_init__(self) -> None:
        if self.season < 0 or self.episode < 0:
            raise ValueError(
                f"Numerotation invalide: saison={self.season}, episode={self.episode}"
            )

    @property
    def is_multi_episode(self) -> bool:
        """Indique si le fichier couvre plusieurs episodes."""
        return self.second_episode is not None

    @property
    def guessed_title(self) -> str:
        """Titre de substitution quand le catalogue ne fournit pas de titre."""
        return f"Season {self.season}, Episode {self.episode}"
