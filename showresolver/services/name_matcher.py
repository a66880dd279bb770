"""
Matching des noms de series et des releases.

Fournit :
- tokenize : decoupage d'un nom normalise en sequence ordonnee de mots
- sequence_matches : comparaison de deux sequences (egalite, prefixe optionnel)
- release_matches_show_and_episode : predicat unique decidant si une release
  correspond a une serie ET a un episode donnes
- filter_releases : application du predicat a une liste de releases

L'ordre des mots est significatif : "Law Order" ne correspond pas a "Order Law".
"""

import re
from typing import Iterable, Optional, Union

from showresolver.core.value_objects.episode import EpisodeDescriptor
from showresolver.services.episode_extractor import extract_airdate, extract_episode
from showresolver.services.normalizer import normalize, strip_noise


def tokenize(name: str) -> list[str]:
    """
    Decoupe un nom en mots normalises, en minuscules, dans l'ordre.

    Args:
        name: Nom de serie ou de fichier nettoye.

    Returns:
        Liste des mots non vides.
    """
    return strip_noise(name).lower().split()


def sequence_matches(
    candidate: list[str],
    target: list[str],
    allow_prefix: bool = False,
) -> bool:
    """
    Compare deux sequences de mots.

    Args:
        candidate: Mots extraits du nom de fichier.
        target: Mots du nom de la serie au catalogue (canonique ou alias).
        allow_prefix: Accepte aussi un candidat commencant par la cible
                      ("show name us" pour "show name").

    Returns:
        True si les sequences sont egales (ou prefixe accepte).
        Deux sequences vides ne correspondent jamais.
    """
    if not candidate or not target:
        return False
    if candidate == target:
        return True
    return allow_prefix and candidate[: len(target)] == target


def _episode_renderings(episode: EpisodeDescriptor) -> list[re.Pattern]:
    if episode.air_date is not None:
        aired = episode.air_date
        return [
            re.compile(
                rf"(?<!\d){aired.year}[.\-\s]{aired.month:02d}[.\-\s]{aired.day:02d}(?!\d)"
            )
        ]

    season, number = episode.season, episode.episode
    return [
        re.compile(rf"S{season:02d}E{number:02d}(?!\d)", re.IGNORECASE),
        re.compile(rf"S{season:02d}\.E{number:02d}(?!\d)", re.IGNORECASE),
        re.compile(rf"(?<![0-9a-z]){season}x{number:02d}(?!\d)", re.IGNORECASE),
        re.compile(rf"(?<![0-9a-z]){season}{number:02d}(?![0-9a-z])", re.IGNORECASE),
    ]


def _coerce_episode(episode: Union[EpisodeDescriptor, str]) -> Optional[EpisodeDescriptor]:
    if isinstance(episode, EpisodeDescriptor):
        return episode
    return extract_episode(episode) or extract_airdate(episode)


def release_matches_show_and_episode(
    show_title: str,
    episode: Union[EpisodeDescriptor, str],
    release: str,
) -> bool:
    """
    Determine si une release correspond a la serie et a l'episode demandes.

    Deux conditions, toutes deux obligatoires :
    - chaque mot du titre normalise apparait en mot entier dans la release
    - une des ecritures de l'episode apparait : S02E14, S02.E14, 2x14 ou 214

    Args:
        show_title: Nom de la serie.
        episode: Descripteur ou notation ("S02E14", "2x14", "2010.01.05").
        release: Nom de la release ou chemin du fichier.

    Returns:
        True si la release appartient a cet episode de cette serie.
    """
    descriptor = _coerce_episode(episode)
    if descriptor is None:
        return False

    words = normalize(show_title).split()
    if not words:
        return False

    has_title = all(
        re.search(rf"\b{re.escape(word)}\b", release, re.IGNORECASE) for word in words
    )
    if not has_title:
        return False

    return any(pattern.search(release) for pattern in _episode_renderings(descriptor))


def filter_releases(
    show_title: str,
    episode: Union[EpisodeDescriptor, str],
    releases: Iterable[str],
) -> list[str]:
    """Garde les releases correspondant a la serie et a l'episode, dans l'ordre."""
    return [
        release
        for release in releases
        if release_matches_show_and_episode(show_title, episode, release)
    ]
