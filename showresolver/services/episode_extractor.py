"""
Extraction et reformatage de la numerotation des episodes.

Notations reconnues, par ordre de priorite (la premiere qui correspond gagne) :
1. S01E01, S01E01-02, S01E01-E02, S01E01E02, S01.E01
2. 1x01, 1x01-02
3. Date de diffusion 2010.01.01 (emissions quotidiennes, hors extract_episode)

Une resolution collee a un episode (S01E01-720p) n'est jamais lue comme
un second episode.
"""

import re
from datetime import date
from typing import Optional, Union

from showresolver.core.value_objects.episode import EpisodeDescriptor, EpisodeNotation
from showresolver.services.normalizer import create_slug, split, normalize as normalize_name
from showresolver.utils.constants import AIRDATE_NOTATION_SHOWS

_RESOLUTION_GUARD = r"(?!-(?:1080|720|480))"

STANDARD_NUMBERING = re.compile(
    r"S(?P<season>\d{1,2})[.\s\-]?E(?P<episode>\d{1,3})(?!\d)"
    rf"(?:{_RESOLUTION_GUARD}(?:-E?|E)(?P<second>\d{{1,3}})(?!\d))?",
    re.IGNORECASE,
)

ALTERNATIVE_NUMBERING = re.compile(
    r"(?<!\d)(?P<season>\d{1,2})x(?P<episode>\d{1,3})(?!\d)"
    rf"(?:{_RESOLUTION_GUARD}-(?P<second>\d{{1,3}})(?!\d))?",
    re.IGNORECASE,
)

AIRDATE_NUMBERING = re.compile(
    r"(?<!\d)(?P<year>(?:19|20)\d{2})[.\-_ ](?P<month>0[1-9]|1[0-2])[.\-_ ]"
    r"(?P<day>0[1-9]|[12]\d|3[01])(?!\d)"
)

# Ordre significatif : evaluation sequentielle, premier succes retenu
EPISODE_RULES = (STANDARD_NUMBERING, ALTERNATIVE_NUMBERING)
NUMBERING_RULES = (STANDARD_NUMBERING, ALTERNATIVE_NUMBERING, AIRDATE_NUMBERING)

_NOTATION_ALIASES = {
    "s00e00": EpisodeNotation.STANDARD,
    "0x00": EpisodeNotation.ALTERNATIVE,
    "airdate": EpisodeNotation.AIRDATE,
    "standard": EpisodeNotation.STANDARD,
    "alternative": EpisodeNotation.ALTERNATIVE,
}


def _coerce_notation(notation: Union[EpisodeNotation, str]) -> EpisodeNotation:
    if isinstance(notation, EpisodeNotation):
        return notation
    try:
        return _NOTATION_ALIASES[notation.strip().lower()]
    except KeyError:
        raise ValueError(f"Notation d'episode inconnue: {notation!r}") from None


def extract_episode(text: str) -> Optional[EpisodeDescriptor]:
    """
    Extrait la notation S01E01 ou 1x01 d'un texte.

    Args:
        text: Nom de fichier ou de release.

    Returns:
        EpisodeDescriptor, ou None si aucune numerotation n'est trouvee.

    Example:
        >>> extract_episode("Show.Name.S02E14-15.720p")
        EpisodeDescriptor(season=2, episode=14, second_episode=15, air_date=None)
    """
    for rule in EPISODE_RULES:
        match = rule.search(text)
        if match is None:
            continue
        second = match.group("second")
        return EpisodeDescriptor(
            season=int(match.group("season")),
            episode=int(match.group("episode")),
            second_episode=int(second) if second is not None else None,
        )
    return None


def extract_airdate(text: str) -> Optional[EpisodeDescriptor]:
    """
    Extrait une date de diffusion (2010.01.05, 2010-01-05...) d'un texte.

    Les dates impossibles (2010.02.30) sont ignorees.
    """
    for match in AIRDATE_NUMBERING.finditer(text):
        try:
            aired = date(int(match.group("year")), int(match.group("month")), int(match.group("day")))
        except ValueError:
            continue
        return EpisodeDescriptor(air_date=aired)
    return None


def find_numbering(file_name: str) -> Optional[tuple[str, str]]:
    """
    Coupe un nom de fichier au niveau de sa notation d'episode.

    Returns:
        Tuple (partie nom, notation trouvee), ou None sans notation.
    """
    for rule in NUMBERING_RULES:
        match = rule.search(file_name)
        if match is not None:
            return file_name[: match.start()], match.group(0)
    return None


def parse_numbering(numbering: str) -> Optional[EpisodeDescriptor]:
    """Convertit une notation isolee par find_numbering en descripteur."""
    return extract_episode(numbering) or extract_airdate(numbering)


def reformat(
    descriptor: EpisodeDescriptor,
    notation: Union[EpisodeNotation, str] = EpisodeNotation.STANDARD,
) -> str:
    """
    Ecrit un episode dans la notation demandee.

    - STANDARD ("S00E00") : S02E14, S02E14-E15
    - ALTERNATIVE ("0x00") : 2x14, 2x14-15
    - AIRDATE : 2010.01.05

    Raises:
        ValueError: Notation inconnue, ou AIRDATE sans date de diffusion.
    """
    notation = _coerce_notation(notation)

    if notation is EpisodeNotation.AIRDATE:
        if descriptor.air_date is None:
            raise ValueError("Notation par date demandee pour un episode sans date")
        return descriptor.air_date.strftime("%Y.%m.%d")

    if notation is EpisodeNotation.ALTERNATIVE:
        text = f"{descriptor.season}x{descriptor.episode:02d}"
        if descriptor.second_episode is not None:
            text += f"-{descriptor.second_episode:02d}"
        return text

    text = f"S{descriptor.season:02d}E{descriptor.episode:02d}"
    if descriptor.second_episode is not None:
        text += f"-E{descriptor.second_episode:02d}"
    return text


def replace_episode(
    query: str,
    notation: Union[EpisodeNotation, str],
    normalize: bool = False,
) -> str:
    """
    Remplace la notation d'episode d'une requete "Serie S01E01".

    Args:
        query: Nom de serie suivi d'une notation d'episode.
        notation: Notation cible.
        normalize: Si True, normalise aussi le nom de la serie.

    Returns:
        Requete reecrite, ou le nom seul si aucune notation n'est trouvee.
    """
    show, _ = split(query)
    if normalize:
        show = normalize_name(show)

    descriptor = extract_episode(query)
    if descriptor is None:
        return show
    return f"{show} {reformat(descriptor, notation)}"


def notation_for_show(name: str, catalog_notation: Optional[str] = None) -> EpisodeNotation:
    """
    Determine la notation utilisee par les releases d'une serie.

    Les emissions quotidiennes connues utilisent toujours la date de diffusion ;
    sinon la notation enregistree dans le catalogue est retenue.
    """
    if create_slug(name) in AIRDATE_NOTATION_SHOWS:
        return EpisodeNotation.AIRDATE
    if catalog_notation:
        try:
            return _coerce_notation(catalog_notation)
        except ValueError:
            pass
    return EpisodeNotation.STANDARD
