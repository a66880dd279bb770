"""
Normalisation des noms de series.

Ce module fournit les fonctions de nettoyage des noms de series utilisees
par le matcher et le pipeline de resolution :
- normalize : nettoyage generique ou remplacement par la table des noms de scene
- split : separation du nom de la serie et de la notation d'episode
- strip_noise : nettoyage generique seul (caracteres speciaux, "the", "and")
- create_slug : identifiant compact pour le catalogue distant
"""

import re

from showresolver.utils.constants import SCENE_NAMES

_SCENE_NAME_MAP: dict[str, str] = dict(SCENE_NAMES)

# Espace precedant une notation S01E01 : le suffixe est preserve tel quel
_EPISODE_SUFFIX = re.compile(r"\s+(?=S\d{1,2}E\d{1,2})", re.IGNORECASE)

_SPECIAL_CHARS = re.compile(r"[^a-z0-9\s]", re.IGNORECASE)
_NOISE_WORDS = re.compile(r"\b(?:the|and)\b", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")

_SPLIT_EPISODE = re.compile(
    r"^(?P<show>.*?)\s*(?P<episode>S\d{1,2}E\d{1,2}|(?<!\d)\d{1,2}x\d{1,2}(?!\d))",
    re.IGNORECASE,
)


def strip_noise(name: str) -> str:
    """
    Applique le nettoyage generique d'un nom.

    Supprime tout caractere qui n'est ni lettre, ni chiffre, ni espace,
    puis les mots isoles "the" et "and", et compacte les espaces.
    Le resultat est un point fixe : strip_noise(strip_noise(x)) == strip_noise(x).

    Args:
        name: Nom brut.

    Returns:
        Nom nettoye.
    """
    name = _SPECIAL_CHARS.sub("", name)
    name = _NOISE_WORDS.sub("", name)
    return _WHITESPACE.sub(" ", name).strip()


def normalize(show: str) -> str:
    """
    Normalise un nom de serie.

    Une notation S01E01 precedee d'un espace est detachee, puis recollee
    telle quelle apres normalisation. Un nom present dans la table des noms
    de scene est remplace par sa forme canonique sans nettoyage generique.

    Args:
        show: Nom de la serie, eventuellement suivi d'une notation d'episode.

    Returns:
        Nom normalise.

    Example:
        >>> normalize("House, M.D.")
        'House'
        >>> normalize("The Big Bang Theory S01E01")
        'Big Bang Theory S01E01'
    """
    show = show.strip()

    if show in _SCENE_NAME_MAP:
        return _SCENE_NAME_MAP[show]

    episode = ""
    if _EPISODE_SUFFIX.search(show):
        parts = _EPISODE_SUFFIX.split(show)
        show = parts[0]
        episode = parts[-1]

    if show in _SCENE_NAME_MAP:
        show = _SCENE_NAME_MAP[show]
    else:
        show = strip_noise(show)

    return " ".join(part for part in (show, episode) if part)


def split(query: str) -> tuple[str, str]:
    """
    Separe le nom de la serie et la notation d'episode.

    Supporte les notations S00E00 et 0x00 (insensible a la casse).

    Args:
        query: Nom de serie suivi d'une notation d'episode.

    Returns:
        Tuple (nom de la serie, notation). Sans notation reconnue,
        la notation est vide et le nom est la requete entiere.
    """
    match = _SPLIT_EPISODE.search(query)
    if match is None:
        return query.strip(), ""
    return match.group("show").strip(), match.group("episode")


def create_slug(name: str) -> str:
    """
    Cree le slug d'un nom de serie ("The Daily Show" -> "dailyshow").

    Args:
        name: Nom de la serie.

    Returns:
        Slug en minuscules sans caracteres non alphanumeriques.
    """
    return _NON_ALNUM.sub("", strip_noise(name).lower())
