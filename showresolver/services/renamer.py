"""
Generation de noms de fichiers a partir d'un resultat de resolution.

Le format est une chaine contenant des variables remplacees par les
informations du fichier identifie :

    $show       Nom de la serie
    $season     Saison sur 2 chiffres      $seasonz   Saison sans zero
    $episode    Episode sur 2 chiffres     $episodez  Episode sans zero
                (plage "01-02" pour un fichier multi-episodes)
    $title      Titre de l'episode
    $quality    Qualite video
    $group      Groupe de release
    $ext        Extension (avec le point)
    $year       Annee de diffusion
    $month      Mois sur 2 chiffres        $monthz    Mois sans zero
    $day        Jour sur 2 chiffres        $dayz      Jour sans zero

Exemple : "$show S$seasonE$episode - $title$ext"
    -> "House S01E01 - Pilot.avi"
"""

import re
import unicodedata

from pathvalidate import sanitize_filename

from showresolver.core.value_objects.resolution import ResolutionResult

# Longueur maximale du nom de fichier
MAX_FILENAME_LENGTH = 200

# Marqueur de partie en fin de titre, retire pour un fichier multi-episodes
PART_TEXT = re.compile(r"\s*\((?:Part|Pt\.?)\s*\d+\)\s*$", re.IGNORECASE)

# Variables triees par longueur decroissante : $seasonz avant $season
_VARIABLE = re.compile(
    r"\$(seasonz|season|episodez|episode|monthz|month|dayz|day|show|title|quality|group|ext|year)"
)


def _number(value: int, padded: bool) -> str:
    return f"{value:02d}" if padded else str(value)


def build_variables(result: ResolutionResult) -> dict[str, str]:
    """
    Calcule la valeur de chaque variable de format pour un resultat.

    Les variables de date sont vides quand la date de diffusion est inconnue.
    """
    episode = result.episode
    season = episode.season if episode else 0
    number = episode.episode if episode else 0
    second = episode.second_episode if episode else None

    def episode_range(padded: bool) -> str:
        text = _number(number, padded)
        if second is not None:
            text += "-" + _number(second, padded)
        return text

    title = result.title
    if second is not None:
        title = PART_TEXT.sub("", title)

    aired = result.air_date
    if aired is None and episode is not None:
        aired = episode.air_date

    return {
        "show": result.show,
        "seasonz": _number(season, padded=False),
        "season": _number(season, padded=True),
        "episodez": episode_range(padded=False),
        "episode": episode_range(padded=True),
        "title": title,
        "quality": result.quality.value,
        "group": result.group,
        "ext": result.extension,
        "year": str(aired.year) if aired else "",
        "monthz": str(aired.month) if aired else "",
        "month": f"{aired.month:02d}" if aired else "",
        "dayz": str(aired.day) if aired else "",
        "day": f"{aired.day:02d}" if aired else "",
    }


def sanitize_for_filesystem(text: str) -> str:
    """
    Nettoie une chaine pour l'utiliser comme nom de fichier.

    Normalisation Unicode NFKC, ":" remplace par " -", caracteres interdits
    supprimes par pathvalidate, troncature a MAX_FILENAME_LENGTH.
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = text.replace(": ", " - ").replace(":", "-")
    text = sanitize_filename(text, platform="universal", replacement_text="")

    if len(text) > MAX_FILENAME_LENGTH:
        text = text[:MAX_FILENAME_LENGTH]

    return text


def format_file_name(format: str, result: ResolutionResult) -> str:
    """
    Genere un nom de fichier a partir d'un format et d'un resultat.

    Args:
        format: Chaine de format avec variables ($show, $season...)
        result: Resultat de resolution (IDENTIFIED ou NOT_IDENTIFIED)

    Returns:
        Nom de fichier nettoye pour le systeme de fichiers

    Raises:
        ValueError: Si le resultat ne porte aucun episode (echec de resolution)
    """
    if result.episode is None:
        raise ValueError(f"Aucun episode identifie pour {result.file_name!r}")

    variables = build_variables(result)
    name = _VARIABLE.sub(lambda match: variables[match.group(1)], format)
    return sanitize_for_filesystem(name)
