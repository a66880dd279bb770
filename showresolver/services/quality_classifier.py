"""
Classification de la qualite video d'une release.

La qualite est deduite du nom de release par une liste ORDONNEE de regles.
Chaque regle est une conjonction d'un ou deux motifs (resolution ET source) ;
la premiere regle satisfaite gagne. Les regles ne sont pas mutuellement
exclusives : "1080p.WEB-DL.HDTV" satisfait les regles 1 et 3, l'ordre decide.

Si aucune regle ne correspond, l'extension du fichier sert d'indice.
"""

import re

from showresolver.core.value_objects.quality import Quality

_FLAGS = re.IGNORECASE

_1080 = r"\b1080(i|p)\b"
_720 = r"\b720p\b"
_WEBDL = r"\bWEB[_\-.]?DL\b"
_BLURAY = r"\bBlu[_\-]?Ray\b"

# (verdict, motifs) - ordre de priorite, ne pas trier
QUALITY_RULES: tuple[tuple[Quality, tuple[re.Pattern, ...]], ...] = tuple(
    (quality, tuple(re.compile(pattern, _FLAGS) for pattern in patterns))
    for quality, patterns in (
        (Quality.WEBDL_1080P, (_1080, _WEBDL)),
        (Quality.BLURAY_1080P, (_1080, _BLURAY)),
        (Quality.HDTV_1080I, (_1080, r"\bHDTV\b")),
        (Quality.WEBDL_720P, (_720, _WEBDL)),
        (Quality.BLURAY_720P, (_720, _BLURAY)),
        (Quality.HDTV_720P, (_720,)),
        (Quality.HR_X264, (r"\b((HR|HiRes|High[_\-.]?Resolution)\b|x264\-|H264)",)),
        (Quality.HDTV_XVID, (r"\b(HDTV|PDTV|DVBRip|DVDRip)\b",)),
        (Quality.TVRIP, (r"\bTV[_\-.]?Rip\b",)),
    )
)

# Dernier recours : indices tires de l'extension
EXTENSION_RULES: tuple[tuple[Quality, re.Pattern], ...] = (
    (Quality.HDTV_1080I, re.compile(r"\.ts$", _FLAGS)),
    (Quality.HDTV_720P, re.compile(r"\.mkv$", _FLAGS)),
    (Quality.HDTV_XVID, re.compile(r"\.avi$", _FLAGS)),
    (Quality.TVRIP, re.compile(r"\.m(ov|pg)$", _FLAGS)),
)

_GROUP = re.compile(
    r"-(?P<group>[a-z0-9&]+)(?:\[[^\]]*\])?(?:\.[a-z0-9]{2,4})?$",
    _FLAGS,
)

# Fins de tags source ou qualite qui ne sont pas des groupes ("WEB-DL", "Blu-Ray")
_NOT_GROUPS = frozenset(
    {"dl", "rip", "ray", "hdtv", "pdtv", "x264", "h264", "720p", "1080p", "1080i"}
)


def classify(release: str) -> Quality:
    """
    Determine la qualite d'une release ou d'un chemin de fichier.

    Args:
        release: Nom de release ou chemin (repertoires parents inclus).

    Returns:
        Le verdict de la premiere regle satisfaite, Quality.UNKNOWN sinon.
        Ne leve jamais d'exception.
    """
    release = release.replace("\u00a0", ".").replace(" ", ".")

    for quality, patterns in QUALITY_RULES:
        if all(pattern.search(release) for pattern in patterns):
            return quality

    for quality, pattern in EXTENSION_RULES:
        if pattern.search(release):
            return quality

    return Quality.UNKNOWN


def extract_group(release: str) -> str:
    """
    Extrait le groupe de release (suffixe "-GROUP" avant l'extension).

    Returns:
        Nom du groupe, ou chaine vide si absent.
    """
    match = _GROUP.search(release.strip())
    if match is None or match.group("group").lower() in _NOT_GROUPS:
        return ""
    return match.group("group")
