"""
Verdict de qualite video d'une release.

L'ordre de declaration des membres correspond au classement des qualites
(la meilleure en premier).
"""

from enum import Enum


class Quality(Enum):
    """Qualite video deduite du nom de release. La valeur est le libelle affiche."""

    WEBDL_1080P = "WebDL-1080p"
    BLURAY_1080P = "BluRay-1080p"
    HDTV_1080I = "HDTV-1080i"
    WEBDL_720P = "WebDL-720p"
    BLURAY_720P = "BluRay-720p"
    HDTV_720P = "HDTV-720p"
    HR_X264 = "HR-x264"
    HDTV_XVID = "HDTV-XviD"
    TVRIP = "TVRip"
    UNKNOWN = "Unknown"

    @property
    def rank(self) -> int:
        """Rang de la qualite (0 = meilleure)."""
        return list(Quality).index(self)
