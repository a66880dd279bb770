"""
Utilitaires et constantes pour ShowResolver.

Ce module contient les constantes partagees.
"""

from showresolver.utils.constants import (
    AIRDATE_NOTATION_SHOWS,
    MAX_PARENT_DEPTH,
    SCENE_KEYWORDS,
    SCENE_NAMES,
    VIDEO_EXTENSIONS,
)

__all__ = [
    "AIRDATE_NOTATION_SHOWS",
    "MAX_PARENT_DEPTH",
    "SCENE_KEYWORDS",
    "SCENE_NAMES",
    "VIDEO_EXTENSIONS",
]
