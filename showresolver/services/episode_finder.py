"""
Recherche des fichiers d'un episode donne sur le disque.

Parcourt recursivement des repertoires, garde les fichiers video dont le
chemin ("<repertoires>/<nom>") mentionne la serie et l'episode recherches,
puis confirme chaque candidat par le pipeline de resolution (sans appel
distant).
"""

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from loguru import logger

from showresolver.core.value_objects.episode import EpisodeDescriptor
from showresolver.core.value_objects.resolution import ResolutionResult
from showresolver.services.name_matcher import release_matches_show_and_episode
from showresolver.services.resolver import ResolverService
from showresolver.utils.constants import VIDEO_EXTENSIONS


@dataclass(frozen=True)
class FoundEpisode:
    """Fichier trouve et son resultat de resolution."""

    path: Path
    result: ResolutionResult


class EpisodeFinderService:
    """
    Service de recherche de fichiers d'episodes.

    Example:
        finder = EpisodeFinderService(resolver)
        found = await finder.find([Path("~/TV")], "House", "S01E01")
    """

    def __init__(self, resolver: ResolverService) -> None:
        self._resolver = resolver

    @staticmethod
    def iter_video_files(directories: Iterable[Path]) -> Iterator[Path]:
        """
        Enumere recursivement les fichiers video.

        Les repertoires inexistants ou illisibles sont ignores.
        """
        for directory in directories:
            directory = Path(directory).expanduser()
            if not directory.is_dir():
                logger.warning("Repertoire de recherche introuvable", path=str(directory))
                continue
            for root, _dirs, files in os.walk(directory):
                for name in sorted(files):
                    path = Path(root) / name
                    if path.suffix.lower() in VIDEO_EXTENSIONS:
                        yield path

    @staticmethod
    def matches(path: Path, show_title: str, episode: Union[EpisodeDescriptor, str]) -> bool:
        """Test rapide du chemin complet contre le nom de la serie et l'episode."""
        return release_matches_show_and_episode(show_title, episode, str(path))

    async def find(
        self,
        directories: Iterable[Path],
        show_title: str,
        episode: Union[EpisodeDescriptor, str],
    ) -> list[FoundEpisode]:
        """
        Recherche les fichiers correspondant a un episode.

        Args:
            directories: Repertoires a parcourir recursivement
            show_title: Nom de la serie
            episode: Episode (descripteur ou notation "S01E01", "1x01", date)

        Returns:
            Fichiers dont la resolution aboutit, dans l'ordre de parcours
        """
        found: list[FoundEpisode] = []

        for path in self.iter_video_files(directories):
            if not self.matches(path, show_title, episode):
                continue

            parents = [part for part in path.parent.parts if part not in ("", path.anchor)]
            result = await self._resolver.parse_file(path.name, parents, ask_remote=False)
            if result.episode is None:
                logger.debug("Candidat rejete", path=str(path), failure=result.failure)
                continue

            found.append(FoundEpisode(path=path, result=result))

        logger.info("Recherche terminee", show=show_title, count=len(found))
        return found
