"""
Pipeline de resolution des noms de fichiers d'episodes.

ResolverService transforme un nom de fichier (et les noms de ses repertoires
parents) en ResolutionResult :

1. Extraction de la numerotation (S01E01, 1x01, date). Sans numerotation,
   echec EPISODE_NUMBERING_NOT_FOUND, aucun tier n'est consulte.
2. Identification par le nom nettoye du fichier.
3. A defaut, identification par les repertoires parents (5 au plus, du plus
   proche au plus eloigne), arret au premier succes.
4. Qualite et groupe de release extraits du chemin complet.

Tiers d'identification, chacun court-circuitant les suivants :
1. Catalogue local (sequences de mots du nom canonique et de l'alias)
2. Catalogue distant en cache (slug), recoupe avec le catalogue local
3. Cache d'identites du processus
4. API de recherche distante

Une serie trouvee sans l'episode demande reste un succes : le titre
retombe sur "Season N, Episode M". Les erreurs des tiers distants sont
journalisees et traitees comme une absence de correspondance.
"""

import re
import string
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from loguru import logger

from showresolver.core.entities.catalog import CatalogEpisode, CatalogShow
from showresolver.core.ports.catalog import ILocalCatalog
from showresolver.core.ports.remote import IShowLookupAPI
from showresolver.core.value_objects.episode import EpisodeDescriptor
from showresolver.core.value_objects.resolution import (
    FailureReason,
    ResolutionResult,
    ResolutionStatus,
)
from showresolver.core.value_objects.show import DetailEpisode, ShowDetail
from showresolver.services.episode_extractor import find_numbering, parse_numbering
from showresolver.services.guide_registry import GuideRegistry
from showresolver.services.name_matcher import sequence_matches, tokenize
from showresolver.services.normalizer import create_slug
from showresolver.services.quality_classifier import classify, extract_group
from showresolver.services.resolution_context import ResolutionContext
from showresolver.utils.constants import MAX_PARENT_DEPTH, SCENE_KEYWORDS

_CONTRACTIONS = re.compile(r"(?<=[A-Z])['’](?=[A-Z])")
_KEYWORDS = re.compile("^(?:" + "|".join(re.escape(keyword) for keyword in SCENE_KEYWORDS) + ")")
_SPECIAL_CHARS = re.compile(r"[^A-Z0-9]+")
_VOL_NUMBERING = re.compile(
    r"\b(?:SEASON|SAISON|SERIES|VOL(?:UME)?|DIS[CK]|DVD|PART)\s*\d{1,3}\b"
    r"|\bS\d{1,2}\b"
    r"|\bCOMPLETE\b"
)
_WHITESPACE = re.compile(r"\s+")

_Episode = TypeVar("_Episode", CatalogEpisode, DetailEpisode)


def clean_file_name(name: str) -> str:
    """
    Nettoie la partie "nom" d'un nom de fichier.

    Majuscules, apostrophes de contraction supprimees (GREY'S -> GREYS),
    prefixes de scene retires (AAF-, MED-), ponctuation remplacee par des espaces.
    """
    name = name.upper()
    name = _CONTRACTIONS.sub("", name)
    name = _KEYWORDS.sub("", name).strip()
    return _SPECIAL_CHARS.sub(" ", name).strip()


def clean_directory_name(name: str) -> str:
    """Nettoie un nom de repertoire parent (idem fichier, sans numeros de saison/volume)."""
    name = _KEYWORDS.sub("", name.upper()).strip()
    name = _SPECIAL_CHARS.sub(" ", name).strip()
    name = _VOL_NUMBERING.sub("", name)
    return _WHITESPACE.sub(" ", name).strip()


@dataclass(frozen=True)
class Identification:
    """
    Serie identifiee par un tier.

    Attributs:
        name: Nom canonique de la serie
        episode: Descripteur, complete par le catalogue si recherche par date
        title: Titre de l'episode, vide si l'episode n'a pas ete trouve
        air_date: Date de diffusion de l'episode si trouve
        tier: Nom du tier ayant identifie la serie
    """

    name: str
    episode: EpisodeDescriptor
    title: str = ""
    air_date: Optional[datetime] = None
    tier: str = ""


def _find_episode(
    episodes: Iterable[_Episode],
    descriptor: EpisodeDescriptor,
    aired_on: Callable[[_Episode], Optional[date]],
) -> Optional[_Episode]:
    """Premier episode correspondant a la date de diffusion, ou a saison+numero."""
    for episode in episodes:
        if descriptor.air_date is not None:
            if aired_on(episode) == descriptor.air_date:
                return episode
        elif episode.season == descriptor.season and episode.number == descriptor.episode:
            return episode
    return None


def _detail_air_date(episode: DetailEpisode) -> Optional[date]:
    return episode.air_date.date() if episode.air_date else None


def _backfill(descriptor: EpisodeDescriptor, episode: _Episode) -> EpisodeDescriptor:
    """Complete saison/numero d'un descripteur par date depuis l'episode trouve."""
    if descriptor.air_date is None:
        return descriptor
    return replace(descriptor, season=episode.season, episode=episode.number)


class ResolverService:
    """
    Service orchestrant l'identification des fichiers d'episodes.

    Example:
        resolver = ResolverService(
            local_catalog=catalog,
            context=ResolutionContext(snapshot_store=store, remote_catalog=api),
            guides=GuideRegistry([tvdb_client]),
            lookup_api=api,
        )
        result = await resolver.parse_file(
            "Show.Name.S01E01.HDTV.XviD-GRP.avi", parents=["TV", "Show Name"]
        )
    """

    def __init__(
        self,
        local_catalog: ILocalCatalog,
        context: ResolutionContext,
        guides: Optional[GuideRegistry] = None,
        lookup_api: Optional[IShowLookupAPI] = None,
        max_parent_depth: int = MAX_PARENT_DEPTH,
        allow_prefix: bool = False,
    ) -> None:
        """
        Initialise le pipeline.

        Args:
            local_catalog: Catalogue local (premier tier)
            context: Caches partages (catalogue distant, identites, details)
            guides: Guides distants par nom de source
            lookup_api: API de recherche par texte libre (dernier tier)
            max_parent_depth: Nombre maximum de repertoires parents consultes
            allow_prefix: Accepte un nom de fichier commencant par le nom de la serie
        """
        self._local_catalog = local_catalog
        self._context = context
        self._guides = guides or GuideRegistry()
        self._lookup_api = lookup_api
        self._max_parent_depth = max_parent_depth
        self._allow_prefix = allow_prefix

    async def parse_file(
        self,
        file_name: str,
        parents: Optional[Sequence[str]] = None,
        ask_remote: bool = True,
    ) -> ResolutionResult:
        """
        Identifie un fichier d'episode.

        Args:
            file_name: Nom du fichier (sans repertoire)
            parents: Noms des repertoires parents, le plus proche en dernier
            ask_remote: Autorise les appels aux guides et a l'API distante

        Returns:
            ResolutionResult (IDENTIFIED, NOT_IDENTIFIED ou FAILED)
        """
        with logger.contextualize(resolving=file_name):
            return await self._parse_file(file_name, list(parents or []), ask_remote)

    async def _parse_file(
        self, file_name: str, parents: list[str], ask_remote: bool
    ) -> ResolutionResult:
        numbering = find_numbering(file_name)
        descriptor = parse_numbering(numbering[1]) if numbering else None
        if numbering is None or descriptor is None:
            logger.debug("Numerotation introuvable", file=file_name)
            return ResolutionResult.failed(file_name, FailureReason.EPISODE_NUMBERING_NOT_FOUND)

        name = clean_file_name(numbering[0])
        guessed_name = name
        identification: Optional[Identification] = None

        if name:
            identification = await self.identify_show(name, descriptor, ask_remote)

        if identification is None and parents:
            nearest_first = list(reversed(parents))[: self._max_parent_depth]
            for directory in nearest_first:
                candidate = clean_directory_name(directory)
                if not candidate:
                    continue
                guessed_name = guessed_name or candidate
                identification = await self.identify_show(candidate, descriptor, ask_remote)
                if identification is not None:
                    break

        if identification is None and not guessed_name:
            logger.debug("Nom de serie introuvable", file=file_name)
            return ResolutionResult.failed(file_name, FailureReason.SHOW_NAME_NOT_FOUND)

        path = " ".join([*parents, file_name])
        quality = classify(path)
        group = extract_group(path)

        if identification is None:
            logger.debug("Serie non identifiee", file=file_name, guess=guessed_name)
            return ResolutionResult(
                file_name=file_name,
                status=ResolutionStatus.NOT_IDENTIFIED,
                show=string.capwords(guessed_name.lower()),
                episode=descriptor,
                title=descriptor.guessed_title,
                quality=quality,
                group=group,
                failure=FailureReason.SHOW_NOT_IDENTIFIED,
            )

        episode = identification.episode
        logger.debug(
            "Fichier identifie",
            file=file_name,
            show=identification.name,
            tier=identification.tier,
        )
        return ResolutionResult(
            file_name=file_name,
            status=ResolutionStatus.IDENTIFIED,
            show=identification.name,
            episode=episode,
            title=identification.title or episode.guessed_title,
            quality=quality,
            group=group,
            air_date=identification.air_date,
        )

    async def identify_show(
        self,
        name: str,
        episode: EpisodeDescriptor,
        ask_remote: bool = False,
    ) -> Optional[Identification]:
        """
        Identifie une serie en parcourant les tiers dans l'ordre.

        Args:
            name: Nom candidat nettoye
            episode: Episode recherche
            ask_remote: Autorise les guides et l'API distante

        Returns:
            Identification du premier tier qui reconnait la serie, ou None
        """
        identification = self._identify_local(name, episode)
        if identification is None:
            identification = await self._identify_remote_catalog(name, episode, ask_remote)
        if identification is None and ask_remote:
            identification = self._identify_cached(name, episode)
        if identification is None and ask_remote:
            identification = await self._identify_lookup(name, episode)
        return identification

    def _show_matches(self, name_parts: list[str], show: CatalogShow) -> bool:
        if sequence_matches(name_parts, tokenize(show.name), self._allow_prefix):
            return True
        return bool(show.release) and sequence_matches(
            name_parts, tokenize(show.release), self._allow_prefix
        )

    def _from_catalog(
        self,
        show: CatalogShow,
        episode: EpisodeDescriptor,
        tier: str,
    ) -> Identification:
        """Recherche l'episode dans le catalogue local pour une serie reconnue."""
        episodes = self._local_catalog.get_episodes(show.id) if show.id is not None else []
        found = _find_episode(
            episodes, episode, lambda ep: ep.original_air_date(show.timezone)
        )
        if found is None:
            return Identification(name=show.name, episode=episode, tier=tier)
        return Identification(
            name=show.name,
            episode=_backfill(episode, found),
            title=found.title,
            air_date=found.air_date,
            tier=tier,
        )

    @staticmethod
    def _from_detail(
        name: str,
        detail: Optional[ShowDetail],
        episode: EpisodeDescriptor,
        tier: str,
    ) -> Identification:
        """Recherche l'episode dans les details distants d'une serie reconnue."""
        found = _find_episode(detail.episodes, episode, _detail_air_date) if detail else None
        if found is None:
            return Identification(name=name, episode=episode, tier=tier)
        return Identification(
            name=name,
            episode=_backfill(episode, found),
            title=found.title,
            air_date=found.air_date,
            tier=tier,
        )

    def _identify_local(
        self, name: str, episode: EpisodeDescriptor
    ) -> Optional[Identification]:
        """Tier 1 : sequences de mots contre le catalogue local."""
        name_parts = tokenize(name)
        if not name_parts:
            return None

        first_match: Optional[Identification] = None
        for show in self._local_catalog.list_shows():
            if not self._show_matches(name_parts, show):
                continue
            identification = self._from_catalog(show, episode, tier="local")
            if identification.title:
                return identification
            if first_match is None:
                first_match = identification

        return first_match

    async def _identify_remote_catalog(
        self, name: str, episode: EpisodeDescriptor, ask_remote: bool
    ) -> Optional[Identification]:
        """Tier 2 : slug contre le catalogue distant, recoupe avec le catalogue local."""
        await self._context.ensure_catalog(download=ask_remote)
        matches = self._context.find_by_slug(create_slug(name))
        if not matches:
            return None

        for record in matches:
            local = self._local_catalog.find_by_external_id(record.source, record.source_id)
            if local is not None:
                return self._from_catalog(local, episode, tier="remote_catalog")

        if not ask_remote:
            return None

        record = matches[0]
        detail = await self._fetch_detail(record.source, record.source_id)
        if detail is None:
            return None

        identity = self._context.remember(name, detail)
        return self._from_detail(identity.name, detail, episode, tier="remote_catalog")

    def _identify_cached(
        self, name: str, episode: EpisodeDescriptor
    ) -> Optional[Identification]:
        """Tier 3 : identites deja resolues a distance par ce processus."""
        cached = self._context.recall(name)
        if cached is None:
            return None
        identity, detail = cached
        return self._from_detail(identity.name, detail, episode, tier="cache")

    async def _identify_lookup(
        self, name: str, episode: EpisodeDescriptor
    ) -> Optional[Identification]:
        """Tier 4 : API de recherche par texte libre."""
        if self._lookup_api is None:
            return None

        try:
            result = await self._lookup_api.lookup(name)
        except Exception as e:
            logger.warning("Recherche distante en echec", name=name, error=str(e))
            return None

        if not result.success:
            return None

        detail = await self._fetch_detail(result.source, result.source_id)
        if detail is None:
            return None

        identity = self._context.remember(name, detail)
        return self._from_detail(identity.name, detail, episode, tier="lookup")

    async def _fetch_detail(self, source: str, source_id: str) -> Optional[ShowDetail]:
        """Recupere les details d'une serie ; toute erreur est journalisee et absorbee."""
        try:
            guide = self._guides.get(source)
            detail = await guide.get_show(source_id)
        except Exception as e:
            logger.warning(
                "Details distants indisponibles",
                source=source,
                source_id=source_id,
                error=str(e),
            )
            return None

        if detail is None:
            logger.debug("Serie absente du guide", source=source, source_id=source_id)
        return detail
