"""
Container d'injection de dependances via dependency-injector.

Assemble le pipeline de resolution : catalogue local SQLite, caches,
clients des services distants (optionnels selon la configuration).
"""

from typing import Optional

from dependency_injector import containers, providers
from loguru import logger
from sqlmodel import Session

from .adapters.api.cache import APICache
from .adapters.api.catalog_api_client import CatalogAPIClient
from .adapters.api.tvdb_client import TVDBClient
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import SQLModelLocalCatalog
from .infrastructure.snapshot_store import SnapshotStore
from .services.episode_finder import EpisodeFinderService
from .services.guide_registry import GuideRegistry
from .services.resolution_context import ResolutionContext
from .services.resolver import ResolverService


def build_guide_registry(settings: Settings, tvdb_client: providers.Provider) -> GuideRegistry:
    """Enregistre les guides configures (TVDB seulement si une cle est fournie)."""
    registry = GuideRegistry()
    if settings.tvdb_enabled:
        registry.register(tvdb_client())
    return registry


def build_catalog_api_client(settings: Settings, cache: APICache) -> Optional[CatalogAPIClient]:
    """Client du catalogue distant, None si aucune URL n'est configuree."""
    if not settings.catalog_api_enabled:
        return None
    return CatalogAPIClient(base_url=settings.catalog_api_url, cache=cache)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        resolver = container.resolver_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database
    engine = providers.Singleton(create_db_engine, db_url=config.provided.database_url)
    database = providers.Resource(init_db, engine=engine)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(Session, engine)

    local_catalog = providers.Factory(SQLModelLocalCatalog, session=session)

    # Cache API - Singleton pour partage entre clients
    api_cache = providers.Singleton(APICache, cache_dir=config.provided.cache_dir)

    tvdb_client = providers.Singleton(
        TVDBClient,
        api_key=config.provided.tvdb_api_key,
        cache=api_cache,
    )

    guide_registry = providers.Singleton(
        build_guide_registry,
        settings=config,
        tvdb_client=tvdb_client.provider,
    )

    catalog_api_client = providers.Singleton(
        build_catalog_api_client,
        settings=config,
        cache=api_cache,
    )

    snapshot_store = providers.Singleton(
        SnapshotStore,
        path=config.provided.catalog_snapshot_path,
    )

    # Caches de resolution partages par toutes les resolutions du processus
    resolution_context = providers.Singleton(
        ResolutionContext,
        snapshot_store=snapshot_store,
        remote_catalog=catalog_api_client,
    )

    resolver_service = providers.Factory(
        ResolverService,
        local_catalog=local_catalog,
        context=resolution_context,
        guides=guide_registry,
        lookup_api=catalog_api_client,
        max_parent_depth=config.provided.max_parent_depth,
        allow_prefix=config.provided.allow_prefix_match,
    )

    episode_finder = providers.Factory(EpisodeFinderService, resolver=resolver_service)


async def close_remote_clients(container: Container) -> None:
    """Ferme les clients HTTP du container (sans effet s'ils n'ont rien ouvert)."""
    for client in (container.tvdb_client(), container.catalog_api_client()):
        if client is None:
            continue
        try:
            await client.close()
        except Exception as e:
            logger.warning("Fermeture du client impossible", error=str(e))
