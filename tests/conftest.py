"""
Fixtures pytest partagees pour les tests ShowResolver.

Ce module contient les fixtures communes utilisees dans les tests:
- Catalogue local de test (mock de ILocalCatalog alimente par des donnees fixes)
- Settings de test avec chemins temporaires
- Session SQLite en memoire
"""

from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional
from unittest.mock import MagicMock

import pytest
from sqlmodel import Session

from showresolver.config import Settings
from showresolver.core.entities.catalog import CatalogEpisode, CatalogShow
from showresolver.core.ports.catalog import ILocalCatalog
from showresolver.infrastructure.persistence.database import create_db_engine, init_db

CATALOG_SHOWS = [
    CatalogShow(id=1, name="House", grabber="tvdb", external_id="73255"),
    CatalogShow(
        id=2,
        name="The Daily Show",
        release="Daily Show with Jon Stewart",
        grabber="tvdb",
        external_id="71256",
        timezone="America/New_York",
    ),
    CatalogShow(id=3, name="Grey's Anatomy", grabber="tvdb", external_id="73762"),
]

CATALOG_EPISODES = {
    1: [
        CatalogEpisode(id=1, show_id=1, season=1, number=1, title="Pilot",
                       air_date=datetime(2004, 11, 17, 2, 0)),
        CatalogEpisode(id=2, show_id=1, season=1, number=2, title="Paternity",
                       air_date=datetime(2004, 11, 24, 2, 0)),
    ],
    # Diffusion 23h a New York, deja le lendemain en UTC
    2: [
        CatalogEpisode(id=3, show_id=2, season=15, number=1, title="Jake Tapper",
                       air_date=datetime(2010, 1, 6, 4, 0)),
    ],
    3: [],
}


@pytest.fixture
def mock_local_catalog() -> MagicMock:
    """
    Mock de ILocalCatalog alimente par CATALOG_SHOWS et CATALOG_EPISODES.

    Les methodes restent des MagicMock : les tests peuvent verifier les appels
    ou remplacer les valeurs de retour.
    """
    mock = MagicMock(spec=ILocalCatalog)
    mock.list_shows.return_value = list(CATALOG_SHOWS)
    mock.get_episodes.side_effect = lambda show_id: list(CATALOG_EPISODES.get(show_id, []))

    def find_by_external_id(source: str, source_id: str) -> Optional[CatalogShow]:
        for show in CATALOG_SHOWS:
            if show.grabber == source and show.external_id == source_id:
                return show
        return None

    mock.find_by_external_id.side_effect = find_by_external_id
    return mock


@pytest.fixture
def empty_local_catalog() -> MagicMock:
    """Mock de ILocalCatalog sans aucune serie."""
    mock = MagicMock(spec=ILocalCatalog)
    mock.list_shows.return_value = []
    mock.get_episodes.return_value = []
    mock.find_by_external_id.return_value = None
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Les services distants sont desactives : aucun appel reseau possible.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        catalog_api_url=None,
        tvdb_api_key=None,
        cache_dir=tmp_path / "cache",
        catalog_snapshot_path=tmp_path / "known_shows.json",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def db_session() -> Iterator[Session]:
    """Session sur une base SQLite en memoire avec les tables creees."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    with Session(engine) as session:
        yield session
