"""
Module de persistance SQLite du catalogue local.

- database.py : engine SQLite, session factory, initialisation
- models.py : modeles SQLModel (shows, episodes)
- repositories/ : conversion modeles <-> entites de domaine

Usage:
    from showresolver.infrastructure.persistence import init_db, get_session

    init_db()
    session = next(get_session())
"""

from showresolver.infrastructure.persistence.database import (
    create_db_engine,
    get_engine,
    get_session,
    init_db,
)
from showresolver.infrastructure.persistence.models import EpisodeModel, ShowModel

__all__ = [
    "create_db_engine",
    "get_engine",
    "get_session",
    "init_db",
    "EpisodeModel",
    "ShowModel",
]
