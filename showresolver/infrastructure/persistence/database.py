"""
Configuration de la base de donnees SQLite du catalogue local.

Ce module fournit :
- Engine SQLite configure pour un usage multi-thread
- Session factory
- Fonction d'initialisation des tables

La base est configuree via SHOWRESOLVER_DATABASE_URL (defaut: sqlite:///showresolver.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def create_db_engine(db_url: str) -> Engine:
    """
    Cree un engine SQLite.

    Le repertoire parent d'un fichier SQLite est cree si necessaire. Une base
    en memoire partage une connexion unique, sans quoi chaque session
    verrait une base vide.
    """
    if db_url.startswith("sqlite:///") and not db_url.startswith("sqlite:///:memory:"):
        db_path = Path(db_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    if db_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        db_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def get_engine() -> Engine:
    """Retourne l'engine de l'application, cree depuis Settings au premier appel."""
    global _engine
    if _engine is None:
        from showresolver.config import Settings

        _engine = create_db_engine(Settings().database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation :
        session = next(get_session())

    Yields:
        Session SQLModel connectee a l'engine de l'application
    """
    with Session(get_engine()) as session:
        yield session


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Cree les tables du catalogue si elles n'existent pas.

    Args:
        engine: Engine cible (defaut: engine de l'application)
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from showresolver.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine or get_engine())
