"""
Modeles SQLModel du catalogue local.

Ces modeles representent les tables de la base SQLite. Ils sont distincts
des entites de domaine (dataclass dans core/entities/) ; la conversion se
fait dans les repositories.

Tables:
- shows: Series suivies, avec leur guide d'origine
- episodes: Episodes des series (date de diffusion en UTC)
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, Index, SQLModel


class ShowModel(SQLModel, table=True):
    """
    Serie du catalogue local.

    grabber + external_id identifient la serie dans le guide distant dont
    elle a ete importee (recoupement avec le catalogue distant).
    """

    __tablename__ = "shows"
    __table_args__ = (Index("ix_shows_grabber_external_id", "grabber", "external_id"),)

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    release: str | None = None  # Nom de scene si different
    grabber: str | None = None  # ex: "tvdb"
    external_id: str | None = None
    timezone: str | None = None  # ex: "America/New_York"
    created_at: datetime | None = Field(default_factory=datetime.utcnow)


class EpisodeModel(SQLModel, table=True):
    """Episode d'une serie du catalogue local."""

    __tablename__ = "episodes"
    __table_args__ = (Index("ix_episodes_show_season_number", "show_id", "season", "number"),)

    id: int | None = Field(default=None, primary_key=True)
    show_id: int = Field(foreign_key="shows.id", index=True)
    season: int = 0
    number: int = 0
    title: str = ""
    air_date: datetime | None = None  # UTC
