"""
Implementation SQLModel du catalogue local.

Implemente ILocalCatalog (lecture, utilisee par le pipeline de resolution)
et fournit l'ecriture necessaire pour alimenter le catalogue.
"""

from typing import Optional

from sqlmodel import Session, select

from showresolver.core.entities.catalog import CatalogEpisode, CatalogShow
from showresolver.core.ports.catalog import ILocalCatalog
from showresolver.infrastructure.persistence.models import EpisodeModel, ShowModel


class SQLModelLocalCatalog(ILocalCatalog):
    """
    Catalogue local stocke en SQLite.

    Implemente ILocalCatalog avec conversion bidirectionnelle entre les
    entites CatalogShow/CatalogEpisode et les modeles de persistance.
    """

    def __init__(self, session: Session) -> None:
        """
        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    @staticmethod
    def _show_to_entity(model: ShowModel) -> CatalogShow:
        return CatalogShow(
            id=model.id,
            name=model.name,
            release=model.release,
            grabber=model.grabber,
            external_id=model.external_id,
            timezone=model.timezone,
        )

    @staticmethod
    def _episode_to_entity(model: EpisodeModel) -> CatalogEpisode:
        return CatalogEpisode(
            id=model.id,
            show_id=model.show_id,
            season=model.season,
            number=model.number,
            title=model.title,
            air_date=model.air_date,
        )

    def list_shows(self) -> list[CatalogShow]:
        """Toutes les series, par ordre d'insertion."""
        statement = select(ShowModel).order_by(ShowModel.id)
        return [self._show_to_entity(model) for model in self._session.exec(statement).all()]

    def get_episodes(self, show_id: int) -> list[CatalogEpisode]:
        """Episodes d'une serie, tries par saison puis numero."""
        statement = (
            select(EpisodeModel)
            .where(EpisodeModel.show_id == show_id)
            .order_by(EpisodeModel.season, EpisodeModel.number, EpisodeModel.id)
        )
        return [
            self._episode_to_entity(model) for model in self._session.exec(statement).all()
        ]

    def find_by_external_id(self, source: str, source_id: str) -> Optional[CatalogShow]:
        """Serie importee depuis le guide source avec cet identifiant."""
        statement = select(ShowModel).where(
            ShowModel.grabber == source,
            ShowModel.external_id == str(source_id),
        )
        model = self._session.exec(statement).first()
        if model:
            return self._show_to_entity(model)
        return None

    def save_show(self, show: CatalogShow) -> CatalogShow:
        """
        Sauvegarde une serie (insertion ou mise a jour).

        Une serie sans ID mais deja importee depuis le meme guide est mise a jour.
        """
        existing = None
        if show.id is not None:
            existing = self._session.get(ShowModel, show.id)
        elif show.grabber and show.external_id:
            statement = select(ShowModel).where(
                ShowModel.grabber == show.grabber,
                ShowModel.external_id == show.external_id,
            )
            existing = self._session.exec(statement).first()

        if existing:
            existing.name = show.name
            existing.release = show.release
            existing.grabber = show.grabber
            existing.external_id = show.external_id
            existing.timezone = show.timezone
            model = existing
        else:
            model = ShowModel(
                name=show.name,
                release=show.release,
                grabber=show.grabber,
                external_id=show.external_id,
                timezone=show.timezone,
            )

        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._show_to_entity(model)

    def save_episode(self, episode: CatalogEpisode) -> CatalogEpisode:
        """
        Sauvegarde un episode (insertion ou mise a jour par serie/saison/numero).

        Raises:
            ValueError: Si l'episode n'est rattache a aucune serie.
        """
        if episode.show_id is None:
            raise ValueError("Un episode doit etre rattache a une serie (show_id)")

        existing = None
        if episode.id is not None:
            existing = self._session.get(EpisodeModel, episode.id)
        else:
            statement = select(EpisodeModel).where(
                EpisodeModel.show_id == episode.show_id,
                EpisodeModel.season == episode.season,
                EpisodeModel.number == episode.number,
            )
            existing = self._session.exec(statement).first()

        if existing:
            existing.title = episode.title
            existing.air_date = episode.air_date
            model = existing
        else:
            model = EpisodeModel(
                show_id=episode.show_id,
                season=episode.season,
                number=episode.number,
                title=episode.title,
                air_date=episode.air_date,
            )

        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._episode_to_entity(model)
