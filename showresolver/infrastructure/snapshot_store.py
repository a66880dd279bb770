"""
Snapshot disque du catalogue distant des series connues.

Sauvegarde la liste plate (nom, slug, source, id) en JSON pour eviter de
la retelecharger a chaque demarrage. Le fichier est toujours reecrit en
entier, jamais patche.
"""

import json
from pathlib import Path
from typing import Optional

from loguru import logger

from showresolver.core.value_objects.show import RemoteCatalogRecord


class SnapshotError(Exception):
    """Exception levee quand le snapshot existe mais est illisible."""


class SnapshotStore:
    """
    Stockage du snapshot du catalogue distant dans un fichier JSON.

    Format : liste de lignes [nom, slug, source, id source].

    Example:
        store = SnapshotStore(Path(".cache/known_shows.json"))
        store.save(records)
        records = store.load()
    """

    def __init__(self, path: Path) -> None:
        """
        Initialise le stockage.

        Args:
            path: Chemin du fichier JSON (le repertoire parent est cree a l'ecriture)
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Chemin du fichier snapshot."""
        return self._path

    def exists(self) -> bool:
        """Indique si un snapshot a deja ete ecrit."""
        return self._path.is_file()

    def load(self) -> Optional[list[RemoteCatalogRecord]]:
        """
        Charge le snapshot.

        Returns:
            Liste des entrees, ou None si le fichier n'existe pas.

        Raises:
            SnapshotError: Fichier illisible ou contenu malforme.
        """
        if not self.exists():
            return None

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            raise SnapshotError(f"Snapshot illisible: {self._path}") from e

        if not isinstance(data, list):
            raise SnapshotError(f"Snapshot malforme (liste attendue): {self._path}")

        try:
            records = [RemoteCatalogRecord.from_row(row) for row in data]
        except (TypeError, ValueError) as e:
            raise SnapshotError(f"Snapshot malforme: {e}") from e

        logger.debug("Snapshot du catalogue charge", path=str(self._path), count=len(records))
        return records

    def save(self, records: list[RemoteCatalogRecord]) -> None:
        """
        Ecrit le snapshot complet (remplace le fichier existant).

        L'ecriture passe par un fichier temporaire pour ne jamais laisser
        un snapshot a moitie ecrit.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps([record.to_row() for record in records], ensure_ascii=False),
            encoding="utf-8",
        )
        tmp_path.replace(self._path)
        logger.debug("Snapshot du catalogue ecrit", path=str(self._path), count=len(records))
