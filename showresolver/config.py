"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
SHOWRESOLVER_, et peut optionnellement être fournie via un fichier .env.

Les services distants (catalogue, TVDB) sont optionnels : sans URL ni clé,
seul le catalogue local est consulté.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fichier .env à la racine du projet (parent de showresolver/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SHOWRESOLVER_.
    Exemple : SHOWRESOLVER_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOWRESOLVER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Catalogue local
    database_url: str = Field(default="sqlite:///showresolver.db")

    # Services distants (OPTIONNELS)
    catalog_api_url: Optional[str] = Field(default=None)
    tvdb_api_key: Optional[str] = Field(default=None)
    cache_dir: Path = Field(default=Path(".cache/api"))
    catalog_snapshot_path: Path = Field(default=Path(".cache/known_shows.json"))

    # Résolution
    ask_remote: bool = Field(default=True)
    max_parent_depth: int = Field(default=5, ge=1, le=10)
    allow_prefix_match: bool = Field(default=False)
    rename_format: str = Field(default="$show S$seasonE$episode - $title$ext")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/showresolver.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "catalog_snapshot_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def catalog_api_enabled(self) -> bool:
        """Vérifie si le service de catalogue distant est configuré."""
        return bool(self.catalog_api_url)

    @property
    def tvdb_enabled(self) -> bool:
        """Vérifie si l'API TVDB est configurée."""
        return self.tvdb_api_key is not None
