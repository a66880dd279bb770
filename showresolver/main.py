"""
Point d'entrée CLI de ShowResolver.

Configure le logging et monte les commandes CLI.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import match, quality, query, refresh_catalog, resolve, scan
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="showresolver",
    help="Identification des fichiers d'episodes de series TV",
)
container = Container()

app.command()(resolve)
app.command()(quality)
app.command()(match)
app.command()(query)
app.command()(scan)
app.command(name="refresh-catalog")(refresh_catalog)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(
        f"Catalogue distant : {config.catalog_api_url if config.catalog_api_enabled else 'désactivé'}"
    )
    typer.echo(f"API TVDB : {'activée' if config.tvdb_enabled else 'désactivée'}")
    typer.echo(f"Snapshot : {config.catalog_snapshot_path}")
    typer.echo(f"Cache API : {config.cache_dir}")
    typer.echo(f"Requêtes distantes : {'oui' if config.ask_remote else 'non'}")
    typer.echo(f"Profondeur des parents : {config.max_parent_depth}")
    typer.echo(f"Format de renommage : {config.rename_format}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"ShowResolver v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de ShowResolver", version=__version__)

    app()


if __name__ == "__main__":
    main()
