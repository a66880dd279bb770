"""
Commandes CLI de resolution (resolve, quality, match, query, scan, refresh-catalog).
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from showresolver.adapters.cli.helpers import (
    console,
    path_parents,
    suppress_loguru,
    with_container,
)
from showresolver.container import Container
from showresolver.core.value_objects.episode import EpisodeNotation
from showresolver.core.value_objects.resolution import ResolutionResult, ResolutionStatus
from showresolver.services.episode_extractor import (
    extract_airdate,
    notation_for_show,
    reformat,
    replace_episode,
)
from showresolver.services.name_matcher import filter_releases
from showresolver.services.normalizer import split
from showresolver.services.quality_classifier import classify, extract_group
from showresolver.services.renamer import format_file_name

_STATUS_STYLES = {
    ResolutionStatus.IDENTIFIED: "green",
    ResolutionStatus.NOT_IDENTIFIED: "yellow",
    ResolutionStatus.FAILED: "red",
}


def _result_table(result: ResolutionResult) -> Table:
    """Tableau Rich detaillant un resultat de resolution."""
    style = _STATUS_STYLES[result.status]
    table = Table(show_header=False, box=None)
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("Fichier", result.file_name)
    table.add_row("Statut", f"[{style}]{result.status.value}[/{style}]")
    if result.failure is not None:
        table.add_row("Raison", result.failure.value)
    if result.episode is not None:
        table.add_row("Serie", result.show)
        table.add_row("Episode", reformat(result.episode))
        table.add_row("Titre", result.title)
        if result.air_date:
            table.add_row("Diffusion", result.air_date.strftime("%Y-%m-%d"))
        table.add_row("Qualite", result.quality.value)
        if result.group:
            table.add_row("Groupe", result.group)
    return table


def resolve(
    file: Annotated[Path, typer.Argument(help="Fichier d'episode a identifier")],
    no_remote: Annotated[
        bool,
        typer.Option("--no-remote", help="Ne consulte que le catalogue local et le snapshot"),
    ] = False,
    rename: Annotated[
        bool,
        typer.Option("--rename", help="Renomme le fichier selon rename_format"),
    ] = False,
) -> None:
    """
    Identifie la serie et l'episode d'un fichier.

    Les repertoires parents du chemin sont consultes si le nom du fichier
    ne suffit pas.

    Exemples:
      showresolver resolve "House.S01E01.HDTV.XviD-LOL.avi"
      showresolver resolve ~/TV/House/Season\\ 1/h101.avi --no-remote
      showresolver resolve ~/TV/house.1x01.avi --rename
    """
    result = asyncio.run(_resolve_async(file, no_remote, rename))
    if result.status == ResolutionStatus.FAILED:
        raise typer.Exit(1)


@with_container()
async def _resolve_async(
    container: Container, file: Path, no_remote: bool, rename: bool
) -> ResolutionResult:
    """Implementation async de la commande resolve."""
    config = container.config()
    resolver = container.resolver_service()

    result = await resolver.parse_file(
        file.name,
        path_parents(file),
        ask_remote=config.ask_remote and not no_remote,
    )

    with suppress_loguru():
        console.print(_result_table(result))

        if rename and result.episode is not None:
            new_name = format_file_name(config.rename_format, result)
            target = file.with_name(new_name)
            if target == file:
                console.print("[dim]Nom deja conforme[/dim]")
            elif target.exists():
                console.print(f"[red]Erreur: {target} existe deja[/red]")
                raise typer.Exit(1)
            elif not file.exists():
                console.print(f"[red]Erreur: Fichier introuvable: {file}[/red]")
                raise typer.Exit(1)
            else:
                file.rename(target)
                console.print(f"[green]Renomme en[/green] {new_name}")

    return result


def quality(
    release: Annotated[str, typer.Argument(help="Nom de release ou chemin")],
) -> None:
    """Affiche la qualite video et le groupe deduits d'un nom de release."""
    console.print(f"Qualite : [bold]{classify(release).value}[/bold]")
    group = extract_group(release)
    if group:
        console.print(f"Groupe : {group}")


def match(
    show: Annotated[str, typer.Argument(help="Nom de la serie")],
    episode: Annotated[str, typer.Argument(help="Episode (S01E01, 1x01 ou date)")],
    releases: Annotated[list[str], typer.Argument(help="Noms de release a tester")],
) -> None:
    """Garde les releases correspondant a une serie et a un episode."""
    kept = filter_releases(show, episode, releases)
    if not kept:
        console.print("[red]Pas de correspondance[/red]")
        raise typer.Exit(1)
    for release in kept:
        console.print(f"[green]{release}[/green]")


def query(
    show_and_episode: Annotated[str, typer.Argument(help='Requete "Serie S01E01"')],
    notation: Annotated[
        Optional[str],
        typer.Option("--notation", "-n", help="standard, alternative ou airdate"),
    ] = None,
    normalize: Annotated[
        bool, typer.Option("--normalize", help="Normalise aussi le nom de la serie")
    ] = False,
) -> None:
    """
    Reecrit une requete de recherche dans la notation des releases de la serie.

    Sans --notation, les emissions quotidiennes passent en notation par date.

    Exemple:
      showresolver query "Lost S02E14" --notation alternative
    """
    show_part, _ = split(show_and_episode)
    target = notation or notation_for_show(show_part)
    try:
        console.print(replace_episode(show_and_episode, target, normalize=normalize))
    except ValueError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1)


def scan(
    directory: Annotated[Path, typer.Argument(help="Repertoire a parcourir")],
    show: Annotated[str, typer.Argument(help="Nom de la serie")],
    episode: Annotated[str, typer.Argument(help="Episode (S01E01, 1x01 ou date)")],
) -> None:
    """
    Recherche les fichiers d'un episode dans un repertoire.

    Exemple:
      showresolver scan ~/TV "House" S01E01
    """
    if notation_for_show(show) is EpisodeNotation.AIRDATE and extract_airdate(episode) is None:
        console.print(
            f"[yellow]{show} est publie par date de diffusion (ex: 2010.01.05)[/yellow]"
        )
    count = asyncio.run(_scan_async(directory, show, episode))
    if count == 0:
        raise typer.Exit(1)


@with_container()
async def _scan_async(container: Container, directory: Path, show: str, episode: str) -> int:
    """Implementation async de la commande scan."""
    if not directory.expanduser().is_dir():
        console.print(f"[red]Erreur: Repertoire introuvable: {directory}[/red]")
        raise typer.Exit(1)

    finder = container.episode_finder()
    found = await finder.find([directory], show, episode)

    with suppress_loguru():
        if not found:
            console.print("[yellow]Aucun fichier trouve[/yellow]")
            return 0

        table = Table(title=f"{show} {episode}")
        table.add_column("Fichier")
        table.add_column("Statut")
        table.add_column("Qualite")
        for item in found:
            style = _STATUS_STYLES[item.result.status]
            table.add_row(
                str(item.path),
                f"[{style}]{item.result.status.value}[/{style}]",
                item.result.quality.value,
            )
        console.print(table)

    return len(found)


def refresh_catalog() -> None:
    """Retelecharge le catalogue des series connues et remplace le snapshot."""
    if not asyncio.run(_refresh_catalog_async()):
        raise typer.Exit(1)


@with_container(requires_db=False)
async def _refresh_catalog_async(container: Container) -> bool:
    """Implementation async de la commande refresh-catalog."""
    config = container.config()
    if not config.catalog_api_enabled:
        console.print("[red]Erreur: SHOWRESOLVER_CATALOG_API_URL non configuree[/red]")
        return False

    context = container.resolution_context()
    if not await context.refresh_catalog():
        console.print("[red]Echec du telechargement du catalogue[/red]")
        return False

    console.print(
        f"[green]{len(context.catalog)} series[/green] ecrites dans {config.catalog_snapshot_path}"
    )
    return True
