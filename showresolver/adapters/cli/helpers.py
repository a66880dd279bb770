"""
Utilitaires partages pour les commandes CLI de ShowResolver.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- path_parents : noms des repertoires parents d'un chemin
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path

from loguru import logger as loguru_logger
from rich.console import Console

from showresolver.container import Container, close_remote_clients

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("showresolver")
    try:
        yield
    finally:
        loguru_logger.enable("showresolver")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Les clients HTTP crees pendant la commande sont fermes a la sortie.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await close_remote_clients(container)
        return wrapper
    return decorator


def path_parents(path: Path) -> list[str]:
    """
    Noms des repertoires parents d'un fichier, le plus proche en dernier.

    Example:
        path_parents(Path("/tv/House/Season 1/house.s01e01.avi"))
        -> ["tv", "House", "Season 1"]
    """
    parent = path.expanduser().absolute().parent
    return [part for part in parent.parts if part != parent.anchor]
