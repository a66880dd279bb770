"""
Configuration du logging de l'application via loguru.

- Sortie console : colorée, préfixée par le fichier en cours de résolution
  (clé "resolving" posée par ResolverService.parse_file) et suivie des
  champs structurés (tier, show, error...)
- Sortie fichier : JSON avec rotation, tous les niveaux, pour retracer
  quels tiers ont été consultés pour chaque fichier
"""

import sys
from pathlib import Path

from loguru import logger

_CONSOLE_PREFIX = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
)


def _console_format(record: dict) -> str:
    """Construit le format console d'un enregistrement selon ses champs extra."""
    extra = record["extra"]
    fmt = _CONSOLE_PREFIX
    if extra.get("resolving"):
        fmt += "<magenta>{extra[resolving]}</magenta> | "
    fmt += "<level>{message}</level>"
    for key in extra:
        if key != "resolving":
            fmt += f" <dim>{key}={{extra[{key}]}}</dim>"
    return fmt + "\n{exception}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/showresolver.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console
        log_file : Chemin vers le fichier de log JSON
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=_console_format, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # les hits de tiers sont en DEBUG
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
