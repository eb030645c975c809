"""
Configuration du logging de CineHook via loguru.

Deux sorties :
- console : colorée, au niveau demandé, pour suivre les recherches en direct
- fichier : JSON avec rotation, tous niveaux (pauses de quota en TRACE incluses)

Les loggers standard de httpx/httpcore journalisent chaque requête en INFO ;
ils sont ramenés à WARNING pour ne pas doubler les logs du client TMDB.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/cinehook.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la console (TRACE, DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log JSON
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="TRACE",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug(f"Logging configuré: {log_file} (rotation {rotation_size})")
