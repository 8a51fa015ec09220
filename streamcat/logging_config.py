"""
Configuration du logging de StreamCat via loguru.

Deux sorties :
- stderr, colorée, au niveau configuré
- fichier JSON avec rotation, tous niveaux

Les loggers stdlib du serveur (uvicorn) et de SQLAlchemy sont redirigés
vers loguru pour que les accès HTTP et les erreurs SQL arrivent dans le
même fichier que les logs applicatifs.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

# Loggers stdlib redirigés vers loguru
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy")

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


class InterceptHandler(logging.Handler):
    """Handler stdlib qui réémet chaque enregistrement dans loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonter jusqu'à l'appelant réel, hors du module logging
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def intercept_stdlib_loggers(names: tuple[str, ...] = INTERCEPTED_LOGGERS) -> None:
    """Remplace les handlers des loggers stdlib donnés par InterceptHandler."""
    handler = InterceptHandler()
    for name in names:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.propagate = False


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/streamcat.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure loguru et redirige les loggers stdlib.

    Args :
        log_level : Niveau minimum de la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON, son répertoire est créé si besoin
        rotation_size : Taille déclenchant la rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level.upper(), format=_CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    intercept_stdlib_loggers()

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)
