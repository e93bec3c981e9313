"""
Configuration du logging de l'application via loguru.

- Sortie console : courte, sans horodatage, pour ne pas noyer l'affichage Rich
  de la CLI ; niveau choisi par la configuration ou par -v / -q
- Sortie fichier (optionnelle) : JSON sérialisé avec rotation, pour analyser
  après coup les anomalies d'ordre des saisons et les réconciliations

Seuls les enregistrements du package epiorg sont routés vers ces handlers.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

PACKAGE_NAME = "epiorg"

# -v -> INFO, -vv et plus -> DEBUG
_VERBOSITY_LEVELS = ("INFO", "DEBUG")

_CONSOLE_FORMAT = "<level>{level: <8}</level> <cyan>{name}</cyan> | <level>{message}</level>"


def level_for_verbosity(verbose: int, quiet: bool, default: str = "WARNING") -> str:
    """Niveau console correspondant aux options --verbose / --quiet de la CLI."""
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS)) - 1]


def is_epiorg_record(record: dict) -> bool:
    """Filtre loguru : garde les messages emis depuis le package epiorg."""
    name = record["name"] or ""
    return name == PACKAGE_NAME or name.startswith(f"{PACKAGE_NAME}.")


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/epiorg.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> list[int]:
    """Remplace les handlers loguru par ceux de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, None pour la console seule
        rotation_size : Taille déclenchant la rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés

    Returns :
        Identifiants des handlers ajoutés (pour logger.remove()).
    """
    logger.remove()

    handler_ids = [
        logger.add(
            sys.stderr,
            level=log_level,
            format=_CONSOLE_FORMAT,
            filter=is_epiorg_record,
            colorize=True,
        )
    ]

    if log_file is not None:
        # Le fichier garde tout le detail : assemblage et grammaires sont en DEBUG
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_file,
                level="DEBUG",
                filter=is_epiorg_record,
                serialize=True,
                rotation=rotation_size,
                retention=retention_count,
                compression="zip",
                enqueue=True,
            )
        )

    logger.debug(f"Logging configure : console={log_level}, fichier={log_file or '-'}")
    return handler_ids
