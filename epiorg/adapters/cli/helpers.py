"""
Utilitaires partages pour les commandes CLI d'EpiOrg.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- load_catalog_or_exit : chargement du catalogue avec sortie propre en erreur
- format_duration / format_release_time : mise en forme pour l'affichage
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from epiorg.adapters.catalog import Catalog, CatalogFormatError, load_catalog

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("epiorg")
    try:
        yield
    finally:
        loguru_logger.enable("epiorg")


def load_catalog_or_exit(path: Path, strict: bool = True) -> Catalog:
    """
    Charge un catalogue JSON ou termine la commande avec le code 1.

    Les erreurs de format et de lecture sont affichees en rouge.
    """
    if not path.exists():
        console.print(f"[red]Erreur: Catalogue introuvable: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    try:
        return load_catalog(path, strict=strict)
    except CatalogFormatError as e:
        console.print(f"[red]Erreur: Catalogue invalide: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Erreur: Lecture impossible de {escape(str(path))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def format_duration(seconds: Optional[int]) -> str:
    """Duree lisible : 2710 -> "45:10", 3725 -> "1:02:05", None -> "-"."""
    if seconds is None:
        return "-"
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_release_time(timestamp: int) -> str:
    """Date UTC (AAAA-MM-JJ) d'un timestamp, "-" si absent."""
    if not timestamp:
        return "-"
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
