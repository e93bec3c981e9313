"""
Point d'entrée CLI d'EpiOrg.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from importlib.metadata import PackageNotFoundError, version as package_version
from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    next_episode,
    parse,
    previous_episode,
    search,
    series,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_for_verbosity

app = typer.Typer(
    name="epiorg",
    help="Organisation des episodes en series et recherche dans un catalogue",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """EpiOrg - Organisation de series et recherche de contenus."""
    settings = get_config()
    configure_logging(
        log_level=level_for_verbosity(verbose, quiet, default=settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Monter les commandes
app.command()(parse)
app.command()(series)
app.command()(search)
# "next" masquerait le builtin, d'ou name= explicite
app.command(name="next")(next_episode)
app.command(name="previous")(previous_episode)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def get_version() -> str:
    try:
        return package_version("epiorg")
    except PackageNotFoundError:
        return "0.1.0"


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration EpiOrg")
    typer.echo(f"Saison par defaut : {config.default_season_number}")
    typer.echo(f"Tags de serie : {', '.join(config.series_tags)}")
    typer.echo(f"Longueur minimale des termes : {config.min_term_length}")
    typer.echo(f"Repli sur les recents : requetes < {config.search_fallback_min_length} car.")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"EpiOrg v{get_version()}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
