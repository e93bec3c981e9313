"""Commande CLI search : recherche classee dans un catalogue."""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from epiorg.adapters.cli.helpers import (
    console,
    format_release_time,
    load_catalog_or_exit,
    suppress_loguru,
)
from epiorg.container import Container


def search(
    catalog_path: Annotated[
        Path, typer.Argument(help="Fichier JSON du catalogue (content + playlists)")
    ],
    query: Annotated[str, typer.Argument(help="Texte recherche (ex: \"breaking bad s5e16\")")],
    limit: Annotated[int, typer.Option("--limit", "-n", min=1, help="Nombre de resultats")] = 20,
    lenient: Annotated[
        bool,
        typer.Option("--lenient", help="Ignorer les enregistrements invalides au lieu d'echouer"),
    ] = False,
) -> None:
    """Recherche des contenus, classes par pertinence."""
    container = Container()
    catalog = load_catalog_or_exit(catalog_path, strict=not lenient)

    with suppress_loguru():
        outcome = container.search_service().search(catalog.content, query, limit=limit)

    if outcome.query.season_episode_tokens:
        console.print(
            f"[dim]Marqueurs : {', '.join(outcome.query.season_episode_tokens)}[/dim]"
        )

    if not outcome.results:
        console.print("[yellow]Aucun resultat.[/yellow]")
        return

    if outcome.fallback:
        console.print(f"[yellow]{escape(outcome.message)}[/yellow]")

    table = Table(
        title=f"Resultats pour \"{escape(outcome.query.original_text)}\"",
        header_style="bold cyan",
    )
    table.add_column("Score", justify="right")
    table.add_column("Titre")
    table.add_column("Sortie", style="dim")
    table.add_column("Claim", style="dim")
    for entry in outcome.results:
        table.add_row(
            str(entry.score),
            escape(entry.content.title),
            format_release_time(entry.content.release_time),
            escape(entry.content.claim_id),
        )
    console.print(table)
