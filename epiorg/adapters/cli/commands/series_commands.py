"""Commandes CLI d'organisation : parse, series, next, previous."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.tree import Tree

from epiorg.adapters.cli.helpers import (
    console,
    format_duration,
    load_catalog_or_exit,
    suppress_loguru,
)
from epiorg.container import Container
from epiorg.core.entities.series import Episode, Season, SeriesInfo
from epiorg.services.grouping import group_series_content
from epiorg.services.navigator import get_next_episode, get_previous_episode
from epiorg.services.season_validator import validate_season_ordering

CatalogArgument = Annotated[
    Path, typer.Argument(help="Fichier JSON du catalogue (content + playlists)")
]
LenientOption = Annotated[
    bool,
    typer.Option("--lenient", help="Ignorer les enregistrements invalides au lieu d'echouer"),
]


def parse(
    title: Annotated[str, typer.Argument(help="Titre a analyser")],
) -> None:
    """Analyse un titre et affiche serie, saison, episode et titre d'episode."""
    parser = Container().title_parser()
    parsed = parser.parse(title)

    if parsed is None:
        console.print("[yellow]Pas un episode[/yellow]")
        raise typer.Exit(1)

    console.print(f"Serie : [bold]{escape(parsed.series_name)}[/bold]")
    console.print(f"Saison : {parsed.season_number}")
    console.print(f"Episode : {parsed.episode_number}")
    console.print(f"Titre : {escape(parsed.episode_title) or '-'}")


def _season_label(season: Season) -> str:
    if season.inferred:
        source = "[dim]inferee[/dim]"
    else:
        source = f"[cyan]playlist {escape(season.playlist_id)}[/cyan]"
    return f"Saison {season.number} ({len(season.episodes)} ep.) {source}"


def _episode_label(episode: Episode) -> str:
    return (
        f"E{episode.episode_number:02d} {escape(episode.title)} "
        f"[dim]({format_duration(episode.duration_seconds)})[/dim]"
    )


def render_series_tree(series: SeriesInfo, validate: bool = False) -> Tree:
    """Arborescence Rich serie > saisons > episodes, avec avertissements optionnels."""
    tree = Tree(
        f"[bold]{escape(series.title)}[/bold] [dim]{escape(series.series_key)}[/dim] "
        f"- {series.total_episodes} episode(s)"
    )
    for season in series.seasons:
        branch = tree.add(_season_label(season))
        if validate:
            report = validate_season_ordering(season)
            if report.duplicates:
                branch.add(f"[yellow]⚠ Doublons : {', '.join(map(str, report.duplicates))}[/yellow]")
            if report.gaps:
                branch.add(f"[yellow]⚠ Manquants : {', '.join(map(str, report.gaps))}[/yellow]")
        for episode in season.episodes:
            branch.add(_episode_label(episode))
    return tree


def series(
    catalog_path: CatalogArgument,
    validate: Annotated[
        bool, typer.Option("--validate", help="Signaler doublons et episodes manquants")
    ] = False,
    lenient: LenientOption = False,
) -> None:
    """Affiche les series reconstituees depuis un catalogue."""
    container = Container()
    catalog = load_catalog_or_exit(catalog_path, strict=not lenient)

    with suppress_loguru():
        grouping = group_series_content(
            catalog.content,
            catalog.playlists,
            series_tags=container.config().series_tags,
            reconciler=container.reconciler(),
        )
    merged = grouping.series

    if not merged:
        console.print("[green]Aucune serie detectee.[/green]")
        return

    for info in sorted(merged.values(), key=lambda s: s.title.lower()):
        console.print(render_series_tree(info, validate=validate))

    console.print(
        f"\n[bold]{len(merged)}[/bold] serie(s), "
        f"{len(grouping.non_series_content)} contenu(s) hors serie"
    )


def _find_episode(series_info: SeriesInfo, claim_id: str) -> Optional[Episode]:
    for season in series_info.seasons:
        for episode in season.episodes:
            if episode.claim_id == claim_id:
                return episode
    return None


def _navigate(catalog_path: Path, claim_id: str, forward: bool, lenient: bool) -> None:
    container = Container()
    catalog = load_catalog_or_exit(catalog_path, strict=not lenient)

    with suppress_loguru():
        series_info = container.reconciler().series_for_claim(
            claim_id, catalog.playlists, catalog.content
        )

    current = _find_episode(series_info, claim_id) if series_info else None
    if series_info is None or current is None:
        console.print(
            f"[red]Erreur: {escape(claim_id)} n'est pas un episode de serie connu[/red]"
        )
        raise typer.Exit(1)

    target = (
        get_next_episode(current, series_info)
        if forward
        else get_previous_episode(current, series_info)
    )
    if target is None:
        edge = "fin" if forward else "debut"
        console.print(
            f"[yellow]{edge.capitalize()} de la serie {escape(series_info.title)}[/yellow]"
        )
        return

    console.print(
        f"S{target.season_number:02d}E{target.episode_number:02d} "
        f"[bold]{escape(target.title)}[/bold] [dim]{escape(target.claim_id)}[/dim]"
    )


def next_episode(
    catalog_path: CatalogArgument,
    claim_id: Annotated[str, typer.Argument(help="Claim de l'episode courant")],
    lenient: LenientOption = False,
) -> None:
    """Affiche l'episode suivant, y compris a travers les saisons."""
    _navigate(catalog_path, claim_id, forward=True, lenient=lenient)


def previous_episode(
    catalog_path: CatalogArgument,
    claim_id: Annotated[str, typer.Argument(help="Claim de l'episode courant")],
    lenient: LenientOption = False,
) -> None:
    """Affiche l'episode precedent, y compris a travers les saisons."""
    _navigate(catalog_path, claim_id, forward=False, lenient=lenient)
