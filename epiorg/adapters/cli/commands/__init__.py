"""Sous-package CLI commands - re-exporte les commandes publiques."""

from epiorg.adapters.cli.commands.search_commands import search
from epiorg.adapters.cli.commands.series_commands import (
    next_episode,
    parse,
    previous_episode,
    render_series_tree,
    series,
)

__all__ = [
    "next_episode",
    "parse",
    "previous_episode",
    "render_series_tree",
    "search",
    "series",
]
