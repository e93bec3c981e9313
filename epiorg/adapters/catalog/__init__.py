"""
Adaptateur de catalogue : chargement de contenus et playlists depuis JSON.
"""

from epiorg.adapters.catalog.json_catalog import (
    Catalog,
    CatalogFormatError,
    load_catalog,
    parse_catalog,
    parse_content_item,
    parse_playlist,
)

__all__ = [
    "Catalog",
    "CatalogFormatError",
    "load_catalog",
    "parse_catalog",
    "parse_content_item",
    "parse_playlist",
]
