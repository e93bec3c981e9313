"""
Fixtures pytest partagees pour les tests EpiOrg.

Ce module contient les fixtures communes utilisees dans les tests:
- Fabrique de ContentItem
- Playlists d'exemple
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Callable, Optional

import pytest

from epiorg.config import Settings
from epiorg.core.entities.content import ContentItem, Playlist, PlaylistItem

ContentFactory = Callable[..., ContentItem]


def build_content(
    claim_id: str,
    title: str,
    tags: tuple[str, ...] = (),
    description: Optional[str] = None,
    release_time: int = 0,
    duration_seconds: Optional[int] = None,
) -> ContentItem:
    """Cree un ContentItem minimal pour les tests."""
    return ContentItem(
        claim_id=claim_id,
        title=title,
        description=description,
        tags=frozenset(tags),
        release_time=release_time,
        duration_seconds=duration_seconds,
    )


@pytest.fixture
def make_content() -> ContentFactory:
    """Fabrique de ContentItem : make_content("c1", "Friends S01E01")."""
    return build_content


@pytest.fixture
def friends_content() -> list[ContentItem]:
    """Trois episodes de Friends saison 1 (titres parsables) et un film."""
    return [
        build_content("f1", "Friends S01E01 - The One Where Monica Gets a Roommate", release_time=100),
        build_content("f2", "Friends S01E02 - The One with the Sonogram", release_time=200),
        build_content("f3", "Friends S01E03 - The One with the Thumb", release_time=300),
        build_content("m1", "Big Buck Bunny", tags=("animation",), release_time=400),
    ]


@pytest.fixture
def friends_playlist() -> Playlist:
    """Playlist saison 1 de Friends dont les positions sont dans le desordre."""
    return Playlist(
        id="pl-friends-1",
        title="Friends",
        items=(
            PlaylistItem(claim_id="f3", position=2),
            PlaylistItem(claim_id="f1", position=0),
            PlaylistItem(claim_id="f2", position=1),
        ),
        season_number=1,
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Le fichier de log est place dans tmp_path pour ne pas polluer le projet.
    """
    return Settings(
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
        min_term_length=2,
        default_season_number=1,
    )
