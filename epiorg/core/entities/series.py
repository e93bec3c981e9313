"""
Series hierarchy entities.

Derived structures produced by the organization engine: episodes grouped
into seasons, seasons grouped into a series. They are rebuilt on every
assembly pass and are never persisted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass
class Episode:
    """
    Individual episode of a series.

    Attributes:
        claim_id: Identifier of the underlying content item
        title: Full content title
        episode_number: Episode number within the season
        season_number: Season number
        thumbnail_url: Thumbnail image URL
        duration_seconds: Runtime in seconds
    """

    claim_id: str
    title: str
    episode_number: int
    season_number: int
    thumbnail_url: Optional[str] = None
    duration_seconds: Optional[int] = None


class SeasonSourceKind(Enum):
    """Origin of a season's boundaries and ordering."""

    PLAYLIST = "playlist"
    INFERRED = "inferred"


@dataclass(frozen=True)
class SeasonSource:
    """
    Provenance of a season.

    Either a playlist (with its id) or inferred from title parsing.
    Build instances with SeasonSource.playlist() or SeasonSource.inferred().
    """

    kind: SeasonSourceKind
    playlist_id: Optional[str] = None

    @classmethod
    def playlist(cls, playlist_id: str) -> "SeasonSource":
        return cls(kind=SeasonSourceKind.PLAYLIST, playlist_id=playlist_id)

    @classmethod
    def inferred(cls) -> "SeasonSource":
        return cls(kind=SeasonSourceKind.INFERRED)


@dataclass
class Season:
    """
    Ordered group of episodes.

    The order of episodes is canonical: playlist position for playlist
    seasons, episode number for inferred ones.

    Attributes:
        number: Season number
        episodes: Episodes in canonical order
        source: Playlist or inferred provenance
    """

    number: int
    episodes: list[Episode] = field(default_factory=list)
    source: SeasonSource = field(default_factory=SeasonSource.inferred)

    @property
    def inferred(self) -> bool:
        """True if the season was derived from title parsing only."""
        return self.source.kind is SeasonSourceKind.INFERRED

    @property
    def playlist_id(self) -> Optional[str]:
        """Id of the source playlist, None for inferred seasons."""
        return self.source.playlist_id


@dataclass
class SeriesInfo:
    """
    A series with its seasons sorted by number.

    Attributes:
        series_key: Stable normalized identifier
        title: Display title
        seasons: Seasons sorted ascending by number
    """

    series_key: str
    title: str
    seasons: list[Season] = field(default_factory=list)

    @property
    def total_episodes(self) -> int:
        """Number of episodes across all seasons, always recomputed."""
        return sum(len(season.episodes) for season in self.seasons)
