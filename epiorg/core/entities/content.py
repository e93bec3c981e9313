"""
Content catalog entities.

Records supplied by the collaborator that fetched the catalog: playable
content items and the playlists that order them. They are treated as
immutable by the organization engine and referenced, never mutated.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class StreamType(Enum):
    """Delivery format of a video URL."""

    MP4 = "mp4"
    HLS = "hls"


@dataclass(frozen=True)
class VideoUrl:
    """
    One playable rendition of a content item.

    Attributes:
        url: Direct URL of the stream
        quality: Quality label (e.g. "720p", "1080p")
        type: Delivery format (progressive MP4 or HLS)
        codec: Codec string when known
    """

    url: str
    quality: str
    type: StreamType = StreamType.MP4
    codec: Optional[str] = None


@dataclass(frozen=True)
class CompatibilityInfo:
    """
    Playback compatibility verdict attached by the fetching layer.

    Attributes:
        compatible: True if the content can be played as-is
        reason: Explanation when not compatible
        fallback_available: True if an alternative rendition exists
    """

    compatible: bool = True
    reason: Optional[str] = None
    fallback_available: bool = False


@dataclass(frozen=True)
class ContentItem:
    """
    One playable unit of the catalog.

    Attributes:
        claim_id: Stable unique identifier
        title: Free-text title (may or may not encode season/episode)
        description: Long description
        tags: Set of tags (e.g. "series", "comedy")
        thumbnail_url: Thumbnail image URL
        duration_seconds: Runtime in seconds
        release_time: Release timestamp (seconds since epoch)
        video_urls: Renditions keyed by quality label
        compatibility: Playback compatibility verdict
    """

    claim_id: str
    title: str
    description: Optional[str] = None
    tags: frozenset[str] = frozenset()
    thumbnail_url: Optional[str] = None
    duration_seconds: Optional[int] = None
    release_time: int = 0
    video_urls: dict[str, VideoUrl] = field(default_factory=dict, hash=False, compare=False)
    compatibility: CompatibilityInfo = field(default_factory=CompatibilityInfo)


@dataclass(frozen=True)
class PlaylistItem:
    """
    Entry of a playlist.

    position is the only source of truth for ordering; it need not be
    contiguous nor sorted in the input.

    Attributes:
        claim_id: Content referenced by this entry
        position: Ordering key within the playlist
        episode_number: Explicit episode number, if the playlist provides one
        season_number: Explicit season number, if the playlist provides one
    """

    claim_id: str
    position: int
    episode_number: Optional[int] = None
    season_number: Optional[int] = None


@dataclass(frozen=True)
class Playlist:
    """
    Authoritative ordering of one season of a series.

    Attributes:
        id: Playlist identifier
        title: Playlist title (series name when series_key is absent)
        claim_id: Claim identifier of the playlist itself
        items: Entries in any order
        season_number: Season this playlist represents
        series_key: Series key, derived from title when absent
    """

    id: str
    title: str
    claim_id: str = ""
    items: tuple[PlaylistItem, ...] = ()
    season_number: Optional[int] = None
    series_key: Optional[str] = None
