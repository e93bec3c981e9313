"""
Business entities representing core domain concepts.

Exports:
- ContentItem, VideoUrl, CompatibilityInfo, StreamType: catalog content
- Playlist, PlaylistItem: authoritative episode ordering
- Episode, Season, SeasonSource, SeasonSourceKind, SeriesInfo: series hierarchy
"""

from epiorg.core.entities.content import (
    CompatibilityInfo,
    ContentItem,
    Playlist,
    PlaylistItem,
    StreamType,
    VideoUrl,
)
from epiorg.core.entities.series import (
    Episode,
    Season,
    SeasonSource,
    SeasonSourceKind,
    SeriesInfo,
)

__all__ = [
    "CompatibilityInfo",
    "ContentItem",
    "Playlist",
    "PlaylistItem",
    "StreamType",
    "VideoUrl",
    "Episode",
    "Season",
    "SeasonSource",
    "SeasonSourceKind",
    "SeriesInfo",
]
