"""
Chargement d'un catalogue JSON en entites.

Format attendu :
    {
        "content": [{"claim_id": "...", "title": "...", "tags": [...], ...}],
        "playlists": [{"id": "...", "title": "...", "items": [{"claim_id": "...", "position": 0}]}]
    }

La validation des champs obligatoires se fait ici, avant que le moteur
d'organisation ne soit invoque : un enregistrement incomplet leve une
CatalogFormatError (mode strict) ou est ignore avec un avertissement.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from loguru import logger

from epiorg.core.entities.content import (
    CompatibilityInfo,
    ContentItem,
    Playlist,
    PlaylistItem,
    StreamType,
    VideoUrl,
)

T = TypeVar("T")


class CatalogFormatError(ValueError):
    """Enregistrement de catalogue malforme ou incomplet."""

    def __init__(self, message: str, section: str = "", index: Optional[int] = None) -> None:
        self.section = section
        self.index = index
        location = f"{section}[{index}]: " if section and index is not None else ""
        super().__init__(f"{location}{message}")


@dataclass
class Catalog:
    """Contenus et playlists charges depuis un document JSON."""

    content: list[ContentItem] = field(default_factory=list)
    playlists: list[Playlist] = field(default_factory=list)

    def content_by_claim(self) -> dict[str, ContentItem]:
        return {item.claim_id: item for item in self.content}


def _require(data: dict[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise CatalogFormatError(f"champ obligatoire manquant : {key}")
    return value


def _optional_int(data: dict[str, Any], *keys: str) -> Optional[int]:
    for key in keys:
        value = data.get(key)
        if value is not None:
            try:
                return int(value)
            except (TypeError, ValueError) as e:
                raise CatalogFormatError(f"{key} n'est pas un entier : {value!r}") from e
    return None


def _optional_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogFormatError(f"{key} doit etre une liste JSON : {value!r}")
    return value


def _optional_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise CatalogFormatError(f"{key} doit etre un objet JSON : {value!r}")
    return value


def parse_video_url(quality: str, data: dict[str, Any]) -> VideoUrl:
    """Convertit un dict en VideoUrl (la qualite par defaut est la cle)."""
    if not isinstance(data, dict):
        raise CatalogFormatError(f"video_urls[{quality!r}] doit etre un objet JSON")
    try:
        stream_type = StreamType(data.get("type", StreamType.MP4.value))
    except ValueError as e:
        raise CatalogFormatError(f"type de flux inconnu : {data.get('type')!r}") from e
    return VideoUrl(
        url=_require(data, "url"),
        quality=data.get("quality") or quality,
        type=stream_type,
        codec=data.get("codec"),
    )


def parse_content_item(data: dict[str, Any]) -> ContentItem:
    """
    Convertit un dict en ContentItem.

    Champs obligatoires : claim_id, title. La duree est lue depuis
    duration_seconds ou duration.
    """
    if not isinstance(data, dict):
        raise CatalogFormatError("un contenu doit etre un objet JSON")

    compatibility = _optional_dict(data, "compatibility")
    tags = _optional_list(data, "tags")
    if not all(isinstance(tag, str) for tag in tags):
        raise CatalogFormatError(f"tags doit contenir des chaines : {tags!r}")
    return ContentItem(
        claim_id=str(_require(data, "claim_id")),
        title=str(_require(data, "title")),
        description=data.get("description"),
        tags=frozenset(tags),
        thumbnail_url=data.get("thumbnail_url"),
        duration_seconds=_optional_int(data, "duration_seconds", "duration"),
        release_time=_optional_int(data, "release_time") or 0,
        video_urls={
            quality: parse_video_url(quality, url)
            for quality, url in _optional_dict(data, "video_urls").items()
        },
        compatibility=CompatibilityInfo(
            compatible=bool(compatibility.get("compatible", True)),
            reason=compatibility.get("reason"),
            fallback_available=bool(compatibility.get("fallback_available", False)),
        ),
    )


def parse_playlist_item(data: dict[str, Any]) -> PlaylistItem:
    """Convertit un dict en PlaylistItem (claim_id et position obligatoires)."""
    if not isinstance(data, dict):
        raise CatalogFormatError("un item de playlist doit etre un objet JSON")
    position = _optional_int(data, "position")
    if position is None:
        raise CatalogFormatError("champ obligatoire manquant : position")
    return PlaylistItem(
        claim_id=str(_require(data, "claim_id")),
        position=position,
        episode_number=_optional_int(data, "episode_number"),
        season_number=_optional_int(data, "season_number"),
    )


def parse_playlist(data: dict[str, Any]) -> Playlist:
    """Convertit un dict en Playlist (id et title obligatoires)."""
    if not isinstance(data, dict):
        raise CatalogFormatError("une playlist doit etre un objet JSON")
    return Playlist(
        id=str(_require(data, "id")),
        title=str(_require(data, "title")),
        claim_id=str(data.get("claim_id") or ""),
        items=tuple(parse_playlist_item(item) for item in _optional_list(data, "items")),
        season_number=_optional_int(data, "season_number"),
        series_key=data.get("series_key") or None,
    )


def _parse_section(
    records: list[Any], section: str, parser: Callable[[Any], T], strict: bool
) -> list[T]:
    parsed: list[T] = []
    for index, record in enumerate(records):
        try:
            parsed.append(parser(record))
        except CatalogFormatError as e:
            error = CatalogFormatError(str(e), section=section, index=index)
            if strict:
                raise error from e
            logger.warning(f"Enregistrement ignore : {error}")
    return parsed


def parse_catalog(document: dict[str, Any], strict: bool = True) -> Catalog:
    """
    Convertit un document JSON deja decode en Catalog.

    Args:
        document: Dict avec les cles "content" et/ou "playlists"
        strict: Si True, le premier enregistrement invalide leve
                CatalogFormatError ; sinon il est ignore et journalise.

    Returns:
        Catalog
    """
    if not isinstance(document, dict):
        raise CatalogFormatError("le catalogue doit etre un objet JSON")

    content = _parse_section(
        _optional_list(document, "content"), "content", parse_content_item, strict
    )
    playlists = _parse_section(
        _optional_list(document, "playlists"), "playlists", parse_playlist, strict
    )
    logger.debug(f"Catalogue : {len(content)} contenu(s), {len(playlists)} playlist(s)")
    return Catalog(content=content, playlists=playlists)


def load_catalog(path: Path, strict: bool = True) -> Catalog:
    """
    Charge un catalogue depuis un fichier JSON.

    Raises:
        CatalogFormatError: JSON invalide ou enregistrement invalide (mode strict)
        OSError: fichier illisible
    """
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogFormatError(f"JSON invalide dans {path} : {e}") from e
    return parse_catalog(document, strict=strict)
