"""
Service d'assemblage des episodes et saisons.

Deux chemins de construction :
- depuis une playlist (ordre canonique) : l'ordre de sortie est exactement
  l'ordre croissant de PlaylistItem.position, jamais retrie par numero d'episode ;
- depuis le parsing des titres (saisons inferees) : regroupement par cle de
  serie puis par saison, tri par numero d'episode.

Exemple :
    Playlist positions [2, 0, 1] -> claims [ep3, ep1, ep2]
    assemble_from_playlist -> [ep1, ep2, ep3]
"""

from typing import Iterable, Mapping, Optional

from loguru import logger

from epiorg.core.entities.content import ContentItem, Playlist
from epiorg.core.entities.series import Episode, Season, SeasonSource, SeriesInfo
from epiorg.core.ports.parser import ITitleParser
from epiorg.services.title_parser import RegexTitleParser
from epiorg.utils.helpers import generate_series_key

DEFAULT_SEASON_NUMBER = 1


def content_to_episode(
    content: ContentItem, episode_number: int, season_number: int
) -> Episode:
    """
    Convertit un ContentItem en Episode.

    Args:
        content: Contenu source (non modifie)
        episode_number: Numero d'episode resolu
        season_number: Numero de saison resolu

    Returns:
        Nouvel Episode reprenant l'identifiant, le titre, la vignette et la duree.
    """
    return Episode(
        claim_id=content.claim_id,
        title=content.title,
        episode_number=episode_number,
        season_number=season_number,
        thumbnail_url=content.thumbnail_url,
        duration_seconds=content.duration_seconds,
    )


def sort_episodes(episodes: Iterable[Episode]) -> list[Episode]:
    """Retourne une copie triee par numero d'episode (tri stable, l'entree n'est pas modifiee)."""
    return sorted(episodes, key=lambda episode: episode.episode_number)


def playlist_series_key(playlist: Playlist) -> str:
    """Cle de serie d'une playlist : series_key si fourni, sinon derivee du titre."""
    return playlist.series_key or generate_series_key(playlist.title)


class EpisodeAssembler:
    """
    Construit les Episode et Season depuis les playlists ou les titres.

    Le parser de titres est injecte (ITitleParser) ; par defaut le parser regex.
    """

    def __init__(
        self,
        title_parser: Optional[ITitleParser] = None,
        default_season_number: int = DEFAULT_SEASON_NUMBER,
    ) -> None:
        self._parser = title_parser or RegexTitleParser()
        self._default_season_number = default_season_number

    @property
    def title_parser(self) -> ITitleParser:
        return self._parser

    def playlist_season_number(self, playlist: Playlist) -> int:
        """
        Numero de la saison representee par une playlist.

        Playlist.season_number, sinon la saison par defaut. Les saisons des
        episodes (item ou titre parse) n'influent pas sur ce numero.
        """
        if playlist.season_number is not None:
            return playlist.season_number
        return self._default_season_number

    def assemble_from_playlist(
        self, playlist: Playlist, content_map: Mapping[str, ContentItem]
    ) -> list[Episode]:
        """
        Assemble les episodes d'une playlist dans l'ordre des positions.

        Resolution du numero d'episode : PlaylistItem.episode_number, sinon
        titre parse, sinon position + 1. Resolution de la saison :
        PlaylistItem.season_number, sinon Playlist.season_number, sinon
        titre parse, sinon la saison par defaut.

        Les items dont le claim est absent de content_map sont ignores
        (recuperation partielle du catalogue, pas une erreur).

        Args:
            playlist: Playlist source
            content_map: Contenus indexes par claim_id

        Returns:
            Episodes dans l'ordre croissant des positions.
        """
        episodes: list[Episode] = []
        skipped = 0

        for item in sorted(playlist.items, key=lambda i: i.position):
            content = content_map.get(item.claim_id)
            if content is None:
                skipped += 1
                continue

            episode_number = item.episode_number
            season_number = (
                item.season_number
                if item.season_number is not None
                else playlist.season_number
            )

            if episode_number is None or season_number is None:
                parsed = self._parser.parse(content.title)
                if parsed is not None:
                    if episode_number is None:
                        episode_number = parsed.episode_number
                    if season_number is None:
                        season_number = parsed.season_number

            if episode_number is None:
                episode_number = item.position + 1
            if season_number is None:
                season_number = self._default_season_number

            episodes.append(content_to_episode(content, episode_number, season_number))

        if skipped:
            logger.debug(
                f"Playlist {playlist.id}: {skipped} item(s) absent(s) du catalogue ignore(s)"
            )
        return episodes

    def build_playlist_season(
        self, playlist: Playlist, content_map: Mapping[str, ContentItem]
    ) -> Optional[Season]:
        """
        Construit la saison (non inferee) representee par une playlist.

        Returns:
            Season avec la provenance playlist, ou None si aucun episode
            n'a pu etre resolu.
        """
        episodes = self.assemble_from_playlist(playlist, content_map)
        if not episodes:
            return None
        return Season(
            number=self.playlist_season_number(playlist),
            episodes=episodes,
            source=SeasonSource.playlist(playlist.id),
        )

    def assemble_from_parsing(self, content: Iterable[ContentItem]) -> dict[str, SeriesInfo]:
        """
        Organise les contenus en series en parsant leurs titres.

        Les contenus non reconnus comme episodes sont exclus. Regroupement par
        cle de serie puis par saison ; dans une saison, tri par numero
        d'episode (stable : a numero egal, l'ordre d'entree est conserve).
        Toutes les saisons produites sont inferees.

        Args:
            content: Contenus a organiser

        Returns:
            SeriesInfo indexes par cle de serie, saisons triees par numero.
        """
        grouped: dict[str, dict[int, list[Episode]]] = {}
        titles: dict[str, str] = {}

        for item in content:
            parsed = self._parser.parse(item.title)
            if parsed is None:
                continue

            series_key = generate_series_key(parsed.series_name)
            if not series_key:
                continue

            titles.setdefault(series_key, parsed.series_name)
            seasons = grouped.setdefault(series_key, {})
            seasons.setdefault(parsed.season_number, []).append(
                content_to_episode(item, parsed.episode_number, parsed.season_number)
            )

        result: dict[str, SeriesInfo] = {}
        for series_key, seasons in grouped.items():
            result[series_key] = SeriesInfo(
                series_key=series_key,
                title=titles[series_key],
                seasons=[
                    Season(
                        number=number,
                        episodes=sort_episodes(seasons[number]),
                        source=SeasonSource.inferred(),
                    )
                    for number in sorted(seasons)
                ],
            )

        logger.debug(f"Parsing des titres : {len(result)} serie(s) inferee(s)")
        return result
