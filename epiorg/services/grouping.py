"""
Service de regroupement des contenus en series.

Ce module garantit que les episodes ne sont jamais presentes comme une liste
plate : les contenus episodiques sont regroupes en SeriesInfo, le reste
(films, etc.) est retourne tel quel.

Exemple : 3 contenus "Friends S01E0x" + 1 film -> 1 serie + 1 contenu hors serie
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence

from loguru import logger

from epiorg.core.entities.content import ContentItem, Playlist
from epiorg.core.entities.series import SeriesInfo
from epiorg.core.ports.parser import ITitleParser
from epiorg.services.reconciler import SeriesReconciler
from epiorg.services.title_parser import RegexTitleParser
from epiorg.utils.constants import SERIES_CONTAINER_TAG, SERIES_TAGS


@dataclass
class SeriesGrouping:
    """
    Resultat du regroupement.

    Attributs :
        series: Series indexees par cle
        non_series_content: Contenus hors serie, dans l'ordre d'entree
    """

    series: dict[str, SeriesInfo] = field(default_factory=dict)
    non_series_content: list[ContentItem] = field(default_factory=list)


def is_series_episode(
    content: ContentItem,
    series_tags: Iterable[str] = SERIES_TAGS,
    title_parser: Optional[ITitleParser] = None,
) -> bool:
    """
    Indique si un contenu est un episode de serie.

    Un tag de serie ("series", "sitcom") suffit ; sinon le titre doit
    etre reconnu par le parser.
    """
    tags = {tag.lower() for tag in content.tags}
    if tags & {tag.lower() for tag in series_tags}:
        return True
    parser = title_parser or RegexTitleParser()
    return parser.parse(content.title) is not None


def group_series_content(
    content: Sequence[ContentItem],
    playlists: Sequence[Playlist] = (),
    series_tags: Iterable[str] = SERIES_TAGS,
    reconciler: Optional[SeriesReconciler] = None,
) -> SeriesGrouping:
    """
    Regroupe les episodes en series et separe les autres contenus.

    Un contenu est candidat s'il est tague serie, si son titre est un
    episode, ou s'il appartient a une playlist. Un candidat qui ne trouve
    finalement place dans aucune serie (tag seul, titre non parsable) est
    rendu dans non_series_content plutot que perdu.

    Args:
        content: Contenus a regrouper
        playlists: Playlists pour l'ordre canonique (optionnel)
        series_tags: Tags marquant un episode
        reconciler: Reconciliateur a utiliser (defaut : parser regex)

    Returns:
        SeriesGrouping avec les series et les contenus hors serie.
    """
    reconciler = reconciler or SeriesReconciler()
    parser = reconciler.assembler.title_parser
    tags = tuple(series_tags)
    playlist_claims = {item.claim_id for playlist in playlists for item in playlist.items}

    candidates: list[ContentItem] = []
    non_series: list[ContentItem] = []
    for item in content:
        if item.claim_id in playlist_claims or is_series_episode(item, tags, parser):
            candidates.append(item)
        else:
            non_series.append(item)

    if not candidates:
        return SeriesGrouping(series={}, non_series_content=non_series)

    series = reconciler.merge(playlists, candidates)

    placed = {
        episode.claim_id
        for info in series.values()
        for season in info.seasons
        for episode in season.episodes
    }
    orphans = {item.claim_id for item in candidates if item.claim_id not in placed}
    if orphans:
        logger.debug(f"{len(orphans)} contenu(s) tague(s) serie sans serie identifiable")
        kept = orphans | {item.claim_id for item in non_series}
        non_series = [item for item in content if item.claim_id in kept]

    return SeriesGrouping(series=series, non_series_content=non_series)


def get_series_representative(
    series: SeriesInfo, all_content: Sequence[ContentItem]
) -> Optional[ContentItem]:
    """
    Contenu representant une serie : le premier episode de la premiere saison.

    Returns:
        Le ContentItem correspondant, ou None si la serie est vide ou si
        le contenu est introuvable.
    """
    if not series.seasons or not series.seasons[0].episodes:
        return None
    first_claim = series.seasons[0].episodes[0].claim_id
    return next((item for item in all_content if item.claim_id == first_claim), None)


def series_to_content_item(series: SeriesInfo, representative: ContentItem) -> ContentItem:
    """
    Cree un ContentItem "conteneur" representant toute la serie.

    Reprend le contenu representatif avec le titre de la serie, une
    description "N seasons • M episodes" et le tag __series_container__.
    """
    season_count = len(series.seasons)
    plural = "s" if season_count != 1 else ""
    return replace(
        representative,
        title=series.title,
        description=f"{season_count} season{plural} • {series.total_episodes} episodes",
        tags=representative.tags | {SERIES_CONTAINER_TAG},
    )
