"""
Service de reconciliation des series.

Fusionne, serie par serie, les saisons issues des playlists (canoniques) et
les saisons inferees par parsing des titres.

Regle de precedence (par saison, totale) :
si une playlist fournit la saison N d'une serie, TOUS les episodes de la
saison N viennent de cette playlist ; les episodes parses de la saison N sont
ecartes (jamais intercales).
"""

from typing import Iterable, Optional, Sequence

from loguru import logger

from epiorg.core.entities.content import ContentItem, Playlist
from epiorg.core.entities.series import Season, SeasonSource, SeriesInfo
from epiorg.services.assembler import EpisodeAssembler, playlist_series_key
from epiorg.utils.helpers import generate_series_key

SeasonTable = dict[tuple[str, int], Season]


class SeriesReconciler:
    """
    Reconciliation playlists / titres parses en SeriesInfo.

    Methodes :
        merge: Construit toutes les series du catalogue.
        series_for_claim: Retrouve la serie d'un contenu donne.
    """

    def __init__(self, assembler: Optional[EpisodeAssembler] = None) -> None:
        self._assembler = assembler or EpisodeAssembler()

    @property
    def assembler(self) -> EpisodeAssembler:
        return self._assembler

    def merge(
        self, playlists: Sequence[Playlist], all_content: Sequence[ContentItem]
    ) -> dict[str, SeriesInfo]:
        """
        Fusionne les donnees playlist et parsees en une SeriesInfo par serie.

        Etapes :
        1. Table (cle, saison) -> Season non inferee depuis chaque playlist
        2. Table (cle, saison) -> Season inferee depuis le parsing des contenus
           qui n'appartiennent a aucune playlist
        3. Union des numeros de saison, l'etape 1 ecrasant l'etape 2
        4. Tri des saisons par numero (total_episodes est calcule)

        Une serie sans saison n'est jamais emise.

        Args:
            playlists: Playlists disponibles
            all_content: Tous les contenus du catalogue

        Returns:
            SeriesInfo indexes par cle de serie.
        """
        content_map = {item.claim_id: item for item in all_content}

        playlist_table, playlist_titles = self._playlist_table(playlists, content_map)

        claimed_ids = {item.claim_id for playlist in playlists for item in playlist.items}
        unclaimed = [item for item in all_content if item.claim_id not in claimed_ids]
        parsed_series = self._assembler.assemble_from_parsing(unclaimed)

        parsed_table: SeasonTable = {}
        titles: dict[str, str] = dict(playlist_titles)
        for series_key, series in parsed_series.items():
            titles.setdefault(series_key, series.title)
            for season in series.seasons:
                parsed_table[(series_key, season.number)] = season

        # Precedence : une entree playlist remplace l'entree parsee de meme cle
        merged: SeasonTable = {**parsed_table, **playlist_table}

        seasons_by_series: dict[str, list[Season]] = {}
        for (series_key, _number), season in merged.items():
            if season.episodes:
                seasons_by_series.setdefault(series_key, []).append(season)

        result: dict[str, SeriesInfo] = {}
        for series_key, seasons in seasons_by_series.items():
            seasons.sort(key=lambda season: season.number)
            result[series_key] = SeriesInfo(
                series_key=series_key,
                title=titles.get(series_key, series_key),
                seasons=seasons,
            )

        overridden = len(set(playlist_table) & set(parsed_table))
        logger.info(
            f"Reconciliation : {len(result)} serie(s), {len(playlist_table)} saison(s) "
            f"playlist, {len(parsed_table)} saison(s) inferee(s), {overridden} ecrasee(s)"
        )
        return result

    def series_for_claim(
        self,
        claim_id: str,
        playlists: Sequence[Playlist],
        all_content: Sequence[ContentItem],
    ) -> Optional[SeriesInfo]:
        """
        Retrouve la serie a laquelle appartient un contenu.

        Par appartenance a une playlist si possible, sinon par parsing du
        titre et regroupement des contenus partageant la meme cle de serie.

        Returns:
            La SeriesInfo, ou None si le claim est inconnu ou si son titre
            n'est pas un episode (film, contenu hors serie).
        """
        content = next((item for item in all_content if item.claim_id == claim_id), None)
        if content is None:
            return None

        for playlist in playlists:
            if any(item.claim_id == claim_id for item in playlist.items):
                series_key = playlist_series_key(playlist)
                return self.merge(playlists, all_content).get(series_key)

        parsed = self._assembler.title_parser.parse(content.title)
        if parsed is None:
            return None

        # La fusion complete regroupe tous les contenus de meme cle et
        # applique la precedence des playlists eventuelles de cette serie
        series_key = generate_series_key(parsed.series_name)
        return self.merge(playlists, all_content).get(series_key)

    def _playlist_table(
        self, playlists: Iterable[Playlist], content_map: dict[str, ContentItem]
    ) -> tuple[SeasonTable, dict[str, str]]:
        """
        Construit la table (cle, saison) -> Season depuis les playlists.

        Deux playlists pour la meme saison d'une meme serie sont concatenees
        dans l'ordre d'entree (l'id de la premiere est conserve).
        """
        table: SeasonTable = {}
        titles: dict[str, str] = {}

        for playlist in playlists:
            series_key = playlist_series_key(playlist)
            if not series_key:
                continue
            titles.setdefault(series_key, playlist.title)

            season = self._assembler.build_playlist_season(playlist, content_map)
            if season is None:
                continue

            key = (series_key, season.number)
            existing = table.get(key)
            if existing is None:
                table[key] = season
            else:
                logger.debug(
                    f"Playlists {existing.playlist_id} et {playlist.id} "
                    f"concatenees pour {series_key} saison {season.number}"
                )
                table[key] = Season(
                    number=existing.number,
                    episodes=existing.episodes + season.episodes,
                    source=SeasonSource.playlist(existing.playlist_id),
                )

        return table, titles


def merge_series_data(
    playlists: Sequence[Playlist], all_content: Sequence[ContentItem]
) -> dict[str, SeriesInfo]:
    """Fusionne playlists et titres parses avec le reconciliateur par defaut."""
    return SeriesReconciler().merge(playlists, all_content)


def get_series_for_claim(
    claim_id: str, playlists: Sequence[Playlist], all_content: Sequence[ContentItem]
) -> Optional[SeriesInfo]:
    """Retrouve la serie d'un claim avec le reconciliateur par defaut."""
    return SeriesReconciler().series_for_claim(claim_id, playlists, all_content)
