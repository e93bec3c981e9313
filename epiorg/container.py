"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'interface CLI :
parser de titres, assembleur, reconciliateur et services de recherche,
tous parametres par Settings.
"""

from dependency_injector import containers, providers

from .config import Settings
from .services.assembler import EpisodeAssembler
from .services.reconciler import SeriesReconciler
from .services.search.query_normalizer import QueryNormalizer
from .services.search.scorer import SearchScorer
from .services.search.service import SearchService
from .services.title_parser import RegexTitleParser


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        reconciler = container.reconciler()
        series = reconciler.merge(playlists, content)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Parser de titres - sans etat, partage
    title_parser = providers.Singleton(RegexTitleParser)

    # Organisation des series
    assembler = providers.Factory(
        EpisodeAssembler,
        title_parser=title_parser,
        default_season_number=config.provided.default_season_number,
    )
    reconciler = providers.Factory(
        SeriesReconciler,
        assembler=assembler,
    )

    # Recherche
    query_normalizer = providers.Factory(
        QueryNormalizer,
        min_term_length=config.provided.min_term_length,
    )
    scorer = providers.Factory(
        SearchScorer,
        normalizer=query_normalizer,
    )
    search_service = providers.Factory(
        SearchService,
        normalizer=query_normalizer,
        scorer=scorer,
        fallback_min_length=config.provided.search_fallback_min_length,
    )
