"""
Service de recherche sur un catalogue en memoire.

SearchService combine normalisation, scoring et repli sur les contenus
recents quand aucun resultat ne correspond.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from loguru import logger

from epiorg.core.entities.content import ContentItem
from epiorg.core.value_objects.search import NormalizedQuery
from epiorg.services.search.query_normalizer import QueryNormalizer
from epiorg.services.search.scorer import SearchScorer
from epiorg.services.search.suggestions import (
    get_fallback_message,
    should_fallback_to_recent,
)


@dataclass
class ScoredContent:
    """Contenu accompagne de son score de pertinence."""

    content: ContentItem
    score: int


@dataclass
class SearchOutcome:
    """
    Resultat d'une recherche.

    Attributs :
        query: Requete normalisee
        results: Contenus tries par pertinence (ou par recence en repli)
        fallback: True si les resultats sont des contenus recents de repli
        message: Message de repli a afficher, None sinon
    """

    query: NormalizedQuery
    results: list[ScoredContent] = field(default_factory=list)
    fallback: bool = False
    message: Optional[str] = None


class SearchService:
    """
    Recherche classee dans un ensemble de contenus.

    Seuls les contenus de score strictement positif sont retenus. A score
    egal, le plus recent passe devant.
    """

    def __init__(
        self,
        normalizer: Optional[QueryNormalizer] = None,
        scorer: Optional[SearchScorer] = None,
        fallback_min_length: int = 2,
    ) -> None:
        self._normalizer = normalizer or QueryNormalizer()
        self._scorer = scorer or SearchScorer(self._normalizer)
        self._fallback_min_length = fallback_min_length

    def search(
        self, content: Sequence[ContentItem], query: str, limit: Optional[int] = None
    ) -> SearchOutcome:
        """
        Recherche les contenus correspondant a une requete.

        Args:
            content: Contenus candidats
            query: Saisie utilisateur
            limit: Nombre maximum de resultats (None : tous)

        Returns:
            SearchOutcome ; en l'absence de correspondance pour une requete
            exploitable, les contenus les plus recents avec fallback=True.
        """
        normalized = self._normalizer.normalize(query)

        scored = [ScoredContent(item, self._scorer.score(item, normalized)) for item in content]
        matches = [entry for entry in scored if entry.score > 0]
        matches.sort(key=lambda entry: (-entry.score, -entry.content.release_time))
        logger.debug(
            f"Recherche '{normalized.original_text}' : {len(matches)}/{len(scored)} contenu(s)"
        )

        if matches or not should_fallback_to_recent(
            query, matches, self._fallback_min_length
        ):
            return SearchOutcome(query=normalized, results=matches[:limit] if limit else matches)

        recent = sorted(content, key=lambda item: -item.release_time)
        if limit:
            recent = recent[:limit]
        logger.info(f"Aucun resultat pour '{normalized.original_text}', repli sur les recents")
        return SearchOutcome(
            query=normalized,
            results=[ScoredContent(item, 0) for item in recent],
            fallback=True,
            message=get_fallback_message(normalized.original_text),
        )
