"""
Service de scoring des resultats de recherche.

Score additif pondere entre un contenu et une requete normalisee :
- titre identique a la requete : +100
- titre contenant la requete entiere : +50
- marqueur saison/episode present dans le titre : +30 par marqueur
- terme present dans le titre : +20 (sinon dans la description : +10)
- terme present dans un tag : +15 par terme

Aucune correspondance donne exactement 0. Le score est deterministe ;
a score egal, l'appelant departage (ex: par release_time).
"""

from typing import Optional, Sequence, TypeVar, Union

from epiorg.core.entities.content import ContentItem
from epiorg.core.value_objects.search import NormalizedQuery
from epiorg.services.search.query_normalizer import QueryNormalizer

EXACT_TITLE_SCORE = 100
TITLE_CONTAINS_SCORE = 50
SEASON_EPISODE_SCORE = 30
TITLE_TERM_SCORE = 20
TAG_TERM_SCORE = 15
DESCRIPTION_TERM_SCORE = 10

ContentT = TypeVar("ContentT", bound=ContentItem)


class SearchScorer:
    """
    Calcule la pertinence des contenus pour une requete.

    Les titres sont normalises avec le meme QueryNormalizer que la requete :
    "Show 1x01" et "show s1e1" partagent ainsi le marqueur S01E01.
    """

    def __init__(self, normalizer: Optional[QueryNormalizer] = None) -> None:
        self._normalizer = normalizer or QueryNormalizer()

    @property
    def normalizer(self) -> QueryNormalizer:
        return self._normalizer

    def normalize(self, query: Union[str, NormalizedQuery]) -> NormalizedQuery:
        if isinstance(query, NormalizedQuery):
            return query
        return self._normalizer.normalize(query)

    def score(self, content: ContentItem, query: Union[str, NormalizedQuery]) -> int:
        """
        Score de pertinence d'un contenu.

        Args:
            content: Contenu candidat
            query: Requete brute ou deja normalisee

        Returns:
            Score entier >= 0.
        """
        normalized = self.normalize(query)
        query_text = normalized.normalized_text.casefold()
        if not query_text:
            return 0

        title = self._normalizer.normalize(content.title)
        title_text = title.normalized_text.casefold()
        description = (content.description or "").casefold()
        tags = [tag.casefold() for tag in content.tags]

        score = 0
        if title_text == query_text:
            score += EXACT_TITLE_SCORE
        if query_text in title_text:
            score += TITLE_CONTAINS_SCORE

        for token in normalized.season_episode_tokens:
            if token in title.season_episode_tokens:
                score += SEASON_EPISODE_SCORE

        for term in normalized.search_terms:
            if term in title_text:
                score += TITLE_TERM_SCORE
            elif term in description:
                score += DESCRIPTION_TERM_SCORE
            if any(term in tag for tag in tags):
                score += TAG_TERM_SCORE

        return score

    def sort_results(
        self, results: Sequence[ContentT], query: Union[str, NormalizedQuery]
    ) -> list[ContentT]:
        """
        Trie les contenus par score decroissant.

        A score egal, le contenu le plus recent (release_time) passe devant,
        puis l'ordre d'entree est conserve.
        """
        normalized = self.normalize(query)
        scored = [(self.score(item, normalized), item) for item in results]
        scored.sort(key=lambda pair: (-pair[0], -pair[1].release_time))
        return [item for _score, item in scored]


_default_scorer = SearchScorer()


def score_search_result(content: ContentItem, query: Union[str, NormalizedQuery]) -> int:
    """Score un contenu avec le scorer par defaut."""
    return _default_scorer.score(content, query)


def sort_search_results(
    results: Sequence[ContentT], query: Union[str, NormalizedQuery]
) -> list[ContentT]:
    """Trie des contenus par pertinence avec le scorer par defaut."""
    return _default_scorer.sort_results(results, query)
