"""
Constantes globales pour EpiOrg.

Ce module contient les constantes utilisees dans l'application:
- Nombres ecrits en toutes lettres (one..twenty) pour les saisons/episodes
- Tags identifiant un contenu episodique
- Marqueur des elements "conteneur de serie"
- Termes de recherche courants proposes en suggestion
"""

# Nombres en toutes lettres reconnus dans "Season one Episode twelve"
NUMBER_WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
}

# Tags qui marquent un contenu comme episode, meme sans titre parsable
SERIES_TAGS = frozenset({
    "series",
    "sitcom",
})

# Tag ajoute aux ContentItem qui representent une serie entiere
SERIES_CONTAINER_TAG = "__series_container__"

# Suggestions de genres pour l'autocompletion de la recherche
COMMON_SEARCH_TERMS = (
    "comedy",
    "action",
    "drama",
    "thriller",
    "horror",
    "romance",
    "documentary",
    "animation",
    "sci-fi",
    "fantasy",
    "mystery",
)

# Nombre maximum de suggestions retournees
MAX_SUGGESTIONS = 10
