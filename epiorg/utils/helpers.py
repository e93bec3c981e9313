"""
Fonctions utilitaires partagees dans le projet EpiOrg.

Ce module centralise les fonctions reutilisees a travers le codebase :
- strip_invisible_chars / clean_title : nettoyage des titres venant de l'API
- collapse_whitespace : normalisation des espaces, tabulations et retours ligne
- generate_series_key : identifiant stable d'une serie a partir de son nom
"""

import re
import unicodedata

_NON_KEY_CHARS = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RUN = re.compile(r"\s+")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.). Les espaces
    blancs (tabulation, retour ligne) sont conserves pour etre normalises
    ensuite par collapse_whitespace.
    """
    result = []
    for char in text:
        if char.isspace():
            result.append(char)
            continue
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def collapse_whitespace(text: str) -> str:
    """Remplace chaque suite d'espaces blancs par un espace simple et retire ceux des bords."""
    if not text:
        return ""
    return " ".join(text.split())


def clean_title(title: str) -> str:
    """Nettoie un titre : retire les caractères invisibles et les espaces superflus."""
    if not title:
        return ""
    return collapse_whitespace(strip_invisible_chars(title))


def generate_series_key(series_name: str) -> str:
    """
    Genere la cle normalisee d'une serie.

    Minuscules, suppression des caracteres hors [a-z0-9 ], chaque suite
    d'espaces devient un tiret, tirets de bord retires.

    Ex: "Grey's Anatomy" -> "greys-anatomy", "  Breaking   Bad!" -> "breaking-bad"

    Args:
        series_name: Nom de la serie (peut etre vide).

    Returns:
        Cle de serie, chaine vide si aucun caractere ne subsiste.
    """
    if not series_name:
        return ""
    key = _NON_KEY_CHARS.sub("", series_name.lower())
    key = _WHITESPACE_RUN.sub("-", key.strip())
    return key.strip("-")
