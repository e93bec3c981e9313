"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

- ITitleParser : Parsing des titres d'episodes
"""

from epiorg.core.ports.parser import ITitleParser

__all__ = [
    "ITitleParser",
]
