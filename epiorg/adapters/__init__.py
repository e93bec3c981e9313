"""
Adaptateurs (couche infrastructure).

- catalog/ : chargement d'un catalogue JSON en entites
- cli/ : commandes Typer avec affichage Rich
"""
