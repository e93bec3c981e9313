"""
Adaptateur CLI : commandes Typer avec affichage Rich.
"""
