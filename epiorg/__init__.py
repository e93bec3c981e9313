"""
EpiOrg - Organisation et recherche de contenus episodiques.

Ce package organise des contenus (titres libres + playlists ordonnees) en
hierarchie serie/saison/episode canonique, et fournit navigation et recherche.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (parsing, assemblage, reconciliation, recherche)
- adapters/ : Couche infrastructure (CLI, chargement de catalogue JSON)
"""
