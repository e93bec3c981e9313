"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Contenus, playlists et hierarchie serie/saison/episode
- ports/ : Interfaces abstraites (parser de titres)
- value_objects/ : Objets valeur immutables (ParsedEpisode, NormalizedQuery, SeasonValidation)
"""
