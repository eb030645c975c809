"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et exceptions. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, clients HTTP, CLI).

Sous-packages :
- entities/ : Entités métier (Movie, Credit, MovieCollection, AlternativeTitle)
- ports/ : Interfaces abstraites et formes brutes des réponses TMDB
- value_objects/ : Objets valeur immutables (Language, SearchRoute, ParsedMovieTitle)
"""
