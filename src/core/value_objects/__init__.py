"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- Language : Langue avec code ISO et nom complet
- ParsedMovieTitle : Informations extraites du parsing d'un titre
- SearchRoute : Strategie de recherche (ImdbIdRoute, TmdbIdRoute, TextRoute, RejectedQuery)
"""

from src.core.value_objects.language import ENGLISH, Language, find_language
from src.core.value_objects.parsed_info import ParsedMovieTitle
from src.core.value_objects.search_route import (
    ImdbIdRoute,
    RejectedQuery,
    SearchRoute,
    TextRoute,
    TmdbIdRoute,
)

__all__ = [
    "ENGLISH",
    "Language",
    "find_language",
    "ParsedMovieTitle",
    "ImdbIdRoute",
    "RejectedQuery",
    "SearchRoute",
    "TextRoute",
    "TmdbIdRoute",
]
