"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Clients HTTP (TMDB, service de decouverte) et URLs d'images
- parsing/ : Parsing des requetes et noms de release (guessit)
- library/ : Bibliotheque, exclusions et pre-releases en memoire
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from src.adapters.parsing.guessit_parser import GuessitTitleParser

__all__ = [
    "GuessitTitleParser",
]
