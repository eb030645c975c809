"""
Adaptateurs de parsing pour CineHook.

Ce package contient l'implementation concrete de l'interface de parsing:
- GuessitTitleParser: Parse les requetes et noms de release avec guessit
"""

from src.adapters.parsing.guessit_parser import GuessitTitleParser

__all__ = ["GuessitTitleParser"]
