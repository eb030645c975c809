"""
Utilitaires et constantes pour CineHook.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import (
    ISO_LANGUAGES,
    PHYSICAL_RELEASE_TYPES,
    TMDB_HEADSHOT_BASE_URL,
)

__all__ = [
    "ISO_LANGUAGES",
    "PHYSICAL_RELEASE_TYPES",
    "TMDB_HEADSHOT_BASE_URL",
]
