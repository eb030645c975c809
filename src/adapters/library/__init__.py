"""
Adaptateurs de bibliotheque (films existants, exclusions, pre-releases).
"""

from src.adapters.library.in_memory import (
    InMemoryExclusionRepository,
    InMemoryMovieRepository,
    InMemoryPreDBService,
)

__all__ = [
    "InMemoryExclusionRepository",
    "InMemoryMovieRepository",
    "InMemoryPreDBService",
]
