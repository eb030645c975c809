"""
Business entities representing core domain concepts.

Entities are mutable objects built from provider records. They carry no
persistence logic; the library manager owns storage.

Exports:
- Movie: Movie metadata from TMDB
- AlternativeTitle: Native or translated alternative title
- Credit: Cast or crew credit
- MovieCollection: Collection a movie belongs to
- MediaCover: Image reference
- ImportExclusion: Movie excluded from discovery
"""

from src.core.entities.movie import (
    AlternativeTitle,
    Credit,
    CreditType,
    ImportExclusion,
    MediaCover,
    MediaCoverType,
    Movie,
    MovieCollection,
    MovieStatus,
    Ratings,
    SourceType,
)

__all__ = [
    "AlternativeTitle",
    "Credit",
    "CreditType",
    "ImportExclusion",
    "MediaCover",
    "MediaCoverType",
    "Movie",
    "MovieCollection",
    "MovieStatus",
    "Ratings",
    "SourceType",
]
