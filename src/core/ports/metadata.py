"""
Interfaces ports pour les collaborateurs de mapping.

- ICoverResolver : construit l'URL d'une image a partir d'un chemin TMDB
- IPreDBService : indique si des releases existent deja pour un film
"""

from abc import ABC, abstractmethod

from src.core.entities.movie import MediaCover, MediaCoverType, Movie


class ICoverResolver(ABC):
    """Interface de resolution des URLs d'images."""

    @abstractmethod
    def get_cover_for_url(self, path: str, cover_type: MediaCoverType) -> MediaCover:
        """
        Construit une reference d'image depuis un chemin TMDB.

        Args:
            path: Chemin relatif TMDB (ex: "/abc.jpg")
            cover_type: Categorie de l'image

        Returns:
            MediaCover avec une URL absolue
        """
        ...


class IPreDBService(ABC):
    """Interface de la base de pre-releases locale."""

    @abstractmethod
    def has_releases(self, movie: Movie) -> bool:
        """Vrai si des releases sont deja connues pour ce film."""
        ...
