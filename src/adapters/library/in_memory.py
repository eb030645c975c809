"""
Implementations en memoire des ports de bibliotheque.

Le stockage reel appartient au gestionnaire de bibliotheque. Ces adaptateurs
servent a la CLI (IDs passes en options) et aux tests.
"""

from typing import Iterable, Optional

from src.core.entities.movie import ImportExclusion, Movie
from src.core.ports.metadata import IPreDBService
from src.core.ports.repositories import IExclusionRepository, IMovieRepository


class InMemoryMovieRepository(IMovieRepository):
    """
    Repository de films en memoire, indexe par ID TMDB.

    Le dernier film ajoute pour un ID TMDB donne remplace le precedent.
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None) -> None:
        """
        Args :
            movies : Films initiaux de la bibliotheque
        """
        self._movies: dict[int, Movie] = {}
        for movie in movies or ():
            self.add(movie)

    def add(self, movie: Movie) -> None:
        """Ajoute ou remplace un film."""
        self._movies[movie.tmdb_id] = movie

    def get_all(self) -> list[Movie]:
        return list(self._movies.values())

    def find_by_tmdb_id(self, tmdb_id: int) -> Optional[Movie]:
        return self._movies.get(tmdb_id)


class InMemoryExclusionRepository(IExclusionRepository):
    """Liste d'exclusions en memoire."""

    def __init__(self, exclusions: Optional[Iterable[ImportExclusion]] = None) -> None:
        self._exclusions = list(exclusions or ())

    def get_all(self) -> list[ImportExclusion]:
        return list(self._exclusions)


class InMemoryPreDBService(IPreDBService):
    """
    Base de pre-releases en memoire.

    Un film a des releases connues si son ID TMDB a ete enregistre.
    """

    def __init__(self, tmdb_ids: Optional[Iterable[int]] = None) -> None:
        self._tmdb_ids = set(tmdb_ids or ())

    def has_releases(self, movie: Movie) -> bool:
        return movie.tmdb_id in self._tmdb_ids
