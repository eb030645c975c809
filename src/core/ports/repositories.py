"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) donnant acces a la bibliotheque de films et a la
liste d'exclusions. Le stockage concret appartient au gestionnaire de
bibliotheque ; CineHook ne fait que lire.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.movie import ImportExclusion, Movie


class IMovieRepository(ABC):
    """
    Interface de lecture des films de la bibliotheque.
    """

    @abstractmethod
    def get_all(self) -> list[Movie]:
        """Liste tous les films de la bibliotheque."""
        ...

    @abstractmethod
    def find_by_tmdb_id(self, tmdb_id: int) -> Optional[Movie]:
        """Récupère un film par son ID TMDB."""
        ...


class IExclusionRepository(ABC):
    """
    Interface de lecture des exclusions d'import.
    """

    @abstractmethod
    def get_all(self) -> list[ImportExclusion]:
        """Liste toutes les exclusions."""
        ...
