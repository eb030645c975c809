"""
Interface port pour le parsing de titres de films.

Le parser extrait titre, annee et identifiant IMDb d'une chaine saisie
(titre libre ou nom de release).
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.value_objects.parsed_info import ParsedMovieTitle


class IMovieTitleParser(ABC):
    """
    Interface pour le parsing de titres de films.

    L'implementation utilisera typiquement la bibliotheque guessit.
    """

    @abstractmethod
    def parse_movie_title(self, title: str) -> Optional[ParsedMovieTitle]:
        """
        Parse une chaine et en extrait les informations structurees.

        Args:
            title: Chaine saisie par l'utilisateur

        Retourne:
            ParsedMovieTitle si le parser a reconnu quelque chose d'utile
            (annee ou ID IMDb), None sinon.
        """
        ...
