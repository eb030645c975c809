"""
Implementation du parser de titres de films avec guessit.

Ce module fournit GuessitTitleParser qui implemente IMovieTitleParser
pour extraire titre, annee et ID IMDb d'une requete de recherche ou d'un
nom de release.
"""

import re
from typing import Any, Optional

from guessit import guessit

from src.core.ports.parser import IMovieTitleParser
from src.core.value_objects.parsed_info import ParsedMovieTitle

_IMDB_ID_RE = re.compile(r"\btt\d{7,8}\b", re.IGNORECASE)

# Requetes par identifiant : guessit lirait "tmdb:2012" comme une annee
_ID_PREFIXES = ("imdb:", "imdbid:", "tmdb:", "tmdbid:")


class GuessitTitleParser(IMovieTitleParser):
    """
    Parser de titres de films utilisant la bibliotheque guessit.

    Ne rapporte un resultat que si une annee ou un ID IMDb a ete reconnu :
    un titre seul n'apporte rien de plus que la chaine brute.
    """

    def parse_movie_title(self, title: str) -> Optional[ParsedMovieTitle]:
        """
        Parse une requete et en extrait les informations structurees.

        Args:
            title: Requete saisie (ex: "The.Matrix.1999.1080p.BluRay")

        Returns:
            ParsedMovieTitle, ou None si ni annee ni ID IMDb n'a ete trouve
        """
        if not title or not title.strip():
            return None
        if title.strip().lower().startswith(_ID_PREFIXES):
            return None

        result = guessit(title, {"type": "movie"})

        year = self._extract_year(result)
        imdb_id = self._extract_imdb_id(title)
        if year is None and imdb_id is None:
            return None

        return ParsedMovieTitle(
            title=self._extract_title(result, title),
            year=year,
            imdb_id=imdb_id,
        )

    def _extract_title(self, result: dict[str, Any], fallback: str) -> str:
        """
        Extrait le titre depuis le resultat guessit.

        Returns:
            Titre extrait, ou la chaine brute en fallback
        """
        title = result.get("title")
        if title:
            return str(title)
        return fallback

    def _extract_year(self, result: dict[str, Any]) -> Optional[int]:
        """Annee reconnue par guessit (la premiere si plusieurs)."""
        year = result.get("year")
        if isinstance(year, list):
            year = year[0] if year else None
        return int(year) if year is not None else None

    def _extract_imdb_id(self, title: str) -> Optional[str]:
        """ID IMDb present dans la chaine (guessit ne le reconnait pas)."""
        match = _IMDB_ID_RE.search(title)
        return match.group(0).lower() if match else None
