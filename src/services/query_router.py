"""
Routage d'une requete de recherche vers une strategie de resolution.

Une chaine saisie par l'utilisateur devient :
- ImdbIdRoute : "imdb:tt0133093", "imdbid:tt0133093" ou nom de release contenant un ID IMDb
- TmdbIdRoute : "tmdb:603", "tmdbid:603"
- TextRoute : recherche floue par titre, avec annee optionnelle
- RejectedQuery : prefixe mal forme, aucun resultat

Le routage ne leve jamais d'exception sur une entree mal formee.
"""

from typing import Optional, Union

from loguru import logger

from src.core.ports.parser import IMovieTitleParser
from src.core.value_objects.search_route import (
    ImdbIdRoute,
    RejectedQuery,
    SearchRoute,
    TextRoute,
    TmdbIdRoute,
)
from src.utils.constants import MIN_SEARCH_YEAR

_IMDB_PREFIXES = ("imdb:", "imdbid:")
_TMDB_PREFIXES = ("tmdb:", "tmdbid:")
_TRAILING_ARTICLES = (",the", ", the")


class QueryRouter:
    """
    Decide comment resoudre une requete : recherche exacte par ID ou floue par titre.

    Example:
        router = QueryRouter(GuessitTitleParser())
        router.route("tmdb:603")        # TmdbIdRoute(tmdb_id=603)
        router.route("The Matrix 1999") # TextRoute("the+matrix", 1999)
    """

    def __init__(self, title_parser: IMovieTitleParser) -> None:
        self._title_parser = title_parser

    def route(self, query: str) -> SearchRoute:
        """
        Determine la strategie de recherche pour une requete.

        Args:
            query: Chaine saisie (titre libre, prefixe imdb:/tmdb:, nom de release)

        Returns:
            Exactement une variante de SearchRoute
        """
        working, year = self._working_string(query)
        if isinstance(working, ImdbIdRoute):
            return working

        for suffix in _TRAILING_ARTICLES:
            if working.endswith(suffix):
                working = working[: -len(suffix)]
                break

        if working.startswith(_IMDB_PREFIXES):
            identifier = _prefixed_value(working)
            if identifier is None:
                return RejectedQuery(reason=f"Identifiant IMDb invalide: {query!r}")
            return ImdbIdRoute(imdb_id=identifier)

        if working.startswith(_TMDB_PREFIXES):
            identifier = _prefixed_value(working)
            try:
                tmdb_id = int(identifier) if identifier is not None else None
            except ValueError:
                tmdb_id = None
            if tmdb_id is None:
                return RejectedQuery(reason=f"Identifiant TMDB invalide: {query!r}")
            return TmdbIdRoute(tmdb_id=tmdb_id)

        search_term = working
        for separator in ("_", " ", "."):
            search_term = search_term.replace(separator, "+")

        return TextRoute(search_term=search_term, year=year)

    def _working_string(
        self, query: str
    ) -> tuple[Union[ImdbIdRoute, str], Optional[int]]:
        """
        Chaine de travail et annee, ou ImdbIdRoute si le parser a trouve un ID IMDb.

        Le resultat du parser n'est retenu que si son titre differe de la
        chaine brute.
        """
        try:
            parsed = self._title_parser.parse_movie_title(query)
        except Exception as e:
            logger.debug(f"Parsing impossible pour {query!r}: {e}")
            parsed = None

        if parsed is None or parsed.title == query:
            return query.lower().replace(".", ""), None

        if parsed.imdb_id:
            return ImdbIdRoute(imdb_id=parsed.imdb_id, from_parser=True), None

        year = parsed.year if parsed.year and parsed.year > MIN_SEARCH_YEAR else None
        return parsed.title.lower().replace(".", " "), year


def _prefixed_value(working: str) -> Optional[str]:
    """Valeur apres le premier ":", None si vide ou contenant un espace."""
    value = working.split(":", 1)[1].strip()
    if not value or any(char.isspace() for char in value):
        return None
    return value
