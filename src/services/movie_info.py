"""
Service de resolution de films aupres de TMDB.

Point d'entree expose de CineHook : resolution par ID TMDB ou IMDb,
recherche par requete libre (routee par QueryRouter), liste des films
modifies et remapping d'un film de la bibliotheque vers TMDB.
"""

from datetime import datetime
from typing import Optional

from loguru import logger

from src.core.entities.movie import Credit, Movie
from src.core.exceptions import (
    MovieNotFoundError,
    ProviderTransportError,
    SearchFailedError,
)
from src.core.ports.api_clients import IMovieInfoProvider
from src.core.value_objects.search_route import (
    ImdbIdRoute,
    RejectedQuery,
    TextRoute,
    TmdbIdRoute,
)
from src.services.movie_mapper import MovieMapper
from src.services.query_router import QueryRouter
from src.utils.constants import MIN_REMAP_YEAR
from src.utils.helpers import is_blank

UNABLE_TO_COMMUNICATE = "Unable to communicate with TMDb."
INVALID_RESPONSE = "Invalid response received from TMDb."


class MovieInfoService:
    """
    Resolution d'identite et de metadonnees de films.

    Orchestre le routage des requetes, l'appel au fournisseur et la
    conversion en entites. Ne persiste rien : l'appelant decide.
    """

    def __init__(
        self,
        provider: IMovieInfoProvider,
        mapper: MovieMapper,
        router: QueryRouter,
        language: str = "en",
    ) -> None:
        """
        Initialise le service.

        Args:
            provider: Fournisseur de metadonnees (TMDB)
            mapper: Conversion des ressources en entites
            router: Routage des requetes de recherche
            language: Langue principale (titres alternatifs, details)
        """
        self._provider = provider
        self._mapper = mapper
        self._router = router
        self._language = language

    async def resolve_by_id(
        self, tmdb_id: int, has_predb_entry: bool = False
    ) -> Optional[tuple[Movie, list[Credit]]]:
        """
        Resout un film complet et ses credits par ID TMDB.

        Returns:
            Tuple (film, credits), ou None si TMDB renvoie une erreur applicative

        Raises:
            MovieNotFoundError: ID inconnu de TMDB
            ProviderTransportError: Echec de communication
        """
        resource = await self._provider.fetch_by_id(tmdb_id, self._language)
        if resource is None:
            return None
        return self._mapper.map_detail(resource, self._language, has_predb_entry)

    async def resolve_by_external_id(self, imdb_id: str) -> Optional[Movie]:
        """
        Resout un film par ID IMDb.

        Returns:
            Film converti depuis le premier resultat, None si la conversion echoue

        Raises:
            MovieNotFoundError: Aucun film pour cet ID IMDb
            ProviderTransportError: Echec de communication
        """
        resource = await self._provider.fetch_by_external_id(imdb_id)
        return self._mapper.map_movie(resource)

    async def list_changed_ids(self, since: datetime) -> set[int]:
        """IDs TMDB des films modifies depuis une date."""
        return await self._provider.fetch_changed_ids(since)

    async def search_by_query(self, query: str) -> list[Movie]:
        """
        Recherche des films depuis une requete libre.

        Args:
            query: Titre, "imdb:tt...", "tmdb:..." ou nom de release

        Returns:
            Films trouves ; les films deja en bibliotheque sont renvoyes tels quels

        Raises:
            SearchFailedError: Echec de communication ou reponse invalide
        """
        route = self._router.route(query)
        logger.debug(f"Requete {query!r} routee vers {route}")

        if isinstance(route, RejectedQuery):
            logger.debug(f"Requete rejetee: {route.reason}")
            return []

        if isinstance(route, ImdbIdRoute) and route.from_parser:
            return await self._search_parsed_imdb_id(route)

        try:
            if isinstance(route, ImdbIdRoute):
                return await self._search_imdb_id(route)

            if isinstance(route, TmdbIdRoute):
                return await self._search_tmdb_id(route)

            return await self._search_text(route)

        except ProviderTransportError as e:
            logger.opt(exception=e).warning(f"Recherche '{query}' impossible: {e}")
            raise SearchFailedError(query, UNABLE_TO_COMMUNICATE) from e
        except Exception as e:
            logger.opt(exception=e).warning(f"Reponse invalide pour la recherche '{query}': {e}")
            raise SearchFailedError(query, INVALID_RESPONSE) from e

    async def _search_imdb_id(self, route: ImdbIdRoute) -> list[Movie]:
        try:
            movie = await self.resolve_by_external_id(route.imdb_id)
        except MovieNotFoundError:
            return []
        return [movie] if movie is not None else []

    async def _search_tmdb_id(self, route: TmdbIdRoute) -> list[Movie]:
        try:
            result = await self.resolve_by_id(route.tmdb_id)
        except MovieNotFoundError:
            return []
        return [result[0]] if result is not None else []

    async def _search_parsed_imdb_id(self, route: ImdbIdRoute) -> list[Movie]:
        """ID IMDb trouve dans un nom de release : toute erreur donne zero resultat."""
        try:
            return await self._search_imdb_id(route)
        except Exception as e:
            logger.opt(exception=e).debug(
                f"Resolution de l'ID IMDb {route.imdb_id} impossible: {e}"
            )
            return []

    async def _search_text(self, route: TextRoute) -> list[Movie]:
        resources = await self._provider.search(route.search_term, route.year)
        movies = [self._mapper.map_search_result(resource) for resource in resources]
        return [movie for movie in movies if movie is not None]

    async def map_movie_to_provider(self, movie: Movie) -> Optional[Movie]:
        """
        Remappe un film de la bibliotheque vers sa fiche TMDB a jour.

        Resolution par ID TMDB, sinon ID IMDb, sinon recherche par titre
        (suivi de l'annee si elle est posterieure a 1900). Les champs propres
        a la bibliotheque sont recopies sur le film obtenu.

        Args:
            movie: Film de la bibliotheque

        Returns:
            Film TMDB avec les champs de bibliotheque, ou None si aucun film
            ne correspond ou en cas d'erreur
        """
        try:
            mapped = await self._find_provider_movie(movie)
        except Exception as e:
            logger.opt(exception=e).warning(
                f"Impossible de faire correspondre '{movie.title}' a un film TMDB: {e}"
            )
            return None

        if mapped is None:
            logger.warning(f"Impossible de faire correspondre '{movie.title}' a un film TMDB")
            return None

        mapped.path = movie.path
        mapped.root_folder_path = movie.root_folder_path
        mapped.profile_id = movie.profile_id
        mapped.monitored = movie.monitored
        mapped.movie_file_id = movie.movie_file_id
        mapped.minimum_availability = movie.minimum_availability
        mapped.tags = set(movie.tags)
        return mapped

    async def _find_provider_movie(self, movie: Movie) -> Optional[Movie]:
        if movie.tmdb_id > 0:
            result = await self.resolve_by_id(movie.tmdb_id)
            return result[0] if result is not None else None

        if not is_blank(movie.imdb_id):
            return await self.resolve_by_external_id(movie.imdb_id)

        query = movie.title
        if movie.year is not None and movie.year > MIN_REMAP_YEAR:
            query = f"{movie.title} {movie.year}"
        results = await self.search_by_query(query)
        return results[0] if results else None
