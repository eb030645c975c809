"""
Service de decouverte de films (recommandations).

Interroge le service de decouverte avec les IDs de la bibliotheque et des
exclusions, ecarte les candidats deja connus et convertit les autres.
Les erreurs ne remontent jamais : elles sont journalisees et renvoyees
dans DiscoveryResult.failure.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from loguru import logger

from src.core.entities.movie import Movie
from src.core.ports.api_clients import IDiscoveryClient
from src.core.ports.repositories import IExclusionRepository, IMovieRepository
from src.services.movie_mapper import MovieMapper


@dataclass
class DiscoveryFailed:
    """Echec d'une decouverte."""

    action: str
    error: Exception


@dataclass
class DiscoveryResult:
    """Films decouverts ; movies est toujours une liste, vide en cas d'echec."""

    movies: list[Movie] = field(default_factory=list)
    failure: Optional[DiscoveryFailed] = None

    @property
    def failed(self) -> bool:
        return self.failure is not None


class DiscoveryService:
    """
    Decouverte de films absents de la bibliotheque et des exclusions.
    """

    def __init__(
        self,
        discovery_client: IDiscoveryClient,
        mapper: MovieMapper,
        movie_repo: IMovieRepository,
        exclusion_repo: IExclusionRepository,
    ) -> None:
        """
        Initialise le service de decouverte.

        Args:
            discovery_client: Client du service de recommandations
            mapper: Conversion des candidats en films
            movie_repo: Films de la bibliotheque
            exclusion_repo: Exclusions d'import
        """
        self._discovery_client = discovery_client
        self._mapper = mapper
        self._movie_repo = movie_repo
        self._exclusion_repo = exclusion_repo

    async def discover(
        self,
        action: str,
        library_ids: Optional[Iterable[int]] = None,
        excluded_ids: Optional[Iterable[int]] = None,
    ) -> DiscoveryResult:
        """
        Decouvre des films pour une action donnee.

        Args:
            action: Action de decouverte (ex: "upcoming", "popular")
            library_ids: IDs TMDB de la bibliotheque (charges depuis le repository si absent)
            excluded_ids: IDs TMDB exclus (charges depuis le repository si absent)

        Returns:
            DiscoveryResult sans aucun film de la bibliotheque ni exclu
        """
        try:
            if library_ids is None:
                library_ids = [movie.tmdb_id for movie in self._movie_repo.get_all()]
            if excluded_ids is None:
                excluded_ids = [exclusion.tmdb_id for exclusion in self._exclusion_repo.get_all()]
            library_ids = list(library_ids)
            excluded_ids = list(excluded_ids)

            candidates = await self._discovery_client.discover_candidates(
                action, _join_ids(library_ids), _join_ids(excluded_ids)
            )

            known_ids = set(library_ids) | set(excluded_ids)
            movies = []
            skipped = 0
            for candidate in candidates:
                if candidate.id in known_ids:
                    continue
                result = self._mapper.map_movie_result(candidate)
                if result.movie is None:
                    skipped += 1
                    continue
                movies.append(result.movie)

            logger.info(
                f"Decouverte '{action}': {len(movies)} films retenus sur "
                f"{len(candidates)} candidats ({skipped} ignores)"
            )
            return DiscoveryResult(movies=movies)

        except Exception as e:
            logger.exception(f"Erreur lors de la decouverte '{action}': {e}")
            return DiscoveryResult(failure=DiscoveryFailed(action=action, error=e))


def _join_ids(ids: Iterable[int]) -> str:
    return ",".join(str(tmdb_id) for tmdb_id in ids)
