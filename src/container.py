"""
Container d'injection de dependances via dependency-injector.

Assemble la configuration, les adaptateurs (TMDB, decouverte, images,
parsing, bibliotheque en memoire) et les services pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.cover_resolver import TMDBCoverResolver
from .adapters.api.discovery_client import DiscoveryAPIClient
from .adapters.api.rate_limit import RateLimitPolicy
from .adapters.api.tmdb_client import TMDBClient
from .adapters.library.in_memory import (
    InMemoryExclusionRepository,
    InMemoryMovieRepository,
    InMemoryPreDBService,
)
from .adapters.parsing.guessit_parser import GuessitTitleParser
from .config import Settings
from .services.discovery import DiscoveryService
from .services.movie_info import MovieInfoService
from .services.movie_mapper import MovieMapper
from .services.query_router import QueryRouter


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.movie_info_service()
        movies = await service.search_by_query("The Matrix 1999")
        await container.tmdb_client().close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Politique de quota TMDB
    rate_limit_policy = providers.Singleton(
        RateLimitPolicy,
        threshold=config.provided.rate_limit_threshold,
        cooldown_seconds=config.provided.rate_limit_cooldown_seconds,
    )

    # Clients API - Singleton (un seul client httpx par processus)
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        base_url=config.provided.tmdb_base_url,
        timeout=config.provided.request_timeout,
        rate_limit=rate_limit_policy,
    )

    discovery_client = providers.Singleton(
        DiscoveryAPIClient,
        base_url=config.provided.discovery_base_url,
        timeout=config.provided.request_timeout,
    )

    # Adapters - implementations concretes des ports
    cover_resolver = providers.Singleton(
        TMDBCoverResolver,
        image_base_url=config.provided.tmdb_image_base_url,
        size=config.provided.tmdb_image_size,
    )
    title_parser = providers.Singleton(GuessitTitleParser)

    # Bibliotheque - en memoire, alimentee par la CLI
    movie_repository = providers.Singleton(InMemoryMovieRepository)
    exclusion_repository = providers.Singleton(InMemoryExclusionRepository)
    predb_service = providers.Singleton(InMemoryPreDBService)

    # Services
    movie_mapper = providers.Factory(
        MovieMapper,
        cover_resolver=cover_resolver,
        predb_service=predb_service,
        movie_repo=movie_repository,
    )
    query_router = providers.Singleton(QueryRouter, title_parser=title_parser)

    movie_info_service = providers.Factory(
        MovieInfoService,
        provider=tmdb_client,
        mapper=movie_mapper,
        router=query_router,
        language=config.provided.tmdb_language,
    )

    discovery_service = providers.Factory(
        DiscoveryService,
        discovery_client=discovery_client,
        mapper=movie_mapper,
        movie_repo=movie_repository,
        exclusion_repo=exclusion_repository,
    )
