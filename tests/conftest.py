"""
Fixtures pytest partagees pour les tests CineHook.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (IPreDBService, IMovieTitleParser)
- Adaptateurs reels sans I/O (resolveur d'images, bibliotheque en memoire)
- MovieMapper avec horloge figee
- Ressources TMDB validees depuis les fixtures JSON
- Settings de test avec chemins temporaires
"""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.adapters.api.cover_resolver import TMDBCoverResolver
from src.adapters.library.in_memory import (
    InMemoryExclusionRepository,
    InMemoryMovieRepository,
)
from src.config import Settings
from src.core.ports.metadata import IPreDBService
from src.core.ports.parser import IMovieTitleParser
from src.core.ports.resources import MovieResource, MovieResultResource
from src.services.movie_mapper import MovieMapper
from tests.fixtures.tmdb_responses import (
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_SEARCH_RESPONSE,
)

# Instant de reference des tests : 1er mai 2020
FIXED_NOW = datetime(2020, 5, 1, 12, 0, 0)


@pytest.fixture
def fixed_now() -> datetime:
    """Instant courant fige utilise par le mapper."""
    return FIXED_NOW


@pytest.fixture
def cover_resolver() -> TMDBCoverResolver:
    """Resolveur d'images TMDB (taille originale)."""
    return TMDBCoverResolver()


@pytest.fixture
def mock_predb_service() -> MagicMock:
    """
    Mock de IPreDBService pour les tests.

    Aucune release connue par defaut.
    """
    mock = MagicMock(spec=IPreDBService)
    mock.has_releases.return_value = False
    return mock


@pytest.fixture
def mock_title_parser() -> MagicMock:
    """
    Mock de IMovieTitleParser pour les tests.

    Ne reconnait rien par defaut (None).
    """
    mock = MagicMock(spec=IMovieTitleParser)
    mock.parse_movie_title.return_value = None
    return mock


@pytest.fixture
def movie_repository() -> InMemoryMovieRepository:
    """Bibliotheque vide."""
    return InMemoryMovieRepository()


@pytest.fixture
def exclusion_repository() -> InMemoryExclusionRepository:
    """Aucune exclusion."""
    return InMemoryExclusionRepository()


@pytest.fixture
def movie_mapper(
    cover_resolver: TMDBCoverResolver,
    mock_predb_service: MagicMock,
    movie_repository: InMemoryMovieRepository,
    fixed_now: datetime,
) -> MovieMapper:
    """MovieMapper avec horloge figee au 1er mai 2020."""
    return MovieMapper(
        cover_resolver=cover_resolver,
        predb_service=mock_predb_service,
        movie_repo=movie_repository,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def matrix_resource() -> MovieResource:
    """Details complets de The Matrix (603)."""
    return MovieResource.model_validate(TMDB_MOVIE_DETAILS_RESPONSE)


@pytest.fixture
def matrix_result() -> MovieResultResource:
    """Resultat de recherche de The Matrix (603)."""
    return MovieResultResource.model_validate(TMDB_SEARCH_RESPONSE["results"][0])


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log.
    """
    return Settings(
        tmdb_api_key="test_api_key",
        log_file=tmp_path / "test.log",
    )
