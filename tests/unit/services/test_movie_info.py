"""
Tests unitaires pour MovieInfoService.

Le fournisseur TMDB est mocke (AsyncMock) ; le mapper et le routeur sont
reels. Tests couvrant:
- resolve_by_id / resolve_by_external_id / list_changed_ids
- search_by_query: routage, erreurs enveloppees, priorite bibliotheque
- map_movie_to_provider: strategie de resolution et recopie des champs bibliotheque
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapters.library.in_memory import InMemoryMovieRepository
from src.core.entities.movie import Movie, MovieStatus
from src.core.exceptions import (
    MovieNotFoundError,
    ProviderTransportError,
    SearchFailedError,
)
from src.core.ports.api_clients import IMovieInfoProvider
from src.core.ports.resources import MovieResource, MovieResultResource
from src.core.value_objects.parsed_info import ParsedMovieTitle
from src.services.movie_info import (
    INVALID_RESPONSE,
    UNABLE_TO_COMMUNICATE,
    MovieInfoService,
)
from src.services.movie_mapper import MovieMapper
from src.services.query_router import QueryRouter
from tests.fixtures.tmdb_responses import TMDB_SEARCH_RESPONSE


@pytest.fixture
def mock_provider() -> AsyncMock:
    """Mock de IMovieInfoProvider."""
    provider = AsyncMock(spec=IMovieInfoProvider)
    provider.search.return_value = []
    return provider


@pytest.fixture
def service(
    mock_provider: AsyncMock,
    movie_mapper: MovieMapper,
    mock_title_parser: MagicMock,
) -> MovieInfoService:
    return MovieInfoService(
        provider=mock_provider,
        mapper=movie_mapper,
        router=QueryRouter(mock_title_parser),
        language="en",
    )


def _search_results() -> list[MovieResultResource]:
    return [MovieResultResource.model_validate(r) for r in TMDB_SEARCH_RESPONSE["results"]]


class TestResolveById:
    @pytest.mark.asyncio
    async def test_returns_movie_and_credits(
        self, service: MovieInfoService, mock_provider: AsyncMock, matrix_resource: MovieResource
    ):
        mock_provider.fetch_by_id.return_value = matrix_resource

        result = await service.resolve_by_id(603)

        assert result is not None
        movie, credits = result
        assert movie.tmdb_id == 603
        assert len(credits) == 5
        mock_provider.fetch_by_id.assert_awaited_once_with(603, "en")

    @pytest.mark.asyncio
    async def test_soft_error_returns_none(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.fetch_by_id.return_value = None

        assert await service.resolve_by_id(603) is None

    @pytest.mark.asyncio
    async def test_not_found_propagates(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.fetch_by_id.side_effect = MovieNotFoundError(999)

        with pytest.raises(MovieNotFoundError):
            await service.resolve_by_id(999)

    @pytest.mark.asyncio
    async def test_predb_flag_is_forwarded(
        self,
        service: MovieInfoService,
        mock_provider: AsyncMock,
        matrix_resource: MovieResource,
        mock_predb_service: MagicMock,
    ):
        mock_provider.fetch_by_id.return_value = matrix_resource

        movie, _ = await service.resolve_by_id(603, has_predb_entry=True)

        assert movie.has_predb_entry is True
        mock_predb_service.has_releases.assert_not_called()


class TestResolveByExternalId:
    @pytest.mark.asyncio
    async def test_maps_first_result(
        self,
        service: MovieInfoService,
        mock_provider: AsyncMock,
        matrix_result: MovieResultResource,
    ):
        mock_provider.fetch_by_external_id.return_value = matrix_result

        movie = await service.resolve_by_external_id("tt0133093")

        assert movie.tmdb_id == 603
        mock_provider.fetch_by_external_id.assert_awaited_once_with("tt0133093")

    @pytest.mark.asyncio
    async def test_transport_error_propagates(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.fetch_by_external_id.side_effect = ProviderTransportError("boom", 500)

        with pytest.raises(ProviderTransportError):
            await service.resolve_by_external_id("tt0133093")


class TestListChangedIds:
    @pytest.mark.asyncio
    async def test_delegates_to_provider(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        since = datetime(2024, 1, 1)
        mock_provider.fetch_changed_ids.return_value = {603, 604}

        assert await service.list_changed_ids(since) == {603, 604}
        mock_provider.fetch_changed_ids.assert_awaited_once_with(since)


class TestSearchByQuery:
    @pytest.mark.asyncio
    async def test_text_query_searches_and_maps(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.search.return_value = _search_results()

        movies = await service.search_by_query("The Matrix")

        assert [m.tmdb_id for m in movies] == [603, 604, 684731]
        mock_provider.search.assert_awaited_once_with("the+matrix", None)

    @pytest.mark.asyncio
    async def test_year_hint_is_forwarded(
        self,
        service: MovieInfoService,
        mock_provider: AsyncMock,
        mock_title_parser: MagicMock,
    ):
        mock_title_parser.parse_movie_title.return_value = ParsedMovieTitle(
            title="The Matrix", year=1999
        )

        await service.search_by_query("The.Matrix.1999.1080p")

        mock_provider.search.assert_awaited_once_with("the+matrix", 1999)

    @pytest.mark.asyncio
    async def test_library_movie_is_returned(
        self,
        service: MovieInfoService,
        mock_provider: AsyncMock,
        movie_repository: InMemoryMovieRepository,
    ):
        library_movie = Movie(tmdb_id=603, title="The Matrix", monitored=True)
        movie_repository.add(library_movie)
        mock_provider.search.return_value = _search_results()

        movies = await service.search_by_query("the matrix")

        assert movies[0] is library_movie
        assert movies[1] is not library_movie

    @pytest.mark.asyncio
    async def test_unmappable_results_are_dropped(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.search.return_value = [
            MovieResultResource(id=1, title=None),
            MovieResultResource(id=2, title="Valid"),
        ]

        movies = await service.search_by_query("valid")

        assert [m.tmdb_id for m in movies] == [2]

    @pytest.mark.asyncio
    async def test_rejected_query_returns_empty_without_call(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        assert await service.search_by_query("tmdb:abc") == []

        mock_provider.search.assert_not_awaited()
        mock_provider.fetch_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_tmdb_route_resolves_detail(
        self, service: MovieInfoService, mock_provider: AsyncMock, matrix_resource: MovieResource
    ):
        mock_provider.fetch_by_id.return_value = matrix_resource

        movies = await service.search_by_query("tmdb:603")

        assert [m.tmdb_id for m in movies] == [603]
        mock_provider.fetch_by_id.assert_awaited_once_with(603, "en")

    @pytest.mark.asyncio
    async def test_imdb_route_uses_find(
        self,
        service: MovieInfoService,
        mock_provider: AsyncMock,
        matrix_result: MovieResultResource,
    ):
        mock_provider.fetch_by_external_id.return_value = matrix_result

        movies = await service.search_by_query("imdb:tt0133093")

        assert [m.tmdb_id for m in movies] == [603]

    @pytest.mark.asyncio
    async def test_not_found_id_gives_empty_list(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.fetch_by_id.side_effect = MovieNotFoundError(1)
        mock_provider.fetch_by_external_id.side_effect = MovieNotFoundError("tt0000001")

        assert await service.search_by_query("tmdb:1") == []
        assert await service.search_by_query("imdb:tt0000001") == []

    @pytest.mark.asyncio
    async def test_soft_error_id_gives_empty_list(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.fetch_by_id.return_value = None

        assert await service.search_by_query("tmdb:603") == []

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.search.side_effect = ProviderTransportError("HTTP 503", status_code=503)

        with pytest.raises(SearchFailedError) as exc_info:
            await service.search_by_query("the matrix")

        assert exc_info.value.query == "the matrix"
        assert exc_info.value.reason == UNABLE_TO_COMMUNICATE
        assert isinstance(exc_info.value.__cause__, ProviderTransportError)

    @pytest.mark.asyncio
    async def test_not_found_on_text_search_is_wrapped(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.search.side_effect = MovieNotFoundError("the+matrix")

        with pytest.raises(SearchFailedError) as exc_info:
            await service.search_by_query("the matrix")

        assert exc_info.value.reason == INVALID_RESPONSE
        assert isinstance(exc_info.value.__cause__, MovieNotFoundError)

    @pytest.mark.asyncio
    async def test_prefixed_imdb_transport_error_is_wrapped(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.fetch_by_external_id.side_effect = ProviderTransportError("HTTP 503")

        with pytest.raises(SearchFailedError) as exc_info:
            await service.search_by_query("imdb:tt0133093")

        assert exc_info.value.reason == UNABLE_TO_COMMUNICATE

    @pytest.mark.asyncio
    async def test_release_name_imdb_id_uses_find(
        self,
        service: MovieInfoService,
        mock_provider: AsyncMock,
        mock_title_parser: MagicMock,
        matrix_result: MovieResultResource,
    ):
        mock_title_parser.parse_movie_title.return_value = ParsedMovieTitle(
            title="The Matrix", year=1999, imdb_id="tt0133093"
        )
        mock_provider.fetch_by_external_id.return_value = matrix_result

        movies = await service.search_by_query("The.Matrix.1999.tt0133093.1080p")

        assert [m.tmdb_id for m in movies] == [603]
        mock_provider.fetch_by_external_id.assert_awaited_once_with("tt0133093")
        mock_provider.search.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [ProviderTransportError("HTTP 503", status_code=503), MovieNotFoundError("tt0133093")],
    )
    async def test_release_name_imdb_id_errors_give_empty_list(
        self,
        service: MovieInfoService,
        mock_provider: AsyncMock,
        mock_title_parser: MagicMock,
        error: Exception,
    ):
        mock_title_parser.parse_movie_title.return_value = ParsedMovieTitle(
            title="The Matrix", year=1999, imdb_id="tt0133093"
        )
        mock_provider.fetch_by_external_id.side_effect = error

        assert await service.search_by_query("The.Matrix.1999.tt0133093.1080p") == []

    @pytest.mark.asyncio
    async def test_unexpected_error_is_wrapped_as_invalid_response(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.search.side_effect = KeyError("results")

        with pytest.raises(SearchFailedError) as exc_info:
            await service.search_by_query("the matrix")

        assert exc_info.value.reason == INVALID_RESPONSE
        assert str(exc_info.value) == f"Search for 'the matrix' failed. {INVALID_RESPONSE}"


class TestMapMovieToProvider:
    """Remapping d'un film de la bibliotheque."""

    @staticmethod
    def _library_movie(**overrides) -> Movie:
        fields = dict(
            title="The Matrix",
            year=1999,
            path="/movies/The Matrix (1999)",
            root_folder_path="/movies",
            profile_id=4,
            monitored=True,
            movie_file_id=12,
            minimum_availability=MovieStatus.RELEASED,
            tags={1, 3},
        )
        fields.update(overrides)
        return Movie(**fields)

    @staticmethod
    def _assert_library_fields_copied(mapped: Movie, original: Movie):
        assert mapped.path == original.path
        assert mapped.root_folder_path == original.root_folder_path
        assert mapped.profile_id == original.profile_id
        assert mapped.monitored == original.monitored
        assert mapped.movie_file_id == original.movie_file_id
        assert mapped.minimum_availability == original.minimum_availability
        assert mapped.tags == original.tags

    @pytest.mark.asyncio
    async def test_by_tmdb_id(
        self, service: MovieInfoService, mock_provider: AsyncMock, matrix_resource: MovieResource
    ):
        original = self._library_movie(tmdb_id=603)
        mock_provider.fetch_by_id.return_value = matrix_resource

        mapped = await service.map_movie_to_provider(original)

        assert mapped is not original
        assert mapped.imdb_id == "tt0133093"
        self._assert_library_fields_copied(mapped, original)
        mock_provider.fetch_by_external_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_by_imdb_id_when_no_tmdb_id(
        self,
        service: MovieInfoService,
        mock_provider: AsyncMock,
        matrix_result: MovieResultResource,
    ):
        original = self._library_movie(imdb_id="tt0133093")
        mock_provider.fetch_by_external_id.return_value = matrix_result

        mapped = await service.map_movie_to_provider(original)

        assert mapped.tmdb_id == 603
        self._assert_library_fields_copied(mapped, original)
        mock_provider.fetch_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_by_title_and_year(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        original = self._library_movie()
        mock_provider.search.return_value = _search_results()

        mapped = await service.map_movie_to_provider(original)

        assert mapped.tmdb_id == 603
        self._assert_library_fields_copied(mapped, original)
        mock_provider.search.assert_awaited_once_with("the+matrix+1999", None)

    @pytest.mark.asyncio
    async def test_year_not_after_1900_is_not_appended(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        original = self._library_movie(title="Intolerance", year=1900)

        await service.map_movie_to_provider(original)

        mock_provider.search.assert_awaited_once_with("intolerance", None)

    @pytest.mark.asyncio
    async def test_tags_are_copied_not_shared(
        self, service: MovieInfoService, mock_provider: AsyncMock, matrix_resource: MovieResource
    ):
        original = self._library_movie(tmdb_id=603)
        mock_provider.fetch_by_id.return_value = matrix_resource

        mapped = await service.map_movie_to_provider(original)
        mapped.tags.add(99)

        assert original.tags == {1, 3}

    @pytest.mark.asyncio
    async def test_no_match_returns_none(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.search.return_value = []

        assert await service.map_movie_to_provider(self._library_movie()) is None

    @pytest.mark.asyncio
    async def test_error_returns_none(
        self, service: MovieInfoService, mock_provider: AsyncMock
    ):
        mock_provider.fetch_by_id.side_effect = MovieNotFoundError(603)

        assert await service.map_movie_to_provider(self._library_movie(tmdb_id=603)) is None
