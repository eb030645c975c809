"""
Conversion des ressources TMDB en entites Movie, Credit et MovieCollection.

Deux formes d'entree :
- MovieResource (details complets) -> map_detail : film + credits
- MovieResultResource (recherche, find, decouverte) -> map_movie / map_movie_result

Le statut de sortie est calcule par resolve_status a partir d'une horloge
injectee. Les images passent par le port ICoverResolver, l'indicateur de
pre-release par IPreDBService.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from src.core.entities.movie import (
    AlternativeTitle,
    Credit,
    CreditType,
    MediaCover,
    MediaCoverType,
    Movie,
    MovieCollection,
    Ratings,
    SourceType,
)
from src.core.ports.metadata import ICoverResolver, IPreDBService
from src.core.ports.repositories import IMovieRepository
from src.core.ports.resources import (
    CastResource,
    CollectionResource,
    CrewResource,
    MovieResource,
    MovieResultResource,
)
from src.core.value_objects.language import ENGLISH, find_language
from src.services.status_resolver import resolve_status
from src.utils.constants import PHYSICAL_RELEASE_TYPES, TMDB_HEADSHOT_BASE_URL
from src.utils.helpers import (
    clean_movie_title,
    is_blank,
    normalize_title,
    parse_date,
    to_url_slug,
)


@dataclass
class MappingSkip:
    """Candidat ignore car sa conversion a echoue."""

    tmdb_id: int
    error: Exception


@dataclass
class MappingResult:
    """Resultat de conversion d'un resultat de recherche : un film ou un skip."""

    movie: Optional[Movie] = None
    skip: Optional[MappingSkip] = None

    @property
    def is_skipped(self) -> bool:
        return self.skip is not None


class MovieMapper:
    """
    Convertit les ressources brutes TMDB en entites du domaine.

    Produit des entites neuves a chaque appel, sans les persister.
    """

    def __init__(
        self,
        cover_resolver: ICoverResolver,
        predb_service: IPreDBService,
        movie_repo: IMovieRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialise le mapper.

        Args:
            cover_resolver: Construction des URLs d'images
            predb_service: Base de pre-releases
            movie_repo: Films deja presents dans la bibliotheque
            clock: Source de l'instant courant pour le calcul du statut
        """
        self._cover_resolver = cover_resolver
        self._predb_service = predb_service
        self._movie_repo = movie_repo
        self._clock = clock

    def map_detail(
        self,
        resource: MovieResource,
        language_code: str = "en",
        has_predb_entry: bool = False,
    ) -> tuple[Movie, list[Credit]]:
        """
        Convertit les details complets d'un film.

        Args:
            resource: Details TMDB avec sous-ressources
            language_code: Langue principale pour filtrer les titres alternatifs natifs
            has_predb_entry: Si True, l'indicateur est pose sans interroger la base

        Returns:
            Tuple (film, credits) ; cast trie par ordre TMDB puis crew

        Raises:
            ValueError: Si une date TMDB est invalide
        """
        tmdb_id = resource.id
        title = resource.original_title

        movie = Movie(
            tmdb_id=tmdb_id,
            imdb_id=resource.imdb_id,
            title=title,
            sort_title=normalize_title(title),
            clean_title=clean_movie_title(title),
            title_slug=_build_slug(title, tmdb_id),
            overview=resource.overview,
            website=resource.homepage,
            original_language=resource.original_language,
            runtime=resource.runtime,
        )

        movie.in_cinemas = parse_date(resource.release_date)
        if movie.in_cinemas is not None:
            movie.year = movie.in_cinemas.year

        movie.physical_release, movie.physical_release_note = self._earliest_physical_release(
            resource
        )

        movie.images = self._map_images(
            (resource.poster_path, MediaCoverType.POSTER),
            (resource.backdrop_path, MediaCoverType.FANART),
        )

        movie.ratings = Ratings(
            value=resource.vote_average or 0.0,
            votes=resource.vote_count or 0,
        )

        for genre in resource.genres:
            if genre.name not in movie.genres:
                movie.genres.append(genre.name)

        movie.status = resolve_status(self._clock(), movie.in_cinemas, movie.physical_release)

        if resource.videos is not None:
            for video in resource.videos.results:
                if video.type == "Trailer" and video.site == "YouTube" and video.key is not None:
                    movie.youtube_trailer_id = video.key
                    break

        if resource.production_companies:
            movie.studio = resource.production_companies[0].name

        movie.alternative_titles = self._map_alternative_titles(resource, language_code)

        if resource.belongs_to_collection is not None:
            movie.collection = self._map_collection(resource.belongs_to_collection)

        if has_predb_entry:
            movie.has_predb_entry = True
        else:
            movie.has_predb_entry = self._predb_service.has_releases(movie)

        credits = [_map_cast(cast) for cast in sorted(resource.credits.cast, key=_cast_order)]
        credits.extend(_map_crew(crew) for crew in resource.credits.crew)

        return movie, credits

    def map_search_result(self, resource: MovieResultResource) -> Optional[Movie]:
        """
        Convertit un resultat de recherche en privilegiant la bibliotheque.

        Returns:
            Le film de la bibliotheque s'il existe deja pour cet ID TMDB,
            sinon une conversion neuve (None si elle echoue)
        """
        existing = self._movie_repo.find_by_tmdb_id(resource.id)
        if existing is not None:
            return existing
        return self.map_movie(resource)

    def map_movie(self, resource: MovieResultResource) -> Optional[Movie]:
        """Convertit un resultat de recherche ; None si la conversion echoue."""
        return self.map_movie_result(resource).movie

    def map_movie_result(self, resource: MovieResultResource) -> MappingResult:
        """
        Convertit un resultat de recherche, find ou decouverte.

        Les dates invalides sont ignorees (log debug). Toute autre erreur est
        journalisee et renvoyee sous forme de MappingSkip.

        Args:
            resource: Resultat brut

        Returns:
            MappingResult contenant soit le film, soit le skip
        """
        try:
            return MappingResult(movie=self._map_result(resource))
        except Exception as e:
            logger.exception(f"Erreur lors de la conversion du film TMDB {resource.id}: {e}")
            return MappingResult(skip=MappingSkip(tmdb_id=resource.id, error=e))

    def _map_result(self, resource: MovieResultResource) -> Movie:
        if resource.title is None:
            raise ValueError(f"Resultat TMDB {resource.id} sans titre")

        movie = Movie(
            tmdb_id=resource.id,
            title=resource.title,
            sort_title=normalize_title(resource.title),
            clean_title=clean_movie_title(resource.title),
            title_slug=_build_slug(resource.title, resource.id),
            overview=resource.overview,
            ratings=Ratings(
                value=resource.vote_average or 0.0,
                votes=resource.vote_count or 0,
            ),
        )

        try:
            movie.in_cinemas = parse_date(resource.release_date)
            if movie.in_cinemas is not None:
                movie.year = movie.in_cinemas.year

            movie.physical_release = parse_date(resource.physical_release)
            if movie.physical_release is not None and not is_blank(
                resource.physical_release_note
            ):
                movie.physical_release_note = resource.physical_release_note
        except ValueError:
            logger.debug(f"Date invalide pour le film TMDB {resource.id}")

        movie.status = resolve_status(self._clock(), movie.in_cinemas, movie.physical_release)
        movie.images = self._map_images((resource.poster_path, MediaCoverType.POSTER))

        if not is_blank(resource.trailer_key) and not is_blank(resource.trailer_site):
            if resource.trailer_site == "youtube":
                movie.youtube_trailer_id = resource.trailer_key

        return movie

    @staticmethod
    def _earliest_physical_release(
        resource: MovieResource,
    ) -> tuple[Optional[datetime], Optional[str]]:
        """Plus ancienne date digitale/physique, a egalite la premiere rencontree."""
        earliest: Optional[datetime] = None
        note: Optional[str] = None
        for country in resource.release_dates.results:
            for release in country.release_dates:
                if release.type not in PHYSICAL_RELEASE_TYPES:
                    continue
                release_date = parse_date(release.release_date)
                if release_date is None:
                    continue
                if earliest is None or release_date < earliest:
                    earliest = release_date
                    note = release.note
        return earliest, note

    @staticmethod
    def _map_alternative_titles(
        resource: MovieResource, language_code: str
    ) -> list[AlternativeTitle]:
        """
        Titres alternatifs natifs puis traductions.

        Natifs : region egale a la langue principale (langue resolue depuis
        le code, anglais par defaut) ou region "us" (anglais).
        Traductions : region reconnue comme langue et titre non vide.
        """
        primary = language_code.lower()
        titles = []

        for alternative in resource.alternative_titles.titles:
            region = alternative.iso_3166_1.lower()
            if region == primary:
                language = find_language(region) or ENGLISH
            elif region == "us":
                language = ENGLISH
            else:
                continue
            titles.append(
                AlternativeTitle(
                    title=alternative.title,
                    source_type=SourceType.TMDB,
                    tmdb_id=resource.id,
                    language=language,
                )
            )

        for translation in resource.translations.translations:
            language = find_language(translation.iso_3166_1)
            if language is None or is_blank(translation.data.title):
                continue
            titles.append(
                AlternativeTitle(
                    title=translation.data.title,
                    source_type=SourceType.TRANSLATION,
                    tmdb_id=resource.id,
                    language=language,
                )
            )

        return titles

    def _map_collection(self, resource: CollectionResource) -> MovieCollection:
        return MovieCollection(
            tmdb_id=resource.id,
            name=resource.name,
            images=self._map_images(
                (resource.poster_path, MediaCoverType.POSTER),
                (resource.backdrop_path, MediaCoverType.FANART),
            ),
        )

    def _map_images(self, *images: tuple[Optional[str], MediaCoverType]) -> list[MediaCover]:
        """Resout les images dont le chemin n'est pas vide, dans l'ordre donne."""
        return [
            self._cover_resolver.get_cover_for_url(path, cover_type)
            for path, cover_type in images
            if not is_blank(path)
        ]


def _build_slug(title: str, tmdb_id: int) -> str:
    """Slug du titre suffixe une seule fois par l'ID TMDB."""
    return f"{to_url_slug(title)}-{tmdb_id}"


def _cast_order(cast: CastResource) -> float:
    # Sans ordre TMDB : en fin de liste, ordre d'origine conserve
    return cast.order if cast.order is not None else float("inf")


def _headshots(profile_path: Optional[str]) -> list[MediaCover]:
    if profile_path is None:
        return []
    return [MediaCover(MediaCoverType.HEADSHOT, f"{TMDB_HEADSHOT_BASE_URL}{profile_path}")]


def _map_cast(resource: CastResource) -> Credit:
    return Credit(
        name=resource.name,
        person_tmdb_id=resource.id,
        credit_tmdb_id=resource.credit_id,
        type=CreditType.CAST,
        character=resource.character,
        order=resource.order,
        images=_headshots(resource.profile_path),
    )


def _map_crew(resource: CrewResource) -> Credit:
    return Credit(
        name=resource.name,
        person_tmdb_id=resource.id,
        credit_tmdb_id=resource.credit_id,
        type=CreditType.CREW,
        department=resource.department,
        job=resource.job,
        images=_headshots(resource.profile_path),
    )
