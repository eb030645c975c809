"""
Formes brutes des reponses TMDB et du service de decouverte.

Modeles pydantic valides a la frontiere HTTP : les champs inconnus sont
ignores, les champs obligatoires manquants levent une ValidationError.
Ces ressources sont converties en entites par MovieMapper.
"""

from typing import Any, Iterable, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class TMDBResource(BaseModel):
    """Base commune : champs supplementaires ignores."""

    model_config = ConfigDict(extra="ignore")


class GenreResource(TMDBResource):
    id: int
    name: str


class ProductionCompanyResource(TMDBResource):
    id: Optional[int] = None
    name: str


class AlternativeTitleResource(TMDBResource):
    """Titre alternatif natif TMDB, indexe par code pays ISO 3166-1."""

    iso_3166_1: str
    title: str
    type: Optional[str] = None


class AlternativeTitlesResource(TMDBResource):
    titles: list[AlternativeTitleResource] = Field(default_factory=list)


class TranslationDataResource(TMDBResource):
    title: Optional[str] = None
    overview: Optional[str] = None
    homepage: Optional[str] = None


class TranslationResource(TMDBResource):
    iso_3166_1: str
    iso_639_1: Optional[str] = None
    name: Optional[str] = None
    english_name: Optional[str] = None
    data: TranslationDataResource = Field(default_factory=TranslationDataResource)


class TranslationsResource(TMDBResource):
    translations: list[TranslationResource] = Field(default_factory=list)


class ReleaseDateResource(TMDBResource):
    """Date de sortie d'un pays. type: 1 Premiere, 2 Limitee, 3 Salles, 4 Digital, 5 Physique, 6 TV."""

    release_date: str
    type: int
    note: Optional[str] = None
    certification: Optional[str] = None


class ReleaseDatesCountryResource(TMDBResource):
    iso_3166_1: str
    release_dates: list[ReleaseDateResource] = Field(default_factory=list)


class ReleaseDatesResource(TMDBResource):
    results: list[ReleaseDatesCountryResource] = Field(default_factory=list)


class VideoResource(TMDBResource):
    key: Optional[str] = None
    site: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None


class VideosResource(TMDBResource):
    results: list[VideoResource] = Field(default_factory=list)


class CastResource(TMDBResource):
    id: int
    name: str
    credit_id: str
    character: Optional[str] = None
    order: Optional[int] = None
    profile_path: Optional[str] = None


class CrewResource(TMDBResource):
    id: int
    name: str
    credit_id: str
    department: Optional[str] = None
    job: Optional[str] = None
    profile_path: Optional[str] = None


class CreditsResource(TMDBResource):
    cast: list[CastResource] = Field(default_factory=list)
    crew: list[CrewResource] = Field(default_factory=list)


class CollectionResource(TMDBResource):
    id: int
    name: str
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None


class MovieResource(TMDBResource):
    """
    Details d'un film (GET /movie/{id}) avec les sous-ressources
    alternative_titles, release_dates, videos, credits et translations.
    """

    id: int
    original_title: str
    imdb_id: Optional[str] = None
    title: Optional[str] = None
    overview: Optional[str] = None
    homepage: Optional[str] = None
    release_date: Optional[str] = None
    runtime: Optional[int] = None
    original_language: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    genres: list[GenreResource] = Field(default_factory=list)
    production_companies: Optional[list[ProductionCompanyResource]] = None
    belongs_to_collection: Optional[CollectionResource] = None
    alternative_titles: AlternativeTitlesResource = Field(
        default_factory=AlternativeTitlesResource
    )
    translations: TranslationsResource = Field(default_factory=TranslationsResource)
    release_dates: ReleaseDatesResource = Field(default_factory=ReleaseDatesResource)
    videos: Optional[VideosResource] = None
    credits: CreditsResource = Field(default_factory=CreditsResource)


class MovieResultResource(TMDBResource):
    """
    Resultat de recherche (search/movie, find, service de decouverte).

    Les champs physical_release et trailer_* ne sont fournis que par le
    service de decouverte.
    """

    id: int
    title: Optional[str] = None
    original_title: Optional[str] = None
    overview: Optional[str] = None
    release_date: Optional[str] = None
    physical_release: Optional[str] = None
    physical_release_note: Optional[str] = None
    poster_path: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    trailer_key: Optional[str] = None
    trailer_site: Optional[str] = None


def validate_results(items: Iterable[Any], source: str) -> list[MovieResultResource]:
    """
    Valide une liste de resultats element par element.

    Un element invalide (id manquant, champ mal type) est journalise et
    ignore : les autres resultats restent exploitables.

    Args:
        items: Elements bruts de la reponse
        source: Origine des resultats, pour les logs (ex: "search/movie")

    Returns:
        Resultats valides, dans l'ordre d'origine
    """
    results = []
    for item in items:
        try:
            results.append(MovieResultResource.model_validate(item))
        except ValidationError as e:
            logger.opt(exception=e).warning(f"Resultat {source} ignore, format invalide: {item!r}")
    return results
