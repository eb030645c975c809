"""
Movie metadata entities.

Canonical entities built from TMDB records: movies, credits, collections,
alternative titles and image references. They are produced fresh for each
lookup; persistence belongs to the library manager.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from src.core.value_objects.language import Language


class MovieStatus(str, Enum):
    """Release lifecycle of a movie."""

    ANNOUNCED = "announced"
    IN_CINEMAS = "inCinemas"
    RELEASED = "released"


class SourceType(str, Enum):
    """Origin of an alternative title."""

    TMDB = "tmdb"
    TRANSLATION = "translation"


class CreditType(str, Enum):
    """Kind of credit."""

    CAST = "cast"
    CREW = "crew"


class MediaCoverType(str, Enum):
    """Image categories."""

    UNKNOWN = "unknown"
    POSTER = "poster"
    BANNER = "banner"
    FANART = "fanart"
    SCREENSHOT = "screenshot"
    HEADSHOT = "headshot"


@dataclass(frozen=True)
class MediaCover:
    """
    Reference to a remote image.

    Attributes:
        cover_type: Image category (poster, fanart, headshot...)
        url: Absolute URL of the image
    """

    cover_type: MediaCoverType
    url: str


@dataclass
class Ratings:
    """Provider rating: average value and number of votes."""

    value: float = 0.0
    votes: int = 0


@dataclass
class AlternativeTitle:
    """
    Alternative title for a movie.

    Attributes:
        title: Title text
        source_type: TMDB native alternative title or translation
        tmdb_id: TMDB ID of the movie the title belongs to
        language: Language the title is written in
    """

    title: str
    source_type: SourceType
    tmdb_id: int
    language: Language


@dataclass
class Credit:
    """
    Cast or crew credit of a movie.

    Cast credits carry ``character`` and ``order``; crew credits carry
    ``department`` and ``job``.
    """

    name: str
    person_tmdb_id: int
    credit_tmdb_id: str
    type: CreditType
    character: Optional[str] = None
    order: Optional[int] = None
    department: Optional[str] = None
    job: Optional[str] = None
    images: list[MediaCover] = field(default_factory=list)


@dataclass
class MovieCollection:
    """TMDB collection (franchise) a movie belongs to."""

    tmdb_id: int
    name: str
    images: list[MediaCover] = field(default_factory=list)


@dataclass
class ImportExclusion:
    """Movie excluded from automatic additions and discovery."""

    tmdb_id: int
    title: str = ""
    year: Optional[int] = None


@dataclass
class Movie:
    """
    Movie metadata from TMDB.

    The first block of fields is computed from provider records. The last
    block (path, profile, monitored flag, file, tags) belongs to the
    library manager and is only copied through when a library movie is
    remapped.

    Attributes:
        tmdb_id: The Movie Database ID
        imdb_id: IMDb ID ("tt" prefixed)
        title: Original title
        sort_title: Normalized title used for sorting
        clean_title: Compact title used for comparisons
        title_slug: URL slug, suffixed with "-<tmdb_id>"
        in_cinemas: Theatrical release date
        physical_release: Earliest digital/physical release date
        status: Release lifecycle status
        has_predb_entry: Whether release-group activity is already known
    """

    tmdb_id: int = 0
    imdb_id: Optional[str] = None
    title: str = ""
    sort_title: str = ""
    clean_title: str = ""
    title_slug: str = ""
    overview: Optional[str] = None
    website: Optional[str] = None
    original_language: Optional[str] = None
    studio: Optional[str] = None
    youtube_trailer_id: Optional[str] = None
    in_cinemas: Optional[datetime] = None
    physical_release: Optional[datetime] = None
    physical_release_note: Optional[str] = None
    year: Optional[int] = None
    runtime: Optional[int] = None
    status: MovieStatus = MovieStatus.ANNOUNCED
    ratings: Ratings = field(default_factory=Ratings)
    genres: list[str] = field(default_factory=list)
    images: list[MediaCover] = field(default_factory=list)
    alternative_titles: list[AlternativeTitle] = field(default_factory=list)
    collection: Optional[MovieCollection] = None
    has_predb_entry: bool = False

    # Library-owned fields
    path: Optional[str] = None
    root_folder_path: Optional[str] = None
    profile_id: Optional[int] = None
    monitored: bool = False
    movie_file_id: Optional[int] = None
    minimum_availability: Optional[MovieStatus] = None
    tags: set[int] = field(default_factory=set)
