"""
Construction des URLs d'images TMDB.

TMDB renvoie des chemins relatifs ("/abc.jpg") ; l'URL absolue est
{image_base_url}{taille}{chemin}.
"""

from src.core.entities.movie import MediaCover, MediaCoverType
from src.core.ports.metadata import ICoverResolver


class TMDBCoverResolver(ICoverResolver):
    """
    Implementation de ICoverResolver pour le CDN d'images TMDB.

    Example:
        resolver = TMDBCoverResolver()
        resolver.get_cover_for_url("/abc.jpg", MediaCoverType.POSTER)
        # MediaCover(POSTER, "https://image.tmdb.org/t/p/original/abc.jpg")
    """

    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"

    def __init__(self, image_base_url: str = TMDB_IMAGE_BASE_URL, size: str = "original") -> None:
        """
        Args:
            image_base_url: Prefixe du CDN d'images (termine par "/")
            size: Taille demandee (ex: "original", "w500")
        """
        self._prefix = f"{image_base_url.rstrip('/')}/{size.strip('/')}"

    def get_cover_for_url(self, path: str, cover_type: MediaCoverType) -> MediaCover:
        """Construit la reference d'image absolue pour un chemin TMDB."""
        if not path.startswith("/"):
            path = f"/{path}"
        return MediaCover(cover_type=cover_type, url=f"{self._prefix}{path}")
