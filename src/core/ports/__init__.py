"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour les services externes
- IMovieInfoProvider : Fournisseur de metadonnees (TMDB)
- IDiscoveryClient : Service de decouverte de films

Ports repository : Lecture de la bibliotheque
- IMovieRepository : Films de la bibliotheque
- IExclusionRepository : Exclusions d'import

Ports de mapping :
- ICoverResolver : URLs d'images
- IPreDBService : Base de pre-releases
- IMovieTitleParser : Parsing des titres saisis
"""

from src.core.ports.api_clients import IDiscoveryClient, IMovieInfoProvider
from src.core.ports.metadata import ICoverResolver, IPreDBService
from src.core.ports.parser import IMovieTitleParser
from src.core.ports.repositories import IExclusionRepository, IMovieRepository

__all__ = [
    # Clients API
    "IMovieInfoProvider",
    "IDiscoveryClient",
    # Repositories
    "IMovieRepository",
    "IExclusionRepository",
    # Mapping
    "ICoverResolver",
    "IPreDBService",
    "IMovieTitleParser",
]
