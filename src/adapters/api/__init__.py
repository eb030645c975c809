"""
Clients API externes pour les metadonnees de films.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDBClient: The Movie Database (details, find, recherche, modifications)
- DiscoveryAPIClient: service de recommandations
- TMDBCoverResolver: URLs du CDN d'images TMDB

Infrastructure partagee:
- RateLimitPolicy / cool_down_if_needed: pause sur quota X-RateLimit-Remaining bas

Les clients implementent les ports definis dans core/ports/api_clients.py.
"""

from src.adapters.api.cover_resolver import TMDBCoverResolver
from src.adapters.api.discovery_client import DiscoveryAPIClient
from src.adapters.api.rate_limit import RateLimitPolicy, cool_down_if_needed
from src.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "DiscoveryAPIClient",
    "RateLimitPolicy",
    "TMDBClient",
    "TMDBCoverResolver",
    "cool_down_if_needed",
]
