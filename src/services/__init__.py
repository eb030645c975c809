"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- MovieInfoService: id/external-id resolution, query search, remapping
- DiscoveryService: recommendations filtered against the library
- MovieMapper: provider records to canonical entities
- QueryRouter: search string to lookup strategy
- resolve_status: release status from known dates

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""

from src.services.discovery import DiscoveryFailed, DiscoveryResult, DiscoveryService
from src.services.movie_info import MovieInfoService
from src.services.movie_mapper import MappingResult, MappingSkip, MovieMapper
from src.services.query_router import QueryRouter
from src.services.status_resolver import resolve_status

__all__ = [
    "DiscoveryFailed",
    "DiscoveryResult",
    "DiscoveryService",
    "MappingResult",
    "MappingSkip",
    "MovieInfoService",
    "MovieMapper",
    "QueryRouter",
    "resolve_status",
]
