"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) definissant les contrats pour les APIs externes :
le fournisseur de metadonnees (TMDB) et le service de decouverte.
Les implementations (adaptateurs) vivent dans src/adapters/api/.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.core.ports.resources import MovieResource, MovieResultResource


class IMovieInfoProvider(ABC):
    """
    Interface du fournisseur de metadonnees de films.

    Les implementations classent les erreurs de transport :
    MovieNotFoundError pour un 404, ProviderTransportError pour tout autre
    echec (statut, content-type, reseau).
    """

    @abstractmethod
    async def fetch_changed_ids(self, since: datetime) -> set[int]:
        """
        Liste les IDs TMDB modifies depuis une date.

        Args :
            since : Date de debut de la fenetre de modifications

        Retourne :
            Ensemble des IDs modifies
        """
        ...

    @abstractmethod
    async def fetch_by_id(
        self, tmdb_id: int, language: str = "en"
    ) -> Optional[MovieResource]:
        """
        Recupere les details complets d'un film.

        Args :
            tmdb_id : ID TMDB
            language : Code de langue principal

        Retourne :
            MovieResource, ou None si TMDB renvoie une erreur applicative
        """
        ...

    @abstractmethod
    async def fetch_by_external_id(self, imdb_id: str) -> MovieResultResource:
        """Recupere le premier film correspondant a un ID IMDb."""
        ...

    @abstractmethod
    async def search(
        self, search_term: str, year: Optional[int] = None
    ) -> list[MovieResultResource]:
        """
        Recherche des films par titre.

        Args :
            search_term : Terme de recherche (mots separes par "+")
            year : Filtre optionnel par annee

        Retourne :
            Resultats bruts dans l'ordre TMDB
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...


class IDiscoveryClient(ABC):
    """
    Interface du service de decouverte (recommandations).

    Les implementations levent DiscoveryError en cas d'echec.
    """

    @abstractmethod
    async def discover_candidates(
        self,
        action: str,
        tmdb_ids: str,
        ignored_ids: str,
    ) -> list[MovieResultResource]:
        """
        Demande des films candidats pour une action de decouverte.

        Args :
            action : Action de decouverte (ex: "upcoming", "popular")
            tmdb_ids : IDs de la bibliotheque, separes par des virgules
            ignored_ids : IDs exclus, separes par des virgules

        Retourne :
            Candidats bruts
        """
        ...
