"""
Client TMDB pour la resolution d'identite et de metadonnees de films.

Implemente l'interface IMovieInfoProvider pour TMDB (The Movie Database).
Classe les reponses en erreurs du domaine (MovieNotFoundError,
ProviderTransportError) et applique la pause de courtoisie sur quota bas
pour les requetes details et find.

Usage:
    client = TMDBClient(api_key="your_key")
    resource = await client.fetch_by_id(603)
    results = await client.search("the+matrix", year=1999)
    await client.close()
"""

import asyncio
from datetime import datetime
from typing import Any, Optional, Union

import httpx
from loguru import logger

from src.adapters.api.rate_limit import RateLimitPolicy, Sleeper, cool_down_if_needed
from src.core.exceptions import MovieNotFoundError, ProviderTransportError
from src.core.ports.api_clients import IMovieInfoProvider
from src.core.ports.resources import MovieResource, MovieResultResource, validate_results
from src.utils.constants import (
    TMDB_APPEND_TO_RESPONSE,
    TMDB_JSON_CONTENT_TYPE,
    TMDB_STATUS_CODE_DELETED,
)


class TMDBClient(IMovieInfoProvider):
    """
    Client API TMDB pour les metadonnees de films.

    Implemente IMovieInfoProvider avec:
    - Details complets d'un film (titres alternatifs, dates, videos, credits, traductions)
    - Recherche par ID IMDb (endpoint find)
    - Recherche par titre avec filtre annee optionnel
    - Liste des films modifies depuis une date
    - Pause de courtoisie quand X-RateLimit-Remaining passe sous le seuil

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3

    Example:
        client = TMDBClient(api_key="xxx")
        resource = await client.fetch_by_id(603)
        if resource is not None:
            print(resource.original_title)
        await client.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = TMDB_BASE_URL,
        timeout: float = 30.0,
        rate_limit: Optional[RateLimitPolicy] = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4)
            base_url: URL de base de l'API
            timeout: Timeout des requetes en secondes
            rate_limit: Politique de pause sur quota bas
            sleep: Primitive de pause (remplacable dans les tests)
        """
        self._api_key = api_key or ""
        self._base_url = base_url
        self._timeout = timeout
        self._rate_limit = rate_limit or RateLimitPolicy()
        self._sleep = sleep
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer

        Returns:
            httpx.AsyncClient configure pour l'API TMDB
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def fetch_changed_ids(self, since: datetime) -> set[int]:
        """
        Liste les IDs des films modifies depuis une date.

        Args:
            since: Debut de la fenetre de modifications

        Returns:
            Ensemble des IDs TMDB modifies
        """
        response = await self._get("/movie/changes", params={"start_date": since.isoformat()})
        self._raise_for_status(response, identifier="changes")

        data = response.json()
        return {int(item["id"]) for item in data.get("results", [])}

    async def fetch_by_id(
        self, tmdb_id: int, language: str = "en"
    ) -> Optional[MovieResource]:
        """
        Recupere les details complets d'un film.

        Args:
            tmdb_id: ID TMDB du film
            language: Code de langue principal (envoye en majuscules)

        Returns:
            MovieResource, ou None si TMDB renvoie une erreur applicative
            (status_message dans le corps d'une reponse 200)

        Raises:
            MovieNotFoundError: Si TMDB repond 404
            ProviderTransportError: Autre statut, content-type inattendu ou erreur reseau
        """
        response = await self._get(
            f"/movie/{tmdb_id}",
            params={
                "append_to_response": TMDB_APPEND_TO_RESPONSE,
                "language": language.upper(),
            },
        )
        self._raise_for_status(response, identifier=tmdb_id)
        self._check_content_type(response)

        await cool_down_if_needed(response.headers, self._rate_limit, self._sleep)

        data = response.json()
        if data.get("status_message") is not None:
            if data.get("status_code") == TMDB_STATUS_CODE_DELETED:
                logger.warning(
                    f"Film TMDB {tmdb_id} introuvable, probablement supprime de TMDB"
                )
            else:
                logger.warning(f"Erreur TMDB pour le film {tmdb_id}: {data['status_message']}")
            return None

        return MovieResource.model_validate(data)

    async def fetch_by_external_id(self, imdb_id: str) -> MovieResultResource:
        """
        Recupere le premier film correspondant a un ID IMDb.

        Args:
            imdb_id: ID IMDb (format ttXXXXXXX)

        Returns:
            Premier resultat de movie_results

        Raises:
            MovieNotFoundError: Si TMDB repond 404 ou qu'aucun film ne correspond
            ProviderTransportError: Autre statut ou erreur reseau
        """
        response = await self._get(
            f"/find/{imdb_id}", params={"external_source": "imdb_id"}
        )
        self._raise_for_status(response, identifier=imdb_id)

        await cool_down_if_needed(response.headers, self._rate_limit, self._sleep)

        movie_results = response.json().get("movie_results") or []
        if not movie_results:
            raise MovieNotFoundError(imdb_id)

        return MovieResultResource.model_validate(movie_results[0])

    async def search(
        self, search_term: str, year: Optional[int] = None
    ) -> list[MovieResultResource]:
        """
        Recherche des films par titre.

        Pas de pause de courtoisie : les reponses de recherche ne portent
        pas d'en-tete de quota.

        Args:
            search_term: Terme de recherche, mots separes par "+"
            year: Annee de sortie optionnelle pour filtrer

        Returns:
            Liste de MovieResultResource dans l'ordre TMDB (vide si aucun resultat)
        """
        # "+" separe les mots : on envoie des espaces et httpx encode la requete
        params = {
            "query": search_term.replace("+", " "),
            "year": str(year) if year else "",
            "include_adult": "false",
        }
        response = await self._get("/search/movie", params=params)
        self._raise_for_status(response, identifier=search_term)

        data = response.json()
        return validate_results(data.get("results") or [], source="search/movie")

    async def _get(self, path: str, params: dict[str, Any]) -> httpx.Response:
        """
        Execute une requete GET sans lever sur les statuts HTTP.

        Raises:
            ProviderTransportError: Pour toute erreur reseau ou timeout
        """
        client = self._get_client()
        try:
            return await client.get(path, params=params)
        except httpx.HTTPError as e:
            url = str(e.request.url) if _has_request(e) else None
            raise ProviderTransportError(
                f"Unable to communicate with TMDB: {e}", url=url
            ) from e

    @staticmethod
    def _raise_for_status(response: httpx.Response, identifier: Union[int, str]) -> None:
        """Convertit un statut HTTP non 2xx en erreur du domaine."""
        if response.status_code == httpx.codes.NOT_FOUND:
            raise MovieNotFoundError(identifier)
        if not response.is_success:
            raise ProviderTransportError(
                f"TMDB returned HTTP {response.status_code}",
                status_code=response.status_code,
                url=str(response.request.url),
            )

    @staticmethod
    def _check_content_type(response: httpx.Response) -> None:
        """Verifie que la reponse est du JSON UTF-8, meme sur un 200."""
        content_type = response.headers.get("content-type", "")
        normalized = content_type.replace(" ", "").lower()
        if normalized != TMDB_JSON_CONTENT_TYPE:
            raise ProviderTransportError(
                f"Unexpected content type from TMDB: {content_type!r}",
                status_code=response.status_code,
                url=str(response.request.url),
            )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


def _has_request(error: httpx.HTTPError) -> bool:
    """Vrai si l'erreur httpx porte la requete d'origine."""
    try:
        error.request
    except RuntimeError:
        return False
    return True
