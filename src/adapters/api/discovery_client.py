"""
Client du service de decouverte (recommandations de films).

Le service recoit la liste des films de la bibliotheque et des exclusions
(formulaire tmdbIds=...&ignoredIds=...) et renvoie des candidats au format
des resultats de recherche TMDB.

Usage:
    client = DiscoveryAPIClient(base_url="https://discovery.example.org")
    candidates = await client.discover_candidates("upcoming", "603,604", "")
    await client.close()
"""

from typing import Optional

import httpx
from loguru import logger

from src.core.exceptions import DiscoveryError
from src.core.ports.api_clients import IDiscoveryClient
from src.core.ports.resources import MovieResultResource, validate_results


class DiscoveryAPIClient(IDiscoveryClient):
    """
    Implementation de IDiscoveryClient via HTTP.

    POST {base_url}/discovery/{action} en form-encoded. Toute erreur
    (reseau, statut, reponse invalide) devient une DiscoveryError.
    """

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        """
        Initialise le client de decouverte.

        Args:
            base_url: URL de base du service de decouverte
            timeout: Timeout des requetes en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def discover_candidates(
        self,
        action: str,
        tmdb_ids: str,
        ignored_ids: str,
    ) -> list[MovieResultResource]:
        """
        Demande des films candidats pour une action de decouverte.

        Args:
            action: Action de decouverte (ex: "upcoming", "popular")
            tmdb_ids: IDs de la bibliotheque separes par des virgules
            ignored_ids: IDs exclus separes par des virgules

        Returns:
            Liste des candidats bruts

        Raises:
            DiscoveryError: Si la requete ou la reponse est invalide
        """
        client = self._get_client()
        try:
            response = await client.post(
                f"/discovery/{action}",
                data={"tmdbIds": tmdb_ids, "ignoredIds": ignored_ids},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise DiscoveryError(f"Service de decouverte injoignable ({action}): {e}") from e
        except ValueError as e:
            raise DiscoveryError(f"Reponse invalide du service de decouverte ({action}): {e}") from e

        if not isinstance(payload, list):
            raise DiscoveryError(
                f"Reponse invalide du service de decouverte ({action}): liste attendue"
            )

        candidates = validate_results(payload, source=f"discovery/{action}")
        logger.debug(f"Decouverte '{action}': {len(candidates)} candidats recus")
        return candidates

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
