"""
Exceptions du domaine CineHook.

Hierarchie:
- CineHookError : base commune
  - MovieNotFoundError : aucun film pour l'identifiant demande
  - ProviderTransportError : statut HTTP inattendu, content-type invalide, erreur reseau
  - SearchFailedError : echec d'une recherche texte (enveloppe l'erreur d'origine)
  - DiscoveryError : echec du service de decouverte (jamais propage par DiscoveryService)
"""

from typing import Optional, Union


class CineHookError(Exception):
    """Exception de base pour toutes les erreurs CineHook."""


class MovieNotFoundError(CineHookError):
    """
    Exception levee quand TMDB ne connait pas l'identifiant demande.

    Attributes:
        identifier: ID TMDB (int) ou IMDb (str) recherche
    """

    def __init__(self, identifier: Union[int, str]) -> None:
        self.identifier = identifier
        super().__init__(f"Movie with id {identifier} was not found")


class ProviderTransportError(CineHookError):
    """
    Exception levee quand la communication avec TMDB echoue.

    Attributes:
        status_code: Statut HTTP recu, ou None pour une erreur reseau
        url: URL de la requete en echec
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class SearchFailedError(CineHookError):
    """
    Exception levee quand une recherche par requete echoue.

    Attributes:
        query: Requete saisie par l'utilisateur
        reason: Cause lisible de l'echec
    """

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Search for '{query}' failed. {reason}")


class DiscoveryError(CineHookError):
    """Exception levee par le client du service de decouverte."""
