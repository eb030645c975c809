"""
Objets valeur decrivant la strategie de resolution d'une requete de recherche.

Le QueryRouter produit exactement une de ces variantes a partir d'une
chaine saisie par l'utilisateur. Elles ne sont jamais persistees.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class ImdbIdRoute:
    """
    Recherche exacte par identifiant IMDb (ex: "tt0133093").

    Attributs :
        imdb_id : Identifiant IMDb
        from_parser : Vrai si l'ID a ete trouve dans un nom de release plutot
            que saisi avec un prefixe imdb: ; toute erreur donne alors zero resultat
    """

    imdb_id: str
    from_parser: bool = False


@dataclass(frozen=True)
class TmdbIdRoute:
    """Recherche exacte par identifiant TMDB."""

    tmdb_id: int


@dataclass(frozen=True)
class TextRoute:
    """
    Recherche floue par titre.

    Attributs :
        search_term : Terme de recherche, mots separes par "+"
        year : Annee de sortie a utiliser comme filtre (optionnel)
    """

    search_term: str
    year: Optional[int] = None


@dataclass(frozen=True)
class RejectedQuery:
    """Requete mal formee : la recherche ne renvoie aucun resultat."""

    reason: str


SearchRoute = Union[ImdbIdRoute, TmdbIdRoute, TextRoute, RejectedQuery]
