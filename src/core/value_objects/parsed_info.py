"""
Objets valeur pour les informations de parsing de titres de films.

Objets valeur immutables representant les informations extraites d'une
chaine de recherche ou d'un nom de release (titre, annee, identifiant IMDb).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedMovieTitle:
    """
    Informations extraites du parsing d'un titre de film.

    Attributs:
        title: Titre nettoye (obligatoire)
        year: Annee de sortie (optionnel)
        imdb_id: Identifiant IMDb trouve dans la chaine (ex: "tt0133093")
    """

    title: str
    year: Optional[int] = None
    imdb_id: Optional[str] = None
