"""
Calcul du statut de sortie d'un film.

Fonction pure : l'instant courant est un parametre, aucune horloge globale
n'est lue. Toutes les combinaisons de dates (y compris absentes) sont valides.
"""

from datetime import datetime, timedelta
from typing import Optional

from src.core.entities.movie import MovieStatus
from src.utils.constants import IN_CINEMAS_RELEASED_AFTER_DAYS

_RELEASED_AFTER = timedelta(days=IN_CINEMAS_RELEASED_AFTER_DAYS)


def resolve_status(
    now: datetime,
    in_cinemas: Optional[datetime],
    physical_release: Optional[datetime],
) -> MovieStatus:
    """
    Determine le statut de sortie a partir des dates connues.

    Regles:
    - sortie salles et physique connues : ANNOUNCED avant la sortie salles,
      IN_CINEMAS ensuite, RELEASED des la sortie physique (toujours prioritaire)
    - sortie salles seule : IN_CINEMAS si passee, sinon ANNOUNCED
    - sortie physique seule : RELEASED si passee, sinon ANNOUNCED
    - aucune date : ANNOUNCED

    TMDB manque souvent de dates physiques : un film en salles depuis plus
    de 90 jours sans date physique est considere RELEASED.

    Args:
        now: Instant de reference
        in_cinemas: Date de sortie en salles
        physical_release: Date de sortie physique/digitale

    Returns:
        Statut calcule
    """
    if in_cinemas is not None and physical_release is not None:
        status = MovieStatus.ANNOUNCED if now < in_cinemas else MovieStatus.IN_CINEMAS
        if now >= physical_release:
            status = MovieStatus.RELEASED
    elif in_cinemas is not None and now >= in_cinemas:
        status = MovieStatus.IN_CINEMAS
    elif physical_release is not None and now >= physical_release:
        status = MovieStatus.RELEASED
    else:
        status = MovieStatus.ANNOUNCED

    if (
        status == MovieStatus.IN_CINEMAS
        and physical_release is None
        and now - in_cinemas > _RELEASED_AFTER
    ):
        status = MovieStatus.RELEASED

    return status
