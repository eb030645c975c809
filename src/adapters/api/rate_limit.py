"""
Politique de courtoisie envers le quota TMDB.

Apres une reponse details/find reussie, l'en-tete X-RateLimit-Remaining
indique le nombre de requetes restantes dans la fenetre courante. Sous un
seuil, on marque une pause avant de rendre la main : c'est l'appel suivant
qui en profite, pas le resultat courant.

La pause est un asyncio.sleep : annulable, elle ne bloque pas la boucle
d'evenements. Aucune coordination entre appelants concurrents.

Usage:
    policy = RateLimitPolicy(threshold=5, cooldown_seconds=5.0)
    await cool_down_if_needed(response.headers, policy)
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Mapping, Optional

from loguru import logger

from src.utils.constants import RATE_LIMIT_REMAINING_HEADER

Sleeper = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RateLimitPolicy:
    """
    Parametres de la pause de courtoisie.

    Attributes:
        threshold: Quota restant a partir duquel on marque une pause (inclus)
        cooldown_seconds: Duree de la pause en secondes
    """

    threshold: int = 5
    cooldown_seconds: float = 5.0

    def should_cool_down(self, remaining: Optional[int]) -> bool:
        """Vrai si le quota restant est connu et inferieur ou egal au seuil."""
        return remaining is not None and remaining <= self.threshold


def remaining_quota(headers: Mapping[str, str]) -> Optional[int]:
    """
    Lit le quota restant depuis les en-tetes de reponse.

    Args:
        headers: En-tetes HTTP (httpx.Headers est insensible a la casse)

    Returns:
        Quota restant, ou None si l'en-tete est absent ou illisible
    """
    value = headers.get(RATE_LIMIT_REMAINING_HEADER)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        logger.debug(f"En-tete {RATE_LIMIT_REMAINING_HEADER} illisible: {value!r}")
        return None


async def cool_down_if_needed(
    headers: Mapping[str, str],
    policy: RateLimitPolicy,
    sleep: Sleeper = asyncio.sleep,
) -> bool:
    """
    Marque une pause si le quota restant est sous le seuil.

    Args:
        headers: En-tetes de la reponse TMDB
        policy: Seuil et duree de pause
        sleep: Primitive de pause (asyncio.sleep par defaut)

    Returns:
        True si une pause a ete effectuee
    """
    remaining = remaining_quota(headers)
    if not policy.should_cool_down(remaining):
        return False

    logger.trace(
        f"Quota TMDB presque epuise ({remaining} restantes), "
        f"pause de {policy.cooldown_seconds}s"
    )
    await sleep(policy.cooldown_seconds)
    return True
