"""
Objet valeur pour les langues des titres alternatifs.

Les codes sont des codes ISO 639-1. La table des langues reconnues vit dans
src.utils.constants.ISO_LANGUAGES.
"""

from dataclasses import dataclass
from typing import Optional

from src.utils.constants import ISO_LANGUAGES


@dataclass(frozen=True)
class Language:
    """
    Langue avec code ISO 639-1 et nom complet.

    Attributs :
        code : Code de langue ISO 639-1 (ex: "fr", "en")
        name : Nom complet de la langue (ex: "French", "English")
    """

    code: str
    name: str


ENGLISH = Language(code="en", name=ISO_LANGUAGES["en"])


def find_language(code: Optional[str]) -> Optional[Language]:
    """
    Retrouve une langue reconnue depuis un code a deux lettres.

    Args:
        code: Code ISO (casse indifferente), ou None

    Returns:
        Language correspondante, ou None si le code n'est pas reconnu
    """
    if not code:
        return None
    normalized = code.strip().lower()
    name = ISO_LANGUAGES.get(normalized)
    if name is None:
        return None
    return Language(code=normalized, name=name)
