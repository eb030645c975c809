"""
Fonctions utilitaires partagees dans le projet CineHook.

Ce module centralise les fonctions de normalisation de titres et de dates :
- normalize_accents / strip_invisible_chars : nettoyage de caracteres
- to_url_slug : slug URL d'un titre
- clean_movie_title : titre compact pour la comparaison
- normalize_title : titre de tri
- parse_date : date TMDB vers datetime naif
"""

import re
import unicodedata
from datetime import datetime
from typing import Optional

from src.utils.constants import COMMON_WORDS

_COMMON_WORDS_PATTERN = "|".join(COMMON_WORDS)

# Mots communs precedes d'un separateur (jamais en tete de titre)
_CLEAN_COMMON_WORDS_RE = re.compile(rf"(?<=[\s_])(?:{_COMMON_WORDS_PATTERN})(?=[\s_]|$)")
_NON_WORD_RE = re.compile(r"[\W_]+")
_WORD_DELIMITER_RE = re.compile(r"[._\s]+")
_PUNCTUATION_RE = re.compile(r"[^\w\s-]")
_SORT_COMMON_WORDS_RE = re.compile(rf"\b(?:{_COMMON_WORDS_PATTERN})\b\s?")
_SLUG_INVALID_RE = re.compile(r"[^a-z0-9\s_-]")
_SLUG_SEPARATOR_RE = re.compile(r"[\s_-]+")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    return "".join(
        char for char in text if unicodedata.category(char) not in ("Cf", "Cc")
    )


def normalize_accents(text: str) -> str:
    """
    Supprime les accents d'une chaine pour une comparaison insensible aux accents.

    Utilise la decomposition NFD puis filtre les caracteres diacritiques (Mn).
    Ex: "Amélie" -> "Amelie"
    """
    normalized = unicodedata.normalize("NFD", text)
    return "".join(char for char in normalized if unicodedata.category(char) != "Mn")


def to_url_slug(title: str) -> str:
    """
    Construit un slug URL depuis un titre.

    Minuscules, accents retires, caracteres non alphanumeriques supprimes,
    separateurs fusionnes en un seul tiret.

    Args:
        title: Titre du film

    Returns:
        Slug sans tiret en tete ni en fin (ex: "the-matrix")
    """
    slug = normalize_accents(strip_invisible_chars(title)).lower()
    slug = _SLUG_INVALID_RE.sub("", slug)
    slug = _SLUG_SEPARATOR_RE.sub("-", slug)
    return slug.strip("-")


def clean_movie_title(title: str) -> str:
    """
    Titre compact utilise pour comparer des titres entre eux.

    Retire accents, mots communs (sauf en tete), ponctuation et espaces.
    Ex: "The Lord of the Rings" -> "thelordrings"
    """
    cleaned = normalize_accents(strip_invisible_chars(title)).lower()
    cleaned = cleaned.replace("&", " and ")
    cleaned = _CLEAN_COMMON_WORDS_RE.sub("", cleaned)
    return _NON_WORD_RE.sub("", cleaned)


def normalize_title(title: str) -> str:
    """
    Titre de tri : delimiteurs en espaces, ponctuation et mots communs retires.

    Ex: "The Matrix: Reloaded" -> "matrix reloaded"
    """
    normalized = _WORD_DELIMITER_RE.sub(" ", strip_invisible_chars(title))
    normalized = _PUNCTUATION_RE.sub("", normalized).lower()
    normalized = _SORT_COMMON_WORDS_RE.sub("", normalized)
    return " ".join(normalized.split())


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Convertit une date TMDB en datetime naif.

    Accepte "YYYY-MM-DD" et les horodatages ISO 8601 des release_dates
    (ex: "2009-12-18T00:00:00.000Z"). Le fuseau est ignore pour pouvoir
    comparer toutes les dates entre elles.

    Args:
        value: Date brute, vide ou None

    Returns:
        datetime naif, ou None si la valeur est vide

    Raises:
        ValueError: Si la valeur n'est pas une date ISO valide
    """
    if value is None or not value.strip():
        return None
    return datetime.fromisoformat(value.strip()).replace(tzinfo=None)


def is_blank(value: Optional[str]) -> bool:
    """Vrai si la chaine est None, vide ou composee uniquement d'espaces."""
    return value is None or not value.strip()
