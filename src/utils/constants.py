"""
Constantes globales pour CineHook.

Ce module contient les constantes utilisees dans l'application:
- Valeurs du protocole TMDB (en-tetes, content-type, codes d'erreur)
- Types de dates de sortie TMDB retenus pour la sortie physique
- Table des langues ISO 639-1 reconnues pour les titres alternatifs
- Articles et mots communs ignores pour les titres normalises
"""

# URL de base pour les portraits des credits (taille originale)
TMDB_HEADSHOT_BASE_URL = "https://image.tmdb.org/t/p/original"

# Sous-ressources demandees avec les details d'un film
TMDB_APPEND_TO_RESPONSE = "alternative_titles,release_dates,videos,credits,translations"

# Content-type attendu sur les reponses de details (compare sans espaces)
TMDB_JSON_CONTENT_TYPE = "application/json;charset=utf-8"

# En-tete de quota restant, present sur les reponses details/find
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"

# Code d'erreur TMDB: ressource supprimee en amont
TMDB_STATUS_CODE_DELETED = 34

# Types de release_dates TMDB: 4 = Digital, 5 = Physical
PHYSICAL_RELEASE_TYPES = frozenset({4, 5})

# Un film en salles depuis plus de 3 mois (mois de 30 jours) est considere sorti
IN_CINEMAS_RELEASED_AFTER_DAYS = 30 * 3

# Annee minimale retenue comme filtre de recherche
MIN_SEARCH_YEAR = 1800

# Annee minimale pour completer une recherche titre lors du remapping
MIN_REMAP_YEAR = 1900

# Langues reconnues (code ISO 639-1 -> nom)
ISO_LANGUAGES = {
    "en": "English",
    "fr": "French",
    "es": "Spanish",
    "de": "German",
    "it": "Italian",
    "da": "Danish",
    "nl": "Dutch",
    "ja": "Japanese",
    "is": "Icelandic",
    "zh": "Chinese",
    "ru": "Russian",
    "pl": "Polish",
    "vi": "Vietnamese",
    "sv": "Swedish",
    "no": "Norwegian",
    "nb": "Norwegian",
    "fi": "Finnish",
    "tr": "Turkish",
    "pt": "Portuguese",
    "el": "Greek",
    "ko": "Korean",
    "hu": "Hungarian",
    "he": "Hebrew",
    "lt": "Lithuanian",
    "cs": "Czech",
    "ar": "Arabic",
    "hi": "Hindi",
    "bg": "Bulgarian",
}

# Mots communs retires des titres de tri et des titres "propres"
COMMON_WORDS = ("a", "an", "the", "and", "or", "of")
