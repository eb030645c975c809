"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINEHOOK_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle - les commandes TMDB sont désactivées si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINEHOOK_.
    Exemple : CINEHOOK_RATE_LIMIT_THRESHOLD=10
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEHOOK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # TMDB (clé OPTIONNELLE)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_language: str = Field(default="en", min_length=2, max_length=2)
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p/")
    tmdb_image_size: str = Field(default="original")

    # Service de découverte
    discovery_base_url: str = Field(default="https://api.radarr.video/v2")

    # Réseau
    request_timeout: float = Field(default=30.0, gt=0)

    # Pause de courtoisie sur quota TMDB bas
    rate_limit_threshold: int = Field(default=5, ge=0)
    rate_limit_cooldown_seconds: float = Field(default=5.0, ge=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinehook.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("tmdb_language", mode="after")
    @classmethod
    def lower_language(cls, v: str) -> str:
        """Normalise le code de langue en minuscules."""
        return v.lower()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return self.tmdb_api_key is not None
