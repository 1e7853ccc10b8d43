"""Configuration de la bibliothèque de métriques."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Logs
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None  # aucun fichier par défaut

    # Jaro-Winkler
    JARO_WINKLER_THRESHOLD: float = 0.7
    JARO_WINKLER_PREFIX_SCALE: float = 0.1
    JARO_WINKLER_MAX_PREFIX: int = 4

    # Smith-Waterman-Gotoh fenêtré (utilisé uniquement par la façade)
    WINDOW_SIZE: int = 100

    # Simplifieurs / tokenizers
    SOUNDEX_LENGTH: int = 4
    QGRAM_PADDING: str = "#"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SIMSCORE_",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
