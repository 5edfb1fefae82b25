"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "1234"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Public origin used to build locale URLs; empty means "use the request host"
    SITE_ORIGIN: str = os.getenv("SITE_ORIGIN", "")

    # Translation bundles
    LOCALES_DIR: str = os.getenv("LOCALES_DIR", str(_ROOT / "locales"))
    LOCALES_TIMEOUT_S: float = float(os.getenv("LOCALES_TIMEOUT_S", "10"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
