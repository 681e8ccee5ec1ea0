"""
Configuration module for the Sapiens.io backend.
Loads settings from the .env file and environment variables.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    # Real environment variables win over .env entries
    load_dotenv(_env_path, override=False)


class Settings:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        self.app_name: str = os.getenv("APP_NAME", "Sapiens.io")
        self.api_version: str = os.getenv("API_VERSION", "1.0.0")
        self.debug: bool = os.getenv("DEBUG", "false").lower() in ("true", "1", "yes")
        self.environment: str = os.getenv("ENVIRONMENT", "development")
        self.port: int = int(os.getenv("PORT", "5001"))

        # Firestore
        self.firebase_credentials_path: str = os.getenv("FIREBASE_CREDENTIALS_PATH", "")
        self.firestore_project_id: str = os.getenv("FIRESTORE_PROJECT_ID", "")

        # LocalStore persistence; empty keeps everything in memory
        self.local_data_dir: str = os.getenv("LOCAL_DATA_DIR", "./data")

        # Stripe
        self.stripe_secret_key: str = os.getenv("STRIPE_SECRET_KEY", "")
        self.stripe_api_base: str = os.getenv("STRIPE_API_BASE", "https://api.stripe.com/v1")
        self.site_domain: str = os.getenv("SITE_DOMAIN", "").rstrip("/")
        self.premium_price_cents: int = int(os.getenv("PREMIUM_PRICE_CENTS", "1200"))
        self.premium_currency: str = os.getenv("PREMIUM_CURRENCY", "usd")

        # CORS
        cors_raw = os.getenv("CORS_ORIGINS", "*")
        self.cors_origins: List[str] = [s.strip() for s in cors_raw.split(",")]


_settings = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
