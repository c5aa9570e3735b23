"""
Configuration management for the grana-sheets functions.

Values come from environment variables; a .env file in the working
directory is loaded first so local overrides don't need exporting.
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Endpoint and identity configuration."""

    def __init__(self):
        # Remote APIs
        self.GRANA_API_URL: str = os.getenv("GRANA_API_URL", "https://app.grana.io/api").rstrip("/")
        self.STOCKS_API_URL: str = os.getenv("STOCKS_API_URL", "https://pafuncio.herokuapp.com").rstrip("/")

        # Caller identity (document owner's email)
        self.OWNER_EMAIL_VAR: str = "GRANA_OWNER_EMAIL"

        # Logging
        self.LOG_LEVEL: str = os.getenv("GRANA_LOG_LEVEL", "INFO").upper()


settings = Settings()
