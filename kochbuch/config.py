"""Configuration management for Kochbuch."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Application configuration."""

    # Application
    PORT: int = int(os.getenv("PORT", "4002"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Import
    IMPORT_PAGE_TIMEOUT: int = int(os.getenv("IMPORT_PAGE_TIMEOUT", "15"))
    IMPORT_IMAGE_MAX_COUNT: int = int(os.getenv("IMPORT_IMAGE_MAX_COUNT", "5"))
    IMPORT_ACCEPT_LANGUAGE: str = os.getenv(
        "IMPORT_ACCEPT_LANGUAGE", "de-DE,de;q=0.9,en;q=0.8"
    )


config = Config()
