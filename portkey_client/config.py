"""Configuration management for the Portkey client."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Client settings, read from the environment (and .env)."""

    # Gateway authentication and routing
    PORTKEY_API_KEY: Optional[str] = os.getenv("PORTKEY_API_KEY")
    PORTKEY_VIRTUAL_KEY: Optional[str] = os.getenv("PORTKEY_VIRTUAL_KEY")
    PORTKEY_PROVIDER: Optional[str] = os.getenv("PORTKEY_PROVIDER")
    PORTKEY_PROVIDER_AUTH_TOKEN: Optional[str] = os.getenv("PORTKEY_PROVIDER_AUTH_TOKEN")
    PORTKEY_CONFIG: Optional[str] = os.getenv("PORTKEY_CONFIG")
    PORTKEY_CUSTOM_HOST: Optional[str] = os.getenv("PORTKEY_CUSTOM_HOST")

    # Transport
    PORTKEY_BASE_URL: str = os.getenv("PORTKEY_BASE_URL", "https://api.portkey.ai/v1")
    PORTKEY_TIMEOUT: float = float(os.getenv("PORTKEY_TIMEOUT", "60"))

    # Images larger than this (either axis) are rejected before decoding.
    # A 16384x16384 RGBA bitmap is ~1 GB in memory.
    MAX_IMAGE_DIMENSION: int = int(os.getenv("MAX_IMAGE_DIMENSION", "8192"))

    # Debug
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "false").lower() == "true"
    DEBUG_LOG_PAYLOADS: bool = os.getenv("DEBUG_LOG_PAYLOADS", "false").lower() == "true"
    DEBUG_LOG_MAX_LENGTH: int = int(os.getenv("DEBUG_LOG_MAX_LENGTH", "0"))

    # File logging
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")
    LOG_FILE: str = os.getenv("LOG_FILE", "portkey_client.log")


settings = Settings()
