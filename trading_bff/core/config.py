# trading_bff/core/config.py

import os
from functools import lru_cache

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # eBay Trading API
    EBAY_SANDBOX_MODE: bool = False # Change to True if in Sandbox test mode
    EBAY_TRADING_API_URL: str = "https://api.ebay.com/ws/api.dll"
    EBAY_TRADING_SANDBOX_API_URL: str = "https://api.sandbox.ebay.com/ws/api.dll"
    EBAY_TRADING_COMPATIBILITY_LEVEL: str = "1157"
    EBAY_DEFAULT_MARKETPLACE: str = "EBAY_US"

    # Static IAF token, used when no auth manager is supplied
    EBAY_ACCESS_TOKEN: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    EBAY_DEBUG_LOGGING: bool = False  # Log request/response XML excerpts

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists('.env') else None,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every call"""
    return Settings()

def get_settings_no_cache():
    """Get settings without caching - useful for testing different environments"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
