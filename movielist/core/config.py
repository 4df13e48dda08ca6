# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "America/New_York")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "movielist")
        
        # Collection Names
        self.accounts_collection: Final[str] = os.getenv("ACCOUNTS_COLLECTION", "accounts")
        self.movies_collection: Final[str] = os.getenv("MOVIES_COLLECTION", "movies")
        
        # Password hashing cost
        self.bcrypt_salt_rounds: Final[int] = int(
            os.getenv("BCRYPT_SALT_ROUNDS", "12")
        )
        
        # TMDB Configuration (movie lookup)
        self.tmdb_api_url: Final[str] = os.getenv(
            "TMDB_API_URL",
            "https://api.themoviedb.org/3"
        )
        self.tmdb_api_key: Final[Optional[str]] = os.getenv("TMDB_API_KEY") or None
        self.tmdb_timeout_seconds: Final[float] = float(
            os.getenv("TMDB_TIMEOUT_SECONDS", "10")
        )
        
        # CORS Configuration
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
