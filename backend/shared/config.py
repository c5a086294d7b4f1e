"""
Centralized configuration for the Storefront backend.

All settings are loaded from environment variables (or a .env file) with
sensible defaults. The database URL and the token signing secret have no
usable default and must be provided before the API starts.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "Storefront API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # MongoDB
    mongo_url: str = ""
    mongo_db_name: str = "storefront"

    # Auth tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7

    # Credential hashing
    bcrypt_rounds: int = 10

    # Catalogue
    max_photo_size: int = 1_000_000  # bytes
    products_per_page: int = 6
    related_products_limit: int = 3

    def validate_required(self) -> None:
        """
        Ensure the settings needed to serve requests are present.

        Raises:
            ConfigurationError: Listing every missing environment variable.
        """
        missing = []
        if not self.mongo_url:
            missing.append("MONGO_URL")
        if not self.jwt_secret:
            missing.append("JWT_SECRET")
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}",
                details={"missing": missing},
            )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
