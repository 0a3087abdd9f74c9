# 📄 File: bookworm/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads the library's rules (loan days, stock alerts,
# password hashing strength, logging) from environment variables.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for library policy and ambient configuration.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - bookworm.shared.utils.logging (log level and format)
# - bookworm.shared.core.security (hashing scheme and rounds)
# - Catalog domain service (low stock threshold)

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Bookworm Library", description="Application name")
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")
    LOG_FILE: Optional[str] = Field(default=None, description="Optional log file path")

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    PASSWORD_HASH_SCHEME: str = Field(default="bcrypt", description="passlib hashing scheme")
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31, description="bcrypt cost factor")

    # =========================================================================
    # LIBRARY POLICY
    # =========================================================================

    DEFAULT_LOAN_PERIOD_DAYS: int = Field(
        default=14, ge=1, le=90,
        description="Default loan period in days (LoanPeriod.create_default)"
    )
    MAX_EXTENSION_DAYS: int = Field(
        default=14, ge=1, le=14,
        description="Maximum days a single extension may add (LoanPeriod.extend)"
    )
    MAX_LOAN_QUANTITY: int = Field(
        default=5, ge=1, le=5,
        description="Maximum copies borrowed in one request (LoanQuantity)"
    )
    LOW_STOCK_THRESHOLD: int = Field(
        default=2, ge=1, le=100,
        description="Stock level at or below which a book is low on stock"
    )
    MAX_BOOK_QUANTITY: int = Field(
        default=9999, ge=1, le=9999,
        description="Maximum stock held for one book (BookQuantity)"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = ["development", "test", "production"]
        if v.lower() not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of: {allowed}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        allowed = ["json", "text"]
        if v.lower() not in allowed:
            raise ValueError(f"LOG_FORMAT must be one of: {allowed}")
        return v.lower()

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.ENVIRONMENT == "test"

    def get_password_hashing_config(self) -> dict:
        """Get passlib CryptContext configuration."""
        config = {
            "schemes": [self.PASSWORD_HASH_SCHEME],
            "deprecated": "auto",
        }
        if self.PASSWORD_HASH_SCHEME == "bcrypt":
            config["bcrypt__rounds"] = self.BCRYPT_ROUNDS
        return config


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
