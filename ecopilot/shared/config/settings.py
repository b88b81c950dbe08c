# 📄 File: ecopilot/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and provides them to the rest of EcoPilot in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - ecopilot.main (application startup)
# - External API clients (weather, search, geocoding)
# - Location tracking defaults (radius, cooldown, inbox size)

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


SUPPORTED_LANGUAGES = ("fr", "en")

# Radius and cooldown bounds exposed to users
MIN_HOME_RADIUS_METERS = 50
MAX_HOME_RADIUS_METERS = 500
MIN_COOLDOWN_MINUTES = 5
MAX_COOLDOWN_MINUTES = 10


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

    APP_NAME: str = Field(default="EcoPilot API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Smart plant care assistant with predictive geolocation",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="text", description="Log output format (text/json)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=3001, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # CORS Settings
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # LOCALIZATION
    # =========================================================================

    DEFAULT_LANGUAGE: str = Field(default="fr", description="Default response language")

    # =========================================================================
    # RATE LIMITING
    # =========================================================================

    RATE_LIMIT: str = Field(
        default="100 per 15 minutes",
        description="Global rate limit per client IP"
    )
    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Enable rate limiting")

    # =========================================================================
    # EXTERNAL APIS
    # =========================================================================

    # OpenWeatherMap
    OPENWEATHER_API_KEY: Optional[str] = Field(None, description="OpenWeather API key")
    OPENWEATHER_API_URL: str = Field(
        default="https://api.openweathermap.org/data/2.5",
        description="OpenWeather API URL"
    )
    WEATHER_CACHE_TTL: int = Field(default=600, description="Weather cache TTL (seconds)")
    WEATHER_CACHE_MAXSIZE: int = Field(default=512, ge=1, description="Maximum cached weather answers")

    # Tavily search
    TAVILY_API_KEY: Optional[str] = Field(None, description="Tavily API key")
    TAVILY_API_URL: str = Field(default="https://api.tavily.com", description="Tavily API URL")

    # Nominatim geocoding
    NOMINATIM_URL: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Nominatim geocoding URL"
    )
    GEOCODING_COUNTRY_CODES: str = Field(default="ca", description="Geocoding country filter")

    EXTERNAL_API_TIMEOUT: int = Field(default=10, description="External API timeout (seconds)")
    EXTERNAL_API_MAX_RETRIES: int = Field(default=3, description="External API retry attempts")

    # =========================================================================
    # LOCATION TRACKING
    # =========================================================================

    HOME_RADIUS_METERS: int = Field(default=100, description="Default home radius in meters")
    HOME_EXIT_RADIUS_FACTOR: float = Field(
        default=1.0,
        description="Exit radius as a multiple of the home radius (1.0 = no hysteresis)"
    )
    NOTIFICATION_COOLDOWN_MINUTES: int = Field(
        default=5,
        description="Minimum minutes between two notifications of the same kind"
    )
    NOTIFICATION_INBOX_SIZE: int = Field(default=10, description="In-app notifications kept")
    LOCATION_HISTORY_SIZE: int = Field(default=100, description="Location samples kept")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v.lower()

    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        if v.lower() not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Default language must be one of {list(SUPPORTED_LANGUAGES)}")
        return v.lower()

    @field_validator("HOME_RADIUS_METERS")
    @classmethod
    def validate_home_radius(cls, v: int) -> int:
        if not MIN_HOME_RADIUS_METERS <= v <= MAX_HOME_RADIUS_METERS:
            raise ValueError(
                f"Home radius must be between {MIN_HOME_RADIUS_METERS} "
                f"and {MAX_HOME_RADIUS_METERS} meters"
            )
        return v

    @field_validator("HOME_EXIT_RADIUS_FACTOR")
    @classmethod
    def validate_exit_factor(cls, v: float) -> float:
        if v < 1.0:
            raise ValueError("Exit radius factor cannot be lower than 1.0")
        return v

    @field_validator("NOTIFICATION_COOLDOWN_MINUTES")
    @classmethod
    def validate_cooldown(cls, v: int) -> int:
        if not MIN_COOLDOWN_MINUTES <= v <= MAX_COOLDOWN_MINUTES:
            raise ValueError(
                f"Notification cooldown must be between {MIN_COOLDOWN_MINUTES} "
                f"and {MAX_COOLDOWN_MINUTES} minutes"
            )
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"

    @property
    def has_weather_api_key(self) -> bool:
        return _is_real_key(self.OPENWEATHER_API_KEY)

    @property
    def has_tavily_api_key(self) -> bool:
        return _is_real_key(self.TAVILY_API_KEY)

    def get_external_api_config(self) -> dict:
        """Get external API configuration."""
        return {
            "openweather": {
                "api_key": self.OPENWEATHER_API_KEY,
                "api_url": self.OPENWEATHER_API_URL,
                "enabled": self.has_weather_api_key,
            },
            "tavily": {
                "api_key": self.TAVILY_API_KEY,
                "api_url": self.TAVILY_API_URL,
                "enabled": self.has_tavily_api_key,
            },
            "nominatim": {
                "api_key": None,
                "api_url": self.NOMINATIM_URL,
                "enabled": True,
            },
        }


def _is_real_key(value: Optional[str]) -> bool:
    # .env.example ships "your-...-here" placeholders
    return bool(value) and not (value.startswith("your-") and value.endswith("-here"))


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
