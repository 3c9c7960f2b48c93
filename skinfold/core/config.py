"""
Application Configuration
=========================
Uses pydantic-settings to load environment variables into a typed Settings object.
STRICT_SEX is the setting that changes calculation behaviour: it decides whether
an unrecognised sex value is an error or silently treated as Female.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    The .env file is automatically read thanks to the model_config below.
    """

    # Application metadata
    APP_NAME: str = "Skinfold Body Fat Calculator"
    APP_VERSION: str = "1.0.0"

    # Root log level passed to logging.basicConfig
    LOG_LEVEL: str = "INFO"

    # When True, sex must be exactly Male or Female (case-insensitive).
    # When False, anything other than "Male" is treated as Female.
    STRICT_SEX: bool = True

    # Origins allowed by the CORS middleware
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


# Singleton instance — import this everywhere you need settings
settings = Settings()
