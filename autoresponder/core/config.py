"""
autoresponder/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (DB URI, Slack tokens, timeouts)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # MongoDB
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB_NAME: str = Field(
        default="chatbot",
        description="MongoDB database name"
    )
    MONGODB_COLLECTION: str = Field(
        default="users",
        description="Collection holding one reply configuration per user"
    )
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        default=5000,
        description="How long the driver waits for a reachable server"
    )
    MONGODB_OPERATION_TIMEOUT_SECONDS: float = Field(
        default=5.0,
        description="Client-side timeout applied to every store operation"
    )

    # Slack
    SLACK_VERIFICATION_TOKEN: Optional[str] = Field(
        default=None,
        description="Verification token sent by Slack with every request"
    )
    SLACK_BOT_TOKEN: Optional[str] = Field(
        default=None,
        description="Bot token used for chat.postMessage"
    )
    SLACK_API_BASE_URL: str = Field(
        default="https://slack.com/api",
        description="Slack Web API base URL"
    )
    SLACK_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Slack Web API request timeout in seconds"
    )
    VERIFY_COMMAND_TOKEN: bool = Field(
        default=False,
        description="Also check the verification token on slash commands"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @validator("SLACK_VERIFICATION_TOKEN", always=True)
    def validate_verification_token(cls, v, values):
        """Ensure the verification token is set in production."""
        if values.get("ENVIRONMENT") == "production" and not v:
            raise ValueError("SLACK_VERIFICATION_TOKEN is required in production environment")
        return v

    @validator("SLACK_BOT_TOKEN", always=True)
    def validate_bot_token(cls, v, values):
        """Ensure the bot token is set in production."""
        if values.get("ENVIRONMENT") == "production" and not v:
            raise ValueError("SLACK_BOT_TOKEN is required in production environment")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the loaded settings."""
    return settings


def validate_settings(current: Optional[Settings] = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    current = current or settings
    errors = []

    if not current.MONGODB_URL:
        errors.append("MONGODB_URL is required")

    if not current.MONGODB_DB_NAME:
        errors.append("MONGODB_DB_NAME is required")

    if not current.SLACK_API_BASE_URL:
        errors.append("SLACK_API_BASE_URL is required")

    if current.MONGODB_OPERATION_TIMEOUT_SECONDS <= 0:
        errors.append("MONGODB_OPERATION_TIMEOUT_SECONDS must be positive")

    # Production-specific validations
    if current.is_production:
        if not current.SLACK_VERIFICATION_TOKEN:
            errors.append("SLACK_VERIFICATION_TOKEN is required in production")
        if not current.SLACK_BOT_TOKEN:
            errors.append("SLACK_BOT_TOKEN is required in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
