"""Configuration loading for the autostatus build reporter.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # GitHub configuration
    github_token: str = Field(
        default="",
        description="GitHub token used to create commit statuses",
    )
    github_repo: str = Field(
        default="",
        description="GitHub repository receiving statuses (owner/repo)",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub API base URL",
    )
    github_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for GitHub API requests in seconds",
    )

    # Build being reported
    commit_sha: str = Field(
        default="",
        description="Commit the statuses are attached to",
    )
    target_url: str = Field(
        default="",
        description="Link back to the build shown next to each status",
    )

    # Notifier selection
    notifiers: list[Literal["github", "stdout"]] = Field(
        default_factory=lambda: ["github"],
        description="Enabled notifier backends",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose output",
    )

    @field_validator("github_repo")
    @classmethod
    def validate_github_repo(cls, v: str) -> str:
        """Ensure repository is empty or of the form owner/repo."""
        if v and (v.count("/") != 1 or v.startswith("/") or v.endswith("/")):
            raise ValueError("github_repo must be of the form 'owner/repo'")
        return v

    @field_validator("github_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure request timeout is positive."""
        if v <= 0:
            raise ValueError("github_timeout_seconds must be positive")
        return v

    @property
    def github_enabled(self) -> bool:
        """Whether enough GitHub settings are present to create statuses."""
        return bool(self.github_token and self.github_repo)


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
