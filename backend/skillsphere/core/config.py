"""
Configuration settings for the Skill Sphere backend.

Uses Pydantic settings management for environment variables and configuration.
"""

from functools import lru_cache
from typing import Annotated, List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Skill Sphere"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Backend for the Skill Sphere learning site"

    # Security
    SECRET_KEY: str = Field(
        default="IDK_WHAT_IM_DOING",
        validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET"),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60  # 1 hour
    BCRYPT_ROUNDS: int = 10

    # Database
    DATABASE_URL: str = "sqlite:///./skill_sphere.db"

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = [
        "https://skillsphere25.netlify.app"
    ]
    CORS_ALLOW_CREDENTIALS: bool = True

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str):
            return [i.strip().rstrip("/") for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return [str(i).rstrip("/") for i in v]
        raise ValueError(v)

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Development settings
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
