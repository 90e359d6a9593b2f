"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables and the nearest .env file
(searched upward from the current working directory).
"""

from functools import lru_cache
from typing import List, Optional

from dotenv import find_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_DB_TYPES = ("mysql", "postgres", "sqlite")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "EcomGo API"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Jason Omondi"]
    PROJECT_URL: str = "https://github.com/Jason-Omondi/ecomgo"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DB_TYPE: str = "mysql"
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "ecomgo"
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_SSLMODE: str = "disable"
    DATABASE_URL_OVERRIDE: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("DATABASE_URL", "DATABASE_URL_OVERRIDE"))
    AUTO_MIGRATE: bool = True

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8085
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    # Security
    TOKEN_PREFIX: str = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    model_config = SettingsConfigDict(env_file=find_dotenv(usecwd=True) or None, case_sensitive=True,
                                      extra="ignore", str_strip_whitespace=True)

    @field_validator("DB_TYPE")
    @classmethod
    def check_db_type(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in SUPPORTED_DB_TYPES:
            raise ValueError(f"invalid DB_TYPE: {value} (must be one of {', '.join(SUPPORTED_DB_TYPES)})")
        return value

    @property
    def DATABASE_URL(self) -> str:
        """SQLAlchemy URL for the configured database type."""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        if self.DB_TYPE == "mysql":
            return (f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}"
                    f"/{self.DB_NAME}?charset=utf8mb4")
        if self.DB_TYPE == "postgres":
            return (f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}"
                    f"/{self.DB_NAME}?sslmode={self.DB_SSLMODE}")
        return f"sqlite:///{self.DB_NAME}.db"

    def validate_database(self) -> None:
        """
        Check that every variable needed to reach the database is set.

        Raises:
            ValueError: naming the first missing variable
        """
        if self.DATABASE_URL_OVERRIDE or self.DB_TYPE == "sqlite":
            if not self.DB_NAME and not self.DATABASE_URL_OVERRIDE:
                raise ValueError("DB_NAME environment variable not set")
            return

        for name in ("DB_USER", "DB_NAME", "DB_HOST"):
            if not getattr(self, name):
                raise ValueError(f"{name} environment variable not set")
        if not self.DB_PASSWORD:
            raise ValueError("DB_PASSWORD environment variable not set - this is required")

    def masked_summary(self) -> dict:
        """Database settings safe to log (password replaced by a flag)."""
        return {
            "db_type": self.DB_TYPE,
            "db_user": self.DB_USER,
            "db_host": self.DB_HOST,
            "db_port": self.DB_PORT,
            "db_name": self.DB_NAME,
            "has_password": bool(self.DB_PASSWORD),
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
