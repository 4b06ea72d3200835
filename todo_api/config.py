"""
Centralized configuration management using pydantic-settings.
This module provides a single source of truth for all application configuration.
"""


from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from todo_api.utils.logger import setup_logger

load_dotenv()


logger = setup_logger("core_config")

# bcrypt only reads the first 72 bytes of its input (password + pepper)
MAX_PEPPER_BYTES = 32
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 16


class Settings(BaseSettings):
    """
    Application settings managed by pydantic-settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_prefix="",
    )

    # ===== Database Configuration =====
    database_url: str | None = Field(
        default=None,
        alias="TODO_API_DATABASE_URL",
        description="Application database URL (postgresql:// or sqlite+aiosqlite://)",
    )

    # ===== Authentication Configuration =====
    jwt_secret_key: str | None = Field(
        default=None,
        alias="JWT_SECRET_KEY",
        description="HMAC secret used to sign access tokens",
    )

    jwt_algorithm: str = Field(
        default="HS256",
        alias="JWT_ALGORITHM",
        description="JWT signing algorithm",
    )

    access_token_expire_minutes: int = Field(
        default=60,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
        gt=0,
        description="Lifetime of an access token in minutes",
    )

    password_pepper: str | None = Field(
        default=None,
        alias="PASSWORD_PEPPER",
        description="Fixed secret appended to every password before hashing",
    )

    bcrypt_rounds: int = Field(
        default=12,
        alias="BCRYPT_ROUNDS",
        ge=MIN_BCRYPT_ROUNDS,
        le=MAX_BCRYPT_ROUNDS,
        description="bcrypt cost factor (log2 of the work factor)",
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0", alias="SERVER_HOST", description="Server host address"
    )

    server_port: int = Field(
        default=3000, alias="SERVER_PORT", description="Server port number"
    )

    server_workers: int = Field(
        default=1, alias="SERVER_WORKERS", description="Number of uvicorn workers"
    )

    # ===== CORS Configuration =====
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_ORIGINS",
        description="CORS allowed origins",
    )

    cors_allow_credentials: bool = Field(
        default=False,
        alias="CORS_ALLOW_CREDENTIALS",
        description="Whether to allow credentials in CORS requests",
    )

    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_METHODS",
        description="CORS allowed methods",
    )

    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ALLOW_HEADERS",
        description="CORS allowed headers",
    )

    db_unavailable_hint: str = Field(
        default="Database connection failed. The server may be offline or network connectivity is down.",
        alias="DB_UNAVAILABLE_HINT",
        description="User-facing hint for database connection errors",
    )

    @field_validator("password_pepper")
    @classmethod
    def check_pepper_length(cls, value: str | None) -> str | None:
        if value is not None and len(value.encode("utf-8")) > MAX_PEPPER_BYTES:
            raise ValueError(f"PASSWORD_PEPPER must be at most {MAX_PEPPER_BYTES} bytes")
        return value

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings and log warnings for missing critical configurations."""

        if not self.database_url:
            logger.warning("TODO_API_DATABASE_URL environment variable not set.")

        if not self.jwt_secret_key:
            logger.warning("JWT_SECRET_KEY environment variable not set.")

        if not self.password_pepper:
            logger.warning("PASSWORD_PEPPER environment variable not set.")

        logger.debug(f"bcrypt cost factor: {self.bcrypt_rounds}")

        return self

    def missing_secrets(self) -> list[str]:
        """Names of required secrets that are not configured."""
        missing = []
        if not self.jwt_secret_key:
            missing.append("JWT_SECRET_KEY")
        if not self.password_pepper:
            missing.append("PASSWORD_PEPPER")
        return missing

    def require_secrets(self) -> None:
        """Raise if a signing key or pepper is unset; there is no built-in default."""
        missing = self.missing_secrets()
        if missing:
            raise RuntimeError(
                f"Required secrets are not configured: {', '.join(missing)}"
            )


# Global settings instance
settings = Settings()
