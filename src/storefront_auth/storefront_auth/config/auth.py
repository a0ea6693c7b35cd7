# ABOUTME: Authentication client configuration for the storefront backend
# ABOUTME: Defines API location, refresh endpoint path, expiry margin and token storage keys

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthClientSettings(BaseSettings):
    """Settings for the authenticated request client.

    Attributes:
        API_BASE_URL: Base URL of the commerce API, without a trailing slash.
        REFRESH_PATH: Path of the token refresh endpoint, relative to the base URL.
        TOKEN_EXPIRY_MARGIN_SECONDS: Access tokens are treated as expired this many
            seconds before their embedded expiry.
        REQUEST_TIMEOUT_SECONDS: Default timeout for outbound HTTP requests.
        ACCESS_TOKEN_KEY: Token store key holding the access token.
        REFRESH_TOKEN_KEY: Token store key holding the refresh token.
        TOKEN_STORE_PATH: Location of the durable token file.
    """

    API_BASE_URL: str = Field(
        default="https://api.jholabazar.com/api/v1",
        description="Base URL of the storefront commerce API.",
    )
    REFRESH_PATH: str = Field(
        default="/auth/refresh",
        description="Path of the endpoint exchanging a refresh token for a new access token.",
    )
    TOKEN_EXPIRY_MARGIN_SECONDS: int = Field(
        default=300,
        ge=0,
        description="Safety margin before expiry at which access tokens are refreshed.",
    )
    REQUEST_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Timeout applied to outbound HTTP requests, including refresh calls.",
    )
    ACCESS_TOKEN_KEY: str = Field(default="authToken", min_length=1)
    REFRESH_TOKEN_KEY: str = Field(default="refreshToken", min_length=1)
    TOKEN_STORE_PATH: Path = Field(
        default=Path("~/.storefront/tokens.json"),
        description="File used by the durable token store.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("API_BASE_URL", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator("REFRESH_PATH", mode="before")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip()
            if not v.startswith("/"):
                v = "/" + v
        return v

    @field_validator("TOKEN_STORE_PATH", mode="after")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @model_validator(mode="after")
    def validate_distinct_keys(self) -> "AuthClientSettings":
        """Access and refresh tokens must live under different store keys."""
        if self.ACCESS_TOKEN_KEY == self.REFRESH_TOKEN_KEY:
            raise ValueError("ACCESS_TOKEN_KEY and REFRESH_TOKEN_KEY must be different.")
        return self

    @property
    def refresh_url(self) -> str:
        """Absolute URL of the refresh endpoint."""
        return f"{self.API_BASE_URL}{self.REFRESH_PATH}"
