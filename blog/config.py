"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # JWT settings
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 7

    # bcrypt cost factor for stored passwords
    password_hash_rounds: int = 12


class StoreSettings(BaseModel):
    """In-memory store configuration."""

    # Upper bound for a single post registry / identity provider lookup
    # A lookup that exceeds it fails the operation as unavailable
    collaborator_timeout_seconds: float = 2.0

    # Populate the stores with a demo user, two posts and a comment on startup
    seed_demo_data: bool = True
    demo_email: str = "demo@example.com"
    demo_password: str = "password123"


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]
    frontend_host: str

    @computed_field
    @property
    def base_url(self) -> str:
        """Base URL for this API server.

        In development: http://localhost:8000
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            # Production uses standard ports (80/443)
            return f"{self.protocol}://{self.host}"

    @computed_field
    @property
    def frontend_url(self) -> str:
        """Frontend URL allowed by CORS.

        In development: http://localhost:5173 (Vite dev server)
        """
        if self.frontend_host == "localhost":
            return "http://localhost:5173"
        else:
            return f"{self.protocol}://{self.frontend_host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Configuration is driven by environment and host values, with all URLs
    computed from them. Set environment variables to override:

    Development (default):
        HOST=localhost
        PORT=8000
        ENVIRONMENT=development
        -> API: http://localhost:8000
        -> Frontend: http://localhost:5173

    Nested values use a double underscore, e.g. STORE__SEED_DEMO_DATA=false.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    # Host configuration (all URLs computed from these)
    host: str = "localhost"
    port: int = 8000
    frontend_host: str = "localhost"

    # Nested settings
    auth: AuthSettings = AuthSettings()
    store: StoreSettings = StoreSettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http", frontend_host="localhost"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(
            host=self.host,
            port=self.port,
            protocol=protocol,
            frontend_host=self.frontend_host,
        )

        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
