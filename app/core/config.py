"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Rate limit for the secrets endpoint.
        max_request_size_bytes: Maximum allowed request body size.
        default_namespace: Namespace used when a request names none.
            Always manageable. Read once at startup.
        managed_namespaces: Further namespaces secrets may be managed in.
        secret_store_backend: Which store adapter to use ("memory" or "sql").
        secret_store_url: SQLAlchemy URL for the "sql" backend.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Tenant Secrets Gateway"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    max_request_size_bytes: int = 1_048_576  # 1 MB

    default_namespace: str = "openfaas-fn"
    managed_namespaces: list[str] = []
    secret_store_backend: str = "memory"
    secret_store_url: str = "sqlite:///./secrets.db"


settings = Settings()
