"""Application configuration via pydantic-settings.

Loads all settings from environment variables (or a local ``.env``).  Every
Azure setting defaults to an empty string so that importing the module never
fails; ``Settings.require_complete()`` is the fail-fast check that runs once
before the server accepts connections.

A global ``settings`` singleton is available for import throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from resume_backend.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Blob storage: either a full connection string or an account/key pair
    AZURE_STORAGE_CONNECTION_STRING: str = ""
    BLOB_ACCOUNT: str = ""
    BLOB_KEY: str = ""
    BLOB_ENDPOINT_SUFFIX: str = "core.windows.net"
    CONTAINER_NAME: str = ""

    # Cosmos DB
    COSMOS_URI: str = ""
    COSMOS_KEY: str = ""
    DATABASE_NAME: str = ""
    CONTAINER_DB: str = ""

    # Outbound calls
    STORAGE_TIMEOUT_SECONDS: int = 30
    SIGNED_URL_TTL_MINUTES: int = 10

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 80

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def storage_connection_string(self) -> str:
        """Connection string for blob storage, built from the account pair if needed."""
        if self.AZURE_STORAGE_CONNECTION_STRING:
            return self.AZURE_STORAGE_CONNECTION_STRING
        return (
            "DefaultEndpointsProtocol=https;"
            f"AccountName={self.BLOB_ACCOUNT};"
            f"AccountKey={self.BLOB_KEY};"
            f"EndpointSuffix={self.BLOB_ENDPOINT_SUFFIX}"
        )

    def missing_settings(self) -> list[str]:
        """Return the name of every required setting that is not set."""
        missing: list[str] = []
        if not self.AZURE_STORAGE_CONNECTION_STRING and not (
            self.BLOB_ACCOUNT and self.BLOB_KEY
        ):
            missing.append("AZURE_STORAGE_CONNECTION_STRING or (BLOB_ACCOUNT and BLOB_KEY)")
        for name in ("CONTAINER_NAME", "COSMOS_URI", "COSMOS_KEY", "DATABASE_NAME", "CONTAINER_DB"):
            if not getattr(self, name):
                missing.append(name)
        return missing

    def require_complete(self) -> None:
        """Raise ``ConfigurationError`` naming every missing required setting."""
        missing = self.missing_settings()
        if missing:
            raise ConfigurationError(
                "Missing required environment variables: " + ", ".join(missing),
                operation="startup.config",
                details={"missing": missing},
            )


settings = Settings()
