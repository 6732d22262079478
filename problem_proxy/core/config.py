"""
Application configuration.

Loads settings from environment variables and .env file.
The Settings value is immutable once loaded and is passed explicitly
into the application factory and the upstream client.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

TABLE_API_PATH = "/api/now/table"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        servicenow_url: Base URL of the ServiceNow instance.
        servicenow_user: Basic-auth username for the Table API.
        servicenow_password: Basic-auth password for the Table API.

    Credentials are not validated at startup. An empty value surfaces
    as a failed upstream call on the first request that needs it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    project_name: str = "Problem Proxy"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    servicenow_url: str = ""
    servicenow_user: str = ""
    servicenow_password: str = ""

    def missing_credentials(self) -> list[str]:
        """Return the environment names of empty ServiceNow settings."""
        values = {
            "SERVICENOW_URL": self.servicenow_url,
            "SERVICENOW_USER": self.servicenow_user,
            "SERVICENOW_PASSWORD": self.servicenow_password,
        }
        return [name for name, value in values.items() if not value]

    def table_api_url(self, table: str, record_id: str | None = None) -> str:
        """Build the Table API URL for a table and optional record.

        Args:
            table: Upstream table name, e.g. ``problem``.
            record_id: Optional record identifier (sys_id).

        Returns:
            ``{servicenow_url}/api/now/table/{table}[/{record_id}]``
        """
        url = f"{self.servicenow_url.rstrip('/')}{TABLE_API_PATH}/{table}"
        if record_id is not None:
            url = f"{url}/{record_id}"
        return url


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
