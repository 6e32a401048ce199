"""Application settings loaded from the environment.

Uses pydantic-settings; every field can be set through an MSG_CATALOG_*
variable or a local .env file (e.g. MSG_CATALOG_CATALOG_DSN).
"""

from pydantic import Field, PostgresDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the message catalog (stores, formatting, interceptors)."""

    model_config = SettingsConfigDict(env_prefix="MSG_CATALOG_", env_file=".env", extra="ignore")

    app_name: str = Field(default="Message Catalog")

    custom_messages_path: str | None = Field(None, description="JSON catalog overriding the defaults")
    custom_store_paths: list[str] = Field(default_factory=list, description="Further JSON catalogs, last wins")
    catalog_dsn: PostgresDsn | None = Field(None, description="Database holding a messages table")
    catalog_table: str = Field("messages", description="Table read by the database store")
    store_load_timeout: float | None = Field(None, description="Seconds to wait for each store")

    warning_status_code: int = Field(200, description="Status for Warning messages without one")
    formatter_preset: str = Field("default", description="Global formatter options preset")

    auto_add_correlation_id: bool = Field(True)
    generate_correlation_id: bool = Field(False, description="Generate an id when the request has none")
    auto_enrich_metadata: bool = Field(False)
    include_request_path: bool = Field(True)
    include_request_method: bool = Field(True)
    include_user_agent: bool = Field(False)
    include_ip_address: bool = Field(False)
    include_user_id: bool = Field(False)
    include_user_name: bool = Field(False)

    auto_log: bool = Field(False, description="Log every formatted message")
    log_minimum_level: str = Field("WARNING", description="Lowest level the logging interceptor emits")


def get_settings() -> Settings:
    """Return the loaded settings instance."""
    return Settings()
