# geowoot/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    app_name: str = Field(default="geowoot", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Upstreams
    metadata_base: str = Field(default="https://geometas.com", alias="METADATA_BASE")
    nominatim_base: str = Field(default="https://nominatim.openstreetmap.org", alias="NOMINATIM_BASE")
    user_agent: str = Field(default="MapViewerApp/1.0", alias="USER_AGENT")
    # certificate checks on the metadata site stay off unless enabled
    metadata_verify_tls: bool = Field(default=False, alias="METADATA_VERIFY_TLS")
    http_timeout_seconds: float = Field(default=30.0, alias="HTTP_TIMEOUT_SECONDS")

    # Userscript: origin the script posts back to (request origin when unset)
    public_base_url: str | None = Field(default=None, alias="PUBLIC_BASE_URL")

    # Poller
    poller_base_url: str = Field(default="http://localhost:8000", alias="POLLER_BASE_URL")
    poll_interval_seconds: float = Field(default=2.0, alias="POLL_INTERVAL_SECONDS")
    move_threshold_deg: float = Field(default=0.09, alias="MOVE_THRESHOLD_DEG")

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[1] / ".env"),  # geowoot/.env
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

settings = Settings()
