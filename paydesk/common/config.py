"""Central environment-driven settings for the transaction form service.

The process loads this once at startup. Behavior is controlled by environment
variables (see `.env.example`).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "transaction-form"
    log_level: str = "INFO"
    submit_url: str = "https://jsonplaceholder.typicode.com/posts"
    submit_timeout_seconds: float = 5.0
    otel_exporter_otlp_endpoint: str = ""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = CommonSettings()
