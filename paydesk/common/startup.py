"""Startup-time helper that logs the effective settings with secrets redacted."""

from pydantic_settings import BaseSettings

from paydesk.common.logging import logger

SECRET_MARKERS = ("key", "secret", "password", "token")


def redacted_config(config: BaseSettings) -> dict[str, object]:
    """Effective settings keyed by env var name, hiding secret-like values."""

    view: dict[str, object] = {}
    for name, value in config.model_dump().items():
        if any(marker in name for marker in SECRET_MARKERS):
            value = "<redacted>"
        view[name.upper()] = value
    return view


def log_startup_config(config: BaseSettings) -> None:
    """Log the resolved configuration once at process start."""

    logger.info("startup_config=%s", redacted_config(config))
