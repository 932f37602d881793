"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI

from pairing.api import create_api_application
from pairing.config import AppSettings, config_build_app_metadata, config_load_settings

logger = logging.getLogger(__name__)


def bootstrap_configure_logging(level_name: str) -> None:
    """Configure root logging for command-line and server runtimes.

    Args:
        level_name: Logging level name such as `INFO` or `DEBUG`.
    """

    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-validated settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    runtime_settings = settings if settings is not None else config_load_settings()
    local_metadata = config_build_app_metadata(runtime_settings)
    logger.info(
        "Loaded local app metadata name=%r url=%r redirect=%s",
        local_metadata.name,
        local_metadata.url,
        "present" if local_metadata.redirect is not None else "absent",
    )
    return create_api_application(settings=runtime_settings, local_metadata=local_metadata)
