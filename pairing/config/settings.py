"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pairing.domain import AppMetadata, InvalidLinkModeUniversalLinkError, Redirect


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the local identity record and API runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `app_redirect_link_mode` reads from `APP_REDIRECT_LINK_MODE`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
        app_name: Name presented to connected peers.
        app_description: Brief description presented to connected peers.
        app_url: Official domain of the app.
        app_icons: Icon URL strings, supplied as a JSON list.
        app_redirect_native: Optional native deep-link URL string.
        app_redirect_universal: Optional universal link URL string.
        app_redirect_link_mode: Whether peers must redirect through the universal link.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    app_name: str = Field(min_length=1)
    app_description: str = Field(default="")
    app_url: str = Field(min_length=1)
    app_icons: list[str] = Field(default_factory=list)
    app_redirect_native: str | None = Field(default=None)
    app_redirect_universal: str | None = Field(default=None)
    app_redirect_link_mode: bool = Field(default=False)

    @field_validator("app_name", "app_url")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        return _config_normalize_log_level(value)


class LoggingSettings(BaseSettings):
    """Minimal settings model used by command-line tooling.

    This model validates only the logging level so offline commands such as
    metadata file validation can run without the local identity settings.

    Attributes:
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        return _config_normalize_log_level(value)


def _config_normalize_log_level(value: str) -> str:
    normalized_value = value.strip().upper()
    if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
        raise ValueError("log_level must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
    return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_log_level() -> str:
    """Load and validate only the logging level setting.

    Returns:
        str: Upper-case logging level name.

    Raises:
        SettingsLoadError: Raised when the logging level is invalid.
    """

    try:
        return LoggingSettings().log_level
    except ValidationError as error:
        raise SettingsLoadError(
            f"Logging configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_build_app_metadata(settings: AppSettings) -> AppMetadata:
    """Build the local identity record from validated settings.

    Redirect links are omitted entirely when no redirect setting is supplied.

    Args:
        settings: Validated runtime settings.

    Returns:
        AppMetadata: Immutable local identity record.

    Raises:
        SettingsLoadError: Raised when redirect settings are inconsistent.
    """

    redirect = None
    if (
        settings.app_redirect_native is not None
        or settings.app_redirect_universal is not None
        or settings.app_redirect_link_mode
    ):
        try:
            redirect = Redirect(
                native=settings.app_redirect_native,
                universal=settings.app_redirect_universal,
                link_mode=settings.app_redirect_link_mode,
            )
        except InvalidLinkModeUniversalLinkError as error:
            raise SettingsLoadError(
                "Startup configuration validation failed. APP_REDIRECT_LINK_MODE requires APP_REDIRECT_UNIVERSAL."
            ) from error

    return AppMetadata(
        name=settings.app_name,
        description=settings.app_description,
        url=settings.app_url,
        icons=tuple(settings.app_icons),
        redirect=redirect,
    )


def config_load_app_metadata() -> AppMetadata:
    """Load settings and build the local identity record in one step.

    Returns:
        AppMetadata: Immutable local identity record.

    Raises:
        SettingsLoadError: Raised when settings are missing, invalid or inconsistent.
    """

    return config_build_app_metadata(config_load_settings())
