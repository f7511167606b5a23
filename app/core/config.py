"""UI strings configuration settings."""

from typing import Annotated, Any, Optional
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")


class I18nSettings(BaseSettings):
    """Locale preferences and translation resource location.

    Preferences (I18N_LOCALES):
    ---------------------------
    Ordered list of locale tags, most preferred first. Accepts a JSON list
    or a comma-separated string:

        I18N_LOCALES='["ja_JP", "en-US"]'
        I18N_LOCALES=ja_JP,en-US

    When empty, the POSIX ``LANGUAGE`` list (``zh_TW:zh``) is used, then
    ``LANG``.
    """

    LOCALES: Annotated[list[str], NoDecode] = Field(
        default_factory=list, alias="I18N_LOCALES"
    )
    LANGUAGE: str = Field(default="", alias="LANGUAGE")
    LANG: str = Field(default="", alias="LANG")
    LOCALE_FOLDER: str = Field(default="", alias="I18N_LOCALE_FOLDER")
    USE_ISOLATING: bool = Field(default=True, alias="I18N_USE_ISOLATING")

    @field_validator("LOCALES", mode="before")
    @classmethod
    def _parse_locales(cls, v: Optional[Any]) -> Any:
        """Parse I18N_LOCALES from a JSON list or a comma-separated string."""
        if v is None:
            return []

        if isinstance(v, (list, tuple)):
            return list(v)

        if isinstance(v, str):
            s = v.strip()
            if (s.startswith("'") and s.endswith("'")) or (
                s.startswith('"') and s.endswith('"')
            ):
                s = s[1:-1]
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid I18N_LOCALES JSON: {e} (value: {s[:80]}...)"
                    ) from e
            return [part.strip() for part in s.split(",") if part.strip()]

        raise ValueError("I18N_LOCALES must be a JSON list or a string")

    @property
    def preferences(self) -> list[str]:
        """Locale preferences, falling back to LANGUAGE and then LANG."""
        # local import: the i18n package imports these settings
        from infrastructure.i18n.resolvers import LocaleResolver

        if self.LOCALES:
            return list(self.LOCALES)
        preferences = LocaleResolver.preferences_from_env(
            self.LANGUAGE
        ) or LocaleResolver.preferences_from_env(self.LANG)
        if preferences:
            logger.debug(
                "locales_from_env",
                language=self.LANGUAGE,
                lang=self.LANG,
                preferences=preferences,
            )
        return preferences

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """UI strings configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
