"""Text domain engine configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class L10nSettings(BaseSettings):
    """Catalog loading and lookup configuration settings.

    Environment Variables:
        L10N_LOCALES_DIR: Directory holding <domain>.<locale>.yml catalogs
        L10N_LOCALE: Locale catalogs are loaded for (default: en-US)
        L10N_DEFAULT_DOMAIN: Domain used when a lookup names none
        L10N_JIT_LOADING: Load absent domains on first lookup (default: True)
        L10N_PRELOAD_DOMAINS: JSON list of domains loaded at startup
    """

    LOCALES_DIR: str = Field(default="./locales", alias="L10N_LOCALES_DIR")
    LOCALE: str = Field(default="en-US", alias="L10N_LOCALE")
    DEFAULT_DOMAIN: str = Field(default="default", alias="L10N_DEFAULT_DOMAIN")
    JIT_LOADING: bool = Field(default=True, alias="L10N_JIT_LOADING")
    PRELOAD_DOMAINS: list[str] = Field(
        default_factory=list, alias="L10N_PRELOAD_DOMAINS"
    )

    @field_validator("LOCALES_DIR", mode="before")
    @classmethod
    def strip_locales_dir(cls, v: str) -> str:
        """Strip surrounding whitespace from the locales directory."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("LOCALE", "DEFAULT_DOMAIN")
    @classmethod
    def require_non_empty(cls, v: str) -> str:
        """Reject empty locale and domain names.

        Args:
            cls: The class itself.
            v: The configured value.

        Returns:
            The value with surrounding whitespace removed.

        Raises:
            ValueError: If the value is empty.
        """
        v = v.strip()
        if not v:
            raise ValueError("value must not be empty")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Text domain engine configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    l10n: L10nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "l10n": L10nSettings,
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
