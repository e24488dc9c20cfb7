"""
Settings for safescript, read from ``SAFESCRIPT_*`` environment variables
(or a ``.env`` file in the working directory).
"""

import logging

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SAFESCRIPT_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Off: the default bridge has no policy factory and always yields plain text.
    TRUSTED_TYPES_ENABLED: bool = True
    TRUSTED_TYPES_POLICY_NAME: str = "safescript"
    # Comma-separated allow-list for the default factory; empty allows any name.
    TRUSTED_TYPES_ALLOWED_POLICIES: str = ""

    LOG_LEVEL: str = "WARNING"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def script_policy_name(self) -> str:
        return f"{self.TRUSTED_TYPES_POLICY_NAME}#script"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def allowed_policy_names(self) -> list[str] | None:
        raw = (self.TRUSTED_TYPES_ALLOWED_POLICIES or "").strip()
        if not raw:
            return None
        return [s.strip() for s in raw.split(",") if s.strip()]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Set the ``safescript`` logger level (defaults to ``settings.LOG_LEVEL``).

    No handlers are installed; the application owns logging output.
    """
    logging.getLogger("safescript").setLevel((level or settings.LOG_LEVEL).upper())
