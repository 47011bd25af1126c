"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

import datetime
from pathlib import Path
from typing import List, Optional
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "InOut Cycle"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["InOut Cycle contributors"]

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Shared storage namespace (must match in the app and in the widget)
    APP_GROUP_ID: str = "group.com.example.InOutWidget"
    CYCLE_START_DATE_KEY: str = "cycleStartDate"
    TIMELINE_RELOAD_KEY: str = "timelineReloadRequestedAt"

    # Root directory holding one container per app group
    SHARED_CONTAINER_ROOT: Path = Path.home() / ".local" / "share" / "inout-cycle"

    # Explicit database URL, overrides the app group container
    DATABASE_URL: Optional[str] = None

    # Widget timeline
    TIMELINE_DAYS: int = 7

    # IANA zone name used for "local" calendar days; system zone if unset
    LOCAL_TIMEZONE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def shared_container_path(self) -> Path:
        """Directory of the app group container."""
        return self.SHARED_CONTAINER_ROOT / self.APP_GROUP_ID

    @property
    def database_url(self) -> str:
        """Database URL of the shared namespace."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.shared_container_path / 'shared_defaults.sqlite'}"

    @property
    def local_tz(self) -> Optional[datetime.tzinfo]:
        """Configured local zone, or ``None`` for the system zone."""
        if not self.LOCAL_TIMEZONE:
            return None
        return ZoneInfo(self.LOCAL_TIMEZONE)


# Global settings instance
settings = Settings()
