"""Application configuration and logging setup."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

# Root of the package, data files are resolved relative to it
DATA_ROOT = Path(__file__).resolve().parent.parent

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "legal_workbench"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    app_name: str = "Legal Triage Workbench"
    debug: bool = False
    log_level: str = "INFO"

    # Triage defaults
    default_jurisdiction: str = "Ontario"
    gap_threshold_days: int = 7

    # Retention
    default_retention_days: int = 60

    # Data files
    authorities_file: str = str(DATA_ROOT / "authority" / "data" / "authorities.yaml")
    templates_dir: str = str(DATA_ROOT / "templates" / "data")
    forms_file: str = str(DATA_ROOT / "templates" / "data" / "forms" / "ontario_forms.yaml")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "WORKBENCH_",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure logging from settings. ``debug`` forces DEBUG.

    The root handler is only installed if none exists; the package logger
    level is always applied.
    """
    settings = get_settings()
    level = (level or ("DEBUG" if settings.debug else settings.log_level)).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
