import logging
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "kundali-core"
    ENV: str = "local"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ─── Ephemeris ────────────────────────
    # Directory of Swiss Ephemeris .se1 files. When unset pyswisseph
    # uses its built-in Moshier model.
    EPHEMERIS_PATH: Optional[str] = None
    USE_EPHEMERIS: bool = True
    RETROGRADE_SAMPLE_HOURS: float = 24.0

    # ─── Calculation ──────────────────────
    CALCULATION_VERSION: str = "v1"


    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()


def get_settings() -> Settings:
    return settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Apply the configured log level for hosts embedding the engine.
    """
    resolved = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
