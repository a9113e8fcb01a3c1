import logging
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    state_file: Path = Path.home() / ".socroi" / "state.json"
    assumptions_file: Optional[Path] = None
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SOCROI_"


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())
