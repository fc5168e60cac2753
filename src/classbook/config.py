"""Settings from the environment (.env supported) and service wiring."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from classbook.application import PersonService
from classbook.infrastructure import InMemoryPersonRepository

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    default_region: str | None = None
    log_level: str = "INFO"


def load_dotenv_file() -> Path | None:
    """Load .env from repo root or from the working directory, whichever is found first."""
    for path in (
        Path(__file__).resolve().parent.parent.parent / ".env",
        Path.cwd() / ".env",
    ):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings() -> Settings:
    load_dotenv_file()
    region = os.environ.get("CLASSBOOK_DEFAULT_REGION", "").strip().upper() or None
    level = os.environ.get("CLASSBOOK_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    return Settings(default_region=region, log_level=level)


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format=LOG_FORMAT, level=level)


def build_service(settings: Settings | None = None) -> PersonService:
    """Wire an in-memory repository into a PersonService."""
    settings = settings or load_settings()
    configure_logging(settings)
    logger.info("Phone default region: %s", settings.default_region or "none")
    return PersonService(repository=InMemoryPersonRepository(default_region=settings.default_region))
