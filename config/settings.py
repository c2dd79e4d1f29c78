# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.constants import ExternalURIs
from util.enums import Environment
import logging


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()

_log = logging.getLogger("config.settings")


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(..., validation_alias="APP_ENV")
    REDIS_URL: str = Field(..., validation_alias="REDIS_URL")
    HOST: str = Field(default="0.0.0.0", validation_alias="HOST")
    PORT: int = Field(default=8000, validation_alias="PORT")

    # CORS
    ALLOWED_ORIGIN: str = Field(..., validation_alias="ALLOWED_ORIGIN")

    # OpenSearch
    TITLE: str = Field(default="Search", validation_alias="TITLE")
    FQDN: str = Field(default="localhost:8000", validation_alias="FQDN")

    # Redirect targets
    DEFAULT_URL: str = Field(
        default=ExternalURIs.DEFAULT_URL, validation_alias="DEFAULT_URL"
    )
    SUGGEST_URL: str = Field(
        default=ExternalURIs.DEFAULT_SUGGEST_URL, validation_alias="SUGGEST_URL"
    )
    SUGGEST_TIMEOUT_SECONDS: float = Field(
        default=5.0, validation_alias="SUGGEST_TIMEOUT_SECONDS"
    )

    # First start
    SEED_DEFAULT_BOOKMARKS: bool = Field(
        default=True, validation_alias="SEED_DEFAULT_BOOKMARKS"
    )

    # Logging knobs
    LOGGER_NAME: str = "hoplinks"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
