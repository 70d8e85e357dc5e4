from __future__ import annotations

from pathlib import Path
from dotenv import load_dotenv

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file explicitly
ENV_FILE_NAME = ".env"
env_path = Path(__file__).parent.parent.parent / ENV_FILE_NAME
load_dotenv(env_path, override=False)

# Every packaged table must define exactly these locales
SUPPORTED_LOCALES = ("zh-TW", "en", "ja")


class Settings(BaseSettings):
    DEFAULT_LANG: str = "en"
    STRICT_LOCALES: bool = True
    DEBUG: bool = False
    LOG_FILE: bool = False

    @field_validator("DEFAULT_LANG", mode="before")
    @classmethod
    def check_default_lang(cls, v):  # type: ignore
        if v in (None, ""):
            return "en"
        v = str(v).strip()
        if v not in SUPPORTED_LOCALES:
            raise ValueError(
                f"DEFAULT_LANG must be one of {', '.join(SUPPORTED_LOCALES)}, got {v!r}"
            )
        return v

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
