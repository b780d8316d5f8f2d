from pathlib import Path
from typing import Dict, List

from pydantic_settings import BaseSettings, SettingsConfigDict

from mdblog.schemas.blog import Author


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    POSTS_DIR: str = "posts"

    # Site
    SITE_URL: str = ""
    SITE_NAME: str = "My Blog"
    DEFAULT_AUTHOR: str = "Blog Author"
    DEFAULT_LANG: str = "en"
    TWITTER_HANDLE: str = ""
    DEFAULT_OG_IMAGE: str = ""
    # JSON in the environment, e.g. AUTHORS='[{"name": "Jane Doe", "twitter": "@jane"}]'
    AUTHORS: List[Author] = []
    ALTERNATE_LANGUAGES: Dict[str, str] = {}

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def site_url(self) -> str:
        return self.SITE_URL or "http://localhost:3000"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
