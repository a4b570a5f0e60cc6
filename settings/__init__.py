"""Application settings."""

import os
from dataclasses import dataclass, field
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("SURVEY_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("SURVEY_LOG_LEVEL", "INFO")

# API
API_BASE_URL = os.getenv("SURVEY_API_BASE_URL", "https://api.surveymonkey.net/v2/surveys/")
API_KEY = os.getenv("SURVEY_API_KEY", "")
ACCESS_TOKEN = os.getenv("SURVEY_ACCESS_TOKEN", "")
API_TIMEOUT = float(os.getenv("SURVEY_API_TIMEOUT", "30"))
MAX_CONCURRENT = int(os.getenv("SURVEY_MAX_CONCURRENT", "2"))
REQUEST_DELAY = float(os.getenv("SURVEY_REQUEST_DELAY", "0.5"))

# Cache
CACHE_BACKEND = os.getenv("SURVEY_CACHE_BACKEND", "file")
CACHE_DIR = Path(os.getenv("SURVEY_CACHE_DIR", "cache"))
CACHE_DB_PATH = os.getenv("SURVEY_CACHE_DB", "survey_cache.duckdb")
STALE_AFTER = int(os.getenv("SURVEY_STALE_AFTER", "3600"))
REFRESH_ATTEMPTS = int(os.getenv("SURVEY_REFRESH_ATTEMPTS", "1"))


@dataclass(frozen=True)
class ApiConfig:
    """Upstream API connection settings."""

    base_url: str = API_BASE_URL
    api_key: str = API_KEY
    access_token: str = ACCESS_TOKEN
    timeout: float = API_TIMEOUT
    max_concurrent: int = MAX_CONCURRENT
    request_delay: float = REQUEST_DELAY

    def __repr__(self) -> str:
        return f"ApiConfig(base_url={self.base_url!r}, timeout={self.timeout}, max_concurrent={self.max_concurrent})"


@dataclass(frozen=True)
class CacheConfig:
    """Cache backend settings."""

    backend: str = CACHE_BACKEND
    root: Path = CACHE_DIR
    db_path: str = CACHE_DB_PATH


@dataclass(frozen=True)
class AppConfig:
    """Everything the container needs to wire the app."""

    api: ApiConfig = field(default_factory=ApiConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    stale_after: int = STALE_AFTER
    refresh_attempts: int = REFRESH_ATTEMPTS
