"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.repositories import BaseCacheRepository, create_cache_repository
from app.services.surveys.service import SurveyService
from settings import AppConfig
from survey_client import SurveyMonkeyClient


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, config: AppConfig | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        config = config or AppConfig()

        # Client and repository (singletons)
        self._client = SurveyMonkeyClient(config.api)
        self._cache_repo: BaseCacheRepository = create_cache_repository(config.cache)

        # Services (with injected client and repo)
        self.surveys = SurveyService(
            client=self._client,
            cache_repo=self._cache_repo,
            stale_after=config.stale_after,
            refresh_attempts=config.refresh_attempts,
        )

        self._initialized = True
        logger.info("Container initialized: cache={}, {}", config.cache.backend, config.api)

    async def start(self) -> None:
        """Open network resources."""
        await self._client.open()

    async def shutdown(self) -> None:
        """Close network and storage resources."""
        if not self._initialized:
            return
        await self._client.aclose()
        self._cache_repo.close()
        self._initialized = False
        logger.info("Container shut down")


# Global container instance
container = Container()
