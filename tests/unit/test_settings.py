"""Tests for configuration, logging and container wiring."""

from app.container import Container
from app.repositories import FileCacheRepository
from app.services.surveys.service import SurveyService
from settings import ApiConfig, AppConfig, CacheConfig
from settings.logging import _redact_secrets


class TestRedactSecrets:
    def test_masks_credentials(self, monkeypatch):
        monkeypatch.setattr("settings.logging.API_KEY", "sekret-key")
        record = {"message": "calling with sekret-key"}

        _redact_secrets(record)

        assert record["message"] == "calling with [REDACTED]"

    def test_empty_secret_ignored(self, monkeypatch):
        monkeypatch.setattr("settings.logging.API_KEY", "")
        monkeypatch.setattr("settings.logging.ACCESS_TOKEN", "")
        record = {"message": "nothing to hide"}

        _redact_secrets(record)

        assert record["message"] == "nothing to hide"


class TestApiConfig:
    def test_repr_hides_credentials(self):
        config = ApiConfig(api_key="k-123", access_token="t-456")
        assert "k-123" not in repr(config)
        assert "t-456" not in repr(config)


class TestContainer:
    async def test_init_and_shutdown(self, tmp_path):
        container = Container()
        config = AppConfig(
            api=ApiConfig(base_url="https://api.example.com/v2/surveys/", request_delay=0),
            cache=CacheConfig(backend="file", root=tmp_path / "cache"),
            stale_after=60,
        )

        container.init(config)
        await container.start()
        try:
            assert isinstance(container.surveys, SurveyService)
            assert isinstance(container._cache_repo, FileCacheRepository)
            assert (tmp_path / "cache").is_dir()
        finally:
            await container.shutdown()

        assert container._initialized is False
