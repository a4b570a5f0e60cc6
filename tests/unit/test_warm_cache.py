"""Tests for the cache warm-up script."""

import pytest

import warm_cache
from app.repositories import FileCacheRepository, survey_key
from settings import AppConfig, CacheConfig
from survey_client import RemoteError
from tests.factories import FakeSurveyClient


@pytest.fixture
def config(tmp_path):
    return AppConfig(cache=CacheConfig(backend="file", root=tmp_path / "cache"))


def _use_client(monkeypatch, client):
    monkeypatch.setattr(warm_cache, "SurveyMonkeyClient", lambda api: client)


class TestWarm:
    async def test_refreshes_list_and_every_listed_survey(self, monkeypatch, config):
        client = FakeSurveyClient()
        _use_client(monkeypatch, client)

        assert await warm_cache.warm(None, list_only=False, force=False, config=config) is True

        cache = FileCacheRepository(config.cache.root)
        assert cache.get(survey_key("1")) is not None
        assert cache.get(survey_key("3")) is not None
        assert client.calls["get_survey_details"] == 2

    async def test_list_only(self, monkeypatch, config):
        client = FakeSurveyClient()
        _use_client(monkeypatch, client)

        assert await warm_cache.warm(None, list_only=True, force=False, config=config) is True
        assert "get_survey_details" not in client.calls

    async def test_unusable_listed_id_does_not_abort_run(self, monkeypatch, config):
        client = FakeSurveyClient(titles=["Staff A", "Staff B", "Staff C"], survey_ids=["1", "bad.id", "3"])
        _use_client(monkeypatch, client)

        ok = await warm_cache.warm(None, list_only=False, force=True, config=config)

        assert ok is False
        assert client.calls["get_survey_details"] == 2
        cache = FileCacheRepository(config.cache.root)
        assert cache.get(survey_key("3")) is not None

    async def test_failed_survey_refresh_is_reported(self, monkeypatch, config):
        client = FakeSurveyClient(fail_with=RemoteError("down", status_code=503, retryable=True))
        _use_client(monkeypatch, client)

        assert await warm_cache.warm(["100", "200"], list_only=False, force=False, config=config) is False
        assert client.calls["get_survey_details"] == 2
