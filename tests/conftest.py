"""Shared fixtures."""

import pytest

from app.repositories import FileCacheRepository
from survey_client import RemoteError
from tests.factories import Clock, FakeSurveyClient


@pytest.fixture
def fake_client():
    return FakeSurveyClient()


@pytest.fixture
def failing_client():
    return FakeSurveyClient(fail_with=RemoteError("boom", status_code=503, retryable=True))


@pytest.fixture
def cache_repo(tmp_path):
    return FileCacheRepository(tmp_path / "cache")


@pytest.fixture
def clock():
    return Clock()
