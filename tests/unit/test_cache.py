"""Tests for cache repositories."""

import threading
from datetime import UTC, datetime, timedelta

import pytest

from app.repositories import (
    DbCacheRepository,
    FileCacheRepository,
    create_cache_repository,
    survey_key,
)
from settings import CacheConfig
from tests.factories import NOW


@pytest.fixture(params=["file", "duckdb"])
def repo(request, tmp_path):
    if request.param == "file":
        r = FileCacheRepository(tmp_path / "cache")
    else:
        r = DbCacheRepository(tmp_path / "cache.duckdb")
    yield r
    r.close()


class TestCacheContract:
    def test_missing_key(self, repo):
        assert repo.get("survey_list") is None
        assert repo.exists("survey_list") is False

    def test_put_then_get(self, repo):
        repo.put("survey_list", [{"id": "1", "title": "Staff"}])
        assert repo.get("survey_list") == [{"id": "1", "title": "Staff"}]
        assert repo.exists("survey_list") is True

    def test_overwrite_replaces_whole_document(self, repo):
        repo.put(survey_key("7"), {"details": {"id": "7"}, "data": [1, 2]})
        repo.put(survey_key("7"), {"details": {"id": "7"}})
        assert repo.get(survey_key("7")) == {"details": {"id": "7"}}

    def test_put_is_idempotent(self, repo):
        repo.put("survey_list", [])
        repo.put("survey_list", [])
        assert repo.get("survey_list") == []

    def test_delete(self, repo):
        repo.put("survey_list", [])
        repo.delete("survey_list")
        repo.delete("survey_list")
        assert repo.get("survey_list") is None

    def test_reader_never_sees_partial_write(self, repo):
        old = {"v": "a" * 200_000}
        new = {"v": "b" * 200_000}
        repo.put("survey_list", old)

        seen = []
        stop = threading.Event()

        def read():
            while not stop.is_set():
                seen.append(repo.get("survey_list"))

        reader = threading.Thread(target=read)
        reader.start()
        try:
            for i in range(30):
                repo.put("survey_list", new if i % 2 == 0 else old)
        finally:
            stop.set()
            reader.join()

        assert seen
        assert all(doc in (old, new) for doc in seen)

    def test_updated_at_missing_key(self, repo):
        assert repo.updated_at("survey_list") is None

    def test_updated_at_records_given_time(self, repo):
        repo.put("survey_list", [], NOW)
        assert abs(repo.updated_at("survey_list") - NOW) < timedelta(seconds=1)

    def test_updated_at_defaults_to_write_time(self, repo):
        before = datetime.now(UTC) - timedelta(seconds=1)
        repo.put("survey_list", [])
        assert repo.updated_at("survey_list") >= before

    @pytest.mark.parametrize("key", ["../etc/passwd", "surveys/../x", "", "a b", "/abs"])
    def test_invalid_keys(self, repo, key):
        with pytest.raises(ValueError):
            repo.get(key)


class TestFileCache:
    def test_layout(self, tmp_path):
        repo = FileCacheRepository(tmp_path)
        repo.put(survey_key("42"), {"details": {}})
        repo.put("survey_list", [])

        assert (tmp_path / "surveys" / "42.json").is_file()
        assert (tmp_path / "survey_list.json").is_file()
        assert not list(tmp_path.rglob("*.tmp"))

    def test_corrupt_document_is_a_miss(self, tmp_path):
        (tmp_path / "survey_list.json").write_text("{not json")
        assert FileCacheRepository(tmp_path).get("survey_list") is None



class TestCreateCacheRepository:
    def test_file_backend(self, tmp_path):
        repo = create_cache_repository(CacheConfig(backend="file", root=tmp_path))
        assert isinstance(repo, FileCacheRepository)

    def test_duckdb_backend(self, tmp_path):
        repo = create_cache_repository(CacheConfig(backend="duckdb", db_path=str(tmp_path / "c.duckdb")))
        assert isinstance(repo, DbCacheRepository)
        repo.close()

    def test_unknown_backend(self, tmp_path):
        with pytest.raises(ValueError):
            create_cache_repository(CacheConfig(backend="redis", root=tmp_path))
