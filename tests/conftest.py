"""Shared fixtures: temporary stores and an API client bound to one."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from string_analyzer.main import app
from string_analyzer.store import JsonFileStore, SqlRecordStore, get_store


@pytest.fixture
def json_store(tmp_path: Path) -> JsonFileStore:
    return JsonFileStore(str(tmp_path / "data.json"))


@pytest.fixture
def sql_store(tmp_path: Path) -> SqlRecordStore:
    store = SqlRecordStore(f"sqlite:///{tmp_path / 'strings.db'}")
    yield store
    store.engine.dispose()


@pytest.fixture
def client(json_store: JsonFileStore):
    """TestClient whose requests all use the temporary JSON store."""
    app.dependency_overrides[get_store] = lambda: json_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
