"""
Pytest configuration and fixtures for directory API tests
"""

import pytest
from fastapi.testclient import TestClient

from directory_api.app.core.config import Settings
from directory_api.app.factory import create_app
from directory_api.app.schemas.user import UserRecord
from directory_api.app.services.record_store import RecordStore


@pytest.fixture
def users():
    """The three seed users, in insertion order"""
    return [
        UserRecord(first_name="Hasbi", last_name="Qohar", city="JKT"),
        UserRecord(first_name="Hadi", last_name="Mustofa", city="MDN"),
        UserRecord(first_name="Haqi", last_name="Muttaqin", city="MDN"),
    ]


@pytest.fixture
def store(users) -> RecordStore:
    return RecordStore(users)


@pytest.fixture
def serve_dir(tmp_path):
    """A serve directory with one portfolio page and one static asset"""
    (tmp_path / "portfolio").mkdir()
    (tmp_path / "portfolio" / "index.html").write_text("<h1>portfolio</h1>", encoding="utf-8")
    (tmp_path / "static").mkdir()
    (tmp_path / "static" / "style.css").write_text("body { color: red; }", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client(store, serve_dir):
    app = create_app(store=store, settings=Settings(), serve_dir=str(serve_dir))
    with TestClient(app) as test_client:
        yield test_client
