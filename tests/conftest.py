import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from bookshelf.database import Database
from bookshelf.main import create_app


@pytest.fixture
def database():
    # One shared in-memory connection so every session sees the same tables
    db = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield db
    db.dispose()


@pytest.fixture
def client(database):
    app = create_app(database=database)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_book(client):
    def _make_book(title="A", content="x"):
        r = client.post("/books", json={"title": title, "content": content})
        assert r.status_code == 201, r.text
        return r.json()["id"]

    return _make_book


@pytest.fixture
def make_chapter(client):
    def _make_chapter(book_id, title="C1", content="y"):
        r = client.post(f"/books/{book_id}/chapters", json={"title": title, "content": content})
        assert r.status_code == 200, r.text
        return r.json()["id"]

    return _make_chapter
