from fastapi.testclient import TestClient

from bookshelf.main import create_app


def test_index_page_is_served(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert "Bookshelf" in r.text


def test_missing_static_file(client):
    assert client.get("/missing.txt").status_code == 404


def test_custom_static_directory(tmp_path, database):
    (tmp_path / "hello.txt").write_text("hi there")
    app = create_app(database=database, static_dir=str(tmp_path))

    with TestClient(app) as client:
        r = client.get("/hello.txt")
        assert r.status_code == 200
        assert r.text == "hi there"
        # API routes win over the static mount
        assert client.get("/books").json() == []
