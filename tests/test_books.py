from bookshelf.models.models import Chapter


def test_list_books_empty(client):
    r = client.get("/books")
    assert r.status_code == 200
    assert r.json() == []


def test_create_then_fetch_book(client):
    r = client.post("/books", json={"title": "A", "content": "x"})
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "book created"

    r = client.get(f"/books/{body['id']}")
    assert r.status_code == 200
    book = r.json()
    assert book["id"] == body["id"]
    assert book["title"] == "A"
    assert book["content"] == "x"
    assert book["chapters"] == []
    assert isinstance(book["createdAt"], int)


def test_list_books_in_creation_order(client, make_book):
    make_book("first")
    make_book("second")

    titles = [b["title"] for b in client.get("/books").json()]
    assert titles == ["first", "second"]
    # Listing does not embed chapters
    assert "chapters" not in client.get("/books").json()[0]


def test_get_missing_book(client):
    r = client.get("/books/42")
    assert r.status_code == 404
    assert r.json() == {"message": "not found"}


def test_update_book_only_touches_title_and_content(client, make_book):
    book_id = make_book("A", "x")
    before = client.get(f"/books/{book_id}").json()

    r = client.put(
        f"/books/{book_id}",
        json={"title": "B", "id": 999, "createdAt": 0, "author": "someone"},
    )
    assert r.status_code == 202
    assert r.json() == {"message": "accepted"}

    after = client.get(f"/books/{book_id}").json()
    assert after["id"] == book_id
    assert after["title"] == "B"
    # Fields missing from the body are left alone
    assert after["content"] == "x"
    assert after["createdAt"] == before["createdAt"]
    assert "author" not in after
    assert client.get("/books/999").status_code == 404


def test_update_missing_book(client):
    r = client.put("/books/7", json={"title": "B"})
    assert r.status_code == 404
    assert r.json() == {"message": "not found"}


def test_delete_book(client, make_book):
    book_id = make_book()

    r = client.delete(f"/books/{book_id}")
    assert r.status_code == 202
    assert r.json() == {"message": "accepted"}
    assert client.get(f"/books/{book_id}").status_code == 404


def test_delete_missing_book(client):
    r = client.delete("/books/3")
    assert r.status_code == 404
    assert r.json() == {"message": "not found"}


def test_delete_book_removes_its_chapters(client, database, make_book, make_chapter):
    doomed = make_book("doomed")
    kept = make_book("kept")
    make_chapter(doomed, "one")
    make_chapter(doomed, "two")
    survivor = make_chapter(kept, "three")

    assert client.delete(f"/books/{doomed}").status_code == 202

    with database.session() as db:
        remaining = db.query(Chapter).all()
        assert [c.id for c in remaining] == [survivor]


def test_malformed_json_body(client):
    r = client.post("/books", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["message"] == "invalid request"


def test_wrong_field_type(client):
    r = client.post("/books", json={"title": {"nested": True}})
    assert r.status_code == 400
    assert r.json()["message"] == "invalid request"
    assert r.json()["errors"]


def test_non_integer_book_id(client):
    r = client.get("/books/abc")
    assert r.status_code == 400
    assert r.json()["message"] == "invalid request"


def test_numbers_are_stored_as_text(client):
    r = client.post("/books", json={"title": 123, "content": 4.5})
    assert r.status_code == 201
    book_id = r.json()["id"]

    book = client.get(f"/books/{book_id}").json()
    assert book["title"] == "123"
    assert book["content"] == "4.5"

    assert client.put(f"/books/{book_id}", json={"title": 7}).status_code == 202
    assert client.get(f"/books/{book_id}").json()["title"] == "7"


def test_empty_body_creates_blank_book(client):
    r = client.post("/books", json={})
    assert r.status_code == 201

    book = client.get(f"/books/{r.json()['id']}").json()
    assert book["title"] is None
    assert book["content"] is None
