def test_sync_recreates_empty_tables(client, make_book, make_chapter):
    book_id = make_book()
    make_chapter(book_id)

    r = client.get("/sync")
    assert r.status_code == 201
    assert r.json() == {"message": "tables created"}

    assert client.get("/books").json() == []
    assert client.get(f"/books/{book_id}").status_code == 404


def test_sync_accepts_post(client, make_book):
    make_book()

    r = client.post("/sync")
    assert r.status_code == 201
    assert client.get("/books").json() == []


def test_ids_restart_after_sync(client, make_book):
    make_book()
    make_book()
    client.get("/sync")

    assert make_book() == 1
