def _create_book(client, title="Dune", author="Herbert"):
    rv = client.post("/books/", json={"title": title, "author": author})
    assert rv.status_code == 201
    return rv.get_json()["id"]


def _create_reader(client, name="Ana", phone="555-0001"):
    rv = client.post("/readers/", json={"name": name, "phone": phone})
    assert rv.status_code == 201
    return rv.get_json()["id"]


def test_health(client):
    assert client.get("/health").get_json() == {"ok": True}


def test_book_crud(client):
    book_id = _create_book(client)

    rv = client.get(f"/books/{book_id}")
    assert rv.get_json()["data"] == {"id": book_id, "title": "Dune", "author": "Herbert", "status": "AVAILABLE"}

    rv = client.patch(f"/books/{book_id}", json={"title": "Dune Messiah", "author": None})
    assert rv.status_code == 200
    assert rv.get_json()["data"]["author"] == "Herbert"
    assert rv.get_json()["data"]["title"] == "Dune Messiah"

    assert len(client.get("/books/").get_json()["data"]) == 1

    assert client.delete(f"/books/{book_id}").status_code == 200
    assert client.get(f"/books/{book_id}").status_code == 404


def test_create_book_missing_field(client):
    rv = client.post("/books/", json={"title": "Dune"})
    assert rv.status_code == 400
    assert rv.get_json()["success"] is False


def test_duplicate_reader_returns_409(client):
    _create_reader(client)
    rv = client.post("/readers/", json={"name": "Ana", "phone": "555-0002"})
    assert rv.status_code == 409
    assert rv.get_json()["success"] is False


def test_rename_reader_to_taken_name(client):
    first = _create_reader(client, "Bruno", "555-0002")
    _create_reader(client, "Ana")

    rv = client.put(f"/readers/{first}", json={"name": "Ana"})
    assert rv.status_code == 409
    assert client.get(f"/readers/{first}").get_json()["data"]["name"] == "Bruno"


def test_loan_flow(client):
    book_id = _create_book(client)
    ana = _create_reader(client, "Ana")
    bia = _create_reader(client, "Bia")

    rv = client.post("/loans/", json={"book_id": book_id, "reader_id": ana})
    assert rv.status_code == 201
    due = rv.get_json()["due_date"]
    assert client.get(f"/books/{book_id}").get_json()["data"]["status"] == "LOANED"

    rv = client.post("/loans/", json={"book_id": book_id, "reader_id": bia})
    assert rv.status_code == 409
    assert due in rv.get_json()["message"]

    assert client.delete(f"/books/{book_id}").status_code == 409
    assert client.delete(f"/readers/{ana}").status_code == 409
    assert len(client.get("/loans/").get_json()["data"]) == 1

    rv = client.post(f"/loans/return/{book_id}")
    assert rv.get_json() == {"success": True, "returned": True}
    assert client.get(f"/books/{book_id}").get_json()["data"]["status"] == "AVAILABLE"

    rv = client.post(f"/loans/return/{book_id}")
    assert rv.status_code == 200
    assert rv.get_json()["returned"] is False

    assert client.delete(f"/books/{book_id}").status_code == 200


def test_borrow_requires_ids(client):
    rv = client.post("/loans/", json={"book_id": 1})
    assert rv.status_code == 400

    rv = client.post("/loans/", json={"book_id": "abc", "reader_id": 1})
    assert rv.status_code == 400


def test_borrow_unknown_book(client):
    reader_id = _create_reader(client)
    rv = client.post("/loans/", json={"book_id": 99, "reader_id": reader_id})
    assert rv.status_code == 404


def test_non_object_bodies_are_rejected(client):
    book_id = _create_book(client)
    reader_id = _create_reader(client)

    assert client.patch(f"/books/{book_id}", json=[1, 2]).status_code == 400
    assert client.put(f"/readers/{reader_id}", json=["Ana"]).status_code == 400
    assert client.post("/books/", json=["Dune", "Herbert"]).status_code == 400
    assert client.post("/readers/", json=["Ana"]).status_code == 400
    assert client.post("/loans/", json=[book_id, reader_id]).status_code == 400

    assert client.get(f"/books/{book_id}").get_json()["data"]["title"] == "Dune"
