from __future__ import annotations


def test_create_user_normalizes_email_and_defaults_purchases(client):
    response = client.post("/users", json={"name": "Jane", "email": "Jane.Doe+books@GMail.com"})
    assert response.status_code == 201
    assert response.json() == {"id": 1, "name": "Jane", "email": "janedoe@gmail.com", "purchasedBooks": []}


def test_create_user_with_invalid_email_is_rejected(client):
    response = client.post("/users", json={"name": "Bob", "email": "not-an-email"})
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert [e["field"] for e in errors] == ["email"]
    assert errors[0]["message"] == "Invalid email format"
    assert client.get("/users").json() == []


def test_create_user_requires_name_and_list_of_purchases(client):
    response = client.post("/users", json={"email": "bob@example.com", "purchasedBooks": 3})
    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"field": "name", "message": "Name is required"},
        {"field": "purchasedBooks", "message": "Purchased books should be an array"},
    ]


def test_purchased_books_may_reference_unknown_books(client):
    response = client.post("/users", json={"name": "Bob", "email": "bob@example.com", "purchasedBooks": [404]})
    assert response.status_code == 201
    assert response.json()["purchasedBooks"] == [404]


def test_update_user_requires_name_and_email(client):
    created = client.post("/users", json={"name": "Bob", "email": "bob@example.com"}).json()
    response = client.put(f"/users/{created['id']}", json={"name": "Robert"})
    assert response.status_code == 400
    assert response.json()["message"] == "Name and email are required"
    assert client.get(f"/users/{created['id']}").json() == created


def test_update_user_does_not_revalidate_email(client):
    created = client.post("/users", json={"name": "Bob", "email": "bob@example.com", "purchasedBooks": [1]}).json()
    response = client.put(f"/users/{created['id']}", json={"name": "Robert", "email": "Robert@Example.com"})
    assert response.status_code == 200
    assert response.json() == {"id": created["id"], "name": "Robert", "email": "Robert@Example.com"}


def test_user_crud_not_found(client):
    assert client.get("/users/1").status_code == 404
    assert client.put("/users/1", json={"name": "a", "email": "a@example.com"}).status_code == 404
    assert client.delete("/users/1").json() == {"error": True, "code": "not_found", "message": "User not found"}


def test_delete_missing_user_leaves_collection_unchanged(client):
    client.post("/users", json={"name": "A", "email": "a@example.com"})
    before = client.get("/users").json()
    assert len(before) == 1
    response = client.delete("/users/7")
    assert response.status_code == 404
    assert client.get("/users").json() == before


def test_delete_user(client):
    first = client.post("/users", json={"name": "A", "email": "a@example.com"}).json()
    second = client.post("/users", json={"name": "B", "email": "b@example.com"}).json()
    assert client.delete(f"/users/{first['id']}").json() == [first]
    assert client.get("/users").json() == [second]
