def create_user(client, headers, email="new@example.com", password="secret1"):
    return client.post("/users", json={"email": email, "password": password}, headers=headers)


def test_list_users_contains_seeded_user(client, auth_headers):
    resp = client.get("/users", headers=auth_headers)

    body = resp.json()
    assert body["message"] == "Users retrieved successfully"
    assert [u["email"] for u in body["data"]] == ["user@example.com"]


def test_create_user(client, auth_headers):
    resp = create_user(client, auth_headers)

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "User created successfully"
    assert body["data"]["email"] == "new@example.com"
    assert body["data"]["id"] > 0


def test_create_user_duplicate_email(client, auth_headers):
    create_user(client, auth_headers)

    resp = create_user(client, auth_headers)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Email already in use", "error_code": 400}


def test_create_user_invalid_email(client, auth_headers):
    resp = create_user(client, auth_headers, email="not-an-email")

    assert resp.status_code == 400
    assert resp.json()["message"].startswith("email:")


def test_create_user_short_password(client, auth_headers):
    resp = create_user(client, auth_headers, password="123")

    assert resp.status_code == 400
    assert "password" in resp.json()["message"]


def test_get_user_not_found(client, auth_headers):
    resp = client.get("/users/999", headers=auth_headers)

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "User not found", "error_code": 404}


def test_update_password_then_login(client, auth_headers):
    user_id = create_user(client, auth_headers).json()["data"]["id"]

    resp = client.put(f"/users/{user_id}", json={"password": "changed1"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["email"] == "new@example.com"

    login = client.post("/auth/login", json={"email": "new@example.com", "password": "changed1"})
    assert login.status_code == 200


def test_update_email_to_taken_one(client, auth_headers):
    user_id = create_user(client, auth_headers).json()["data"]["id"]

    resp = client.put(
        f"/users/{user_id}", json={"email": "user@example.com"}, headers=auth_headers
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Email already in use"


def test_delete_user(client, auth_headers):
    user_id = create_user(client, auth_headers).json()["data"]["id"]

    resp = client.delete(f"/users/{user_id}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "User deleted successfully"

    assert client.get(f"/users/{user_id}", headers=auth_headers).status_code == 404


def test_email_case_does_not_matter(client, auth_headers):
    resp = create_user(client, auth_headers, email="Ann@Example.COM")
    assert resp.json()["data"]["email"] == "ann@example.com"

    for email in ("Ann@Example.COM", "ann@example.com", " ANN@EXAMPLE.COM "):
        login = client.post("/auth/login", json={"email": email, "password": "secret1"})
        assert login.status_code == 200

    duplicate = create_user(client, auth_headers, email="ANN@example.com")
    assert duplicate.status_code == 400
