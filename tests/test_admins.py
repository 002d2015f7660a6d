def test_passwords_never_leave_the_api(client):
    admins = client.get("/api/admins").json()
    assert [a["id"] for a in admins] == ["admin_01"]
    assert all("password" not in a and "hashedPassword" not in a for a in admins)

    res = client.post("/api/admins", json={
        "name": "Second Admin",
        "email": "second@example.com",
        "phone": "+254711111111",
        "password": "s3cret",
    })
    assert res.status_code == 201
    assert "password" not in res.json()
    assert "hashedPassword" not in res.json()


def test_duplicate_admin_email(client):
    res = client.post("/api/admins", json={
        "name": "Copy", "email": "admin@example.com", "phone": "1", "password": "x",
    })
    assert res.status_code == 400
    assert res.json() == {"error": "Email already exists"}


def test_verify_password(client):
    assert client.post("/api/admins/admin_01/verify-password", json={"password": "admin123"}).json() == {"valid": True}
    assert client.post("/api/admins/admin_01/verify-password", json={"password": "nope"}).json() == {"valid": False}
    assert client.post("/api/admins/ghost/verify-password", json={"password": "x"}).status_code == 404


def test_update_admin_password_and_name(client):
    res = client.patch("/api/admins/admin_01", json={"name": "Treasurer", "password": "changed"})
    assert res.status_code == 200
    assert res.json()["name"] == "Treasurer"
    check = client.post("/api/admins/admin_01/verify-password", json={"password": "changed"})
    assert check.json() == {"valid": True}


def test_update_and_delete_missing_admin(client):
    assert client.patch("/api/admins/ghost", json={"name": "x"}).status_code == 404
    assert client.delete("/api/admins/ghost").status_code == 404


def test_delete_admin(client):
    assert client.delete("/api/admins/admin_01").json() == {"success": True}
    assert client.get("/api/admins").json() == []
