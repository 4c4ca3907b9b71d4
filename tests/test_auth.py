def test_admin_login(client):
    r = client.post("/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["role"] == "admin"
    assert body["userId"] == "admin"
    assert body["message"] == "Login successful"
    assert "userName" not in body


def test_teacher_login_returns_seeded_teacher(client, teacher_ids):
    r = client.post("/login", json={"username": "teacher1", "password": "pass123"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["role"] == "teacher"
    assert body["userId"] == teacher_ids["Professor Smith"]
    assert body["userName"] == "Professor Smith"


def test_teacher_login_creates_teacher_once(client, admin_headers):
    r1 = client.post("/login", json={"username": "teacher2", "password": "pass456"})
    r2 = client.post("/login", json={"username": "teacher2", "password": "pass456"})
    assert r1.status_code == 200
    assert r1.json()["userId"] == r2.json()["userId"]

    teachers = client.get("/api/teachers", headers=admin_headers).json()
    assert [t["name"] for t in teachers] == ["Dr. Johnson"]


def test_bad_password(client):
    r = client.post("/login", json={"username": "teacher1", "password": "nope"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid credentials"


def test_missing_fields(client):
    assert client.post("/login", json={"username": "admin"}).status_code == 400
    assert client.post("/login", json={"username": "", "password": "x"}).status_code == 400
