from models.user import User
from utils.security import hash_password

TOKEN_HEADER = "x-auth-token"


def test_register_returns_user_and_token(client):
    r = client.post(
        "/api/auth/register",
        json={
            "email": "Alice@FitMail.com",
            "password": "secret123",
            "fullName": "Alice Doe",
            "gender": "female",
            "birthDate": "1990-05-01",
            "heightCm": 168,
            "weightKg": 61.5,
        },
    )
    assert r.status_code == 201
    assert r.headers[TOKEN_HEADER]
    body = r.json()
    assert body["email"] == "alice@fitmail.com"
    assert body["fullName"] == "Alice Doe"
    assert body["gender"] == "female"
    assert body["birthDate"] == "1990-05-01"
    assert body["heightCm"] == 168
    assert body["weightKg"] == 61.5
    assert body["isAdmin"] is False
    assert "password" not in body and "passwordHash" not in body


def test_password_is_stored_hashed(client, db):
    client.post("/api/auth/register", json={"email": "bob@fitmail.com", "password": "secret123", "fullName": "Bob"})
    user = db.query(User).filter(User.email == "bob@fitmail.com").one()
    assert user.password_hash != "secret123"
    assert user.check_password("secret123")


def test_password_shaped_like_a_hash_is_still_hashed(client, db):
    raw = hash_password("whatever")
    r = client.post("/api/auth/register", json={"email": "hashy@fitmail.com", "password": raw, "fullName": "H"})
    assert r.status_code == 201

    user = db.query(User).filter(User.email == "hashy@fitmail.com").one()
    assert user.password_hash != raw

    ok = client.post("/api/auth/login", json={"email": "hashy@fitmail.com", "password": raw})
    other = client.post("/api/auth/login", json={"email": "hashy@fitmail.com", "password": "whatever"})
    assert ok.status_code == 200
    assert other.status_code == 400


def test_gender_defaults_to_unspecified_and_accepts_blank(client):
    r = client.post("/api/auth/register", json={"email": "c@fitmail.com", "password": "secret123", "fullName": "C"})
    assert r.json()["gender"] == "unspecified"
    r = client.post(
        "/api/auth/register",
        json={"email": "d@fitmail.com", "password": "secret123", "fullName": "D", "gender": ""},
    )
    assert r.status_code == 201
    assert r.json()["gender"] == "unspecified"


def test_duplicate_email_is_case_insensitive(client):
    payload = {"email": "dup@fitmail.com", "password": "secret123", "fullName": "Dup"}
    assert client.post("/api/auth/register", json=payload).status_code == 201

    r = client.post("/api/auth/register", json={**payload, "email": "DUP@FitMail.com"})
    assert r.status_code == 400
    assert r.json() == {"message": "Email already in use"}


def test_register_rejects_weak_password(client):
    r = client.post("/api/auth/register", json={"email": "w@fitmail.com", "password": "123", "fullName": "W"})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Validation error"
    assert any("at least 6 characters" in e for e in body["errors"])


def test_register_rejects_malformed_email(client):
    r = client.post("/api/auth/register", json={"email": "not-an-email", "password": "secret123", "fullName": "X"})
    assert r.status_code == 400
    assert any(e.startswith("email") for e in r.json()["errors"])


def test_register_requires_fields(client):
    r = client.post("/api/auth/register", json={"email": "x@fitmail.com"})
    assert r.status_code == 400
    errors = r.json()["errors"]
    assert any(e.startswith("password") for e in errors)
    assert any(e.startswith("fullName") for e in errors)


def test_register_rejects_unknown_gender(client):
    r = client.post(
        "/api/auth/register",
        json={"email": "g@fitmail.com", "password": "secret123", "fullName": "G", "gender": "robot"},
    )
    assert r.status_code == 400


def test_login_success(client, register):
    register(email="eve@fitmail.com", fullName="Eve")
    r = client.post("/api/auth/login", json={"email": "EVE@fitmail.com", "password": "secret123"})
    assert r.status_code == 200
    assert r.headers[TOKEN_HEADER]
    assert r.json()["email"] == "eve@fitmail.com"


def test_login_failures_are_indistinguishable(client, register):
    register(email="frank@fitmail.com")
    wrong_password = client.post("/api/auth/login", json={"email": "frank@fitmail.com", "password": "nope-nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "ghost@fitmail.com", "password": "nope-nope"})

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.content == unknown_email.content
    assert wrong_password.json() == {"message": "Invalid credentials"}
    assert TOKEN_HEADER not in wrong_password.headers


def test_login_requires_fields(client):
    r = client.post("/api/auth/login", json={"email": "a@fitmail.com"})
    assert r.status_code == 400
    assert r.json()["message"] == "Validation error"


def test_token_from_login_opens_protected_routes(client, register):
    register(email="gina@fitmail.com")
    r = client.post("/api/auth/login", json={"email": "gina@fitmail.com", "password": "secret123"})
    me = client.get("/api/protected/me", headers={TOKEN_HEADER: r.headers[TOKEN_HEADER]})
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "gina@fitmail.com"
