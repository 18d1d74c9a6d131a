"""Unit tests for user API endpoints."""

from fastapi.testclient import TestClient

from helpers import auth


def _register(client: TestClient, email: str, password: str = "secret1", username: str = "tester"):
    return client.post(
        "/api/users/register",
        json={"email": email, "username": username, "password": password},
    )


def test_register_user(client: TestClient):
    """Registration returns a token and the new profile."""
    response = _register(client, "u1@ex.com", username="Test User")
    assert response.status_code == 201
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["user"]["email"] == "u1@ex.com"
    assert data["user"]["username"] == "Test User"
    assert "hashed_password" not in data["user"]


def test_register_duplicate_email(client: TestClient):
    """Test registering with duplicate email."""
    _register(client, "u2@ex.com")

    response = _register(client, "u2@ex.com", password="another1")
    assert response.status_code == 409
    assert "already registered" in response.json()["detail"].lower()


def test_register_rejects_short_password(client: TestClient):
    assert _register(client, "u5@ex.com", password="abc").status_code == 422


def test_login_user(client: TestClient):
    """Test user login."""
    _register(client, "u3@ex.com")

    response = client.post("/api/users/login", json={"email": "u3@ex.com", "password": "secret1"})
    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert data["user"]["email"] == "u3@ex.com"


def test_login_invalid_credentials(client: TestClient):
    """Test login with invalid credentials."""
    response = client.post(
        "/api/users/login",
        json={"email": "nonexistent@example.com", "password": "wrongpassword"},
    )
    assert response.status_code == 401

    _register(client, "u6@ex.com")
    response = client.post("/api/users/login", json={"email": "u6@ex.com", "password": "wrong!!"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_get_current_user(client: TestClient):
    """Token from registration is accepted by /me."""
    token = _register(client, "u4@ex.com").json()["access_token"]

    response = client.get("/api/users/me", headers=auth(token))
    assert response.status_code == 200
    assert response.json()["email"] == "u4@ex.com"


def test_unauthorized_access(client: TestClient):
    """Test accessing protected endpoint without token."""
    response = client.get("/api/users/me")
    assert response.status_code == 401

    response = client.get("/api/users/me", headers=auth("not-a-jwt"))
    assert response.status_code == 401


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "quiz-service"}
