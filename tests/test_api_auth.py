"""
Tests for registration and login
"""


class TestRegister:

    def test_register_success(self, client, memory_store):
        response = client.post("/api/auth/register", json={"username": "steve", "password": "diamond"})
        data = response.json()

        assert response.status_code == 201
        assert data["user"]["username"] == "steve"
        assert "password" not in data["user"]
        assert "hashedPassword" not in data["user"]
        # Stored hashed, never in plain text
        stored = memory_store.get_user_by_username("steve")
        assert stored.hashed_password != "diamond"
        assert stored.hashed_password.startswith("$2")

    def test_username_too_short(self, client):
        response = client.post("/api/auth/register", json={"username": "ab", "password": "diamond"})
        data = response.json()

        assert response.status_code == 400
        assert data["message"] == "Invalid request data"
        assert "username" in data["errors"]
        assert "at least 3" in data["errors"]["username"][0]

    def test_password_too_short(self, client):
        response = client.post("/api/auth/register", json={"username": "steve", "password": "123"})

        assert response.status_code == 400
        assert "password" in response.json()["errors"]

    def test_username_is_trimmed(self, client, memory_store):
        response = client.post("/api/auth/register", json={"username": "  bob  ", "password": "diamond"})

        assert response.status_code == 201
        assert response.json()["user"]["username"] == "bob"
        assert memory_store.get_user_by_username("bob") is not None

    def test_whitespace_does_not_make_a_new_username(self, client):
        client.post("/api/auth/register", json={"username": "steve", "password": "diamond"})

        response = client.post("/api/auth/register", json={"username": " steve ", "password": "emerald"})

        assert response.status_code == 409

    def test_padding_does_not_count_toward_length(self, client):
        response = client.post("/api/auth/register", json={"username": "  ab  ", "password": "diamond"})

        assert response.status_code == 400
        assert "username" in response.json()["errors"]

    def test_duplicate_username(self, client):
        client.post("/api/auth/register", json={"username": "steve", "password": "diamond"})

        response = client.post("/api/auth/register", json={"username": "steve", "password": "emerald"})

        assert response.status_code == 409
        assert response.json() == {"message": "Username already exists"}


class TestLogin:

    def test_login_success(self, client):
        client.post("/api/auth/register", json={"username": "alex", "password": "redstone"})

        response = client.post("/api/auth/login", json={"username": "alex", "password": "redstone"})

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alex"

    def test_login_with_padded_username(self, client):
        client.post("/api/auth/register", json={"username": " bob ", "password": "redstone"})

        response = client.post("/api/auth/login", json={"username": "bob ", "password": "redstone"})

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "bob"

    def test_wrong_password(self, client):
        client.post("/api/auth/register", json={"username": "alex", "password": "redstone"})

        response = client.post("/api/auth/login", json={"username": "alex", "password": "lapis1"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid username or password"}

    def test_unknown_user(self, client):
        response = client.post("/api/auth/login", json={"username": "nobody", "password": "whatever"})
        assert response.status_code == 401

    def test_missing_fields(self, client):
        response = client.post("/api/auth/login", json={"username": "alex"})

        assert response.status_code == 400
        assert "password" in response.json()["errors"]


def test_current_user_is_never_authenticated(client):
    response = client.get("/api/auth/user")

    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}
