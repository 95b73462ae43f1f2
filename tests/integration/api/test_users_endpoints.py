"""Integration tests for /api/users endpoints."""

from fastapi.testclient import TestClient


class TestRegisterAndSignin:
    def test_register_returns_token_and_public_fields(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
    ):
        response = test_client.post(
            f"{api}/users/register",
            json={"name": "Jane", "email": "Jane@Example.com", "password": "secret123"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "jane@example.com"
        assert body["is_admin"] is False
        assert body["role"] == "user"
        assert body["token"]
        assert "password" not in body

    def test_duplicate_email_is_rejected(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
    ):
        register_user()

        response = test_client.post(
            f"{api}/users/register",
            json={"name": "Jane 2", "email": "jane@example.com", "password": "secret123"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "message": "User already exists",
            "code": "DUPLICATE_EMAIL",
        }

    def test_missing_fields_are_rejected(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
    ):
        response = test_client.post(
            f"{api}/users/register",
            json={"name": "  ", "email": "jane@example.com"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "MISSING_FIELD"
        assert "name" in body["message"]
        assert "password" in body["message"]

    def test_password_over_bcrypt_limit_is_rejected(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
    ):
        response = test_client.post(
            f"{api}/users/register",
            json={"name": "Jane", "email": "jane@example.com", "password": "a" * 100},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_malformed_body_is_a_validation_error(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
    ):
        response = test_client.post(
            f"{api}/users/register",
            json={"name": ["not", "a", "string"]},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert response.json()["error"]

    def test_signin_failures_are_generic(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
    ):
        register_user()

        wrong_password = test_client.post(
            f"{api}/users/signin",
            json={"email": "jane@example.com", "password": "wrong-password"},
        )
        unknown_email = test_client.post(
            f"{api}/users/signin",
            json={"email": "nobody@example.com", "password": "secret123"},
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["message"] == "Invalid email or password"
        assert wrong_password.headers["www-authenticate"] == "Bearer"

    def test_superuser_signs_in_through_user_signin(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
    ):
        response = test_client.post(
            f"{api}/users/signin",
            json={"email": "root@example.com", "password": "rootpass123"},
        )

        assert response.status_code == 200
        assert response.json()["role"] == "superuser"
        assert response.json()["is_admin"] is True


class TestProfileEndToEnd:
    def test_register_signin_update_and_read(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
        auth_header,
    ):
        user_a = register_user("a@example.com", name="Alice")
        user_b = register_user("b@example.com", name="Bob")

        signin = test_client.post(
            f"{api}/users/signin",
            json={"email": "a@example.com", "password": "secret123"},
        )
        assert signin.status_code == 200
        assert signin.json()["role"] == "user"
        token = signin.json()["token"]

        update = test_client.put(
            f"{api}/users/{user_a['id']}",
            headers=auth_header(token),
            json={"name": "Alicia"},
        )
        assert update.status_code == 200

        own = test_client.get(f"{api}/users/{user_a['id']}", headers=auth_header(token))
        assert own.status_code == 200
        assert own.json()["name"] == "Alicia"
        assert own.json()["email"] == "a@example.com"

        other = test_client.get(
            f"{api}/users/{user_b['id']}",
            headers=auth_header(token),
        )
        assert other.status_code == 403

    def test_password_update_is_hashed_and_usable(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
        auth_header,
    ):
        user = register_user()

        response = test_client.put(
            f"{api}/users/{user['id']}",
            headers=auth_header(user["token"]),
            json={"password": "changed-secret"},
        )
        assert response.status_code == 200

        signin = test_client.post(
            f"{api}/users/signin",
            json={"email": "jane@example.com", "password": "changed-secret"},
        )
        assert signin.status_code == 200

    def test_empty_password_keeps_current_one(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
        auth_header,
    ):
        user = register_user()

        response = test_client.put(
            f"{api}/users/{user['id']}",
            headers=auth_header(user["token"]),
            json={"name": "Jane Updated", "password": ""},
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Jane Updated"

        signin = test_client.post(
            f"{api}/users/signin",
            json={"email": "jane@example.com", "password": "secret123"},
        )
        assert signin.status_code == 200

    def test_admin_may_read_any_profile(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
        auth_header,
    ):
        user = register_user()

        response = test_client.get(
            f"{api}/users/{user['id']}",
            headers=auth_header(superuser_token),
        )

        assert response.status_code == 200

    def test_requires_token(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
        auth_header,
    ):
        user = register_user()

        missing = test_client.get(f"{api}/users/{user['id']}")
        garbage = test_client.get(
            f"{api}/users/{user['id']}",
            headers=auth_header("not-a-token"),
        )

        assert missing.status_code == 401
        assert garbage.status_code == 401
