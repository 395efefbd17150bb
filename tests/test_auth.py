import time

import pytest
from itsdangerous import TimestampSigner

from portfolio_cms.core.error_codes import AuthErrorCode
from portfolio_cms.core.exceptions import AuthException
from portfolio_cms.services.auth_service import (
    AuthService,
    hash_password,
    verify_password,
)

PASSWORD_HASH = hash_password("pa55word")


def _service(**overrides):
    values = {
        "admin_email": "owner@example.com",
        "admin_password_hash": PASSWORD_HASH,
        "secret_key": "unit-test-key",
        "max_age": 60,
    }
    values.update(overrides)
    return AuthService(**values)


def test_login_issues_token_that_resolves_to_the_admin():
    service = _service()

    session = service.login(" Owner@Example.com ", "pa55word")

    assert session.user.email == "owner@example.com"
    assert session.expires_in == 60
    assert service.resolve_session(session.token).user.email == "owner@example.com"


@pytest.mark.parametrize(
    "email,password",
    [("owner@example.com", "wrong"), ("someone@example.com", "pa55word")],
)
def test_login_rejects_bad_credentials(email, password):
    with pytest.raises(AuthException) as exc_info:
        _service().login(email, password)

    assert exc_info.value.error_code == AuthErrorCode.INVALID_CREDENTIALS
    assert exc_info.value.http_status == 401


def test_password_is_checked_against_a_bcrypt_hash():
    service = _service()

    assert service.admin_password_hash.startswith("$2b$")
    assert "pa55word" not in service.admin_password_hash
    assert verify_password("pa55word", PASSWORD_HASH)
    assert not verify_password("pa55word", "not-a-hash")


def test_login_without_configured_hash_is_rejected():
    service = AuthService(
        admin_email="owner@example.com",
        admin_password_hash="",
        secret_key="unit-test-key",
    )

    with pytest.raises(AuthException) as exc_info:
        service.login("owner@example.com", "")
    assert exc_info.value.error_code == AuthErrorCode.INVALID_CREDENTIALS


def test_missing_token_is_not_authenticated():
    with pytest.raises(AuthException) as exc_info:
        _service().resolve_session(None)
    assert exc_info.value.error_code == AuthErrorCode.NOT_AUTHENTICATED


def test_token_signed_with_another_key_is_invalid():
    token = _service(secret_key="other-key").login("owner@example.com", "pa55word").token

    with pytest.raises(AuthException) as exc_info:
        _service().resolve_session(token)
    assert exc_info.value.error_code == AuthErrorCode.TOKEN_INVALID


def test_old_token_is_expired(monkeypatch):
    service = _service()
    with monkeypatch.context() as m:
        m.setattr(TimestampSigner, "get_timestamp", lambda self: int(time.time()) - 3600)
        token = service.login("owner@example.com", "pa55word").token

    with pytest.raises(AuthException) as exc_info:
        service.resolve_session(token)
    assert exc_info.value.error_code == AuthErrorCode.TOKEN_EXPIRED


def test_login_endpoint_sets_session_cookie(client, admin_credentials):
    response = client.post("/api/v1/auth/login", json=admin_credentials)

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["email"] == admin_credentials["email"]
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert "portfolio_session" in response.cookies

    session = client.get("/api/v1/auth/session")
    assert session.status_code == 200
    assert session.json()["user"]["email"] == admin_credentials["email"]


def test_bearer_token_is_accepted(client, admin_credentials):
    token = client.post("/api/v1/auth/login", json=admin_credentials).json()["access_token"]
    client.cookies.clear()

    response = client.get(
        "/api/v1/auth/session", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 200


def test_login_endpoint_rejects_wrong_password(client, admin_credentials):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": admin_credentials["email"], "password": "nope"},
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTH_INVALID_CREDENTIALS"


def test_session_endpoint_without_cookie(client):
    response = client.get("/api/v1/auth/session")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTH_NOT_AUTHENTICATED"


def test_tampered_cookie_is_rejected(client):
    client.cookies.set("portfolio_session", "not-a-real-token")

    response = client.get("/api/v1/auth/session")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTH_TOKEN_INVALID"


def test_logout_clears_cookie(admin_client):
    assert admin_client.get("/api/v1/auth/session").status_code == 200

    response = admin_client.post("/api/v1/auth/logout")

    assert response.status_code == 204
    assert admin_client.get("/api/v1/auth/session").status_code == 401


def test_logout_does_not_revoke_bearer_tokens(client, admin_credentials):
    token = client.post("/api/v1/auth/login", json=admin_credentials).json()[
        "access_token"
    ]

    assert client.post("/api/v1/auth/logout").status_code == 204
    client.cookies.clear()

    response = client.get(
        "/api/v1/auth/session", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 200
