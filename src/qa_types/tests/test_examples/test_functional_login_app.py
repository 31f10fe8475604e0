"""
The login demo application exercised over HTTP, without a browser.
"""

import uuid

import pytest

from qa_types.examples.functional.login_app import (
    INVALID_PASSWORD_MESSAGE,
    INVALID_USERNAME_MESSAGE,
    SUCCESS_MESSAGE,
    render_login_page,
)

pytestmark = pytest.mark.functional


def test_login_form_has_expected_fields(login_client):
    resp = login_client.get("/login")
    assert resp.status_code == 200
    assert 'id="username"' in resp.text
    assert 'id="password"' in resp.text
    assert 'type="submit"' in resp.text
    assert 'id="flash"' not in resp.text


def test_valid_credentials_show_secure_area_message(login_client):
    resp = login_client.post("/login", data={"username": "tomsmith", "password": "SuperSecretPassword!"})
    assert resp.status_code == 200
    assert SUCCESS_MESSAGE in resp.text
    assert 'class="flash success"' in resp.text


@pytest.mark.parametrize(
    "username, password, message",
    [
        ("nobody", "SuperSecretPassword!", INVALID_USERNAME_MESSAGE),
        ("tomsmith", "wrong", INVALID_PASSWORD_MESSAGE),
        ("", "", INVALID_USERNAME_MESSAGE),
    ],
)
def test_invalid_credentials_rejected(login_client, username, password, message):
    resp = login_client.post("/login", data={"username": username, "password": password})
    assert resp.status_code == 401
    assert message in resp.text
    assert SUCCESS_MESSAGE not in resp.text


def test_failed_login_keeps_escaped_username(login_client):
    resp = login_client.post("/login", data={"username": '<script>"x"</script>', "password": "nope"})
    assert "<script>" not in resp.text
    assert "&lt;script&gt;" in resp.text


def test_render_login_page_without_message():
    assert 'id="flash"' not in render_login_page()


def test_health(login_client):
    assert login_client.get("/health").json() == {"status": "ok"}


def test_user_lookup_api(login_client):
    resp = login_client.get("/api/users/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "John Doe"}


def test_user_lookup_missing_user(login_client):
    resp = login_client.get("/api/users/99")
    assert resp.status_code == 404
    assert resp.json()["code"] == "not_found"


def test_user_lookup_invalid_id(login_client):
    resp = login_client.get("/api/users/0")
    assert resp.status_code == 422
    assert resp.json()["code"] == "invalid_input"


def test_responses_carry_request_id(login_client):
    resp = login_client.get("/health")
    assert uuid.UUID(resp.headers["X-Request-ID"])


def test_failed_login_never_logs_password(login_client, caplog):
    secret = "hunter2-typed-by-user"
    with caplog.at_level("DEBUG", logger="qa_types"):
        resp = login_client.post("/login", data={"username": "tomsmith", "password": secret})
    assert resp.status_code == 401

    failed = [r for r in caplog.records if r.getMessage() == "login.failed"]
    assert failed and failed[0].fields == ["password"]
    for record in caplog.records:
        assert secret not in record.getMessage()
        assert all(secret not in str(value) for value in vars(record).values())


def test_user_lookup_id_beyond_integer_range(login_client):
    resp = login_client.get("/api/users/99999999999999999999")
    assert resp.status_code == 422
    assert resp.json()["code"] == "invalid_input"
    assert resp.json()["fields"] == ["user_id"]
