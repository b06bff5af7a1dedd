"""Tests for registration and login endpoints."""

from fastapi.testclient import TestClient

from paired_photos.api.app import create_app
from tests.conftest import BrokenAccountRepository, InMemoryAccountRepository

REGISTER_PAYLOAD = {
    "name": "Ada",
    "eid": 100,
    "password": "s3cret",
    "mobileNumber": "555-0100",
}


def test_register_twice_conflicts(
    container, account_repository: InMemoryAccountRepository
) -> None:
    client = TestClient(create_app(container))

    first = client.post("/api/register", json=REGISTER_PAYLOAD)
    second = client.post("/api/register", json=REGISTER_PAYLOAD)

    assert first.status_code == 201
    assert first.json() == {"message": "User registered successfully."}
    assert second.status_code == 400
    assert second.json() == {"error": "Employee ID already exists"}
    assert len(account_repository.accounts) == 1
    assert account_repository.accounts[0].phone_number == "555-0100"


def test_login_after_register(container) -> None:
    client = TestClient(create_app(container))
    client.post("/api/register", json=REGISTER_PAYLOAD)

    response = client.post("/api/login", json={"eid": 100, "password": "s3cret"})

    assert response.status_code == 200
    assert response.json() == {"message": "Authentication successful"}


def test_login_failures_look_the_same(container) -> None:
    client = TestClient(create_app(container))
    client.post("/api/register", json=REGISTER_PAYLOAD)

    wrong_password = client.post("/api/login", json={"eid": 100, "password": "x"})
    unknown_eid = client.post("/api/login", json={"eid": 7, "password": "s3cret"})

    assert wrong_password.status_code == 401
    assert unknown_eid.status_code == 401
    assert wrong_password.json() == unknown_eid.json()
    assert wrong_password.json() == {"error": "Invalid eid or password"}


def test_register_missing_field_is_validation_error(
    container, account_repository: InMemoryAccountRepository
) -> None:
    client = TestClient(create_app(container))
    payload = {key: value for key, value in REGISTER_PAYLOAD.items() if key != "eid"}

    response = client.post("/api/register", json=payload)

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid request"
    assert any(detail["field"] == "body.eid" for detail in data["details"])
    assert account_repository.accounts == []


def test_login_with_non_numeric_eid_is_validation_error(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/login", json={"eid": "abc", "password": "x"})

    assert response.status_code == 400


def test_store_failure_returns_500(container) -> None:
    container.identity_service.repository = BrokenAccountRepository()
    client = TestClient(create_app(container))

    register = client.post("/api/register", json=REGISTER_PAYLOAD)
    login = client.post("/api/login", json={"eid": 100, "password": "s3cret"})

    assert register.status_code == 500
    assert login.status_code == 500
    assert login.json() == {"error": "Internal server error"}
