from pathlib import Path

import pytest
from fastapi.testclient import TestClient

SUPER_ADMIN_LOGIN = {"username": "john.doe", "password": "p-U:QaA/3G"}
ADMIN_LOGIN = {"username": "jane.doe", "password": "Str0ng!Pass"}
SECOND_ADMIN_LOGIN = {"username": "sam.roe", "password": "An0ther#Pass"}

WEAK_PASSWORD = "weakpassword"
WEAK_PASS_PHRASE = "correct horse battery staple"
WEAK_PASSWORD_ERRORS = [
    "The password must contain at least one uppercase letter.",
    "The password must contain at least one number.",
    "The password must contain at least one special character.",
]

BAD_ID = "not-an-id"
MISSING_ID = "5b306f3331c68b024299ee26"


@pytest.fixture()
def app_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_file.as_posix()}")
    monkeypatch.setenv("AUTO_CREATE_SCHEMA", "true")
    monkeypatch.setenv("API_V1_PREFIX", "")
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    from cms_api.core.config import clear_settings_cache
    from cms_api.main import create_app

    clear_settings_cache()
    app = create_app()
    with TestClient(app) as client:
        yield client

    clear_settings_cache()


@pytest.fixture()
def database(tmp_path: Path):
    from cms_api.db.session import Database

    db = Database(f"sqlite+pysqlite:///{(tmp_path / 'store.db').as_posix()}")
    db.create_schema()
    yield db
    db.drop_schema()
    db.dispose()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def register_super_admin(client: TestClient) -> dict[str, str]:
    response = client.post("/register", json=SUPER_ADMIN_LOGIN)
    assert response.status_code == 201, response.text
    return bearer(response.json()["data"]["token"])


def sign_in(client: TestClient, credentials: dict[str, str]) -> dict[str, str]:
    response = client.post("/signin", json=credentials)
    assert response.status_code == 200, response.text
    return bearer(response.json()["data"]["token"])


def create_admin(client: TestClient, headers: dict[str, str], credentials: dict[str, str]) -> str:
    response = client.post("/admins", headers=headers, json=credentials)
    assert response.status_code == 201, response.text
    admins = client.get("/admins", headers=headers).json()["data"]["admins"]
    return next(item["_id"] for item in admins if item["username"] == credentials["username"])


def assert_error(response, status_code: int, name: str, message: str | None = None) -> None:
    assert response.status_code == status_code, response.text
    body = response.json()
    assert body["status"] == ("error" if status_code >= 500 else "fail")
    assert body["data"]["name"] == name
    if message is not None:
        assert body["data"]["message"] == message
