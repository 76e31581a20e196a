import pytest

from cms_api.core.errors import BadRequest
from cms_api.schemas.admins import parse_credentials, parse_password_update


def test_parse_credentials():
    credentials = parse_credentials({"username": "john.doe", "password": "p-U:QaA/3G"})
    assert credentials.username == "john.doe"
    assert credentials.password == "p-U:QaA/3G"


@pytest.mark.parametrize(
    "body",
    [
        None,
        "john.doe",
        [],
        {},
        {"username": "john.doe"},
        {"username": "", "password": "p-U:QaA/3G"},
        {"username": "john.doe", "password": 12345678},
        {"username": "john.doe", "password": "1234567"},
        {"username": "john.doe", "password": "x" * 129},
        {"username": "john.doe", "password": "p-U:QaA/3G", "role": 0},
    ],
)
def test_parse_credentials_rejects(body):
    with pytest.raises(BadRequest, match="proper username and password is required"):
        parse_credentials(body)


def test_credentials_accept_length_bounds():
    parse_credentials({"username": "a", "password": "x" * 8})
    parse_credentials({"username": "a", "password": "x" * 128})


def test_parse_password_update():
    update = parse_password_update(
        {"currentPassword": "p-U:QaA/3G", "newPassword": "q-W:QzA$3Sb", "newPasswordAgain": "q-W:QzA$3Sc"}
    )
    assert update.current_password == "p-U:QaA/3G"
    assert update.new_password == "q-W:QzA$3Sb"
    assert update.new_password_again == "q-W:QzA$3Sc"


@pytest.mark.parametrize(
    "body",
    [
        None,
        {},
        {"current_password": "p-U:QaA/3G", "new_password": "q-W:QzA$3Sb", "new_password_again": "q-W:QzA$3Sb"},
        {"currentPassword": "p-U:QaA/3G", "newPassword": "q-W:QzA$3Sb"},
        {"currentPassword": "short", "newPassword": "q-W:QzA$3Sb", "newPasswordAgain": "q-W:QzA$3Sb"},
        {
            "currentPassword": "p-U:QaA/3G",
            "newPassword": "q-W:QzA$3Sb",
            "newPasswordAgain": "q-W:QzA$3Sb",
            "username": "john.doe",
        },
    ],
)
def test_parse_password_update_rejects(body):
    with pytest.raises(BadRequest, match="proper current and new password is required"):
        parse_password_update(body)
