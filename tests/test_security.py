import string

import pytest

from cms_api.core.errors import AuthenticationError
from cms_api.core.password_policy import check_password
from cms_api.core.security import (
    TokenIssuer,
    generate_temporary_password,
    hash_password,
    verify_password,
)

ADMIN_ID = "5b306f3331c68b024299ee26"


def test_hash_and_verify_password():
    password_hash = hash_password("p-U:QaA/3G")
    assert password_hash.startswith("pbkdf2_sha256$")
    assert "p-U:QaA/3G" not in password_hash
    assert verify_password("p-U:QaA/3G", password_hash)
    assert not verify_password("p-U:QaA/3g", password_hash)


def test_hashes_are_salted():
    assert hash_password("p-U:QaA/3G") != hash_password("p-U:QaA/3G")


def test_verify_rejects_malformed_hash():
    assert not verify_password("p-U:QaA/3G", "plain-text")
    assert not verify_password("p-U:QaA/3G", "md5$1$abc$def")


def test_token_round_trip():
    issuer = TokenIssuer("secret")
    assert issuer.verify(issuer.sign(ADMIN_ID)) == ADMIN_ID


def test_expired_token_is_rejected():
    issuer = TokenIssuer("secret")
    token = issuer.sign(ADMIN_ID, expires_minutes=-1)
    with pytest.raises(AuthenticationError, match="token expired"):
        issuer.verify(token)


def test_token_with_other_secret_is_rejected():
    token = TokenIssuer("secret").sign(ADMIN_ID)
    with pytest.raises(AuthenticationError):
        TokenIssuer("other-secret").verify(token)


@pytest.mark.parametrize("segment", [0, 1, 2])
def test_tampered_token_is_rejected(segment):
    issuer = TokenIssuer("secret")
    parts = issuer.sign(ADMIN_ID).split(".")
    target = parts[segment]
    index = len(target) // 2
    replacement = "A" if target[index] != "A" else "B"
    parts[segment] = target[:index] + replacement + target[index + 1 :]

    with pytest.raises(AuthenticationError):
        issuer.verify(".".join(parts))


def test_temporary_password_character_classes():
    for _ in range(50):
        password = generate_temporary_password(12)
        assert len(password) == 12
        assert any(ch in string.ascii_lowercase for ch in password)
        assert any(ch in string.ascii_uppercase for ch in password)
        assert any(ch in string.digits for ch in password)
        assert any(ch not in string.ascii_letters + string.digits for ch in password)
        assert not set(password) & set('ilLI|`oO0"')
        assert check_password(password).strong


def test_temporary_passwords_differ():
    passwords = {generate_temporary_password() for _ in range(100)}
    assert len(passwords) == 100


def test_temporary_password_minimum_length():
    with pytest.raises(ValueError):
        generate_temporary_password(3)
