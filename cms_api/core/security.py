import base64
import hashlib
import hmac
import os
import secrets
import string
from datetime import UTC, datetime, timedelta

import jwt

from cms_api.core.config import Settings
from cms_api.core.errors import AuthenticationError


PBKDF2_ITERATIONS = 120_000

_SIMILAR_CHARACTERS = set("ilLI|`oO0")
_EXCLUDED_CHARACTERS = set('"')
_SYMBOLS = "!@#$%^&*()+_-=}{[]|:;\"/?.><,`~"


def _pool(characters: str) -> str:
    return "".join(ch for ch in characters if ch not in _SIMILAR_CHARACTERS | _EXCLUDED_CHARACTERS)


TEMPORARY_PASSWORD_POOLS = (
    _pool(string.ascii_lowercase),
    _pool(string.ascii_uppercase),
    _pool(string.digits),
    _pool(_SYMBOLS),
)


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return "pbkdf2_sha256${iterations}${salt}${digest}".format(
        iterations=PBKDF2_ITERATIONS,
        salt=base64.urlsafe_b64encode(salt).decode("ascii"),
        digest=base64.urlsafe_b64encode(digest).decode("ascii"),
    )


def verify_password(password: str, password_hash: str) -> bool:
    try:
        algo, iterations, salt_b64, digest_b64 = password_hash.split("$", 3)
    except ValueError:
        return False

    if algo != "pbkdf2_sha256":
        return False

    salt = base64.urlsafe_b64decode(salt_b64.encode("ascii"))
    expected = base64.urlsafe_b64decode(digest_b64.encode("ascii"))
    actual = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, int(iterations))
    return hmac.compare_digest(actual, expected)


def generate_temporary_password(length: int = 12) -> str:
    """Random password with at least one character of every class.

    Look-alike characters and the double quote are never used.
    """
    if length < len(TEMPORARY_PASSWORD_POOLS):
        raise ValueError(f"temporary password must be at least {len(TEMPORARY_PASSWORD_POOLS)} characters")

    rng = secrets.SystemRandom()
    alphabet = "".join(TEMPORARY_PASSWORD_POOLS)
    chars = [secrets.choice(pool) for pool in TEMPORARY_PASSWORD_POOLS]
    chars.extend(secrets.choice(alphabet) for _ in range(length - len(chars)))
    rng.shuffle(chars)
    return "".join(chars)


class TokenIssuer:
    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 8 * 60) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(settings.jwt_secret, settings.jwt_algorithm, settings.jwt_expire_minutes)

    def sign(self, admin_id: str, expires_minutes: int | None = None) -> str:
        expires_delta = timedelta(minutes=expires_minutes if expires_minutes is not None else self.expire_minutes)
        now = datetime.now(UTC)
        payload = {
            "sub": admin_id,
            "iat": int(now.timestamp()),
            "exp": int((now + expires_delta).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("invalid token") from exc

        admin_id = payload.get("sub")
        if not admin_id or not isinstance(admin_id, str):
            raise AuthenticationError("invalid token payload")
        return admin_id
