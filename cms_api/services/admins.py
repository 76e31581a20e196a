import logging
from dataclasses import dataclass
from typing import Any

from cms_api.core.errors import FORBIDDEN, BadRequest, Forbidden, Unauthorized, WeakPassword
from cms_api.core.password_policy import check_password
from cms_api.core.security import TokenIssuer, generate_temporary_password, hash_password, verify_password
from cms_api.models.admin import Admin, AdminRole
from cms_api.repositories.admins import USER_EXISTS, AdminStore
from cms_api.schemas.admins import Credentials, parse_password_update

logger = logging.getLogger(__name__)


@dataclass
class PasswordRotation:
    admin: Admin
    new_password: str | None = None
    temporary_password: str | None = None


def ensure_strong_password(password: str) -> None:
    verdict = check_password(password)
    if not verdict.strong:
        raise WeakPassword(verdict.message)


class AdminService:
    """Admin lifecycle: bootstrap, creation, password rotation, deletion.

    Callers pass structurally valid payloads (see ``cms_api.schemas.admins``);
    the password-update payload is parsed here because only the self-rotation
    paths require one.
    """

    def __init__(self, store: AdminStore, tokens: TokenIssuer, temporary_password_length: int = 12) -> None:
        self.store = store
        self.tokens = tokens
        self.temporary_password_length = temporary_password_length

    def bootstrap_super_admin(self, credentials: Credentials) -> str:
        ensure_strong_password(credentials.password)

        if self.store.find_super_admin() is not None:
            logger.warning("Failed super-admin registration for %s: super-admin exists.", credentials.username)
            raise Forbidden(USER_EXISTS)

        admin = self.store.create(
            username=credentials.username,
            password_hash=hash_password(credentials.password),
            role=AdminRole.SUPER_ADMIN,
        )
        logger.info("Super-admin %s registered.", admin.username)
        return self.tokens.sign(admin.id)

    def create_admin(self, credentials: Credentials, acting_admin: Admin) -> Admin:
        ensure_strong_password(credentials.password)

        super_admin = self.store.find_super_admin()
        if super_admin is None:
            logger.warning("Super-admin is not found in the database.")
            raise Forbidden("not authorised to create admin")
        if (
            super_admin.id != acting_admin.id
            or super_admin.role != acting_admin.role
            or super_admin.username != acting_admin.username
        ):
            logger.warning("Non super-admin %s attempted to create an admin.", acting_admin.username)
            raise Forbidden("not authorised to create admin")

        if self.store.find_by_username(credentials.username) is not None:
            logger.warning("Failed admin registration for %s: username taken.", credentials.username)
            raise Forbidden(USER_EXISTS)

        admin = self.store.create(
            username=credentials.username,
            password_hash=hash_password(credentials.password),
            role=AdminRole.ADMIN,
        )
        logger.info("Admin %s registered by %s.", admin.username, acting_admin.username)
        return admin

    def rotate_password(self, acting_admin: Admin, target_admin: Admin, body: Any) -> PasswordRotation:
        if acting_admin.id == target_admin.id:
            return self._rotate_own_password(target_admin, body)

        if acting_admin.is_super_admin:
            temporary_password = generate_temporary_password(self.temporary_password_length)
            admin = self.store.apply_password(target_admin, hash_password(temporary_password))
            logger.info("Temporary password issued for %s by %s.", admin.username, acting_admin.username)
            return PasswordRotation(admin=admin, temporary_password=temporary_password)

        logger.warning("Admin %s attempted to update admin %s.", acting_admin.username, target_admin.username)
        raise Unauthorized("not authorised to update other admin")

    def _rotate_own_password(self, admin: Admin, body: Any) -> PasswordRotation:
        update = parse_password_update(body)

        if update.new_password != update.new_password_again:
            raise BadRequest("the two new passwords do not match, try again")
        if update.new_password == update.current_password:
            raise BadRequest("new and old password are same")
        ensure_strong_password(update.new_password)
        if not verify_password(update.current_password, admin.password_hash):
            logger.info("Wrong current password entered by %s.", admin.username)
            raise Unauthorized("wrong old password")

        admin = self.store.apply_password(admin, hash_password(update.new_password))
        logger.info("Admin %s changed own password.", admin.username)
        return PasswordRotation(admin=admin, new_password=update.new_password)

    def delete_admin(self, acting_admin: Admin, target_admin: Admin) -> Admin:
        if not acting_admin.is_super_admin and acting_admin.id != target_admin.id:
            logger.warning("Admin %s attempted to delete admin %s.", acting_admin.username, target_admin.username)
            raise Unauthorized("can not delete other admin")

        self.store.delete(target_admin)
        logger.info("Admin %s deleted by %s.", target_admin.username, acting_admin.username)
        return target_admin

    def list_or_self(self, acting_admin: Admin) -> list[Admin] | Admin:
        if acting_admin.is_super_admin:
            return self.store.list_all()
        return acting_admin

    def get_admin(self, acting_admin: Admin, target_admin: Admin) -> Admin:
        if acting_admin.is_super_admin:
            return target_admin
        return acting_admin

    def sign_in(self, credentials: Credentials) -> str:
        admin = self.store.find_by_username(credentials.username)
        if admin is None or not verify_password(credentials.password, admin.password_hash):
            logger.info("Failed sign-in attempt for %s.", credentials.username)
            raise Forbidden(FORBIDDEN)
        return self.tokens.sign(admin.id)
