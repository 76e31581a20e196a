import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cms_api.core.errors import Forbidden
from cms_api.models.admin import Admin, AdminRole

logger = logging.getLogger(__name__)

USER_EXISTS = "user already exists"


class AdminStore:
    """Persistence for admin records.

    The store enforces username uniqueness (and the single super-admin
    index); violations come back as ``Forbidden("user already exists")``
    instead of the raw driver error.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, admin_id: str) -> Admin | None:
        return self.db.get(Admin, admin_id)

    def find_by_username(self, username: str) -> Admin | None:
        return self.db.scalar(select(Admin).where(Admin.username == username))

    def find_super_admin(self) -> Admin | None:
        return self.db.scalar(select(Admin).where(Admin.role == AdminRole.SUPER_ADMIN))

    def list_all(self) -> list[Admin]:
        return list(self.db.scalars(select(Admin).order_by(Admin.created_at, Admin.id)).all())

    def create(self, username: str, password_hash: str, role: AdminRole) -> Admin:
        admin = Admin(username=username, password_hash=password_hash, role=role)
        self.db.add(admin)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Duplicate admin rejected by the store: %s", username)
            raise Forbidden(USER_EXISTS) from exc
        self.db.refresh(admin)
        return admin

    def apply_password(self, admin: Admin, password_hash: str) -> Admin:
        admin.password_hash = password_hash
        self.db.add(admin)
        self.db.commit()
        self.db.refresh(admin)
        return admin

    def delete(self, admin: Admin) -> None:
        self.db.delete(admin)
        self.db.commit()
