from enum import IntEnum

from sqlalchemy import Enum, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from cms_api.db.base import Base
from cms_api.models.common import ObjectIdPrimaryKeyMixin, TimestampMixin


class AdminRole(IntEnum):
    SUPER_ADMIN = 0
    ADMIN = 1


class Admin(ObjectIdPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "admins"
    # at most one super-admin row
    __table_args__ = (
        Index(
            "uq_admins_single_super_admin",
            "role",
            unique=True,
            sqlite_where=text("role = 'SUPER_ADMIN'"),
            postgresql_where=text("role = 'SUPER_ADMIN'"),
        ),
    )

    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(512), nullable=False)
    role: Mapped[AdminRole] = mapped_column(
        Enum(AdminRole, native_enum=False, length=16, validate_strings=True),
        nullable=False,
        default=AdminRole.ADMIN,
    )

    @property
    def is_super_admin(self) -> bool:
        return self.role == AdminRole.SUPER_ADMIN
