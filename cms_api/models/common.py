import re
from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

OBJECT_ID_LENGTH = 24
_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


def utcnow() -> datetime:
    return datetime.now(UTC)


def new_object_id() -> str:
    return uuid4().hex[:OBJECT_ID_LENGTH]


def is_valid_id(value: str) -> bool:
    return _OBJECT_ID_RE.fullmatch(value) is not None


class ObjectIdPrimaryKeyMixin:
    id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
