"""
Column types shared by the models.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import CHAR, TypeDecorator
from sqlalchemy.dialects.postgresql import UUID as PostgresUUID


class GUID(TypeDecorator):
    """
    UUID column that works on PostgreSQL and SQLite alike.

    PostgreSQL gets its native UUID type; other databases store the
    canonical 36-character string. Python code always sees ``uuid.UUID``.
    """

    impl = CHAR(36)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(PostgresUUID(as_uuid=True))
        return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name == "postgresql":
            return value
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


def utcnow() -> datetime:
    """Timezone-aware current UTC time, used as a column default."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Express a datetime in UTC.

    Naive values are taken to already be UTC. SQLite stores wall-clock
    text without an offset, so everything written or compared must be UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
