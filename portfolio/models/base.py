import uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy import CHAR
from sqlalchemy.types import TypeDecorator

Base = declarative_base()

# UUIDs are stored as 36-char strings so the same schema works on SQLite and PostgreSQL
class UUIDChar(TypeDecorator):
    impl = CHAR(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        """Called when a value is sent to the database."""
        if value is None:
            return value
        elif isinstance(value, uuid.UUID):
            return str(value)
        else:
            return value

    def process_result_value(self, value, dialect):
        """Called when a value is read from the database."""
        if value is None:
            return value
        else:
            try:
                return uuid.UUID(value)
            except (TypeError, ValueError):
                return value
