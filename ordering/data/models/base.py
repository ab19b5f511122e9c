"""Declarative base and shared column types."""

import uuid

from sqlalchemy import LargeBinary
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class BinaryGUID(TypeDecorator):
    """
    UUID stored as a fixed-length 16-byte binary value.

    Bound parameters accept `uuid.UUID` or its string form; result values
    are always `uuid.UUID`.
    """

    impl = LargeBinary
    cache_ok = True

    def __init__(self, *args, **kwargs):
        super().__init__(length=16)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return value.bytes

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return uuid.UUID(bytes=bytes(value))
