"""Domain exceptions for order operations."""
from typing import Iterable, List
from uuid import UUID


class OrderingError(Exception):
    """Base class for order domain errors."""
    pass


class ForeignKeyNotFoundError(OrderingError):
    """
    A referenced status, product or service does not exist.

    Carries the name of the offending request field and the identifiers
    that could not be resolved, so the API layer can report them together.
    """

    def __init__(self, message: str, field: str, values: Iterable[UUID] = ()):
        super().__init__(message)
        self.message = message
        self.field = field
        self.values: List[UUID] = list(values)

    def __str__(self) -> str:
        return self.message


class StoreUnavailableError(OrderingError):
    """The backing store could not be reached or timed out."""
    pass


class InvalidProfitPeriodError(OrderingError, ValueError):
    """Year or month outside the calendar range."""
    pass
