"""
Domain exceptions.

The API layer maps each of these to one HTTP status:
ValidationError -> 400, NotFoundError -> 404, StoreError -> 500.
"""


class OrderServiceError(Exception):
    """Base class for all errors raised by the orders service."""


class ValidationError(OrderServiceError, ValueError):
    """Bad or missing input, or a foreign reference that does not resolve."""


class NotFoundError(OrderServiceError, LookupError):
    """An id that does not resolve to a stored record."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class StoreError(OrderServiceError):
    """Underlying persistence failure."""
