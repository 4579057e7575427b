"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InsufficientStockError(ValidationError):
    """A cart entry asks for more units than the product has in stock."""

    def __init__(self, product_name: str, available: int) -> None:
        self.product_name = product_name
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name}. Available: {available}"
        )


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is not visible to the caller)."""


class OrderProcessingError(DomainException):
    """A transactional write failed unexpectedly and was rolled back."""
