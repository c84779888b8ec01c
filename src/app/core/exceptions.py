"""Domain errors raised by the inventory entities and repositories."""


class InventoryError(Exception):
    """Base class for inventory domain errors."""


class ProductValidationError(InventoryError, ValueError):
    """A product field violates its constraint."""

    def __init__(self, field: str, message: str, location: str = "body") -> None:
        super().__init__(message)
        self.field = field
        self.message = message
        self.location = location


class ProductNotFoundError(InventoryError, LookupError):
    """No product exists with the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product not found with id {product_id}")
        self.product_id = product_id
