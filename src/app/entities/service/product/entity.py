"""Entity: Product."""

from datetime import datetime
from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from src.app.core.exceptions import ProductValidationError
from src.app.entities.core import Entity

REQUIRED_TEXT_FIELDS = {
    "name": "Product name is required",
    "category": "Category is required",
}
NON_NEGATIVE_FIELDS = {
    "quantity": "Quantity cannot be negative",
    "price": "Price cannot be negative",
}
EDITABLE_FIELDS = ("name", "category", "price", "sku", "quantity")


def validate_product(product: Any) -> None:
    """Raise ProductValidationError for the first field that breaks a constraint.

    Works on anything exposing the product attributes: request models,
    domain entities and table rows.
    """
    for field, message in REQUIRED_TEXT_FIELDS.items():
        value = getattr(product, field, None)
        if value is None or not str(value).strip():
            raise ProductValidationError(field, message)

    for field, message in NON_NEGATIVE_FIELDS.items():
        value = getattr(product, field, None)
        if value is None:
            raise ProductValidationError(field, f"{field.capitalize()} is required")
        if value < 0:
            raise ProductValidationError(field, message)


def _check_text(field: str, value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ProductValidationError(field, REQUIRED_TEXT_FIELDS[field])
    return value


class ProductCreate(Entity):
    """Request body for creating a product.

    Client-supplied ``id`` and ``lastUpdated`` are ignored.
    """

    name: str = Field(description="Product name")
    sku: str | None = Field(default=None, description="Stock keeping unit")
    category: str = Field(description="Product category")
    quantity: int = Field(default=0, ge=0, description="Units in stock")
    price: float = Field(default=0.0, ge=0, description="Unit price")

    @field_validator("name", "category")
    @classmethod
    def _not_blank(cls, value: str, info: ValidationInfo) -> str:
        return _check_text(info.field_name, value)


class ProductUpdate(Entity):
    """Request body for updating a product; omitted fields keep their value."""

    name: str | None = None
    sku: str | None = None
    category: str | None = None
    quantity: int | None = Field(default=None, ge=0)
    price: float | None = Field(default=None, ge=0)

    @field_validator("name", "category")
    @classmethod
    def _not_blank(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None:
            raise ProductValidationError(
                info.field_name, REQUIRED_TEXT_FIELDS[info.field_name]
            )
        return _check_text(info.field_name, value)

    @field_validator("quantity", "price")
    @classmethod
    def _not_null(cls, value: float | None, info: ValidationInfo) -> float | None:
        if value is None:
            raise ProductValidationError(
                info.field_name, f"{info.field_name.capitalize()} is required"
            )
        return value

    def changes(self) -> dict[str, Any]:
        """Editable fields present in the request body."""
        return {
            field: getattr(self, field)
            for field in EDITABLE_FIELDS
            if field in self.model_fields_set
        }


class Product(Entity):
    """Product entity as stored and returned by the API.

    ``id`` is assigned by the database; ``last_updated`` is stamped on every
    write and never taken from the client.
    """

    id: int | None = Field(default=None, description="Database identifier")
    name: str
    sku: str | None = None
    category: str
    quantity: int = 0
    price: float = 0.0
    last_updated: datetime | None = None

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.sku == other.sku
            and self.category == other.category
            and self.quantity == other.quantity
            and self.price == other.price
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.sku,
            self.category,
            self.quantity,
            self.price,
        ))


class ProductPage(Entity):
    """One page of a sorted product listing."""

    content: list[Product]
    total_elements: int
    total_pages: int
    number: int
    size: int
